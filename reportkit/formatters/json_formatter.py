"""JSON output formatter."""

import json
from typing import Any

from ..renderers import GroupingRenderer, GroupRenderer, RowRenderer, TableRenderer
from .base import Formatter, stage


def _records(table) -> Any:
    if hasattr(table, "to_records"):
        return table.to_records()
    return [_record(row) for row in table]


def _record(row) -> Any:
    if getattr(row, "column_names", None):
        return row.to_dict()
    return list(row)


class JSONFormatter(Formatter):
    """Formatter that outputs JSON documents.

    This formatter provides machine-readable output suitable for scripting.
    Set the pretty option to False for compact output.
    """

    def _format_json(self, data: Any) -> str:
        """Generic JSON formatting helper.

        Args:
            data: Data to format

        Returns:
            JSON string
        """
        if self.options.get("pretty", True):
            return json.dumps(data, indent=2, sort_keys=False, default=str)
        return json.dumps(data, default=str)

    def _emit(self, data: Any) -> None:
        self.output.write(self._format_json(data) + "\n")

    @stage("row")
    def row(self):
        """Format a row as a JSON object."""
        self._emit(_record(self.data))

    @stage("table_body")
    def table_body(self):
        """Format a table as a list of objects."""
        self._emit(_records(self.data))

    @stage("group_body")
    def group_body(self):
        """Format a group as its name plus rows."""
        self._emit({"name": self.data.name, "rows": _records(self.data)})

    @stage("grouping_body")
    def grouping_body(self):
        """Format a grouping as an object keyed by group name."""
        self._emit({name: _records(group) for name, group in self.data.items()})


JSONFormatter.renders("json", for_=[RowRenderer, TableRenderer, GroupRenderer, GroupingRenderer])
