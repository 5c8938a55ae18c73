"""CSV output formatter."""

import csv
from typing import Any, Dict, Iterable

from ..renderers import GroupingRenderer, GroupRenderer, RowRenderer, TableRenderer
from .base import Formatter, stage


class CSVFormatter(Formatter):
    """Formatter that outputs comma-separated values.

    Extra csv.writer arguments (delimiter, quoting, ...) can be passed in
    the format_options option and are carried into nested row renders.
    """

    def _writer(self):
        writer_options: Dict[str, Any] = {"lineterminator": "\n"}
        writer_options.update(self.format_options or {})
        return csv.writer(self.output, **writer_options)

    def _write_row(self, values: Iterable[Any]) -> None:
        self._writer().writerow(list(values))

    def _nested_options(self) -> Dict[str, Any]:
        return {
            "format_options": self.format_options,
            "show_table_headers": self.show_table_headers,
        }

    @stage("table_header")
    def table_header(self):
        if self.show_table_headers is not False and self.data.column_names:
            self._write_row(self.data.column_names)

    @stage("table_body")
    def table_body(self):
        self.render_data_by_row(self._nested_options())

    @stage("row")
    def row(self):
        self._write_row(self.data)

    @stage("group_header")
    def group_header(self):
        self.output.write(f"{self.data.name}\n\n")

    @stage("group_body")
    def group_body(self):
        self.render_table(self.data, self._nested_options())

    @stage("grouping_body")
    def grouping_body(self):
        self.render_inline_grouping(self._nested_options())


CSVFormatter.opt_reader("show_table_headers", "format_options")
CSVFormatter.renders("csv", for_=[RowRenderer, TableRenderer, GroupRenderer, GroupingRenderer])
