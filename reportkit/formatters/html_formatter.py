"""HTML output formatter."""

from typing import Any, Dict

from ..renderers import GroupingRenderer, GroupRenderer, RowRenderer, TableRenderer
from .base import Formatter, stage

TABLE_HEADER = (
    "{% if title %}<h1>{{ title | e }}</h1>\n{% endif %}"
    "<table>\n"
    "{% if show_headers %}"
    "  <tr>{% for name in columns %}<th>{{ name | e }}</th>{% endfor %}</tr>\n"
    "{% endif %}"
)

ROW = "  <tr>{% for value in data %}<td>{{ '' if value is none else value | e }}</td>{% endfor %}</tr>\n"

GROUP_HEADER = "<p>{{ data.name | e }}</p>\n"


class HTMLFormatter(Formatter):
    """Formatter that outputs HTML tables.

    Every value is HTML-escaped. Groups are written as a paragraph with
    the group name followed by the group's table.
    """

    def _nested_options(self) -> Dict[str, Any]:
        return {"show_table_headers": self.show_table_headers}

    @stage("table_header")
    def table_header(self):
        self.output.write(self.render_template(
            TABLE_HEADER,
            title=self.title,
            columns=self.data.column_names,
            show_headers=self.show_table_headers is not False and bool(self.data.column_names),
        ))

    @stage("table_body")
    def table_body(self):
        self.render_data_by_row(self._nested_options())

    @stage("table_footer")
    def table_footer(self):
        self.output.write("</table>\n")

    @stage("row")
    def row(self):
        self.output.write(self.render_template(ROW))

    @stage("group_header")
    def group_header(self):
        self.output.write(self.render_template(GROUP_HEADER))

    @stage("group_body")
    def group_body(self):
        self.render_table(self.data, self._nested_options())

    @stage("grouping_header")
    def grouping_header(self):
        if self.title:
            self.output.write(self.render_template("<h1>{{ title | e }}</h1>\n", title=self.title))

    @stage("grouping_body")
    def grouping_body(self):
        self.render_inline_grouping(self._nested_options())


HTMLFormatter.opt_reader("show_table_headers", "title")
HTMLFormatter.renders("html", for_=[RowRenderer, TableRenderer, GroupRenderer, GroupingRenderer])
