"""Plain-text output formatter using rich library."""

import io
from typing import Any, Dict

from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from ..renderers import GroupingRenderer, GroupRenderer, RowRenderer, TableRenderer
from .base import Formatter, stage

DEFAULT_WIDTH = 120


class TextFormatter(Formatter):
    """Formatter that outputs terminal tables and plain text.

    Uses the rich library to draw tables. Colors are off unless the
    use_colors option is set, so saved reports contain no escape codes.
    """

    def _console(self, buffer) -> Console:
        use_colors = bool(self.use_colors)
        return Console(
            file=buffer,
            color_system="auto" if use_colors else None,
            force_terminal=use_colors,
            width=self.width or DEFAULT_WIDTH,
        )

    def _capture(self, renderable) -> str:
        """Capture rich renderable output to string.

        Args:
            renderable: Rich renderable object

        Returns:
            Captured string output
        """
        buffer = io.StringIO()
        self._console(buffer).print(renderable, soft_wrap=True)
        return buffer.getvalue().rstrip()

    def _nested_options(self) -> Dict[str, Any]:
        return {
            "use_colors": self.use_colors,
            "width": self.width,
            "show_table_headers": self.show_table_headers,
        }

    @stage("table_body")
    def table_body(self):
        """Draw the whole table."""
        table = self.data
        if not len(table):
            self.output.write(self._capture("[yellow]No data found[/yellow]") + "\n")
            return

        rich_table = RichTable(
            title=escape(str(self.title)) if self.title else None,
            show_header=self.show_table_headers is not False,
            show_lines=False,
        )
        for name in table.column_names:
            rich_table.add_column(escape(str(name)), overflow="fold")

        for row in table:
            rich_table.add_row(*["" if value is None else escape(str(value)) for value in row])

        self.output.write(self._capture(rich_table) + "\n")

    @stage("row")
    def row(self):
        cells = ["" if value is None else str(value) for value in self.data]
        self.output.write("| " + " | ".join(cells) + " |\n")

    @stage("group_header")
    def group_header(self):
        self.output.write(self._capture(f"[bold]{escape(str(self.data.name))}[/bold]:") + "\n\n")

    @stage("group_body")
    def group_body(self):
        self.render_table(self.data, self._nested_options())

    @stage("grouping_header")
    def grouping_header(self):
        if self.title:
            self.output.write(self._capture(f"[bold]{escape(str(self.title))}[/bold]") + "\n\n")

    @stage("grouping_body")
    def grouping_body(self):
        self.render_inline_grouping(self._nested_options())


TextFormatter.opt_reader("show_table_headers", "title", "use_colors", "width")
TextFormatter.renders("text", for_=[RowRenderer, TableRenderer, GroupRenderer, GroupingRenderer])
