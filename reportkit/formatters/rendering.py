"""Rendering shortcuts for use inside formatter stages."""

from typing import Any, Callable, Dict, List, Optional

from ..renderers.builtin import GroupingRenderer, GroupRenderer, RowRenderer, TableRenderer


class RenderingTools:
    """Delegate sub-rendering of rows, tables and groups to nested renderers.

    Every helper renders with the current formatter's format and registry,
    and by default writes into the current formatter's output. Options
    passed by the caller override the defaults. The optional callback
    receives the nested renderer before its stages run.

    Binary formatters get a fresh buffer for each nested render instead,
    since their output cannot be concatenated as text. The nested result is
    returned so the caller can merge it.
    """

    def render_data_by_row(
        self,
        options: Optional[Dict[str, Any]] = None,
        callback: Optional[Callable] = None
    ) -> List[Any]:
        """Render each element of data with render_row, in order.

        Returns the nested results, one per row. For binary formatters
        these are the only copy of the rendered rows.
        """
        return [self.render_row(row, options, callback) for row in self.data]

    def render_row(self, row, options: Optional[Dict[str, Any]] = None, callback: Optional[Callable] = None):
        """Render a Row with RowRenderer."""
        return self._render_helper(RowRenderer, row, options, callback)

    def render_table(self, table, options: Optional[Dict[str, Any]] = None, callback: Optional[Callable] = None):
        """Render a Table with TableRenderer."""
        return self._render_helper(TableRenderer, table, options, callback)

    def render_group(self, group, options: Optional[Dict[str, Any]] = None, callback: Optional[Callable] = None):
        """Render a Group with GroupRenderer."""
        return self._render_helper(GroupRenderer, group, options, callback)

    def render_grouping(self, grouping, options: Optional[Dict[str, Any]] = None, callback: Optional[Callable] = None):
        """Render a Grouping with GroupingRenderer."""
        return self._render_helper(GroupingRenderer, grouping, options, callback)

    def render_inline_grouping(
        self,
        options: Optional[Dict[str, Any]] = None,
        callback: Optional[Callable] = None
    ) -> List[Any]:
        """Render each group in data followed by a newline.

        Returns the nested results, one per group. Binary formatters get
        each group's bytes with the newline appended, and nothing is
        written to their own output.
        """
        results = []
        for _, group in self.data.items():
            result = self.render_group(group, options, callback)
            if self.binary_output:
                result += self._newline()
            else:
                self.output.write(self._newline())
            results.append(result)
        return results

    def _newline(self):
        return b"\n" if self.binary_output else "\n"

    def _render_helper(self, renderer_class, source_data, options=None, callback=None):
        merged = {"data": source_data, "io": self.output, "layout": False}
        merged.update(options or {})

        if self.binary_output:
            merged["io"] = self.new_buffer()

        return renderer_class.render(
            self.format, merged, callback=callback, registry=self.registry
        )
