"""Renderers for the tabular data models."""

from .base import Renderer


class RowRenderer(Renderer):
    """Render a single Row."""

    stages = ("row",)


class TableRenderer(Renderer):
    """Render a Table."""

    stages = ("table_header", "table_body", "table_footer")


class GroupRenderer(Renderer):
    """Render a Group: its name, then its rows."""

    stages = ("group_header", "group_body", "group_footer")


class GroupingRenderer(Renderer):
    """Render a Grouping: every group in order."""

    stages = ("grouping_header", "grouping_body", "grouping_footer")
