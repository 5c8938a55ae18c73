"""Renderer package."""

from .base import Renderer
from .builtin import GroupingRenderer, GroupRenderer, RowRenderer, TableRenderer

__all__ = [
    "Renderer",
    "RowRenderer",
    "TableRenderer",
    "GroupRenderer",
    "GroupingRenderer",
]
