"""Tabular data package."""

from .loaders import load_table
from .models import Group, Grouping, Row, Table

__all__ = [
    "Row",
    "Table",
    "Group",
    "Grouping",
    "load_table",
]
