"""Utility functions package."""

from .pager import page_output, should_page
from .validators import (
    parse_column_list,
    validate_format_name,
    validate_output_path,
)
from .output import rich_echo

__all__ = [
    "page_output",
    "should_page",
    "validate_format_name",
    "parse_column_list",
    "validate_output_path",
    "rich_echo",
]
