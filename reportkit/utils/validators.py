"""Input validation utilities."""

import re
from pathlib import Path
from typing import List, Optional

_FORMAT_NAME = re.compile(r'^[a-z][a-z0-9_]*$')


def validate_format_name(name: str) -> str:
    """Validate and normalize a format identifier.

    Args:
        name: Format name such as "csv" or "TEXT"

    Returns:
        Lower-cased format name

    Raises:
        ValueError: If the name is empty or not an identifier
    """
    if not name:
        raise ValueError("Format cannot be empty")

    normalized = name.strip().lower()
    if not _FORMAT_NAME.match(normalized):
        raise ValueError(f"Invalid format name: {name}")

    return normalized


def parse_column_list(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma-separated column list.

    Args:
        value: String like "name, amount"; None or empty means all columns

    Returns:
        List of column names, or None

    Raises:
        ValueError: If the list contains empty or duplicate names
    """
    if not value:
        return None

    columns = [part.strip() for part in value.split(",")]
    if any(not column for column in columns):
        raise ValueError(f"Empty column name in: {value}")
    if len(set(columns)) != len(columns):
        raise ValueError(f"Duplicate column name in: {value}")

    return columns


def validate_output_path(path: str) -> Path:
    """Check that an output file can be created.

    Args:
        path: Destination file path

    Returns:
        Path object for the destination

    Raises:
        ValueError: If the path is a directory or its parent does not exist
    """
    target = Path(path)
    if target.is_dir():
        raise ValueError(f"Output path is a directory: {path}")
    if not target.parent.exists():
        raise ValueError(f"Output directory does not exist: {target.parent}")
    return target
