"""Load tables from JSON and CSV files."""

import csv
import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..exceptions import DataLoadError
from .models import Table

logger = logging.getLogger(__name__)


def load_table(path: Union[str, Path], column_names: Optional[List[str]] = None) -> Table:
    """Load a table from a .json or .csv file.

    JSON input must be a list of objects. CSV input must have a header row.

    Args:
        path: File to load
        column_names: Columns to keep (default: all, in file order)

    Returns:
        Loaded Table

    Raises:
        DataLoadError: If the file is missing, malformed, or of an unknown type
    """
    path = Path(path)
    suffix = path.suffix.lower()

    try:
        if suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                records = json.load(f)
            if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
                raise DataLoadError(f"{path} must contain a JSON list of objects")
        elif suffix == ".csv":
            with open(path, "r", encoding="utf-8", newline="") as f:
                records = list(csv.DictReader(f))
        else:
            raise DataLoadError(f"Unsupported data file type: {path.suffix or path.name}")
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DataLoadError(f"{path} is not valid UTF-8: {e}") from e
    except (IOError, OSError) as e:
        raise DataLoadError(f"Failed to read {path}: {e}") from e

    logger.debug(f"Loaded {len(records)} records from {path}")

    if column_names:
        missing = [name for name in column_names if records and name not in records[0]]
        if missing:
            raise DataLoadError(f"Unknown column(s) in {path}: {', '.join(missing)}")

    return Table.from_records(records, column_names=column_names)
