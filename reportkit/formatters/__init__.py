"""Output formatting package.

Importing this package registers the built-in formatters with the
default formatter registry.
"""

from .base import BinaryFormatter, Formatter, stage
from .csv_formatter import CSVFormatter
from .html_formatter import HTMLFormatter
from .json_formatter import JSONFormatter
from .template import Template
from .text_formatter import TextFormatter

__all__ = [
    "Formatter",
    "BinaryFormatter",
    "stage",
    "Template",
    "TextFormatter",
    "CSVFormatter",
    "JSONFormatter",
    "HTMLFormatter",
]
