"""Default configuration values for reportkit CLI."""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass
class ReportConfig:
    """Configuration for reportkit CLI.

    Attributes:
        default_format: Output format used when --format is not given
        use_colors: Enable colored terminal output
        page_output: Enable paging for long text output
        pretty_json: Indent JSON output
        show_table_headers: Print column headers in tables
    """

    default_format: str = "text"
    use_colors: bool = True
    page_output: bool = True
    pretty_json: bool = True
    show_table_headers: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReportConfig":
        """Create config from dictionary."""
        return cls(**data)
