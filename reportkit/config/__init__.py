"""Configuration management package."""

from .config_manager import ConfigManager
from .defaults import ReportConfig

__all__ = [
    "ConfigManager",
    "ReportConfig",
]
