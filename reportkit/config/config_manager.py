"""Configuration file management for reportkit CLI."""

import json
import logging
from dataclasses import fields
from pathlib import Path

from .defaults import ReportConfig
from ..exceptions import ReportConfigError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manage reportkit CLI configuration file.

    Configuration is stored at ~/.reportkit/config.json
    """

    CONFIG_DIR = Path.home() / ".reportkit"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    @classmethod
    def load(cls, verbose: bool = False) -> ReportConfig:
        """Load configuration from file or use defaults.

        Args:
            verbose: Log loading messages at INFO instead of DEBUG

        Returns:
            ReportConfig instance with loaded or default values

        Raises:
            ReportConfigError: If config file is malformed
        """
        level = logging.INFO if verbose else logging.DEBUG

        if not cls.CONFIG_FILE.exists():
            logger.log(level, f"Config file not found at {cls.CONFIG_FILE}, using defaults")
            return ReportConfig()

        try:
            with open(cls.CONFIG_FILE, 'r') as f:
                data = json.load(f)

            if not isinstance(data, dict):
                raise ReportConfigError(
                    f"Config file {cls.CONFIG_FILE} must contain a JSON object"
                )

            logger.log(level, f"Loaded config from {cls.CONFIG_FILE}")

            # Validate and filter known keys only
            valid_keys = {f.name for f in fields(ReportConfig)}
            filtered_data = {k: v for k, v in data.items() if k in valid_keys}

            return ReportConfig.from_dict(filtered_data)

        except json.JSONDecodeError as e:
            raise ReportConfigError(
                f"Invalid JSON in config file {cls.CONFIG_FILE}: {e}"
            ) from e
        except TypeError as e:
            raise ReportConfigError(
                f"Invalid config data in {cls.CONFIG_FILE}: {e}"
            ) from e
        except (IOError, OSError) as e:
            logger.warning(f"Failed to load config: {e}")
            return ReportConfig()

    @classmethod
    def save(cls, config: ReportConfig, verbose: bool = False):
        """Save configuration to file.

        Args:
            config: Configuration to save
            verbose: Log save messages at INFO instead of DEBUG

        Raises:
            ReportConfigError: If save fails
        """
        try:
            cls.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

            with open(cls.CONFIG_FILE, 'w') as f:
                json.dump(config.to_dict(), f, indent=2)

            logger.log(logging.INFO if verbose else logging.DEBUG,
                       f"Saved config to {cls.CONFIG_FILE}")

        except (IOError, OSError) as e:
            raise ReportConfigError(
                f"Failed to save config to {cls.CONFIG_FILE}: {e}"
            ) from e

    @classmethod
    def init_config(cls, force: bool = False) -> bool:
        """Initialize config file with defaults.

        Args:
            force: Overwrite existing config file

        Returns:
            True if config was created/updated, False if exists and not forced

        Raises:
            ReportConfigError: If initialization fails
        """
        if cls.CONFIG_FILE.exists() and not force:
            return False

        config = ReportConfig()
        cls.save(config, verbose=True)
        return True

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the configuration file path.

        Returns:
            Path to configuration file
        """
        return cls.CONFIG_FILE
