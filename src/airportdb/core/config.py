"""Configuration loader for YAML files.

This module provides configuration loading with support for nested access,
built-in defaults, and merging of user overrides.

Typical usage example:
    from airportdb.core.config import load_settings

    config = load_settings("config/settings.yaml")
    airports_file = config.get("data.airports_file")
    precision = config.get("display.precision", default=4)
"""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "data": {
        "airports_file": "data/airports.csv",
        "countries_file": "data/countries.csv",
        "delimiter": ",",
        "encoding": "utf-8",
    },
    "display": {
        "precision": 4,
        "yes_key": "o",
        "no_key": "N",
    },
}


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access, and default values for configuration.

    Examples:
        >>> config = ConfigLoader.load("config/settings.yaml")
        >>> precision = config.get("display.precision", default=4)
    """

    def __init__(self, data: dict[str, Any]) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If file cannot be loaded or is not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Supports nested access like "data.airports_file".

        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        keys = key.split(".")
        value = self._data

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value using dot notation.

        Args:
            key: Configuration key (supports dot notation).
            value: Value to set.

        Examples:
            >>> config.set("data.delimiter", ";")
        """
        keys = key.split(".")
        data = self._data

        for k in keys[:-1]:
            if k not in data:
                data[k] = {}
            data = data[k]

        data[keys[-1]] = value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Configuration section as dictionary.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one.

        Args:
            other: ConfigLoader to merge from.

        Note:
            Other config values override existing ones.
        """
        self._data = self._merge_dicts(self._data, other._data)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        """Recursively merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result

    def to_dict(self) -> dict[str, Any]:
        """Get the configuration as a dictionary."""
        return self._data.copy()


def load_settings(path: str | Path | None = None) -> ConfigLoader:
    """Load application settings on top of the built-in defaults.

    Args:
        path: Optional YAML file overriding DEFAULT_SETTINGS. A missing file
            is an error only when it was given explicitly.

    Returns:
        Merged configuration.

    Raises:
        ConfigError: If the given file cannot be loaded.
    """
    config = ConfigLoader(copy.deepcopy(DEFAULT_SETTINGS))

    if path is not None:
        config.merge(ConfigLoader.load(path))
    else:
        logger.debug("No settings file given, using defaults")

    return config
