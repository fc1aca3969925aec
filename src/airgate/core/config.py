"""YAML configuration loading.

Typical usage example:
    from airgate.core.config import ConfigLoader

    config = ConfigLoader.load("config/airport.yaml")
    max_capacity = config.get("airport.max_capacity", default=100)
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or holds a bad value."""


class ConfigLoader:
    """Nested configuration with dot-notation access.

    Examples:
        >>> config = ConfigLoader.from_dict({"airport": {"max_capacity": 20}})
        >>> config.get("airport.max_capacity")
        20
        >>> config.get("weather.category", default="clear")
        'clear'
    """

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            ConfigLoader holding the file's contents. An empty file yields an
            empty configuration.

        Raises:
            ConfigError: If the file is missing, unreadable, or its top level
                is not a mapping.
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

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConfigLoader":
        """Wrap an in-memory dictionary (copied, so later edits don't leak)."""
        return cls(cls._merge_dicts({}, data))

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value using dot notation, e.g. ``"airport.max_capacity"``.

        Args:
            key: Configuration key.
            default: Returned when any part of the key is missing.

        Returns:
            The value or ``default``.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """Set a value using dot notation, creating sections as needed."""
        keys = key.split(".")
        data = self._data

        for k in keys[:-1]:
            if not isinstance(data.get(k), dict):
                data[k] = {}
            data = data[k]

        data[keys[-1]] = value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get a whole section.

        Raises:
            ConfigError: If the section is missing or is not a mapping.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def get_int(self, key: str, default: int) -> int:
        """Get an integer value.

        Raises:
            ConfigError: If the value is present but not an integer.
        """
        value = self.get(key, default)
        # bool is an int subclass; "true" is never a capacity
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"Configuration key {key} must be an integer, got {value!r}")
        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one; ``other`` wins."""
        self._data = self._merge_dicts(self._data, other._data)

    @staticmethod
    def _merge_dicts(base: dict, override: dict) -> dict:
        result = base.copy()

        for key, value in override.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = ConfigLoader._merge_dicts(result[key], value)
            elif isinstance(value, dict):
                result[key] = ConfigLoader._merge_dicts({}, value)
            else:
                result[key] = value

        return result

    def to_dict(self) -> dict[str, Any]:
        """Get the configuration as a dictionary (deep copy of sections)."""
        return self._merge_dicts({}, self._data)
