"""Layered YAML configuration.

The shipped config/pc12perf.yaml holds every gateway address, timeout and
polling interval. A site file given with --config is layered on top of it
and only needs the keys it changes:

    gateways:
      aspen:
        host: 192.168.1.50

Typical usage example:
    from pc12perf.core.config import ConfigLoader

    config = ConfigLoader.load_layers(get_config_path("pc12perf.yaml"), "site.yaml")
    host = config.get("gateways.aspen.host", default="10.22.44.1")
    interval = config.get_float("polling.success_interval_s", 5.0)
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Nested configuration with dot-notation keys.

    Examples:
        >>> config = ConfigLoader({"gateways": {"gogo": {"network_timeout_s": 1.0}}})
        >>> config.get_float("gateways.gogo.network_timeout_s")
        1.0
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data if data is not None else {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load one YAML file.

        An empty file is an empty configuration.

        Raises:
            ConfigError: If the file is missing, unreadable, or its root is
                not a mapping.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    @classmethod
    def load_layers(cls, *paths: str | Path | None) -> "ConfigLoader":
        """Load several files, each overriding the keys of the ones before.

        None entries are skipped so optional layers can be passed through.

        Raises:
            ConfigError: If a given file cannot be loaded.
        """
        config = cls()
        for path in paths:
            if path is not None:
                config.merge(cls.load(path))
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key such as "gateways.aspen.host"."""
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_float(self, key: str, default: float | None = None) -> float | None:
        """Get a numeric value (interval, timeout) as a float.

        Raises:
            ConfigError: If the value is present but not a number.
        """
        value = self.get(key, default)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"Configuration key {key} must be a number, got {value!r}")
        return float(value)

    def set(self, key: str, value: Any) -> None:
        """Set a value by dot-notation key, creating sections on the way."""
        *parents, leaf = key.split(".")
        node = self._data
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value

    def get_section(self, key: str, default: dict[str, Any] | None = None) -> dict[str, Any]:
        """Get a whole section, such as "gateways.econnect".

        Args:
            key: Section key.
            default: Returned when the section is missing. If None, a missing
                section is an error.

        Raises:
            ConfigError: If the section is missing without default, or the
                key holds a plain value.
        """
        value = self.get(key)
        if value is None:
            if default is not None:
                return default
            raise ConfigError(f"Configuration section not found: {key}")
        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")
        return value

    def save(self, path: str | Path) -> None:
        """Write the configuration as YAML, creating parent directories.

        Raises:
            ConfigError: If the file cannot be written.
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(self._data, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration {path}: {e}") from e

        logger.info("Saved configuration to: %s", path)

    def merge(self, other: "ConfigLoader") -> None:
        """Layer other on top of this configuration; nested sections merge key by key."""
        self._data = _deep_merge(self._data, other._data)

    def to_dict(self) -> dict[str, Any]:
        """Get a shallow copy of the configuration data."""
        return dict(self._data)
