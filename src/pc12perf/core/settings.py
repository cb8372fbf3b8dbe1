"""Pilot settings.

The polling cycle only needs a key-value read of the pilot's choices. This
module defines that read as SettingsProvider and implements it with a small
YAML file.

Enum settings are stored by member name:

    aircraft_type: MSN_1576_1942_5_BLADE
    gateway_kind: AUTO_DETECT
    weight_class: LBS_8000
    wifi_ssid: ""
    wifi_password: ""

Typical usage example:
    from pc12perf.core.settings import SettingsStore

    settings = SettingsStore.load("~/.pc12perf/settings.yaml")
    settings.set("gateway_kind", GatewayKind.GOGO)
    settings.save()
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Protocol

from pc12perf.avionics.base import GatewayKind
from pc12perf.core.config import ConfigError, ConfigLoader
from pc12perf.performance.aircraft import AircraftType, WeightClass

logger = logging.getLogger(__name__)

ENUM_SETTINGS: dict[str, type[Enum]] = {
    "aircraft_type": AircraftType,
    "gateway_kind": GatewayKind,
    "weight_class": WeightClass,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "aircraft_type": AircraftType.MSN_1576_1942_5_BLADE.name,
    "gateway_kind": GatewayKind.ASPEN.name,
    "weight_class": WeightClass.LBS_8000.name,
    "wifi_ssid": "",
    "wifi_password": "",
}


class SettingsError(Exception):
    """Raised when a setting is unknown or holds an invalid value."""


class SettingsProvider(Protocol):
    """Read access to the pilot's selections."""

    @property
    def aircraft_type(self) -> AircraftType: ...

    @property
    def gateway_kind(self) -> GatewayKind: ...

    @property
    def weight_class(self) -> WeightClass: ...

    @property
    def wifi_ssid(self) -> str: ...

    @property
    def wifi_password(self) -> str: ...


def _to_enum(key: str, value: Any) -> Enum:
    enum_type = ENUM_SETTINGS[key]
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type[str(value)]
    except KeyError as e:
        choices = ", ".join(m.name for m in enum_type)
        raise SettingsError(f"Invalid {key}: {value!r} (expected one of {choices})") from e


class SettingsStore:
    """YAML-backed settings with factory defaults.

    Examples:
        >>> settings = SettingsStore()
        >>> settings.aircraft_type
        <AircraftType.MSN_1576_1942_5_BLADE: 'PC-12/47E MSN 1576-1942 5 Blade'>
        >>> settings.set("weight_class", "LBS_9000")
        >>> settings.weight_class.label
        '9000 lbs'
    """

    def __init__(self, values: dict[str, Any] | None = None, path: Path | None = None) -> None:
        """Initialize the store.

        Args:
            values: Settings overriding the defaults.
            path: File used by save().

        Raises:
            SettingsError: If a value is unknown or invalid.
        """
        self.path = path
        self._config = ConfigLoader(dict(DEFAULT_SETTINGS))
        for key, value in (values or {}).items():
            self.set(key, value)

    @classmethod
    def load(cls, path: str | Path) -> "SettingsStore":
        """Load settings from a YAML file.

        A missing file yields the defaults; save() will create it.

        Args:
            path: Settings file.

        Returns:
            The settings store.

        Raises:
            SettingsError: If the file cannot be read or holds invalid values.
        """
        path = Path(path).expanduser()
        if not path.exists():
            logger.info("No settings file at %s, using defaults", path)
            return cls(path=path)

        try:
            values = ConfigLoader.load(path).to_dict()
        except ConfigError as e:
            raise SettingsError(str(e)) from e

        logger.info("Loaded settings from: %s", path)
        return cls(values, path=path)

    def get(self, key: str) -> Any:
        """Get a setting as stored (enum settings by member name).

        Raises:
            SettingsError: If the key is unknown.
        """
        if key not in DEFAULT_SETTINGS:
            raise SettingsError(f"Unknown setting: {key}")
        return self._config.get(key)

    def set(self, key: str, value: Any) -> None:
        """Change a setting.

        Args:
            key: Setting name.
            value: Enum member, enum member name, or string.

        Raises:
            SettingsError: If the key is unknown or the value invalid.
        """
        if key not in DEFAULT_SETTINGS:
            raise SettingsError(f"Unknown setting: {key}")

        if key in ENUM_SETTINGS:
            value = _to_enum(key, value).name
        else:
            value = "" if value is None else str(value)

        self._config.set(key, value)

    def save(self, path: str | Path | None = None) -> None:
        """Write the settings to path, or to the file they were loaded from.

        Raises:
            SettingsError: If no path is known or the write fails.
        """
        target = Path(path) if path is not None else self.path
        if target is None:
            raise SettingsError("No settings file to save to")

        try:
            self._config.save(target)
        except ConfigError as e:
            raise SettingsError(str(e)) from e
        self.path = target

    @property
    def aircraft_type(self) -> AircraftType:
        return _to_enum("aircraft_type", self._config.get("aircraft_type"))

    @property
    def gateway_kind(self) -> GatewayKind:
        return _to_enum("gateway_kind", self._config.get("gateway_kind"))

    @property
    def weight_class(self) -> WeightClass:
        return _to_enum("weight_class", self._config.get("weight_class"))

    @property
    def wifi_ssid(self) -> str:
        return self._config.get("wifi_ssid", "")

    @property
    def wifi_password(self) -> str:
        return self._config.get("wifi_password", "")
