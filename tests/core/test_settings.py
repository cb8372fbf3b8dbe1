"""Tests for the pilot settings store."""

from pathlib import Path

import pytest
import yaml

from pc12perf.avionics.base import GatewayKind
from pc12perf.core.settings import DEFAULT_SETTINGS, SettingsError, SettingsStore
from pc12perf.performance.aircraft import AircraftType, WeightClass


class TestSettingsStore:
    """Test SettingsStore."""

    def test_defaults(self) -> None:
        """Test factory defaults."""
        settings = SettingsStore()

        assert settings.aircraft_type is AircraftType.MSN_1576_1942_5_BLADE
        assert settings.gateway_kind is GatewayKind.ASPEN
        assert settings.weight_class is WeightClass.LBS_8000
        assert settings.wifi_ssid == ""
        assert settings.wifi_password == ""

    def test_set_enum_member_or_name(self) -> None:
        """Test enum settings accept members and member names."""
        settings = SettingsStore()

        settings.set("gateway_kind", GatewayKind.AUTO_DETECT)
        settings.set("weight_class", "LBS_10400")

        assert settings.gateway_kind is GatewayKind.AUTO_DETECT
        assert settings.weight_class is WeightClass.LBS_10400
        assert settings.get("gateway_kind") == "AUTO_DETECT"

    def test_invalid_value(self) -> None:
        """Test an unknown enum name is rejected with the valid choices."""
        settings = SettingsStore()

        with pytest.raises(SettingsError, match="LBS_8000"):
            settings.set("weight_class", "heavy")

    def test_unknown_key(self) -> None:
        with pytest.raises(SettingsError, match="Unknown setting"):
            SettingsStore({"tail_number": "HB-FVA"})
        with pytest.raises(SettingsError, match="Unknown setting"):
            SettingsStore().get("tail_number")

    def test_wifi_credentials_are_strings(self) -> None:
        """Test Wi-Fi settings are stored as strings."""
        settings = SettingsStore({"wifi_ssid": "AIRCRAFT", "wifi_password": None})

        assert settings.wifi_ssid == "AIRCRAFT"
        assert settings.wifi_password == ""

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file yields the defaults and remembers the path."""
        path = tmp_path / "settings.yaml"
        settings = SettingsStore.load(path)

        assert settings.path == path
        assert {key: settings.get(key) for key in DEFAULT_SETTINGS} == DEFAULT_SETTINGS

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test saved settings load back."""
        path = tmp_path / "pc12perf" / "settings.yaml"
        settings = SettingsStore.load(path)
        settings.set("aircraft_type", AircraftType.MSN_2001_5_BLADE)
        settings.save()

        assert yaml.safe_load(path.read_text())["aircraft_type"] == "MSN_2001_5_BLADE"
        assert SettingsStore.load(path).aircraft_type is AircraftType.MSN_2001_5_BLADE

    def test_load_invalid_file(self, tmp_path: Path) -> None:
        """Test invalid stored values are reported as settings errors."""
        path = tmp_path / "settings.yaml"
        path.write_text("gateway_kind: SATCOM\n")

        with pytest.raises(SettingsError, match="gateway_kind"):
            SettingsStore.load(path)

    def test_save_without_path(self) -> None:
        with pytest.raises(SettingsError, match="No settings file"):
            SettingsStore().save()
