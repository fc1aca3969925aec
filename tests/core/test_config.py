"""Tests for YAML configuration loading."""

from pathlib import Path

import pytest

from airgate.core.config import ConfigError, ConfigLoader
from airgate.core.resource_path import get_config_path


class TestConfigLoader:
    """Test suite for ConfigLoader."""

    @pytest.fixture
    def config(self) -> ConfigLoader:
        """Create a loader with an airport section."""
        return ConfigLoader.from_dict({"airport": {"max_capacity": 20, "initial_aircraft": [1]}})

    def test_load_file(self, tmp_path: Path) -> None:
        """Test loading a YAML file."""
        path = tmp_path / "airport.yaml"
        path.write_text("airport:\n  max_capacity: 12\n", encoding="utf-8")

        config = ConfigLoader.load(path)

        assert config.get("airport.max_capacity") == 12

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file is an empty configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert ConfigLoader.load(path).to_dict() == {}

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path / "nope.yaml")

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        """Test broken YAML raises ConfigError."""
        path = tmp_path / "broken.yaml"
        path.write_text("airport: {max_capacity: 3", encoding="utf-8")

        with pytest.raises(ConfigError, match="Failed to load"):
            ConfigLoader.load(path)

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        """Test a list at the top level is refused."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader.load(path)

    def test_get_nested(self, config: ConfigLoader) -> None:
        """Test dot-notation access."""
        assert config.get("airport.max_capacity") == 20
        assert config.get("airport.missing", default="x") == "x"
        assert config.get("weather.category") is None

    def test_set_creates_sections(self, config: ConfigLoader) -> None:
        """Test set builds missing sections."""
        config.set("weather.category", "stormy")
        assert config.get("weather.category") == "stormy"

    def test_get_section(self, config: ConfigLoader) -> None:
        """Test section access and its errors."""
        assert config.get_section("airport")["max_capacity"] == 20

        with pytest.raises(ConfigError, match="not found"):
            config.get_section("weather")
        with pytest.raises(ConfigError, match="not a section"):
            config.get_section("airport.max_capacity")

    def test_get_int(self, config: ConfigLoader) -> None:
        """Test integer access validates the type."""
        assert config.get_int("airport.max_capacity", 100) == 20
        assert config.get_int("airport.other", 100) == 100

        config.set("airport.max_capacity", True)
        with pytest.raises(ConfigError):
            config.get_int("airport.max_capacity", 100)

    def test_merge(self, config: ConfigLoader) -> None:
        """Test the other configuration wins on conflicts."""
        config.merge(ConfigLoader.from_dict({"airport": {"max_capacity": 3}, "weather": {"magnitude": 1}}))

        assert config.get("airport.max_capacity") == 3
        assert config.get("airport.initial_aircraft") == [1]
        assert config.get("weather.magnitude") == 1

    def test_from_dict_copies(self) -> None:
        """Test later edits to the source dict don't leak in."""
        data = {"airport": {"max_capacity": 1}}
        config = ConfigLoader.from_dict(data)
        data["airport"]["max_capacity"] = 50

        assert config.get("airport.max_capacity") == 1

    def test_shipped_airport_config(self) -> None:
        """Test the bundled airport.yaml loads with the default capacity."""
        config = ConfigLoader.load(get_config_path("airport.yaml"))

        assert config.get_int("airport.max_capacity", 0) == 100
        assert config.get("weather.category") == "clear"
