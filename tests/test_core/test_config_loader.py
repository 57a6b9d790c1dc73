"""
Tests for the configuration loader module.

Tests config loading, parsing, defaults, and error handling.
"""

import json
import os
import pytest
from pathlib import Path

from stringext.core.config_loader import (
    Config,
    get_config,
    get_loaded_config,
    reload_config,
)
from stringext.core.exceptions import ConfigurationError


class TestConfigFromFile:
    """Tests for loading config from file."""

    def test_load_valid_config(self, temp_config: Path, reset_config_singleton):
        """Test loading a valid configuration file."""
        config = Config.from_file(temp_config)

        assert config.logging.level == "DEBUG"
        assert config.text.stream_encoding == "utf-16-le"
        assert config.paths.logs_directory.is_absolute()

    def test_load_missing_config_raises_error(self, temp_dir: Path):
        """Test that loading non-existent config raises ConfigurationError."""
        fake_path = temp_dir / "nonexistent" / "config.json"

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(fake_path)

        assert "not found" in str(exc_info.value.message).lower()

    def test_load_invalid_json_raises_error(self, temp_dir: Path):
        """Test that invalid JSON raises ConfigurationError."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text("{ invalid json }")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(config_path)

        assert "invalid json" in str(exc_info.value.message).lower()

    def test_config_default_values(self, temp_dir: Path):
        """Test that missing config values get defaults."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({"logging": {}}))

        config = Config.from_file(config_path)

        assert config.text.stream_encoding == "utf-8"
        assert config.logging.level == "WARNING"
        assert config.paths.logs_directory is None

    def test_relative_logs_directory_resolved(self, temp_dir: Path):
        """Test that a relative logs directory is resolved against the project root."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({"paths": {"logs_directory": "logs"}}))

        config = Config.from_file(config_path)

        assert config.paths.logs_directory == temp_dir / "logs"


class TestGetConfig:
    """Tests for the get_config singleton function."""

    def test_get_config_returns_same_instance(self, temp_config: Path, reset_config_singleton):
        """Test that get_config returns singleton instance."""
        config1 = get_config(temp_config)
        config2 = get_config()

        assert config1 is config2

    def test_reload_config_creates_new_instance(self, temp_config: Path, reset_config_singleton):
        """Test that reload_config creates a fresh instance."""
        _config1 = get_config(temp_config)  # noqa: F841

        with open(temp_config, "r") as f:
            data = json.load(f)
        data["text"]["stream_encoding"] = "latin-1"
        with open(temp_config, "w") as f:
            json.dump(data, f)

        config2 = reload_config(temp_config)

        assert config2.text.stream_encoding == "latin-1"

    def test_falls_back_to_defaults_without_file(self, temp_dir: Path, reset_config_singleton):
        """Test that no config file on the search path yields defaults."""
        previous = os.getcwd()
        os.chdir(temp_dir)
        try:
            config = get_config()
        finally:
            os.chdir(previous)

        assert config.text.stream_encoding == "utf-8"

    def test_get_loaded_config_does_not_search(self, temp_dir: Path, reset_config_singleton):
        """Test that get_loaded_config ignores config files in the working directory."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        (config_dir / "config.json").write_text("{not json")

        previous = os.getcwd()
        os.chdir(temp_dir)
        try:
            loaded = get_loaded_config()
        finally:
            os.chdir(previous)

        assert loaded is None

    def test_get_loaded_config_after_explicit_load(self, temp_config: Path, reset_config_singleton):
        """Test that an explicitly loaded config is returned."""
        config = get_config(temp_config)

        assert get_loaded_config() is config


class TestSectionValidation:
    """Tests for rejecting malformed config sections."""

    @pytest.mark.parametrize("section, value", [
        ("logging", "verbose"),
        ("paths", ["logs"]),
        ("text", 3),
    ])
    def test_non_object_section_raises(self, temp_dir: Path, section, value):
        """Test that a section that is not a JSON object raises ConfigurationError."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({section: value}))

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(config_path)

        assert exc_info.value.details["section"] == section
