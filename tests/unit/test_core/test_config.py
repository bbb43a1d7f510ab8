"""Tests for settings and the YAML config loader."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from classdiagram.core.config import ConfigLoader, GeneratorSettings, LoggingSettings, Settings
from classdiagram.core.exceptions import ConfigurationError


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_load_and_sections(self, tmp_path: Path):
        """Test loading a file and reading its sections."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("generator:\n  title: demo\n  max_workers: 2\n")

        loader = ConfigLoader(config_file)
        config = loader.load()

        assert config["generator"]["title"] == "demo"
        assert loader.get_section("generator") == {"title": "demo", "max_workers": 2}
        assert loader.get_section("logging") == {}

    def test_no_path(self):
        """Test that a loader without a path loads nothing."""
        assert ConfigLoader().load() == {}

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing file raises ConfigurationError."""
        loader = ConfigLoader(tmp_path / "missing.yaml")
        with pytest.raises(ConfigurationError) as exc_info:
            loader.load()
        assert "not found" in exc_info.value.message

    def test_invalid_yaml(self, tmp_path: Path):
        """Test that broken YAML raises ConfigurationError."""
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("generator: [unclosed\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader(config_file).load()

    def test_non_mapping_root(self, tmp_path: Path):
        """Test that a list at the root is rejected."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader(config_file).load()

    def test_empty_file(self, tmp_path: Path):
        """Test that an empty file is an empty mapping."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert ConfigLoader(config_file).load() == {}


class TestSettings:
    """Tests for the settings models."""

    def test_defaults(self):
        """Test default generator settings."""
        settings = GeneratorSettings()
        assert settings.max_workers == 4
        assert "bin" in settings.excluded_dirs
        assert settings.newline == "\n"

    def test_log_level_is_normalized(self):
        """Test that log levels are upper-cased."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_log_level(self):
        """Test that an unknown level is rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="verbose")

    def test_escaped_newline(self):
        """Test that escaped line separators are unescaped."""
        assert GeneratorSettings(newline="\\r\\n").newline == "\r\n"

    def test_worker_bounds(self):
        """Test worker count validation."""
        with pytest.raises(ValidationError):
            GeneratorSettings(max_workers=0)

    def test_env_override(self, monkeypatch):
        """Test that environment variables are read."""
        monkeypatch.setenv("CLASSDIAGRAM_GENERATOR_TITLE", "from-env")
        assert GeneratorSettings().title == "from-env"

    def test_from_yaml(self, tmp_path: Path):
        """Test building settings from a YAML file."""
        config_file = tmp_path / "classdiagram.yaml"
        config_file.write_text(
            "logging:\n"
            "  level: info\n"
            "  use_rich: false\n"
            "generator:\n"
            "  title: from-file\n"
            "  excluded_dirs: [vendor]\n"
        )
        settings = Settings.from_yaml(config_file)
        assert settings.logging.level == "INFO"
        assert settings.logging.use_rich is False
        assert settings.generator.title == "from-file"
        assert settings.generator.excluded_dirs == ["vendor"]

    def test_from_yaml_invalid_value(self, tmp_path: Path):
        """Test that invalid values become a ConfigurationError."""
        config_file = tmp_path / "classdiagram.yaml"
        config_file.write_text("logging:\n  level: loud\n")
        with pytest.raises(ConfigurationError) as exc_info:
            Settings.from_yaml(config_file)
        assert exc_info.value.details["config_key"] == str(config_file)

    def test_load_explicit_path(self, tmp_path: Path):
        """Test that an explicit path takes priority."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("generator:\n  max_workers: 8\n")
        assert Settings.load(config_file).generator.max_workers == 8

    def test_load_default_file(self, tmp_path: Path, monkeypatch):
        """Test that classdiagram.yaml in the working directory is used."""
        (tmp_path / "classdiagram.yaml").write_text("generator:\n  title: local\n")
        monkeypatch.chdir(tmp_path)
        assert Settings.load().generator.title == "local"
