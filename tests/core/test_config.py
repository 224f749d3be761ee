"""Tests for configuration loading and lookup."""

from pathlib import Path

import pytest

from beforehand.core.config import Config
from beforehand.kernel.exceptions import ConfigurationException


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "test-service", "port": 8080}})
        assert config.get("app.name") == "test-service"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_through_scalar_returns_default(self):
        config = Config({"app": "flat"})
        assert config.get("app.name", "fallback") == "fallback"

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BEFOREHAND_LOGGING_FORMAT", "json")
        config = Config({"beforehand": {"logging": {"format": "console"}}})
        assert config.get("beforehand.logging.format") == "json"

    def test_get_section(self):
        config = Config({"beforehand": {"logging": {"level": {"root": "DEBUG", "beforehand.aop": "WARNING"}}}})
        assert config.get_section("beforehand.logging.level") == {"root": "DEBUG", "beforehand.aop": "WARNING"}
        assert config.get_section("beforehand.missing") == {}


class TestConfigFiles:
    def test_defaults_are_packaged(self):
        config = Config.defaults()
        assert config.get("beforehand.logging.format") == "console"
        assert config.get("beforehand.logging.level.root") == "INFO"

    def test_yaml_overrides_defaults(self, tmp_path: Path):
        config_file = tmp_path / "beforehand.yaml"
        config_file.write_text("beforehand:\n  logging:\n    format: json\n")
        config = Config.from_file(config_file)
        assert config.get("beforehand.logging.format") == "json"
        assert config.get("beforehand.logging.level.root") == "INFO"
        assert config.loaded_sources[-1] == str(config_file)

    def test_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "beforehand.toml"
        config_file.write_text('[beforehand.logging.level]\nroot = "DEBUG"\n')
        config = Config.from_file(config_file, load_defaults=False)
        assert config.get("beforehand.logging.level.root") == "DEBUG"
        assert config.get("beforehand.logging.format") is None

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("beforehand.logging.format") == "console"
        assert len(config.loaded_sources) == 1

    def test_malformed_file_raises(self, tmp_path: Path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("beforehand: [unclosed\n")
        with pytest.raises(ConfigurationException) as exc_info:
            Config.from_file(config_file)
        assert exc_info.value.code == "CONFIG_001"
