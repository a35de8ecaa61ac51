"""
Unit tests for repouri.config module
"""
import json
import logging
from pathlib import Path

import pytest
import toml
import yaml

from repouri.config import (
    apply_env_overrides,
    get_config_path,
    get_default_config,
    load_config,
    logger,
    merge_configs,
    parse_mode_from_env,
    save_config,
)
from repouri.exit_codes import ConfigError
from repouri.parser import ParseMode


class TestConfigPath:
    """Tests for config file resolution."""

    def test_env_variable_wins(self, isolated_env):
        assert get_config_path() == isolated_env

    def test_home_directory_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("REPOURI_CONFIG")
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert get_config_path() == tmp_path / ".repouri" / "config.json"

    def test_existing_yaml_found(self, tmp_path, monkeypatch):
        monkeypatch.delenv("REPOURI_CONFIG")
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        (tmp_path / ".repouri").mkdir()
        (tmp_path / ".repouri" / "config.yaml").write_text("parsing:\n  mode: strict\n")
        assert get_config_path() == tmp_path / ".repouri" / "config.yaml"


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self):
        config = load_config()
        assert config == get_default_config()
        assert config["parsing"]["mode"] == "legacy"

    def test_json_file_merged(self, isolated_env):
        isolated_env.parent.mkdir(parents=True)
        isolated_env.write_text(json.dumps({"parsing": {"mode": "strict"}}))
        config = load_config()
        assert config["parsing"]["mode"] == "strict"
        assert config["validation"]["enabled"] is False

    def test_toml_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.toml"
        path.write_text('[validation]\nenabled = true\n')
        monkeypatch.setenv("REPOURI_CONFIG", str(path))
        assert load_config()["validation"]["enabled"] is True

    def test_yaml_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yml"
        path.write_text("logging:\n  level: warning\n")
        monkeypatch.setenv("REPOURI_CONFIG", str(path))
        load_config()
        assert logger.level == logging.WARNING

    def test_invalid_json(self, isolated_env):
        isolated_env.parent.mkdir(parents=True)
        isolated_env.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config()

    def test_non_mapping_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        monkeypatch.setenv("REPOURI_CONFIG", str(path))
        with pytest.raises(ConfigError):
            load_config()

    def test_unknown_logging_level(self, isolated_env):
        isolated_env.parent.mkdir(parents=True)
        isolated_env.write_text(json.dumps({"logging": {"level": "chatty"}}))
        with pytest.raises(ConfigError):
            load_config()

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("REPOURI_PARSING_MODE", "strict")
        monkeypatch.setenv("REPOURI_VALIDATION_ENABLED", "true")
        config = load_config()
        assert config["parsing"]["mode"] == "strict"
        assert config["validation"]["enabled"] is True


class TestSaveConfig:
    """Tests for save_config."""

    def test_json(self, isolated_env):
        path = save_config(get_default_config())
        assert path == isolated_env
        assert json.loads(isolated_env.read_text()) == get_default_config()

    def test_toml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.toml"
        monkeypatch.setenv("REPOURI_CONFIG", str(path))
        save_config(get_default_config())
        assert toml.load(path)["parsing"]["mode"] == "legacy"

    def test_yaml_round_trip(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        monkeypatch.setenv("REPOURI_CONFIG", str(path))
        config = get_default_config()
        config["parsing"]["mode"] = "strict"
        save_config(config)
        assert yaml.safe_load(path.read_text())["parsing"]["mode"] == "strict"
        assert load_config()["parsing"]["mode"] == "strict"


class TestMergeAndOverrides:
    """Tests for merge_configs and apply_env_overrides."""

    def test_merge_nested(self):
        merged = merge_configs({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}, "d": 4})
        assert merged == {"a": {"b": 1, "c": 3}, "d": 4}

    def test_override_types(self):
        config = apply_env_overrides(get_default_config(), {
            "REPOURI_VALIDATION_ENABLED": "yes",
            "REPOURI_LOGGING_LEVEL": "DEBUG",
        })
        assert config["validation"]["enabled"] is True
        assert config["logging"]["level"] == "DEBUG"

    def test_unknown_keys_ignored(self):
        config = apply_env_overrides(get_default_config(), {
            "REPOURI_V4": "",
            "REPOURI_NOPE_KEY": "x",
            "OTHER_PARSING_MODE": "strict",
        })
        assert config == get_default_config()


class TestParseModeFromEnv:
    """Tests for grammar selection."""

    def test_default_legacy(self):
        assert parse_mode_from_env({}) is ParseMode.LEGACY

    @pytest.mark.parametrize("value", ["", "0", "false", "1"])
    def test_toggle_presence_selects_strict(self, value):
        assert parse_mode_from_env({"REPOURI_V4": value}) is ParseMode.STRICT

    def test_config_mode(self):
        config = {"parsing": {"mode": "Strict"}}
        assert parse_mode_from_env({}, config) is ParseMode.STRICT

    def test_toggle_beats_config(self):
        config = {"parsing": {"mode": "legacy"}}
        assert parse_mode_from_env({"REPOURI_V4": "1"}, config) is ParseMode.STRICT

    def test_unknown_config_mode(self):
        with pytest.raises(ConfigError):
            parse_mode_from_env({}, {"parsing": {"mode": "v5"}})

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("REPOURI_V4", "")
        assert parse_mode_from_env() is ParseMode.STRICT
