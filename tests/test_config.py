"""Tests for configuration loading."""

import json

import pytest

from convy.config import (
    BUILTIN_TYPES,
    CONFIG_FILENAME,
    DEFAULT_CONFIG,
    Config,
    load_config,
    parse_bool,
    write_default_config,
)
from convy.errors import ConfigError


class TestConfig:
    """Tests for the Config dataclass."""

    def test_defaults(self):
        config = Config()

        assert config.additional_types == frozenset()
        assert config.require_breaking_change_footer is True
        assert config.strict_footers is False
        assert config.allowed_types == frozenset(BUILTIN_TYPES)

    def test_builtin_types(self):
        assert set(BUILTIN_TYPES) == {
            "feat", "fix", "docs", "style", "refactor", "perf", "test",
            "build", "ci", "chore", "revert", "merge", "wip",
        }

    def test_additional_types_normalized(self):
        config = Config(additional_types={" Deps ", "release", ""})

        assert config.additional_types == frozenset({"deps", "release"})
        assert "deps" in config.allowed_types
        assert "feat" in config.allowed_types

    def test_from_dict(self):
        config = Config.from_dict(
            {"additional_types": ["deps"], "require_breaking_change_footer": False}
        )

        assert config.additional_types == frozenset({"deps"})
        assert config.require_breaking_change_footer is False
        assert config.strict_footers is False

    def test_from_dict_null_types(self):
        assert Config.from_dict({"additional_types": None}).additional_types == frozenset()

    @pytest.mark.parametrize(
        "data",
        [
            {"additional_types": "deps"},
            {"additional_types": [1, 2]},
            {"require_breaking_change_footer": "yes"},
            {"strict_footers": 1},
        ],
    )
    def test_from_dict_rejects_bad_values(self, data):
        with pytest.raises(ConfigError):
            Config.from_dict(data)

    def test_from_dict_rejects_unknown_keys(self):
        """A misspelled key is an error rather than a silent default."""
        with pytest.raises(ConfigError, match="require_breaking_change_foter"):
            Config.from_dict({"require_breaking_change_foter": False})

    def test_to_dict_round_trip(self):
        config = Config(additional_types={"deps"}, strict_footers=True)

        assert Config.from_dict(config.to_dict()) == config


class TestParseBool:
    """Tests for boolean environment values."""

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_true(self, value):
        assert parse_bool(value, "X") is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_false(self, value):
        assert parse_bool(value, "X") is False

    def test_invalid(self):
        with pytest.raises(ConfigError, match="CONVY_STRICT_FOOTERS"):
            parse_bool("maybe", "CONVY_STRICT_FOOTERS")


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self):
        assert load_config() == Config()

    def test_reads_default_file(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text(
            json.dumps({"additional_types": ["deps"], "strict_footers": True})
        )

        config = load_config()

        assert config.additional_types == frozenset({"deps"})
        assert config.strict_footers is True
        assert config.require_breaking_change_footer is True

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"require_breaking_change_footer": False}))

        assert load_config(path).require_breaking_change_footer is False

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.json")

    def test_unknown_key_in_file(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"strict_footer": True}))

        with pytest.raises(ConfigError, match="Unknown config key"):
            load_config()

    def test_invalid_json(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("{not json")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config()

    def test_non_object_json(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("[1, 2]")

        with pytest.raises(ConfigError, match="JSON object"):
            load_config()

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        (tmp_path / CONFIG_FILENAME).write_text(
            json.dumps({"additional_types": ["deps"], "require_breaking_change_footer": True})
        )
        monkeypatch.setenv("CONVY_ADDITIONAL_TYPES", "release, hotfix")
        monkeypatch.setenv("CONVY_REQUIRE_BREAKING_CHANGE_FOOTER", "false")
        monkeypatch.setenv("CONVY_STRICT_FOOTERS", "1")

        config = load_config()

        assert config.additional_types == frozenset({"release", "hotfix"})
        assert config.require_breaking_change_footer is False
        assert config.strict_footers is True

    def test_invalid_environment_boolean(self, monkeypatch):
        monkeypatch.setenv("CONVY_STRICT_FOOTERS", "sometimes")

        with pytest.raises(ConfigError):
            load_config()


class TestWriteDefaultConfig:
    """Tests for write_default_config."""

    def test_writes_defaults(self, tmp_path):
        path = write_default_config(tmp_path / CONFIG_FILENAME)

        assert json.loads(path.read_text()) == DEFAULT_CONFIG
        assert load_config(path) == Config()

    def test_refuses_overwrite(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("{}")

        with pytest.raises(ConfigError, match="already exists"):
            write_default_config(path)

    def test_force_overwrite(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("{}")

        write_default_config(path, force=True)

        assert json.loads(path.read_text()) == DEFAULT_CONFIG
