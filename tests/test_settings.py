"""
Tests for settings loading and deep merge logic.

Uses real TOML files on disk (no mocking).
"""

import toml

from searchsh.utils.helpers import _deep_merge, load_settings, settings_path


class TestDeepMerge:
    """Test the _deep_merge function directly."""

    def test_override_replaces_flat_key(self):
        base = {"a": 1, "b": 2}
        override = {"b": 99}
        result = _deep_merge(base, override)
        assert result == {"a": 1, "b": 99}

    def test_override_adds_new_key(self):
        base = {"a": 1}
        override = {"b": 2}
        result = _deep_merge(base, override)
        assert result == {"a": 1, "b": 2}

    def test_nested_dicts_are_merged(self):
        base = {"section": {"a": 1, "b": 2}}
        override = {"section": {"b": 99, "c": 3}}
        result = _deep_merge(base, override)
        assert result == {"section": {"a": 1, "b": 99, "c": 3}}

    def test_base_is_not_mutated(self):
        base = {"a": {"x": 1}}
        override = {"a": {"x": 2}}
        _deep_merge(base, override)
        assert base["a"]["x"] == 1


class TestLoadSettings:
    """Test load_settings with real TOML files."""

    def test_returns_defaults_when_file_missing(self, tmp_path):
        settings = load_settings(tmp_path / "nonexistent.toml")
        assert settings["cli"]["default_command"] == "help"
        assert settings["browser"]["terminal"] == "w3m"
        assert settings["grep"]["exclude_dirs"] == [".bzr", ".cvs", ".git", ".hg", ".svn"]
        assert settings["engines"] == {}

    def test_loaded_values_override_defaults(self, tmp_settings):
        settings = load_settings(tmp_settings)
        assert settings["browser"]["terminal"] == "lynx"
        assert settings["engines"]["google"] == "https://www.google.co.uk/search?q="

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text(toml.dumps({"browser": {"terminal": ""}}))
        settings = load_settings(path)
        assert settings["browser"]["terminal"] == ""
        assert settings["cli"]["default_command"] == "help"

    def test_invalid_toml_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text("[browser\nterminal = ")
        settings = load_settings(path)
        assert settings["browser"]["terminal"] == "w3m"

    def test_env_overrides_default_command(self, tmp_settings, monkeypatch):
        monkeypatch.setenv("SEARCHSH_DEFAULT_COMMAND", "google")
        assert load_settings(tmp_settings)["cli"]["default_command"] == "google"


class TestSettingsPath:
    """Test where the settings file is looked up."""

    def test_explicit_env_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SEARCHSH_SETTINGS", str(tmp_path / "x.toml"))
        assert settings_path() == tmp_path / "x.toml"

    def test_xdg_config_home(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SEARCHSH_SETTINGS")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert settings_path() == tmp_path / "searchsh" / "settings.toml"
