"""
Tests for ztui.config.settings module.

This test suite covers:
- Default settings initialization
- Settings loading, merging and persistence
- Error handling for corrupted settings files
"""

import json

import pytest

from ztui.config import settings


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "config" / "settings.json"
    monkeypatch.setattr("ztui.config.settings.SETTINGS_PATH", path)
    yield path
    settings.settings_store.values = dict(settings.DEFAULT_SETTINGS)


class TestLoadSettings:
    def test_load_defaults_when_no_file(self, settings_file):
        settings.settings_store.values = {}
        settings.load_settings()

        assert settings.get_setting("title") == settings.DEFAULT_TITLE
        assert settings.get_setting("attr_active") == "white/blue"
        assert settings.get_setting("quit_key") == "q"
        assert settings.get_setting("menu") is None

    def test_load_merges_with_defaults(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"title": "Custom", "ascii_borders": True}))

        settings.load_settings()

        assert settings.get_setting("title") == "Custom"
        assert settings.get_bool("ascii_borders") is True
        assert settings.get_setting("attr_normal") == "default/default"

    def test_menu_order_is_preserved(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text('{"menu": {"Zeta": "A", "Alpha": "", "Mid": ["B"]}}')

        settings.load_settings()

        assert list(settings.get_setting("menu")) == ["Zeta", "Alpha", "Mid"]

    def test_corrupted_file_keeps_defaults(self, settings_file, messages_at):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("{not json")

        settings.load_settings()

        assert settings.get_setting("title") == settings.DEFAULT_TITLE
        assert any("Could not read settings" in m for m in messages_at("WARNING"))

    def test_non_dict_file_keeps_defaults(self, settings_file, messages_at):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("[1, 2, 3]")

        settings.load_settings()

        assert settings.get_setting("quit_label") == "Quit"
        assert any("does not hold a JSON object" in m for m in messages_at("WARNING"))


class TestSaveSettings:
    def test_set_setting_persists(self, settings_file):
        settings.load_settings()
        settings.set_setting("title", "Saved")

        data = json.loads(settings_file.read_text(encoding="utf-8"))
        assert data["title"] == "Saved"

    def test_get_setting_default(self, settings_file):
        settings.load_settings()
        assert settings.get_setting("missing", "fallback") == "fallback"
