"""Tests for nmskeys preferences."""

import json

from nmskeys.config import (
    default_settings_file,
    get_config_dir,
    get_settings_dir,
    load_ui_config,
    remember_settings_dir,
    save_ui_config,
)
from nmskeys.config.settings import DEFAULT_CONFIG, get_ui_config_path


def test_config_dir_respects_environment(isolated_config):
    assert get_config_dir() == isolated_config


def test_config_dir_defaults_to_home(monkeypatch):
    monkeypatch.delenv("NMSKEYS_CONFIG_DIR", raising=False)
    assert get_config_dir().parts[-2:] == (".config", "nmskeys")


def test_load_returns_defaults_without_file():
    assert load_ui_config() == DEFAULT_CONFIG
    assert get_settings_dir() is None


def test_save_creates_directory(isolated_config):
    save_ui_config({"settings_dir": "/tmp"})
    assert json.loads((isolated_config / "ui_config.json").read_text()) == {"settings_dir": "/tmp"}


def test_invalid_json_falls_back_to_defaults():
    path = get_ui_config_path()
    path.parent.mkdir(parents=True)
    path.write_text("{not json")
    assert load_ui_config() == DEFAULT_CONFIG


def test_non_object_json_falls_back_to_defaults():
    path = get_ui_config_path()
    path.parent.mkdir(parents=True)
    path.write_text("[1, 2]")
    assert load_ui_config() == DEFAULT_CONFIG


def test_unknown_keys_are_preserved():
    save_ui_config({"theme": "dark"})
    assert load_ui_config() == {"settings_dir": None, "theme": "dark"}


def test_remember_settings_dir(settings_file):
    remembered = remember_settings_dir(settings_file)

    assert remembered == settings_file.parent.resolve()
    assert get_settings_dir() == remembered
    assert default_settings_file() == remembered / "TKGAMESETTINGS.MXML"


def test_remembered_dir_that_was_removed(tmp_path):
    gone = tmp_path / "gone"
    gone.mkdir()
    remember_settings_dir(gone / "TKGAMESETTINGS.MXML")
    gone.rmdir()

    assert get_settings_dir() is None
    assert default_settings_file() is None


def test_default_file_requires_settings_file(tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    remember_settings_dir(other / "custom.MXML")

    assert get_settings_dir() == other.resolve()
    assert default_settings_file() is None
