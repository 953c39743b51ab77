"""Shared pytest fixtures for nmskeys tests."""

import logging
from pathlib import Path

import pytest

from mxml_factories import SCENARIO_BINDINGS, make_settings_xml


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch) -> Path:
    """Keep preferences and logs out of the real home directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("NMSKEYS_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by the CLI/TUI logging setup between tests."""
    yield
    package_logger = logging.getLogger("nmskeys")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def scenario_xml() -> str:
    return make_settings_xml(SCENARIO_BINDINGS)


@pytest.fixture
def settings_file(tmp_path, scenario_xml) -> Path:
    """A TKGAMESETTINGS.MXML inside a SETTINGS directory."""
    settings_dir = tmp_path / "SETTINGS"
    settings_dir.mkdir()
    path = settings_dir / "TKGAMESETTINGS.MXML"
    path.write_text(scenario_xml, encoding="utf-8")
    return path


@pytest.fixture
def broken_file(tmp_path) -> Path:
    path = tmp_path / "broken.MXML"
    path.write_text('<Data><Property name="KeyMapping2">', encoding="utf-8")
    return path
