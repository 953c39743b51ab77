"""
Viewer preferences.

Remembers the directory the last settings file was loaded from so the
next run can open TKGAMESETTINGS.MXML without asking. Stored in
~/.config/nmskeys/ui_config.json (or under NMSKEYS_CONFIG_DIR).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from .constants import CONFIG_DIR_ENV_VAR, NMSKEYS_CONFIG_DIR, SETTINGS_FILENAME

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "settings_dir": None,
}


def get_config_dir() -> Path:
    """Get the config directory, respecting NMSKEYS_CONFIG_DIR.

    When running tests, set NMSKEYS_CONFIG_DIR to a temp path to keep
    tests away from the real preferences.
    """
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return NMSKEYS_CONFIG_DIR


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to <config dir>/ui_config.json
    """
    return get_config_dir() / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if not isinstance(config, dict):
                raise ValueError("top-level value is not an object")
            # Merge with defaults to handle missing keys
            return {**DEFAULT_CONFIG, **config}
        except (json.JSONDecodeError, ValueError, OSError) as e:
            logger.warning(f"Ignoring unreadable UI config {path}: {e}")
            return DEFAULT_CONFIG.copy()
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Preferences are non-critical
        logger.warning(f"Failed to save UI config {path}: {e}")


def get_settings_dir() -> Path | None:
    """Return the remembered settings directory if it still exists."""
    raw = load_ui_config().get("settings_dir")
    if not raw:
        return None
    settings_dir = Path(raw)
    if not settings_dir.is_dir():
        logger.debug(f"Remembered settings dir no longer exists: {settings_dir}")
        return None
    return settings_dir


def remember_settings_dir(settings_file: Path | str) -> Path | None:
    """Persist the directory containing ``settings_file``.

    Returns:
        The remembered directory, or None if it does not exist
    """
    settings_dir = Path(settings_file).expanduser().resolve().parent
    if not settings_dir.is_dir():
        return None
    config = load_ui_config()
    config["settings_dir"] = str(settings_dir)
    save_ui_config(config)
    logger.info(f"Remembered settings dir {settings_dir}")
    return settings_dir


def default_settings_file() -> Path | None:
    """Return <remembered dir>/TKGAMESETTINGS.MXML if that file exists."""
    settings_dir = get_settings_dir()
    if settings_dir is None:
        return None
    candidate = settings_dir / SETTINGS_FILENAME
    return candidate if candidate.is_file() else None
