"""Configuration utilities for nmskeys."""

from .constants import ALL_GROUPS_SENTINEL, SETTINGS_FILENAME
from .settings import (
    default_settings_file,
    get_config_dir,
    get_settings_dir,
    load_ui_config,
    remember_settings_dir,
    save_ui_config,
)

__all__ = [
    "ALL_GROUPS_SENTINEL",
    "SETTINGS_FILENAME",
    "default_settings_file",
    "get_config_dir",
    "get_settings_dir",
    "load_ui_config",
    "remember_settings_dir",
    "save_ui_config",
]
