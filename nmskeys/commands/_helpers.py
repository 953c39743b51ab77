"""Shared helpers for command modules."""

from pathlib import Path
from typing import Optional

from nmskeys.config.constants import SETTINGS_FILENAME
from nmskeys.config.settings import default_settings_file
from nmskeys.exceptions import ConfigurationError


def resolve_settings_file(settings_file: Optional[Path]) -> Path:
    """Return the file to load: the argument, or the remembered default.

    Raises:
        ConfigurationError: If no file was given and none is remembered
    """
    if settings_file is not None:
        return settings_file.expanduser()

    remembered = default_settings_file()
    if remembered is None:
        raise ConfigurationError(
            f"No settings file given and no remembered directory containing {SETTINGS_FILENAME}",
            setting="settings_dir",
        )
    return remembered
