"""
Centralized constants for nmskeys.

Names and values that describe the TKGAMESETTINGS.MXML layout and the
defaults used by the viewer live here so the parser, the CLI and the TUI
agree on them.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

# Overridden at runtime by the NMSKEYS_CONFIG_DIR environment variable
NMSKEYS_CONFIG_DIR = Path.home() / ".config" / "nmskeys"
CONFIG_DIR_ENV_VAR = "NMSKEYS_CONFIG_DIR"

# The game keeps its bindings in <install>/Binaries/SETTINGS/TKGAMESETTINGS.MXML
SETTINGS_FILENAME = "TKGAMESETTINGS.MXML"

# =============================================================================
# DOCUMENT LAYOUT
# =============================================================================

# Top-level containers look like <Property name="KeyMapping2">, sometimes
# alongside an empty <Property name="KeyMapping" />
KEYMAP_PREFIX = "KeyMap"

NAME_ATTRIBUTE = "name"
VALUE_ATTRIBUTE = "value"

ACTION_SET_PROPERTY = "ActionSet"
ACTION_PROPERTY = "Action"
BUTTON_PROPERTY = "Button"

# =============================================================================
# DISPLAY
# =============================================================================

# First catalogue entry; selecting it disables the group filter
ALL_GROUPS_SENTINEL = "All"

COLUMN_TITLES = ("ActionSet", "Action", "Button")

# Max rows printed by `nmskeys list` before truncating (0 = no limit)
DEFAULT_LIST_LIMIT = 0
