"""
Centralized constants for hyprhelp.

Marker strings recognised in keybinds.conf are fixed; they are collected here
so the parser, the CLI help text and the tests agree on them.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

# Both relative to the user's home directory
CONFIG_DIR_RELPATH = Path(".config") / "hyprhelp"
SETTINGS_FILE_NAME = "config.yaml"
DEFAULT_KEYBINDS_RELPATH = Path(".config") / "hypr" / "configs" / "keybinds.conf"

# =============================================================================
# KEYBINDS.CONF MARKERS
# =============================================================================

IGNORE_MARKER = "#."  # Line is dropped entirely
SECTION_MARKER = "#/"  # "#/ Apps" starts the "Apps" category
COMMENT_MARKER = "#"
DIRECTIVE_KEYWORD = "bind"
FIELD_SEPARATOR = ","
ASSIGNMENT = "="

DEFAULT_CATEGORY = "General"
ALL_CATEGORIES = "All"  # Pseudo-category used by filters

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "HYPRHELP_KEYBINDS_FILE": {
        "description": "Path to the Hyprland keybinds file to read",
        "default": None,
        "valid_values": None,
    },
    "HYPRHELP_CONFIG_FILE": {
        "description": "Path to the hyprhelp YAML settings file",
        "default": None,
        "valid_values": None,
    },
    "HYPRHELP_LOG_LEVEL": {
        "description": "Logging level for hyprhelp diagnostics",
        "default": "WARNING",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
    },
}
