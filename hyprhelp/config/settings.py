"""Configuration utilities for hyprhelp.

Settings come from three places, highest priority first: explicit arguments
(CLI options), HYPRHELP_* environment variables, and the YAML settings file
at ~/.config/hyprhelp/config.yaml.

Example settings file:

    # Where to read Hyprland keybinds from
    keybinds_file: ~/.config/hypr/configs/keybinds.conf
    # Show commented-out binds in listings
    show_commented: true
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .constants import (
    CONFIG_DIR_RELPATH,
    DEFAULT_KEYBINDS_RELPATH,
    ENV_VAR_DEFINITIONS,
    SETTINGS_FILE_NAME,
)

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "keybinds_file": None,
    "show_commented": True,
}


def get_config_dir() -> Path:
    """Get the hyprhelp config directory (~/.config/hyprhelp)."""
    return Path.home() / CONFIG_DIR_RELPATH


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    if value is None:
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values is None:
        return True, None

    if value.upper() not in [v.upper() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all HYPRHELP_* environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Raises:
        ValueError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ValueError(error)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_settings_path() -> Path:
    """Get the YAML settings path, respecting HYPRHELP_CONFIG_FILE."""
    override = os.environ.get("HYPRHELP_CONFIG_FILE")
    if override:
        return Path(override).expanduser()
    return get_config_dir() / SETTINGS_FILE_NAME


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from the YAML file.

    Returns:
        Settings dict merged over defaults. A missing, empty or invalid
        file yields the defaults.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        return DEFAULT_SETTINGS.copy()

    try:
        with open(settings_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load settings from {settings_path}: {e}")
        return DEFAULT_SETTINGS.copy()

    if loaded is None:
        return DEFAULT_SETTINGS.copy()

    if not isinstance(loaded, dict):
        logger.warning(f"Ignoring settings file {settings_path}: expected a mapping")
        return DEFAULT_SETTINGS.copy()

    return {**DEFAULT_SETTINGS, **loaded}


def get_keybinds_path(override: Optional[Path] = None) -> Path:
    """Resolve which keybinds file to read.

    Order: explicit override, HYPRHELP_KEYBINDS_FILE, ``keybinds_file`` in
    the settings file, then ~/.config/hypr/configs/keybinds.conf.

    Raises:
        RuntimeError: If the home directory cannot be determined.
    """
    if override is not None:
        return Path(override).expanduser()

    env_path = get_env_var("HYPRHELP_KEYBINDS_FILE")
    if env_path:
        return Path(env_path).expanduser()

    configured = load_settings().get("keybinds_file")
    if configured:
        return Path(str(configured)).expanduser()

    return Path.home() / DEFAULT_KEYBINDS_RELPATH


def get_env_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all HYPRHELP_* environment variables."""
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)
        is_valid, _ = validate_env_var(name, value)
        info[name] = {
            "description": definition.get("description", ""),
            "value": value,
            "is_set": value is not None,
            "valid": is_valid,
            "default": definition.get("default"),
        }
    return info
