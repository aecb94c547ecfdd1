"""Configuration utilities for hyprhelp."""

from .settings import (
    get_config_dir,
    get_env_info,
    get_env_var,
    get_keybinds_path,
    get_settings_path,
    load_settings,
    validate_all_env_vars,
    validate_env_var,
)

__all__ = [
    "get_config_dir",
    "get_env_info",
    "get_env_var",
    "get_keybinds_path",
    "get_settings_path",
    "load_settings",
    "validate_all_env_vars",
    "validate_env_var",
]
