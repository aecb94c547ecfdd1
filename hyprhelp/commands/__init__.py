"""CLI commands for hyprhelp."""
