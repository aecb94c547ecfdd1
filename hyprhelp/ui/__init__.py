"""Terminal UI for hyprhelp."""
