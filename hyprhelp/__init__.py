"""
hyprhelp - Hyprland keybinding browser
"""

__version__ = "0.3.0"
