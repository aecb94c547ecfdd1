"""
Keybinds browser - searchable view of Hyprland keybinds.

Provides:
- KeybindsScreen: Search bar, keybinds table and status bar
- KeybindsPresenter: Filtering and reload logic
- KeybindsApp: Standalone app used by ``hyprhelp browse``
"""

from .keybinds_presenter import KeybindsPresenter, KeybindsStateVM
from .keybinds_screen import KeybindsApp, KeybindsScreen

__all__ = [
    "KeybindsApp",
    "KeybindsPresenter",
    "KeybindsScreen",
    "KeybindsStateVM",
]
