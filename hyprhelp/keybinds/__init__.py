"""
Hyprland keybinds.conf parsing.

Usage:
    from hyprhelp.keybinds import load_keybinds, filter_keybinds

    binds = load_keybinds()
    for bind in filter_keybinds(binds, search="kitty"):
        print(bind.modifiers, bind.key, bind.description)
"""

from .classifier import Classification, LineKind, classify_line
from .fields import describe, split_action
from .formatting import format_key, format_modifiers
from .loader import load_keybinds, load_keybinds_strict, read_keybinds_text
from .matcher import DirectiveMatch, match_directive
from .models import BindVariant, Keybind
from .parser import parse_keybinds
from .query import (
    count_by_category,
    filter_keybinds,
    format_combo,
    group_by_category,
    list_categories,
    matches_search,
    split_modifiers,
)

__all__ = [
    "BindVariant",
    "Classification",
    "DirectiveMatch",
    "Keybind",
    "LineKind",
    "classify_line",
    "count_by_category",
    "describe",
    "filter_keybinds",
    "format_combo",
    "format_key",
    "format_modifiers",
    "group_by_category",
    "list_categories",
    "load_keybinds",
    "load_keybinds_strict",
    "match_directive",
    "matches_search",
    "parse_keybinds",
    "read_keybinds_text",
    "split_action",
    "split_modifiers",
]
