"""
Search and grouping helpers for rendering keybinds.

All helpers keep file order and never modify the records they are given.
"""

from typing import Dict, Iterable, List

from hyprhelp.config.constants import ALL_CATEGORIES

from .formatting import MODIFIER_SEPARATOR
from .models import Keybind


def list_categories(keybinds: Iterable[Keybind]) -> List[str]:
    """Return ["All", ...] followed by categories in order of first appearance."""
    categories = [ALL_CATEGORIES]
    for bind in keybinds:
        if bind.category not in categories:
            categories.append(bind.category)
    return categories


def count_by_category(keybinds: Iterable[Keybind]) -> Dict[str, int]:
    """Count keybinds per category, in order of first appearance."""
    counts: Dict[str, int] = {}
    for bind in keybinds:
        counts[bind.category] = counts.get(bind.category, 0) + 1
    return counts


def matches_search(bind: Keybind, term: str) -> bool:
    """Case-insensitive substring match on description, key and modifiers."""
    term = term.lower()
    return (
        term in bind.description.lower()
        or term in bind.key.lower()
        or term in bind.modifiers.lower()
    )


def filter_keybinds(
    keybinds: Iterable[Keybind],
    search: str = "",
    category: str = ALL_CATEGORIES,
    include_commented: bool = True,
) -> List[Keybind]:
    """
    Filter keybinds for display.

    Args:
        keybinds: Parsed keybinds
        search: Text to look for; empty matches everything
        category: Category name, or "All"
        include_commented: Whether to keep disabled binds
    """
    return [
        bind
        for bind in keybinds
        if matches_search(bind, search)
        and (category == ALL_CATEGORIES or bind.category == category)
        and (include_commented or not bind.is_commented)
    ]


def group_by_category(keybinds: Iterable[Keybind]) -> Dict[str, List[Keybind]]:
    """Group keybinds by category, keeping first-appearance order."""
    groups: Dict[str, List[Keybind]] = {}
    for bind in keybinds:
        groups.setdefault(bind.category, []).append(bind)
    return groups


def split_modifiers(modifiers: str) -> List[str]:
    """Split "SUPER + SHIFT" into ["SUPER", "SHIFT"]; empty gives []."""
    if not modifiers.strip():
        return []
    return modifiers.split(MODIFIER_SEPARATOR)


def format_combo(bind: Keybind) -> str:
    """Full key combination, e.g. "SUPER + SHIFT + Q"."""
    return MODIFIER_SEPARATOR.join(split_modifiers(bind.modifiers) + [bind.key])
