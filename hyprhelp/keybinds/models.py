"""
Keybind records and directive variants.

A Keybind is built once per accepted ``bind`` line and never mutated
afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class BindVariant(Enum):
    """Letters that may follow the ``bind`` keyword (bindm, bindle, ...)."""

    LOCKED = "l"  # Active on the lock screen
    REPEAT = "e"  # Repeats while held
    RELEASE = "r"  # Fires on key release
    TRANSPARENT = "t"  # Passes the key through
    MOUSE = "m"  # Mouse binding

    @property
    def tag(self) -> str:
        """Display tag used when labelling a bind of this variant."""
        return _VARIANT_TAGS[self]

    @property
    def auto_describe(self) -> bool:
        """Whether binds of this variant get a synthesized description.

        Only mouse binds are labelled automatically; the other tags exist
        but are not applied.
        """
        return self is BindVariant.MOUSE

    def describe(self, action: str) -> str:
        """Label an action with this variant's tag, e.g. "Mouse: movewindow"."""
        return f"{self.tag}: {action}"

    @classmethod
    def from_letter(cls, letter: str) -> Optional["BindVariant"]:
        """Return the variant for a suffix letter, or None if unknown."""
        for variant in cls:
            if variant.value == letter:
                return variant
        return None

    @classmethod
    def parse_suffix(cls, suffix: str) -> Tuple["BindVariant", ...]:
        """Parse a suffix like "le" into variants.

        Raises:
            ValueError: If a letter is not a known variant
        """
        variants = []
        for letter in suffix:
            variant = cls.from_letter(letter)
            if variant is None:
                raise ValueError(f"Unknown bind variant: {letter!r}")
            variants.append(variant)
        return tuple(variants)


_VARIANT_TAGS = {
    BindVariant.LOCKED: "Locked",
    BindVariant.REPEAT: "Repeat",
    BindVariant.RELEASE: "On Release",
    BindVariant.TRANSPARENT: "Transparent",
    BindVariant.MOUSE: "Mouse",
}


@dataclass(frozen=True)
class Keybind:
    """A single parsed keybinding."""

    modifiers: str  # "SUPER + SHIFT", or "" for a bare key
    key: str  # Display-formatted key, e.g. "Return", "←", "Mouse Left"
    action: str  # Dispatcher and its arguments, e.g. "exec, kitty"
    description: str  # Inline comment label, or the action itself
    category: str  # Most recent "#/" section, or "General"
    is_commented: bool  # Directive was disabled with a leading "#"
    raw_line: str  # Source line exactly as read

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "mods": self.modifiers,
            "key": self.key,
            "action": self.action,
            "description": self.description,
            "category": self.category,
            "isCommented": self.is_commented,
            "rawLine": self.raw_line,
        }
