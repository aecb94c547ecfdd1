"""
Line classification for keybinds.conf.

Each line is either skipped, changes the current section, or is handed on
to the directive matcher. The current section is the only state and is
passed in and returned rather than stored.
"""

from dataclasses import dataclass
from enum import Enum

from hyprhelp.config.constants import (
    COMMENT_MARKER,
    DIRECTIVE_KEYWORD,
    IGNORE_MARKER,
    SECTION_MARKER,
)


class LineKind(Enum):
    """What a line means to the parser."""

    SKIP = "skip"
    SECTION = "section"
    CANDIDATE = "candidate"


@dataclass(frozen=True)
class Classification:
    """Result of classifying one line."""

    kind: LineKind
    section: str  # Section to carry to the next line
    is_commented: bool = False


def classify_line(line: str, section: str) -> Classification:
    """
    Classify a line given the current section name.

    Rules, first match wins (on the stripped line):
        1. empty                          -> SKIP
        2. starts with "#."               -> SKIP
        3. starts with "#/"               -> SECTION (name kept if blank)
        4. starts with "#", mentions bind -> CANDIDATE, commented
        5. starts with "#"                -> SKIP
        6. anything else                  -> CANDIDATE
    """
    stripped = line.strip()

    if not stripped:
        return Classification(LineKind.SKIP, section)

    if stripped.startswith(IGNORE_MARKER):
        return Classification(LineKind.SKIP, section)

    if stripped.startswith(SECTION_MARKER):
        name = stripped[len(SECTION_MARKER):].strip()
        return Classification(LineKind.SECTION, name or section)

    if stripped.startswith(COMMENT_MARKER):
        if DIRECTIVE_KEYWORD in stripped:
            return Classification(LineKind.CANDIDATE, section, is_commented=True)
        return Classification(LineKind.SKIP, section)

    return Classification(LineKind.CANDIDATE, section)
