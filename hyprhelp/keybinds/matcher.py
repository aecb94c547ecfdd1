"""
Directive matching for ``bind`` lines.

Accepts lines shaped like::

    bind = SUPER, Return, exec, kitty
    # bindm = SUPER, mouse:272, movewindow
    binde=, XF86AudioRaiseVolume, exec, wpctl set-volume @DEFAULT_AUDIO_SINK@ 5%+

The matcher is a chain of small steps (marker, keyword, variants, "=",
fields) instead of one regular expression, so each step can fail on its own.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from hyprhelp.config.constants import (
    ASSIGNMENT,
    COMMENT_MARKER,
    DIRECTIVE_KEYWORD,
    FIELD_SEPARATOR,
)

from .models import BindVariant

logger = logging.getLogger(__name__)

VARIANT_LETTERS = frozenset(v.value for v in BindVariant)

# Leading whitespace the directive shape allows; other Unicode spaces do not count
DIRECTIVE_WHITESPACE = " \t\n\f\r"


@dataclass(frozen=True)
class DirectiveMatch:
    """Fields pulled out of a directive line, trimmed but not yet formatted."""

    is_commented: bool
    suffix: str  # Variant letters as written, e.g. "" or "le"
    variants: Tuple[BindVariant, ...]
    modifiers: str
    key: str
    remainder: str  # Everything after the second comma


def strip_comment_marker(text: str, is_commented: bool) -> Optional[str]:
    """Drop leading whitespace and, for commented lines, the "#" marker."""
    rest = text.lstrip(DIRECTIVE_WHITESPACE)
    if not is_commented:
        return rest
    if not rest.startswith(COMMENT_MARKER):
        return None
    return rest[len(COMMENT_MARKER):].lstrip(DIRECTIVE_WHITESPACE)


def split_keyword(text: str) -> Optional[Tuple[str, str]]:
    """Split "bindle = ..." into ("le", " = ...").

    Returns None if the text does not start with the keyword.
    """
    if not text.startswith(DIRECTIVE_KEYWORD):
        return None
    rest = text[len(DIRECTIVE_KEYWORD):]
    end = 0
    while end < len(rest) and rest[end] in VARIANT_LETTERS:
        end += 1
    return rest[:end], rest[end:]


def split_assignment(text: str) -> Optional[str]:
    """Return what follows "=" (after optional whitespace), or None."""
    rest = text.lstrip(DIRECTIVE_WHITESPACE)
    if not rest.startswith(ASSIGNMENT):
        return None
    return rest[len(ASSIGNMENT):]


def split_fields(payload: str) -> Optional[Tuple[str, str, str]]:
    """Split "MODS, KEY, ACTION..." into three trimmed fields.

    Only the first two commas separate fields; the action keeps any further
    commas ("exec, kitty" stays whole).
    """
    parts = payload.split(FIELD_SEPARATOR, 2)
    if len(parts) != 3:
        return None
    mods, key, remainder = (part.strip() for part in parts)
    return mods, key, remainder


def match_directive(line: str, is_commented: bool = False) -> Optional[DirectiveMatch]:
    """
    Match a candidate line against the directive shape.

    Args:
        line: The original, untrimmed line
        is_commented: Whether the classifier saw a leading comment marker

    Returns:
        DirectiveMatch, or None if the line is not a usable directive
        (wrong shape, or blank key or action).
    """
    rest = strip_comment_marker(line, is_commented)
    if rest is None:
        return None

    keyword = split_keyword(rest)
    if keyword is None:
        return None
    suffix, rest = keyword

    payload = split_assignment(rest)
    if payload is None:
        return None

    fields = split_fields(payload)
    if fields is None:
        return None
    mods, key, remainder = fields

    if not key or not remainder:
        logger.debug(f"Skipping incomplete directive: {line!r}")
        return None

    return DirectiveMatch(
        is_commented=is_commented,
        suffix=suffix,
        variants=BindVariant.parse_suffix(suffix),
        modifiers=mods,
        key=key,
        remainder=remainder,
    )
