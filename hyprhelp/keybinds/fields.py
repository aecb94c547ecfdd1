"""Splitting a directive's action from its inline description."""

from typing import Tuple

from hyprhelp.config.constants import COMMENT_MARKER

from .models import BindVariant


def split_action(remainder: str) -> Tuple[str, str]:
    """
    Split "killactive # Close window" into ("killactive", "Close window").

    Without an inline comment the action doubles as its description.
    An empty action means the directive should be dropped.
    """
    remainder = remainder.strip()
    action, marker, comment = remainder.partition(COMMENT_MARKER)
    if not marker:
        return remainder, remainder
    return action.strip(), comment.strip()


def describe(variants: Tuple[BindVariant, ...], action: str, description: str) -> str:
    """Apply the variant label when no inline description was given.

    Only a bare ``bindm`` qualifies; combined suffixes such as "lm" and the
    other variants keep the action as their description.
    """
    if description != action or len(variants) != 1:
        return description
    variant = variants[0]
    if variant.auto_describe:
        return variant.describe(action)
    return description
