"""
keybinds.conf parser.

Turns the text of a Hyprland keybinds file into Keybind records, one per
``bind`` directive (active or commented out), in file order.

Usage:
    from hyprhelp.keybinds import parse_keybinds

    binds = parse_keybinds(path.read_text())
    for bind in binds:
        print(bind.category, bind.modifiers, bind.key, bind.description)

File conventions understood by the parser:
    #/ Apps          start a category; binds below it belong to "Apps"
    #. anything      ignored completely
    # bind = ...     disabled bind, listed with is_commented=True
    # any text       plain comment, skipped
"""

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, List, Optional, Union

from hyprhelp.config.constants import DEFAULT_CATEGORY

from .classifier import LineKind, classify_line
from .fields import describe, split_action
from .formatting import format_key, format_modifiers
from .matcher import DirectiveMatch, match_directive
from .models import Keybind

logger = logging.getLogger(__name__)


@dataclass
class ParseState:
    """Accumulator threaded through the lines of a single parse."""

    section: str = DEFAULT_CATEGORY
    keybinds: List[Keybind] = field(default_factory=list)


def build_keybind(line: str, match: DirectiveMatch, category: str) -> Optional[Keybind]:
    """Assemble a record from a matched line, or None if the action is empty."""
    action, description = split_action(match.remainder)
    if not action:
        logger.debug(f"Skipping directive with empty action: {line!r}")
        return None

    return Keybind(
        modifiers=format_modifiers(match.modifiers),
        key=format_key(match.key),
        action=action,
        description=describe(match.variants, action, description),
        category=category,
        is_commented=match.is_commented,
        raw_line=line,
    )


def parse_line(state: ParseState, line: str) -> ParseState:
    """Process one line, returning the state for the next one."""
    result = classify_line(line, state.section)
    state.section = result.section

    if result.kind is not LineKind.CANDIDATE:
        return state

    match = match_directive(line, result.is_commented)
    if match is None:
        return state

    keybind = build_keybind(line, match, state.section)
    if keybind is not None:
        state.keybinds.append(keybind)
    return state


def parse_keybinds(source: Union[str, Iterable[str]]) -> List[Keybind]:
    """
    Parse keybinds.conf content.

    Args:
        source: The whole file as a string, or an iterable of lines
            (trailing newlines are removed)

    Returns:
        Keybind records in file order. Lines that are not usable
        directives are skipped, never reported.

    Only "\\n" ends a line, with an optional "\\r" before it. Form feeds,
    vertical tabs and Unicode line separators stay part of the line.
    """
    if isinstance(source, str):
        lines: Iterable[str] = (line.removesuffix("\r") for line in source.split("\n"))
    else:
        lines = (line.removesuffix("\n").removesuffix("\r") for line in source)

    state = reduce(parse_line, lines, ParseState())
    logger.debug(f"Parsed {len(state.keybinds)} keybinds")
    return state.keybinds
