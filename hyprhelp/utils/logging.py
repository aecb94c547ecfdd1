"""Simple logging utilities for hyprhelp."""

import logging
import sys
from typing import IO, Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Union[int, str] = logging.WARNING, stream: Optional[IO[str]] = None) -> None:
    """Configure the ``hyprhelp`` logger hierarchy.

    Replaces any handler from an earlier call with a single handler on the
    current stderr (or ``stream``). Old handlers are detached without being
    flushed, since their stream may already be closed.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("hyprhelp")
    logger.setLevel(level)

    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
