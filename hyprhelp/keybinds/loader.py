"""
Reading the keybinds file.

The parser only sees text. This module finds the file, reads it and turns
I/O problems into either exceptions (strict) or an empty list (default),
so the listing and the browser always have something to render.
"""

import logging
from pathlib import Path
from typing import List, Optional

from hyprhelp.config.settings import get_keybinds_path
from hyprhelp.exceptions import (
    FileOperationError,
    KeybindsFileNotFoundError,
    KeybindsReadError,
)

from .models import Keybind
from .parser import parse_keybinds

logger = logging.getLogger(__name__)


def read_keybinds_text(path: Path) -> str:
    """
    Read the keybinds file as UTF-8 text, keeping line endings as written.

    Raises:
        KeybindsFileNotFoundError: If the file does not exist
        KeybindsReadError: If it cannot be read or decoded
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise KeybindsFileNotFoundError(path=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise KeybindsReadError(path=str(path), reason=str(e)) from e


def load_keybinds_strict(path: Optional[Path] = None) -> List[Keybind]:
    """
    Read and parse the keybinds file, propagating errors.

    Raises:
        FileOperationError: If the file cannot be read
        RuntimeError: If no path was given and the home directory is unknown
    """
    resolved = get_keybinds_path(path)
    logger.debug(f"Loading keybinds from {resolved}")
    return parse_keybinds(read_keybinds_text(resolved))


def load_keybinds(path: Optional[Path] = None) -> List[Keybind]:
    """
    Read and parse the keybinds file.

    Returns:
        Parsed keybinds, or an empty list if the file is missing or
        unreadable. Use load_keybinds_strict() to tell those apart.
    """
    try:
        return load_keybinds_strict(path)
    except FileOperationError as e:
        logger.warning(f"No keybinds loaded: {e}")
        return []
    except RuntimeError as e:
        # Path.home() fails when HOME is unset and no passwd entry exists
        logger.warning(f"No keybinds loaded, cannot resolve home directory: {e}")
        return []
