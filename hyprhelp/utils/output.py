"""Shared console output utilities."""

import json
from typing import Any

from rich.console import Console

# Shared console instance for all CLI output
console = Console()

# Diagnostics and errors go to stderr so JSON output stays clean
err_console = Console(stderr=True)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout.

    Non-ASCII glyphs (arrow keys) are written as-is.
    """
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
