"""Custom exception hierarchy for hyprhelp.

The parser itself never raises on malformed input: bad lines are skipped.
These exceptions describe failures around it (reading the keybinds file,
loading settings) so callers can decide whether to surface or swallow them.

Exception Hierarchy:
    HyprhelpError (base)
    ├── FileOperationError - File I/O
    │   ├── KeybindsFileNotFoundError
    │   └── KeybindsReadError
    └── ConfigurationError - Settings/configuration issues

Usage:
    from hyprhelp.exceptions import KeybindsReadError

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise KeybindsReadError(path=str(path)) from e
"""

from typing import Any, Optional


class HyprhelpError(Exception):
    """Base exception for all hyprhelp errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# File Operation Errors
# =============================================================================


class FileOperationError(HyprhelpError):
    """Base exception for file operations."""

    pass


class KeybindsFileNotFoundError(FileOperationError):
    """The keybinds file does not exist."""

    def __init__(
        self,
        message: str = "Keybinds file not found",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class KeybindsReadError(FileOperationError):
    """The keybinds file exists but could not be read or decoded."""

    def __init__(
        self,
        message: str = "Failed to read keybinds file",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(HyprhelpError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
