"""Error handling helpers for CLI commands."""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from hyprhelp.exceptions import ConfigurationError, FileOperationError, HyprhelpError

from .output import err_console

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_cli_error(
    operation: str,
    console: Optional[Console] = None,
    exit_code: int = 1,
    log_traceback: bool = True,
) -> Callable[[F], F]:
    """Decorator for consistent CLI command error handling.

    Args:
        operation: Description of the operation for error messages
        console: Rich Console for error output (stderr by default)
        exit_code: Exit code to use on error (default: 1)
        log_traceback: Whether to log the full traceback for unexpected errors

    Usage:
        @app.command()
        @handle_cli_error("listing keybinds")
        def list_cmd():
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            _console = console or err_console
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except typer.Abort:
                _console.print(f"[yellow]{operation.capitalize()} cancelled[/yellow]")
                raise typer.Exit(0) from None
            except FileOperationError as e:
                _console.print(f"[red]Error {operation}: {escape(str(e))}[/red]")
                raise typer.Exit(exit_code) from e
            except ConfigurationError as e:
                _console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
                raise typer.Exit(exit_code) from e
            except HyprhelpError as e:
                _console.print(f"[red]Error {operation}: {escape(str(e))}[/red]")
                if log_traceback:
                    logger.error(f"Error during {operation}: {e}", exc_info=True)
                raise typer.Exit(exit_code) from e
            except Exception as e:
                _console.print(f"[red]Error {operation}: {escape(str(e))}[/red]")
                if log_traceback:
                    logger.error(f"Unexpected error during {operation}: {e}", exc_info=True)
                raise typer.Exit(exit_code) from e

        return wrapper  # type: ignore[return-value]

    return decorator
