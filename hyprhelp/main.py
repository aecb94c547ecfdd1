#!/usr/bin/env python3
"""
Main CLI entry point for hyprhelp
"""

import logging
import os

import typer

from hyprhelp import __version__
from hyprhelp.commands import config as config_commands
from hyprhelp.commands import keybinds as keybinds_commands
from hyprhelp.config.settings import validate_env_var
from hyprhelp.utils.logging import setup_logging


def version():
    """Show hyprhelp version"""
    typer.echo(f"hyprhelp version {__version__}")


def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    hyprhelp - browse and search Hyprland keybinds

    Reads ~/.config/hypr/configs/keybinds.conf. Start a line with "#/" to
    name a category for the binds below it, or with "#." to hide it.

    [bold]Examples:[/bold]

    List every bind:
        [cyan]hyprhelp list[/cyan]

    Search binds:
        [cyan]hyprhelp list --search screenshot[/cyan]

    Open the browser:
        [cyan]hyprhelp browse[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = _env_log_level()

    setup_logging(level)


def _env_log_level() -> str:
    """Log level from HYPRHELP_LOG_LEVEL, falling back to WARNING if invalid."""
    value = os.environ.get("HYPRHELP_LOG_LEVEL")
    is_valid, _ = validate_env_var("HYPRHELP_LOG_LEVEL", value)
    if value and is_valid:
        return value.upper()
    return "WARNING"


def create_app() -> typer.Typer:
    """Create and configure the main CLI application"""
    app = typer.Typer(
        name="hyprhelp",
        help="Browse and search Hyprland keybinds",
        rich_markup_mode="rich",
        no_args_is_help=True,
    )

    app.registered_commands.extend(keybinds_commands.app.registered_commands)
    app.registered_commands.extend(config_commands.app.registered_commands)
    app.command()(version)
    app.callback()(main)

    return app


app = create_app()


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
