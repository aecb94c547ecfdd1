"""Configuration inspection command for hyprhelp."""

import typer
from rich.markup import escape
from rich.table import Table

from hyprhelp.config.settings import (
    get_env_info,
    get_keybinds_path,
    get_settings_path,
    validate_all_env_vars,
)
from hyprhelp.exceptions import ConfigurationError
from hyprhelp.utils.error_handling import handle_cli_error
from hyprhelp.utils.output import console, print_json

app = typer.Typer()


@app.command("config")
@handle_cli_error("reading configuration")
def show_config(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show resolved paths and HYPRHELP_* environment variables.

    Exits with an error if an environment variable has an invalid value.
    """
    errors = validate_all_env_vars()
    if errors:
        raise ConfigurationError("; ".join(errors))

    env_info = get_env_info()
    settings_path = get_settings_path()
    keybinds_path = get_keybinds_path()

    if json_output:
        print_json(
            {
                "settings_file": str(settings_path),
                "keybinds_file": str(keybinds_path),
                "environment": env_info,
            }
        )
        return

    console.print(f"[bold]Settings file:[/bold] {escape(str(settings_path))}")
    console.print(f"[bold]Keybinds file:[/bold] {escape(str(keybinds_path))}\n")

    table = Table()
    table.add_column("Variable", style="cyan")
    table.add_column("Value")
    table.add_column("Default", style="dim")
    table.add_column("Description", style="dim")

    for name, info in env_info.items():
        value = escape(info["value"]) if info["is_set"] else "[dim]unset[/dim]"
        table.add_row(
            name,
            value,
            str(info["default"] or ""),
            info["description"],
        )

    console.print(table)
