"""Keybinding listing commands for hyprhelp."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from hyprhelp.config.constants import ALL_CATEGORIES
from hyprhelp.config.settings import get_keybinds_path, load_settings
from hyprhelp.keybinds import (
    Keybind,
    count_by_category,
    filter_keybinds,
    group_by_category,
    load_keybinds,
    load_keybinds_strict,
)
from hyprhelp.utils.error_handling import handle_cli_error
from hyprhelp.utils.output import console, print_json

app = typer.Typer()

FILE_OPTION_HELP = "Keybinds file (default: ~/.config/hypr/configs/keybinds.conf)"


@app.command("list")
@handle_cli_error("listing keybinds")
def list_cmd(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
    category: str = typer.Option(
        ALL_CATEGORIES, "--category", "-c", help="Only show this category"
    ),
    search: str = typer.Option(
        "", "--search", "-s", help="Filter by description, key or modifiers"
    ),
    active_only: bool = typer.Option(
        False, "--active-only", "-a", help="Hide commented-out binds"
    ),
    raw: bool = typer.Option(False, "--raw", help="Show the source line of each bind"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List keybinds grouped by category.

    Examples:
        hyprhelp list
        hyprhelp list -c Apps
        hyprhelp list -s terminal --json
    """
    binds = load_keybinds(file)
    show_commented = bool(load_settings().get("show_commented", True))
    include_commented = show_commented and not active_only
    visible = filter_keybinds(binds, search, category, include_commented)

    if json_output:
        print_json([bind.to_dict() for bind in visible])
        return

    if not visible:
        if not binds:
            console.print(
                f"[yellow]No keybinds found. Make sure {get_keybinds_path(file)} exists.[/yellow]"
            )
        else:
            console.print("[yellow]No keybinds found matching your search.[/yellow]")
        return

    for name, group in group_by_category(visible).items():
        _show_category(name, group, raw)

    console.print(f"[dim]{len(visible)} of {len(binds)} keybinds[/dim]")


def _show_category(name: str, binds: List[Keybind], raw: bool) -> None:
    """Render one category as a table."""
    console.print(f"\n[bold]{escape(name)}[/bold] ({len(binds)} bindings)")

    table = Table(show_header=True, box=None, padding=(0, 1))
    table.add_column("Modifiers", style="cyan")
    table.add_column("Key", style="bold")
    table.add_column("Description")
    table.add_column("Action", style="dim")
    if raw:
        table.add_column("Line", style="dim")

    for bind in binds:
        row = [
            escape(bind.modifiers),
            escape(bind.key),
            escape(bind.description),
            escape(bind.action),
        ]
        if raw:
            row.append(escape(bind.raw_line))
        table.add_row(*row, style="dim strike" if bind.is_commented else None)

    console.print(table)


@app.command()
@handle_cli_error("listing categories")
def categories(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List categories declared with "#/" markers."""
    binds = load_keybinds(file)
    counts = count_by_category(binds)

    if json_output:
        print_json([{"category": name, "count": count} for name, count in counts.items()])
        return

    if not binds:
        console.print("[yellow]No keybinds found[/yellow]")
        return

    table = Table()
    table.add_column("Category", min_width=15)
    table.add_column("Binds", justify="right", width=6)
    for name, count in counts.items():
        table.add_row(escape(name), str(count))

    console.print(table)


@app.command()
@handle_cli_error("checking keybinds file")
def check(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
) -> None:
    """Verify the keybinds file can be read and summarize it.

    Unlike ``list``, a missing or unreadable file is an error here.
    """
    path = get_keybinds_path(file)
    binds = load_keybinds_strict(path)
    commented = sum(1 for bind in binds if bind.is_commented)

    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("File", escape(str(path)))
    table.add_row("Keybinds", str(len(binds)))
    table.add_row("Commented", str(commented))
    table.add_row("Categories", str(len(count_by_category(binds))))

    console.print(table)


@app.command()
def browse(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_OPTION_HELP),
) -> None:
    """Browse keybinds in an interactive terminal UI."""
    from hyprhelp.ui.keybinds import KeybindsApp

    KeybindsApp(path=file).run()
