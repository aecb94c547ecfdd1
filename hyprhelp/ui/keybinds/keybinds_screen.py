"""
Keybinds Screen - searchable table of Hyprland keybinds.

Layout:
- Search bar at top
- Table of binds (category, key combo, description, action)
- Status bar at bottom
"""

import logging
from pathlib import Path
from typing import Any

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widget import Widget
from textual.widgets import DataTable, Footer, Input, Static

from hyprhelp.keybinds import Keybind, format_combo

from .keybinds_presenter import KeybindsPresenter, KeybindsStateVM

logger = logging.getLogger(__name__)


class KeybindsScreen(Widget):
    """Search bar, keybinds table and status bar."""

    BINDINGS = [
        Binding("slash", "focus_search", "Search"),
        Binding("escape", "clear_search", "Clear"),
        Binding("c", "next_category", "Category"),
        Binding("C", "previous_category", "Prev Category", show=False),
        Binding("a", "toggle_commented", "Commented"),
        Binding("r", "refresh", "Reload"),
    ]

    DEFAULT_CSS = """
    KeybindsScreen {
        height: 1fr;
        layout: grid;
        grid-size: 1;
        grid-rows: 3 1fr 1;
    }

    #keybinds-search {
        border: solid $primary-darken-1;
    }

    #keybinds-search:focus {
        border: solid $primary;
    }

    #keybinds-table {
        height: 1fr;
        scrollbar-gutter: stable;
    }

    #keybinds-status {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    def __init__(self, path: Path | None = None, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.presenter = KeybindsPresenter(path=path, on_state_update=self._on_state_update)

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Search keybindings...", id="keybinds-search")
        yield DataTable(id="keybinds-table", cursor_type="row", zebra_stripes=True)
        yield Static("Loading keybinds...", id="keybinds-status")

    async def on_mount(self) -> None:
        table = self.query_one("#keybinds-table", DataTable)
        table.add_column("Category", key="category")
        table.add_column("Keys", key="keys")
        table.add_column("Description", key="description")
        table.add_column("Action", key="action")
        table.focus()

        await self.presenter.refresh()

    async def _on_state_update(self, state: KeybindsStateVM) -> None:
        """Handle state updates from presenter."""
        self.call_later(self._render_state, state)

    def _render_state(self, state: KeybindsStateVM) -> None:
        if state.is_loading:
            self.query_one("#keybinds-status", Static).update("Loading keybinds...")
            return

        table = self.query_one("#keybinds-table", DataTable)
        table.clear()
        for index, bind in enumerate(state.visible):
            table.add_row(*self._format_row(bind), key=str(index))

        self.query_one("#keybinds-status", Static).update(
            f"{escape(state.status_text)} | [dim]/[/dim] search | [dim]c[/dim] category "
            f"({escape(state.category)}) | [dim]a[/dim] commented | [dim]r[/dim] reload"
        )

    @staticmethod
    def _format_row(bind: Keybind) -> tuple[Text, ...]:
        style = "dim strike" if bind.is_commented else ""
        return (
            Text(bind.category, style="dim"),
            Text(format_combo(bind), style=style or "bold"),
            Text(bind.description, style=style),
            Text(bind.action, style="dim"),
        )

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "keybinds-search":
            await self.presenter.search(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "keybinds-search":
            self.query_one("#keybinds-table", DataTable).focus()

    def action_focus_search(self) -> None:
        self.query_one("#keybinds-search", Input).focus()

    def action_clear_search(self) -> None:
        # Setting the value posts Input.Changed, which re-filters
        self.query_one("#keybinds-search", Input).value = ""
        self.query_one("#keybinds-table", DataTable).focus()

    async def action_next_category(self) -> None:
        await self.presenter.cycle_category(1)

    async def action_previous_category(self) -> None:
        await self.presenter.cycle_category(-1)

    async def action_toggle_commented(self) -> None:
        await self.presenter.toggle_commented()

    async def action_refresh(self) -> None:
        await self.presenter.refresh()


class KeybindsApp(App[None]):
    """Standalone keybinds browser."""

    TITLE = "Hyprland Keybinds"
    AUTO_FOCUS = "#keybinds-table"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, path: Path | None = None) -> None:
        super().__init__()
        self.path = path

    def compose(self) -> ComposeResult:
        yield KeybindsScreen(path=self.path, id="keybinds-screen")
        yield Footer()
