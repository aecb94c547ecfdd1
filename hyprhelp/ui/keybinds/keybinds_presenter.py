"""
Presenter for the Keybinds Screen.

Holds the view state (search text, category, commented toggle) and reloads
keybinds from disk on every refresh.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path

from hyprhelp.config.constants import ALL_CATEGORIES
from hyprhelp.config.settings import get_keybinds_path
from hyprhelp.keybinds import (
    Keybind,
    filter_keybinds,
    list_categories,
    load_keybinds,
)

logger = logging.getLogger(__name__)


@dataclass
class KeybindsStateVM:
    """Complete keybinds view state for the UI."""

    keybinds: list[Keybind] = field(default_factory=list)
    visible: list[Keybind] = field(default_factory=list)
    categories: list[str] = field(default_factory=lambda: [ALL_CATEGORIES])
    query: str = ""
    category: str = ALL_CATEGORIES
    show_commented: bool = True
    is_loading: bool = False
    status_text: str = ""


class KeybindsPresenter:
    """
    Handles keybinds screen logic.

    Filtering runs on the records from the last load; only refresh()
    touches the file.
    """

    def __init__(
        self,
        path: Path | None = None,
        on_state_update: Callable[[KeybindsStateVM], Awaitable[None]] | None = None,
    ):
        self.path = path
        self.on_state_update = on_state_update
        self._state = KeybindsStateVM()

    @property
    def state(self) -> KeybindsStateVM:
        """Get current state."""
        return self._state

    async def _notify_update(self) -> None:
        """Notify listeners of state change."""
        if self.on_state_update:
            await self.on_state_update(self._state)

    async def refresh(self) -> None:
        """Re-read the keybinds file and re-apply filters."""
        self._state.is_loading = True
        await self._notify_update()

        keybinds = await asyncio.to_thread(load_keybinds, self.path)

        self._state.keybinds = keybinds
        self._state.categories = list_categories(keybinds)
        if self._state.category not in self._state.categories:
            self._state.category = ALL_CATEGORIES
        self._state.is_loading = False
        logger.info(f"Loaded {len(keybinds)} keybinds")

        await self._apply_filters()

    async def search(self, query: str) -> None:
        """Filter by description, key or modifiers."""
        self._state.query = query
        await self._apply_filters()

    async def set_category(self, category: str) -> None:
        """Show only one category ("All" for every category)."""
        if category not in self._state.categories:
            logger.warning(f"Unknown category: {category}")
            return
        self._state.category = category
        await self._apply_filters()

    async def cycle_category(self, step: int = 1) -> None:
        """Move to the next (or previous, with step=-1) category."""
        categories = self._state.categories
        try:
            index = categories.index(self._state.category)
        except ValueError:
            index = 0
        self._state.category = categories[(index + step) % len(categories)]
        await self._apply_filters()

    async def toggle_commented(self) -> None:
        """Show or hide commented-out binds."""
        self._state.show_commented = not self._state.show_commented
        await self._apply_filters()

    async def _apply_filters(self) -> None:
        state = self._state
        state.visible = filter_keybinds(
            state.keybinds,
            search=state.query,
            category=state.category,
            include_commented=state.show_commented,
        )
        state.status_text = self._status_text()
        await self._notify_update()

    def _status_text(self) -> str:
        state = self._state
        if not state.keybinds:
            return f"No keybinds found. Make sure {self._display_path()} exists."
        if not state.visible:
            return "No keybinds found matching your search."

        parts = [f"{len(state.visible)} of {len(state.keybinds)} keybinds"]
        if state.category != ALL_CATEGORIES:
            parts.append(state.category)
        if not state.show_commented:
            parts.append("commented hidden")
        return " | ".join(parts)

    def _display_path(self) -> str:
        try:
            return str(get_keybinds_path(self.path))
        except RuntimeError:
            return "the keybinds file"
