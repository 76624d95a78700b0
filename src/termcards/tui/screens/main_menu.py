"""Main menu screen for termcards TUI.

The entry screen. Key presses are turned into navigation events for
``MainMenu``; a transition to another entry replaces this screen with a
freshly built one, and a quit transition exits the app.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Static

from ..navigation import MainMenu, MenuItem, NavEvent, Resize
from .browse import BrowseScreen
from .statistics import StatisticsScreen

if TYPE_CHECKING:
    from ...store import Store

logger = logging.getLogger(__name__)

ScreenFactory = Callable[["Store"], Screen]

# Study has no dedicated screen yet; it opens the deck browser.
SCREEN_FOR_ITEM: dict[MenuItem, ScreenFactory] = {
    MenuItem.STUDY: BrowseScreen,
    MenuItem.BROWSE: BrowseScreen,
    MenuItem.STATISTICS: StatisticsScreen,
}


class MainMenuScreen(Screen[None]):
    """Screen showing the main menu."""

    BINDINGS = [
        Binding("up,k", "cursor_up", "Up", show=False),
        Binding("down,j", "cursor_down", "Down", show=False),
        Binding("enter", "activate", "Select"),
        Binding("q,ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, store: Store) -> None:
        super().__init__()
        self._store = store
        self._menu = MainMenu()

    @property
    def menu(self) -> MainMenu:
        """The menu state driven by this screen."""
        return self._menu

    def compose(self) -> ComposeResult:
        yield Static(self._menu.render(), id="menu", markup=True)

    def on_resize(self, event: events.Resize) -> None:
        """Record the new viewport size and re-center the header."""
        self._menu.handle(Resize(event.size.width, event.size.height))
        self._update_menu()

    async def action_cursor_up(self) -> None:
        await self._dispatch(NavEvent.UP)

    async def action_cursor_down(self) -> None:
        await self._dispatch(NavEvent.DOWN)

    async def action_activate(self) -> None:
        await self._dispatch(NavEvent.ACTIVATE)

    async def action_quit(self) -> None:
        await self._dispatch(NavEvent.QUIT)

    async def _dispatch(self, event: NavEvent) -> None:
        """Feed an event to the menu and carry out the transition."""
        transition = self._menu.handle(event)

        if transition.is_stay:
            self._update_menu()
            return

        if transition.quit:
            self.app.exit()
            return

        factory = SCREEN_FOR_ITEM[transition.target]
        logger.debug("Switching to %s", factory.__name__)
        await self.app.switch_screen(factory(self._store))

    def _update_menu(self) -> None:
        # Resize can arrive before the menu widget is mounted
        for menu in self.query("#menu").results(Static):
            menu.update(self._menu.render())
