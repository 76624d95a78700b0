"""Deck browser screen for termcards TUI.

Lists every deck with its card count and when it was last studied.
Selecting a deck opens its statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import ListItem, ListView, Static

from ...stats.aggregate import format_last_studied

if TYPE_CHECKING:
    from ...model import Deck
    from ...store import Store


@dataclass
class DeckInfo:
    """Information about a deck for display."""

    deck_id: str
    name: str
    card_count: int
    last_studied: datetime | None

    @classmethod
    def from_deck(cls, deck: Deck) -> DeckInfo:
        return cls(
            deck_id=deck.id,
            name=deck.name,
            card_count=len(deck.cards),
            last_studied=deck.last_studied,
        )

    def format_details(self, now: datetime | None = None) -> str:
        """Format card count and last studied date."""
        noun = "card" if self.card_count == 1 else "cards"
        studied = format_last_studied(self.last_studied, now)
        return f"{self.card_count} {noun}, studied: {studied}"


class DeckListItem(ListItem):
    """A list item representing a deck."""

    def __init__(self, deck: DeckInfo) -> None:
        super().__init__()
        self.deck = deck

    def compose(self) -> ComposeResult:
        yield Static(
            f"{escape(self.deck.name)}  [dim]({self.deck.format_details()})[/dim]",
            markup=True,
        )


class BrowseScreen(Screen[None]):
    """Screen listing decks to pick one for statistics."""

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("q", "app.quit", "Quit"),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]

    def __init__(self, store: Store) -> None:
        super().__init__()
        self._store = store
        self._decks = [DeckInfo.from_deck(d) for d in store.get_decks()]

    def compose(self) -> ComposeResult:
        yield Vertical(
            Static("Decks", classes="header-bar"),
            ListView(*(DeckListItem(deck) for deck in self._decks), id="deck-list"),
            Static(
                "[dim]j/k[/dim] navigate  [dim]Enter[/dim] statistics  "
                "[dim]Esc[/dim] back  [dim]q[/dim] quit",
                classes="help-text",
                markup=True,
            ),
        )

    async def on_mount(self) -> None:
        """Focus the deck list when screen mounts."""
        self.query_one("#deck-list", ListView).focus()

    async def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Open statistics for the chosen deck."""
        if isinstance(event.item, DeckListItem):
            from .statistics import StatisticsScreen

            await self.app.switch_screen(
                StatisticsScreen(self._store, event.item.deck.deck_id)
            )

    async def action_cursor_down(self) -> None:
        """Move cursor down in the list."""
        self.query_one("#deck-list", ListView).action_cursor_down()

    async def action_cursor_up(self) -> None:
        """Move cursor up in the list."""
        self.query_one("#deck-list", ListView).action_cursor_up()

    async def action_back(self) -> None:
        """Return to a fresh main menu."""
        from .main_menu import MainMenuScreen

        await self.app.switch_screen(MainMenuScreen(self._store))
