"""Statistics screen for termcards TUI.

Shows the review dashboard for one deck: card counts, success rate,
average interval, last studied date and the 30-day rating distribution.
Starts on the requested deck, or the most recently studied one, and can
step through the other decks.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Static

from ...config_store import load_config, save_config
from ...stats.aggregate import resolve_deck_id
from ...stats.render import palette_for
from ..widgets.deck_review import DeckReviewPanel

if TYPE_CHECKING:
    from ...store import Store
    from ..app import TermcardsApp

logger = logging.getLogger(__name__)


class StatisticsScreen(Screen[None]):
    """Screen displaying deck review statistics."""

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("q", "app.quit", "Quit"),
        Binding("c", "toggle_contrast", "Contrast"),
        # Priority so the scroll container doesn't take left/right
        Binding("left,h", "previous_deck", "Previous Deck", show=False, priority=True),
        Binding("right,l", "next_deck", "Next Deck", show=False, priority=True),
    ]

    def __init__(self, store: Store, focus_deck_id: str | None = None) -> None:
        super().__init__()
        self._store = store
        self._focus_deck_id = focus_deck_id

    @property
    def termcards_app(self) -> "TermcardsApp":
        """Get the typed app instance."""
        from ..app import TermcardsApp

        assert isinstance(self.app, TermcardsApp)
        return self.app

    @property
    def focus_deck_id(self) -> str | None:
        return self._focus_deck_id

    def compose(self) -> ComposeResult:
        yield Vertical(
            Static("Statistics", classes="header-bar"),
            VerticalScroll(
                DeckReviewPanel(
                    self._store,
                    palette=self.termcards_app.state.palette,
                    id="deck-review",
                ),
            ),
            Static(
                "[dim]←/→[/dim] switch deck  [dim]c[/dim] contrast  [dim]Esc[/dim] back  [dim]q[/dim] quit",
                classes="help-text",
                markup=True,
            ),
        )

    async def on_mount(self) -> None:
        """Render the initial deck."""
        self._refresh_stats()

    def _refresh_stats(self) -> None:
        panel = self.query_one("#deck-review", DeckReviewPanel)
        panel.show_deck(self._focus_deck_id)

    def _step_deck(self, step: int) -> None:
        """Move the focus ``step`` decks forward, wrapping around."""
        deck_ids = [deck.id for deck in self._store.get_decks()]
        if not deck_ids:
            return

        current = resolve_deck_id(self._store, self._focus_deck_id)
        if current in deck_ids:
            index = (deck_ids.index(current) + step) % len(deck_ids)
        else:
            index = 0
        self._focus_deck_id = deck_ids[index]
        self._refresh_stats()

    async def action_previous_deck(self) -> None:
        self._step_deck(-1)

    async def action_next_deck(self) -> None:
        self._step_deck(1)

    async def action_toggle_contrast(self) -> None:
        """Flip the high contrast palette and remember the choice."""
        state = self.termcards_app.state
        high_contrast = not state.high_contrast
        state.palette = palette_for(high_contrast)
        self.query_one("#deck-review", DeckReviewPanel).set_palette(state.palette)

        try:
            save_config(replace(load_config(), high_contrast=high_contrast))
        except OSError as exc:
            logger.warning("Could not save config: %s", exc)
            self.notify("Could not save settings", severity="warning")

    async def action_back(self) -> None:
        """Return to a fresh main menu."""
        from .main_menu import MainMenuScreen

        await self.app.switch_screen(MainMenuScreen(self._store))
