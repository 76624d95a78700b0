"""Deck review panel widget for displaying per-deck statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Static

from ...stats.render import DEFAULT_PALETTE, RatingPalette, render_deck_review

if TYPE_CHECKING:
    from ...store import Store


class DeckReviewPanel(Static):
    """Widget showing the review dashboard for a single deck."""

    DEFAULT_CSS = """
    DeckReviewPanel {
        height: auto;
        padding: 1 2;
    }
    """

    def __init__(
        self,
        store: Store,
        palette: RatingPalette = DEFAULT_PALETTE,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id, markup=True)
        self._store = store
        self._palette = palette
        self._deck_id: str | None = None

    @property
    def deck_id(self) -> str | None:
        """The explicitly focused deck, if any."""
        return self._deck_id

    def show_deck(self, deck_id: str | None) -> None:
        """Render statistics for ``deck_id`` (or the last studied deck)."""
        self._deck_id = deck_id
        self.update(render_deck_review(self._store, deck_id, self._palette))

    def set_palette(self, palette: RatingPalette) -> None:
        """Switch colors and redraw the current deck."""
        self._palette = palette
        self.show_deck(self._deck_id)
