"""Textual TUI application for termcards.

This module provides the main Textual App that manages:
- The shared deck store handed to every screen
- The rating palette chosen from the user's settings
- Screen navigation, one live screen at a time
"""

from __future__ import annotations

from dataclasses import dataclass, field

from textual.app import App

from ..stats.render import DEFAULT_PALETTE, HIGH_CONTRAST_PALETTE, RatingPalette, palette_for
from ..store import Store


@dataclass
class AppState:
    """Shared application state."""

    store: Store = field(default_factory=Store)
    palette: RatingPalette = DEFAULT_PALETTE

    @property
    def high_contrast(self) -> bool:
        return self.palette is HIGH_CONTRAST_PALETTE


class TermcardsApp(App[None]):
    """Main Textual application for termcards."""

    TITLE = "termcards"
    CSS = """
    Screen {
        background: $surface;
    }

    #menu {
        padding: 1 2;
        height: 1fr;
    }

    #deck-list {
        height: 1fr;
        border: solid $primary;
    }

    .header-bar {
        height: 1;
        padding: 0 1;
        text-style: bold;
    }

    .stats-panel {
        padding: 1 2;
        height: auto;
    }

    .help-text {
        dock: bottom;
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        text-align: center;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(self, store: Store, high_contrast: bool = False) -> None:
        """Initialize the termcards app.

        Args:
            store: Deck store shared by all screens.
            high_contrast: Whether to use the high contrast rating palette.
        """
        super().__init__()
        self._state = AppState(store=store, palette=palette_for(high_contrast))

    @property
    def state(self) -> AppState:
        """Get the shared application state."""
        return self._state

    async def on_mount(self) -> None:
        """Show the main menu on mount."""
        from .screens.main_menu import MainMenuScreen

        await self.push_screen(MainMenuScreen(self._state.store))

    async def action_quit(self) -> None:
        """Quit the application."""
        self.exit()


def run_tui(store: Store, high_contrast: bool = False) -> None:
    """Run the termcards TUI.

    Args:
        store: Deck store to browse and summarize.
        high_contrast: Whether to use the high contrast rating palette.
    """
    app = TermcardsApp(store=store, high_contrast=high_contrast)
    app.run()
