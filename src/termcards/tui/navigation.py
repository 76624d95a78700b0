"""Main menu navigation for the termcards TUI.

``MainMenu`` is the menu's logic with no Textual dependency: it owns the
cursor, the last selection and the viewport size, and answers every
input event with a ``Transition``. The screen that displays it only
translates key presses into events and carries out the transitions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class MenuItem(Enum):
    """Main menu entries in display order."""

    STUDY = "Study"
    BROWSE = "Browse Decks"
    STATISTICS = "Statistics"
    QUIT = "Quit"


class NavEvent(Enum):
    """Discrete input events the menu understands."""

    UP = "up"
    DOWN = "down"
    ACTIVATE = "activate"
    QUIT = "quit"


@dataclass(frozen=True)
class Resize:
    """Viewport size change. Affects layout only."""

    width: int
    height: int


@dataclass(frozen=True)
class Transition:
    """What should happen after handling an event.

    ``target`` names the menu entry whose screen replaces the menu;
    ``quit`` ends the application. Neither set means stay put.
    """

    target: MenuItem | None = None
    quit: bool = False

    @property
    def is_stay(self) -> bool:
        return self.target is None and not self.quit


STAY = Transition()
QUIT = Transition(quit=True)


class MainMenu:
    """Cursor and selection state for the main menu."""

    TITLE = "termcards"
    SUBTITLE = "Terminal Flashcards"
    HELP = "↑/k ↓/j navigate  Enter select  q quit"

    def __init__(self) -> None:
        self.items: list[MenuItem] = list(MenuItem)
        self.cursor = 0
        self.selected = -1
        self.width = 0
        self.height = 0

    @property
    def current(self) -> MenuItem:
        """The item under the cursor."""
        return self.items[self.cursor]

    def handle(self, event: object) -> Transition:
        """Apply an input event and return the resulting transition.

        Unrecognized events leave the menu unchanged.
        """
        if isinstance(event, Resize):
            self.width = event.width
            self.height = event.height
            return STAY

        if event is NavEvent.QUIT:
            return QUIT

        if event is NavEvent.UP:
            if self.cursor > 0:
                self.cursor -= 1
            return STAY

        if event is NavEvent.DOWN:
            if self.cursor < len(self.items) - 1:
                self.cursor += 1
            return STAY

        if event is NavEvent.ACTIVATE:
            self.selected = self.cursor
            item = self.current
            logger.debug("Menu item activated: %s", item.value)
            if item is MenuItem.QUIT:
                return QUIT
            return Transition(target=item)

        return STAY

    def _indent(self, text: str) -> str:
        """Left padding that centers ``text`` in the last known width."""
        return " " * max(0, (self.width - len(text)) // 2)

    def render(self) -> str:
        """Render the menu as markup.

        The title and subtitle are centered in the viewport width once a
        ``Resize`` has been seen; the entries stay left aligned.
        """
        lines = [
            f"{self._indent(self.TITLE)}[bold]{self.TITLE}[/bold]",
            f"{self._indent(self.SUBTITLE)}[dim]{self.SUBTITLE}[/dim]",
            "",
        ]
        for index, item in enumerate(self.items):
            if index == self.cursor:
                lines.append(f"[bold reverse]> {item.value}[/bold reverse]")
            else:
                lines.append(f"  {item.value}")
        lines.append("")
        lines.append(f"[dim]{self.HELP}[/dim]")
        return "\n".join(lines)
