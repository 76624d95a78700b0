"""Deck and card data model for termcards.

These are plain data structures read by the statistics and navigation
code. Scheduling fields (interval, rating, last review time) are written
by whatever reviews the cards; this package only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class Rating(IntEnum):
    """Outcome recorded at a card's last review, worst to best."""

    BLACKOUT = 1
    WRONG = 2
    HARD = 3
    GOOD = 4
    EASY = 5

    @property
    def label(self) -> str:
        """Display name for the rating ("Blackout", "Wrong", ...)."""
        return self.name.capitalize()

    @classmethod
    def from_value(cls, value: int) -> Rating | None:
        """Return the Rating for a stored value, or None if out of range."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class Card:
    """A single flashcard with its scheduling state."""

    id: str
    front: str = ""
    back: str = ""
    interval: int = 0  # days until next review, 0 if never scheduled
    rating: int = 0  # raw stored value, only meaningful once reviewed
    last_reviewed: datetime | None = None

    @property
    def reviewed(self) -> bool:
        """Whether the card has been reviewed at least once."""
        return self.last_reviewed is not None


@dataclass
class Deck:
    """A named collection of cards reviewed as a unit."""

    id: str
    name: str
    cards: list[Card] = field(default_factory=list)
    last_studied: datetime | None = None
