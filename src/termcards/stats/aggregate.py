"""Deck statistics for the review dashboard.

Pure functions over a deck snapshot: nothing here mutates its inputs or
performs I/O. Windowed metrics (success rate, rating distribution) only
count cards reviewed in the 30 days before ``now``, which defaults to the
current wall-clock time, so results change as time passes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

from ..model import Card, Deck, Rating

if TYPE_CHECKING:
    from ..store import Store

# Interval (days) at which a card counts as mature
MATURE_INTERVAL = 21
REVIEW_WINDOW = timedelta(days=30)
# Lowest rating counted as a successful review
SUCCESS_RATING = Rating.HARD

NO_DECK_MESSAGE = "No deck available to show statistics."
NOT_FOUND_MESSAGE = "Selected deck not found."


class RatingDistribution:
    """Review counts per rating, one fixed bucket for each of 1-5."""

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts = [0] * len(Rating)

    def add(self, rating: Rating) -> None:
        self._counts[rating - 1] += 1

    def __getitem__(self, rating: Rating) -> int:
        return self._counts[rating - 1]

    def __iter__(self) -> Iterator[tuple[Rating, int]]:
        """Yield (rating, count) pairs in rating order."""
        return zip(Rating, self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts)

    def __repr__(self) -> str:
        return f"RatingDistribution({self._counts})"


@dataclass(frozen=True)
class DeckLookup:
    """Result of resolving which deck the dashboard should show.

    Exactly one of ``deck`` or ``message`` is set.
    """

    deck: Deck | None = None
    message: str | None = None

    @property
    def found(self) -> bool:
        return self.deck is not None


@dataclass(frozen=True)
class DeckSummary:
    """All dashboard metrics for one deck, computed against one ``now``."""

    total_cards: int
    mature_cards: int
    success_rate: int
    average_interval: float
    last_studied: str
    distribution: RatingDistribution = field(compare=False)

    @property
    def new_cards(self) -> int:
        return self.total_cards - self.mature_cards


def _window_start(now: datetime | None) -> datetime:
    return (now or datetime.now()) - REVIEW_WINDOW


def _recent_cards(deck: Deck, now: datetime | None) -> Iterator[Card]:
    """Cards reviewed strictly after the start of the review window."""
    since = _window_start(now)
    for card in deck.cards:
        if card.last_reviewed is not None and card.last_reviewed > since:
            yield card


def last_studied_deck_id(store: Store) -> str | None:
    """Return the id of the most recently studied deck.

    Decks never studied are skipped. On a tie the deck enumerated first
    wins; enumeration order is the store's and carries no guarantee.
    """
    latest: datetime | None = None
    latest_id: str | None = None
    for deck in store.get_decks():
        if deck.last_studied is None:
            continue
        if latest is None or deck.last_studied > latest:
            latest = deck.last_studied
            latest_id = deck.id
    return latest_id


def resolve_deck_id(store: Store, focus_deck_id: str | None = None) -> str | None:
    """Pick the deck to show: the explicit id, else the last studied deck."""
    if focus_deck_id:
        return focus_deck_id
    return last_studied_deck_id(store)


def resolve_deck(store: Store, focus_deck_id: str | None = None) -> DeckLookup:
    """Resolve and look up the dashboard deck.

    Returns a lookup carrying either the deck or the message to display in
    its place. An unknown explicit id and "nothing to show" produce
    different messages.
    """
    deck_id = resolve_deck_id(store, focus_deck_id)
    if deck_id is None:
        return DeckLookup(message=NO_DECK_MESSAGE)
    deck = store.get_deck(deck_id)
    if deck is None:
        return DeckLookup(message=NOT_FOUND_MESSAGE)
    return DeckLookup(deck=deck)


def count_mature_cards(deck: Deck) -> int:
    """Number of cards with an interval of at least 21 days."""
    return sum(1 for card in deck.cards if card.interval >= MATURE_INTERVAL)


def success_rate(deck: Deck, now: datetime | None = None) -> int:
    """Percentage of recently reviewed cards rated Hard or better.

    Truncated to an int. Returns 0 when nothing was reviewed in the window.
    """
    reviewed = 0
    successful = 0
    for card in _recent_cards(deck, now):
        reviewed += 1
        if card.rating >= SUCCESS_RATING:
            successful += 1
    if reviewed == 0:
        return 0
    return int(successful / reviewed * 100)


def average_interval(deck: Deck) -> float:
    """Mean interval of reviewed cards that have been scheduled.

    Considers every reviewed card regardless of when it was reviewed.
    """
    intervals = [c.interval for c in deck.cards if c.reviewed and c.interval > 0]
    if not intervals:
        return 0.0
    return sum(intervals) / len(intervals)


def rating_distribution(deck: Deck, now: datetime | None = None) -> RatingDistribution:
    """Count recent reviews per rating. Out-of-range ratings are skipped."""
    distribution = RatingDistribution()
    for card in _recent_cards(deck, now):
        rating = Rating.from_value(card.rating)
        if rating is not None:
            distribution.add(rating)
    return distribution


def format_last_studied(when: datetime | None, now: datetime | None = None) -> str:
    """Describe when a deck was last studied.

    Compares calendar days, not elapsed hours: anything on the current
    date is "Today" and anything on the previous date is "Yesterday".
    """
    if when is None:
        return "Never"

    today: date = (now or datetime.now()).date()
    day = when.date()
    if day == today:
        return "Today"
    if day == today - timedelta(days=1):
        return "Yesterday"
    return f"{when:%b} {when.day}"


def summarize_deck(deck: Deck, now: datetime | None = None) -> DeckSummary:
    """Compute every dashboard metric for ``deck`` at a single instant."""
    now = now or datetime.now()
    return DeckSummary(
        total_cards=len(deck.cards),
        mature_cards=count_mature_cards(deck),
        success_rate=success_rate(deck, now),
        average_interval=average_interval(deck),
        last_studied=format_last_studied(deck.last_studied, now),
        distribution=rating_distribution(deck, now),
    )
