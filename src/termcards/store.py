"""In-memory deck store for termcards.

The store is the read side the dashboard consumes: decks are looked up
by id or enumerated. Decks can be loaded from a JSON file, or a small
sample collection can be generated when no deck file is configured.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

from .model import Card, Deck

logger = logging.getLogger(__name__)


class StoreLoadError(ValueError):
    """Raised when a deck file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load decks from {path}: {reason}")
        self.path = path
        self.reason = reason


class Store:
    """Collection of decks keyed by deck id."""

    def __init__(self, decks: list[Deck] | None = None) -> None:
        self._decks: dict[str, Deck] = {}
        for deck in decks or []:
            self.add_deck(deck)

    def add_deck(self, deck: Deck) -> None:
        """Add a deck, replacing any deck with the same id."""
        self._decks[deck.id] = deck

    def get_deck(self, deck_id: str) -> Deck | None:
        """Look up a deck by id. Returns None for an unknown id."""
        return self._decks.get(deck_id)

    def get_decks(self) -> list[Deck]:
        """Return all decks in insertion order."""
        return list(self._decks.values())


def _parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO 8601 timestamp into a naive local datetime."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"expected ISO timestamp string, got {value!r}")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _expect_object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{what} must be an object, got {type(data).__name__}")
    return data


def _card_from_dict(data: Any) -> Card:
    data = _expect_object(data, "card")
    return Card(
        id=str(data["id"]),
        front=str(data.get("front", "")),
        back=str(data.get("back", "")),
        interval=int(data.get("interval", 0)),
        rating=int(data.get("rating", 0)),
        last_reviewed=_parse_timestamp(data.get("last_reviewed")),
    )


def _deck_from_dict(data: Any) -> Deck:
    data = _expect_object(data, "deck")
    raw_cards = data.get("cards", [])
    if not isinstance(raw_cards, list):
        raise TypeError(f"cards of deck {data.get('id')!r} must be a list")
    cards = [_card_from_dict(c) for c in raw_cards]
    last_studied = _parse_timestamp(data.get("last_studied"))
    if last_studied is None:
        reviewed = [c.last_reviewed for c in cards if c.last_reviewed is not None]
        last_studied = max(reviewed, default=None)
    return Deck(
        id=str(data["id"]),
        name=str(data.get("name") or data["id"]),
        cards=cards,
        last_studied=last_studied,
    )


def load_store(path: Path) -> Store:
    """Load decks from a JSON file.

    Args:
        path: File containing ``{"decks": [...]}``.

    Returns:
        Store populated with the decks in file order.

    Raises:
        StoreLoadError: If the file is missing or malformed.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise StoreLoadError(path, exc.strerror or str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise StoreLoadError(path, f"invalid JSON ({exc.msg})") from exc

    if not isinstance(raw, dict) or not isinstance(raw.get("decks"), list):
        raise StoreLoadError(path, 'expected an object with a "decks" list')

    try:
        decks = [_deck_from_dict(d) for d in raw["decks"]]
    except (KeyError, TypeError, ValueError) as exc:
        raise StoreLoadError(path, f"malformed deck entry ({exc})") from exc

    logger.debug("Loaded %d decks from %s", len(decks), path)
    return Store(decks)


def sample_store(now: datetime | None = None) -> Store:
    """Build a small store of demo decks with recent review history."""
    now = now or datetime.now()

    def card(n: int, interval: int, rating: int, days_ago: int | None) -> Card:
        reviewed = now - timedelta(days=days_ago) if days_ago is not None else None
        return Card(
            id=f"card-{n}",
            front=f"Question {n}",
            back=f"Answer {n}",
            interval=interval,
            rating=rating,
            last_reviewed=reviewed,
        )

    python = [
        card(1, 25, 5, 0),
        card(2, 3, 3, 0),
        card(3, 1, 1, 1),
        card(4, 40, 4, 2),
        card(5, 7, 2, 5),
        card(6, 0, 0, None),
    ]
    geography = [
        card(1, 12, 4, 3),
        card(2, 30, 5, 3),
        card(3, 2, 2, 45),
        card(4, 0, 0, None),
    ]

    decks = [
        Deck(id="python", name="Python Basics", cards=python),
        Deck(id="geography", name="World Capitals", cards=geography),
        Deck(id="spanish", name="Spanish Verbs", cards=[card(1, 0, 0, None)]),
    ]
    for deck in decks:
        reviewed = [c.last_reviewed for c in deck.cards if c.last_reviewed is not None]
        deck.last_studied = max(reviewed, default=None)
    return Store(decks)
