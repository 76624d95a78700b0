"""Shared fixtures for termcards tests."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

import termcards.config_store as config_store
from termcards.config_store import clear_config_cache
from termcards.model import Card, Deck

# Fixed reference time for time-windowed statistics
NOW = datetime(2026, 3, 15, 14, 30)


def make_card(
    interval: int = 0,
    rating: int = 0,
    days_ago: float | None = None,
    card_id: str = "c",
) -> Card:
    """Build a card reviewed ``days_ago`` days before NOW (None = never)."""
    reviewed = NOW - timedelta(days=days_ago) if days_ago is not None else None
    return Card(id=card_id, interval=interval, rating=rating, last_reviewed=reviewed)


def make_deck(cards: list[Card], deck_id: str = "deck", name: str = "Deck") -> Deck:
    reviewed = [c.last_reviewed for c in cards if c.last_reviewed is not None]
    return Deck(id=deck_id, name=name, cards=cards, last_studied=max(reviewed, default=None))


@pytest.fixture(autouse=True)
def _temp_config_dir(monkeypatch, tmp_path):
    """Keep tests away from the real user config."""
    clear_config_cache()
    config_dir = tmp_path / "termcards-config"
    monkeypatch.setattr(config_store, "_get_config_dir", lambda: config_dir)
    yield config_dir
    clear_config_cache()
