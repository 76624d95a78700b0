"""Deck statistics for the review dashboard."""

from .aggregate import (
    MATURE_INTERVAL,
    NO_DECK_MESSAGE,
    NOT_FOUND_MESSAGE,
    DeckLookup,
    DeckSummary,
    RatingDistribution,
    average_interval,
    count_mature_cards,
    format_last_studied,
    last_studied_deck_id,
    rating_distribution,
    resolve_deck,
    resolve_deck_id,
    success_rate,
    summarize_deck,
)
from .render import (
    DEFAULT_PALETTE,
    HIGH_CONTRAST_PALETTE,
    NO_RATINGS_MESSAGE,
    RatingPalette,
    palette_for,
    render_deck_review,
    render_rating_chart,
)

__all__ = [
    "DEFAULT_PALETTE",
    "HIGH_CONTRAST_PALETTE",
    "MATURE_INTERVAL",
    "NO_DECK_MESSAGE",
    "NO_RATINGS_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "DeckLookup",
    "DeckSummary",
    "RatingDistribution",
    "RatingPalette",
    "average_interval",
    "count_mature_cards",
    "format_last_studied",
    "last_studied_deck_id",
    "palette_for",
    "rating_distribution",
    "render_deck_review",
    "render_rating_chart",
    "resolve_deck",
    "resolve_deck_id",
    "success_rate",
    "summarize_deck",
]
