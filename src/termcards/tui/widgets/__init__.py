"""TUI widgets for termcards."""

from .deck_review import DeckReviewPanel

__all__ = ["DeckReviewPanel"]
