"""termcards: terminal flashcards with a deck review dashboard."""

__version__ = "0.1.0"
