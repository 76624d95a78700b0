"""Textual user interface for termcards."""

from .app import TermcardsApp, run_tui

__all__ = ["TermcardsApp", "run_tui"]
