"""CLI command routing for termcards.

This module provides the command-line interface with support for:
- TUI mode (default, with fallback to plain if unavailable)
- Plain deck listing
- Plain deck statistics
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from . import __version__
from .config_store import load_config
from .stats.aggregate import format_last_studied
from .stats.render import palette_for, render_deck_review
from .store import Store, StoreLoadError, load_store, sample_store

logger = logging.getLogger(__name__)


def _check_tui_available() -> bool:
    """Check if TUI dependencies are available."""
    try:
        import textual  # noqa: F401

        return True
    except ImportError:
        return False


def _open_store(args: argparse.Namespace) -> Store:
    """Load the deck store named on the command line or in the config.

    Falls back to sample decks when no deck file is configured.
    """
    decks_path = args.decks or load_config().decks_path
    if decks_path is None:
        logger.debug("No deck file configured, using sample decks")
        return sample_store()
    return load_store(Path(decks_path).expanduser())


def _high_contrast(args: argparse.Namespace) -> bool:
    return args.high_contrast or load_config().high_contrast


def _print_decks(store: Store) -> None:
    decks = store.get_decks()
    if not decks:
        print("No decks found.")
        return

    print("Available decks:")
    print("-" * 40)
    for deck in decks:
        studied = format_last_studied(deck.last_studied)
        print(f"{deck.name}  [{deck.id}]  ({len(deck.cards)} cards, studied: {studied})")


def _cmd_decks(args: argparse.Namespace) -> int:
    """Handle decks command."""
    try:
        _print_decks(_open_store(args))
        return 0
    except StoreLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _cmd_stats(args: argparse.Namespace) -> int:
    """Handle stats command."""
    try:
        store = _open_store(args)
    except StoreLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    console = Console(highlight=False)
    console.print(render_deck_review(store, args.deck, palette_for(_high_contrast(args))))
    return 0


def _cmd_default(args: argparse.Namespace) -> int:
    """Handle default command (TUI or plain mode)."""
    try:
        store = _open_store(args)
    except StoreLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not args.plain and _check_tui_available():
        from .tui import run_tui

        run_tui(store, high_contrast=_high_contrast(args))
        return 0

    _print_decks(store)
    print()
    print("Run 'termcards stats DECK_ID' to see deck statistics.")
    return 0


def _configure_logging(log_file: str | None) -> None:
    """Send debug logging to a file; the terminal belongs to the TUI."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entrypoint.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        prog="termcards",
        description="Terminal flashcards with a deck review dashboard",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Force plain terminal mode (no TUI)",
    )
    parser.add_argument(
        "--decks",
        metavar="PATH",
        help="JSON deck file (defaults to the configured file or sample decks)",
    )
    parser.add_argument(
        "--high-contrast",
        action="store_true",
        help="Use high contrast colors",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write debug logs to PATH",
    )

    subparsers = parser.add_subparsers(dest="command")

    decks_parser = subparsers.add_parser(
        "decks",
        help="List decks",
    )
    decks_parser.set_defaults(func=_cmd_decks)

    stats_parser = subparsers.add_parser(
        "stats",
        help="Show review statistics for a deck",
    )
    stats_parser.add_argument(
        "deck",
        nargs="?",
        help="Deck id (defaults to the most recently studied deck)",
    )
    stats_parser.set_defaults(func=_cmd_stats)

    args = parser.parse_args(argv)
    _configure_logging(args.log_file)

    # Route to appropriate handler
    if args.command is None:
        return _cmd_default(args)

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
