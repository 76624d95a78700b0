"""Markup rendering for deck statistics.

Produces Rich/Textual markup strings. Colors and rating labels come from
an explicit ``RatingPalette`` so the output depends only on arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from rich.markup import escape

from ..model import Rating
from .aggregate import RatingDistribution, resolve_deck, summarize_deck

if TYPE_CHECKING:
    from ..store import Store

NO_RATINGS_MESSAGE = "No ratings data available"

BAR_MAX_WIDTH = 30
BAR_BLOCK = "█"
CHART_LABEL_WIDTH = 15
STAT_LABEL_WIDTH = 20


@dataclass(frozen=True)
class RatingPalette:
    """Labels and colors for rating bars, indexed by rating - 1."""

    labels: tuple[str, str, str, str, str]
    colors: tuple[str, str, str, str, str]
    label_color: str
    dim_color: str

    def label(self, rating: Rating) -> str:
        return self.labels[rating - 1]

    def color(self, rating: Rating) -> str:
        return self.colors[rating - 1]


_LABELS = tuple(r.label for r in Rating)

DEFAULT_PALETTE = RatingPalette(
    labels=_LABELS,  # type: ignore[arg-type]
    colors=("#e96c6c", "#e9a55c", "#e0c55a", "#6cd97e", "#5eb5f7"),
    label_color="#6c9fd4",
    dim_color="#777777",
)

HIGH_CONTRAST_PALETTE = RatingPalette(
    labels=_LABELS,  # type: ignore[arg-type]
    colors=("#ff3030", "#ff9900", "#ffff00", "#00ff00", "#00c0ff"),
    label_color="#ffffff",
    dim_color="#c0c0c0",
)


def palette_for(high_contrast: bool) -> RatingPalette:
    """Pick the palette matching the high contrast setting."""
    return HIGH_CONTRAST_PALETTE if high_contrast else DEFAULT_PALETTE


def _percentage(count: int, total: int) -> int:
    if total == 0:
        return 0
    return int(count / total * 100)


def bar_width(percentage: int, max_width: int = BAR_MAX_WIDTH) -> int:
    """Bar length for a percentage; any non-zero share gets at least 1."""
    width = int(percentage / 100 * max_width)
    if percentage > 0 and width == 0:
        return 1
    return width


def render_rating_chart(
    distribution: RatingDistribution,
    palette: RatingPalette = DEFAULT_PALETTE,
) -> str:
    """Render a horizontal bar chart of a rating distribution.

    Args:
        distribution: Counts per rating.
        palette: Labels and bar colors.

    Returns:
        Markup with one row per rating (1 to 5) separated by blank lines,
        or a single placeholder line when there are no ratings.
    """
    total = distribution.total
    if total == 0:
        return NO_RATINGS_MESSAGE

    rows: list[str] = []
    for rating, count in distribution:
        percentage = _percentage(count, total)
        label = f"{palette.label(rating):<8} ({int(rating)})"
        row = f"{label:<{CHART_LABEL_WIDTH}} "

        width = bar_width(percentage)
        if width > 0:
            color = palette.color(rating)
            row += f"[{color}]{BAR_BLOCK * width}[/{color}]"
        if percentage > 0:
            row += f" {percentage}%"
        rows.append(row)

    return "\n\n".join(rows)


def _stat_line(label: str, value: str, palette: RatingPalette) -> str:
    padded = f"{label:<{STAT_LABEL_WIDTH}}"
    return f"[bold {palette.label_color}]{padded}[/bold {palette.label_color}]{value}"


def render_deck_review(
    store: Store,
    focus_deck_id: str | None = None,
    palette: RatingPalette = DEFAULT_PALETTE,
    now: datetime | None = None,
) -> str:
    """Render the deck review dashboard for one deck.

    Shows ``focus_deck_id`` when given, otherwise the most recently
    studied deck. When no deck can be shown the result is a single
    message line instead.
    """
    lookup = resolve_deck(store, focus_deck_id)
    if not lookup.found:
        return lookup.message or ""

    deck = lookup.deck
    assert deck is not None
    summary = summarize_deck(deck, now)
    accent = palette.label_color

    left = [
        _stat_line("Total Cards:", f"{summary.total_cards:4d}", palette),
        _stat_line("Mature Cards:", f"{summary.mature_cards:4d}", palette),
        _stat_line("New Cards:", f"{summary.new_cards:4d}", palette),
    ]
    right = [
        _stat_line("Success Rate:", f"{summary.success_rate:3d}%", palette),
        _stat_line("Avg. Interval:", f"{summary.average_interval:.1f} days", palette),
        _stat_line("Last Studied:", summary.last_studied, palette),
    ]
    columns = [f"{lhs}    {rhs}" for lhs, rhs in zip(left, right)]

    lines = [
        f"[bold {accent}]Deck: {escape(deck.name)}[/bold {accent}]",
        "",
        *columns,
        "",
        f"[bold {accent}]Ratings Distribution[/bold {accent}]",
        "",
        render_rating_chart(summary.distribution, palette),
    ]
    return "\n".join(lines)
