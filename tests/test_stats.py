"""Tests for stats/aggregate.py - deck statistics."""

from datetime import datetime, timedelta

from conftest import NOW, make_card, make_deck

from termcards.model import Deck, Rating
from termcards.stats.aggregate import (
    NO_DECK_MESSAGE,
    NOT_FOUND_MESSAGE,
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
from termcards.store import Store


def scenario_deck() -> Deck:
    """10 cards, 4 reviewed in the last 30 days rated 3, 4, 5, 2."""
    recent = [
        make_card(interval=5, rating=3, days_ago=1),
        make_card(interval=22, rating=4, days_ago=2),
        make_card(interval=30, rating=5, days_ago=10),
        make_card(interval=1, rating=2, days_ago=29),
    ]
    stale = [make_card(interval=40, rating=1, days_ago=60)]
    unseen = [make_card() for _ in range(5)]
    return make_deck(recent + stale + unseen)


class TestRatingDistribution:
    """Tests for the fixed five-bucket distribution."""

    def test_starts_with_all_buckets_zero(self):
        dist = RatingDistribution()
        assert dict(dist) == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
        assert dist.total == 0

    def test_iterates_in_rating_order(self):
        dist = RatingDistribution()
        dist.add(Rating.EASY)
        dist.add(Rating.BLACKOUT)
        assert [r for r, _ in dist] == list(Rating)
        assert dist[Rating.EASY] == 1
        assert dist[Rating.BLACKOUT] == 1
        assert dist.total == 2


class TestScenario:
    """The reference deck from the dashboard requirements."""

    def test_success_rate(self):
        assert success_rate(scenario_deck(), NOW) == 75

    def test_distribution(self):
        dist = rating_distribution(scenario_deck(), NOW)
        assert dict(dist) == {1: 0, 2: 1, 3: 1, 4: 1, 5: 1}

    def test_summary(self):
        summary = summarize_deck(scenario_deck(), NOW)
        assert summary.total_cards == 10
        assert summary.mature_cards == 3
        assert summary.new_cards == 7
        assert summary.success_rate == 75
        assert summary.last_studied == "Yesterday"


class TestMatureCards:
    """Tests for count_mature_cards."""

    def test_threshold_is_inclusive(self):
        deck = make_deck([make_card(interval=20), make_card(interval=21), make_card(interval=100)])
        assert count_mature_cards(deck) == 2

    def test_mature_plus_new_equals_total(self):
        for deck in (scenario_deck(), make_deck([]), make_deck([make_card(interval=21)])):
            summary = summarize_deck(deck, NOW)
            assert summary.mature_cards + summary.new_cards == len(deck.cards)


class TestSuccessRate:
    """Tests for success_rate."""

    def test_no_reviews_is_zero(self):
        assert success_rate(make_deck([make_card(), make_card()]), NOW) == 0

    def test_empty_deck_is_zero(self):
        assert success_rate(make_deck([]), NOW) == 0

    def test_truncates(self):
        deck = make_deck(
            [
                make_card(rating=3, days_ago=1),
                make_card(rating=3, days_ago=1),
                make_card(rating=1, days_ago=1),
            ]
        )
        # 2/3 = 66.67%
        assert success_rate(deck, NOW) == 66

    def test_window_is_strict(self):
        deck = make_deck([make_card(rating=1, days_ago=30), make_card(rating=5, days_ago=29.9)])
        assert success_rate(deck, NOW) == 100

    def test_only_stale_reviews_is_zero(self):
        deck = make_deck([make_card(rating=5, days_ago=31)])
        assert success_rate(deck, NOW) == 0


class TestAverageInterval:
    """Tests for average_interval."""

    def test_no_qualifying_cards(self):
        deck = make_deck([make_card(interval=10), make_card(interval=0, days_ago=1)])
        assert average_interval(deck) == 0.0

    def test_mean_of_reviewed_scheduled_cards(self):
        deck = make_deck(
            [
                make_card(interval=10, days_ago=1),
                make_card(interval=20, days_ago=100),
                make_card(interval=30),
                make_card(interval=0, days_ago=2),
            ]
        )
        assert average_interval(deck) == 15.0


class TestRatingDistributionFromDeck:
    """Tests for rating_distribution."""

    def test_out_of_range_ratings_skipped(self):
        deck = make_deck(
            [
                make_card(rating=0, days_ago=1),
                make_card(rating=6, days_ago=1),
                make_card(rating=-1, days_ago=1),
                make_card(rating=4, days_ago=1),
            ]
        )
        dist = rating_distribution(deck, NOW)
        assert dict(dist) == {1: 0, 2: 0, 3: 0, 4: 1, 5: 0}

    def test_sum_matches_recent_in_range_reviews(self):
        deck = scenario_deck()
        dist = rating_distribution(deck, NOW)
        since = NOW - timedelta(days=30)
        expected = sum(
            1
            for c in deck.cards
            if c.last_reviewed is not None and c.last_reviewed > since and 1 <= c.rating <= 5
        )
        assert dist.total == expected == 4

    def test_no_reviews_empty(self):
        assert rating_distribution(make_deck([make_card()]), NOW).total == 0


class TestFormatLastStudied:
    """Tests for format_last_studied."""

    def test_never(self):
        assert format_last_studied(None, NOW) == "Never"

    def test_today(self):
        assert format_last_studied(NOW, NOW) == "Today"

    def test_earlier_today(self):
        assert format_last_studied(NOW.replace(hour=0, minute=1), NOW) == "Today"

    def test_yesterday(self):
        assert format_last_studied(NOW - timedelta(days=1), NOW) == "Yesterday"

    def test_yesterday_is_calendar_based(self):
        now = datetime(2026, 3, 15, 0, 10)
        when = datetime(2026, 3, 14, 23, 50)
        assert format_last_studied(when, now) == "Yesterday"

    def test_two_days_ago_within_48_hours(self):
        now = datetime(2026, 3, 15, 0, 10)
        when = datetime(2026, 3, 13, 23, 50)
        assert format_last_studied(when, now) == "Mar 13"

    def test_older_dates_show_month_and_day(self):
        assert format_last_studied(NOW - timedelta(days=8), NOW) == "Mar 7"

    def test_defaults_to_wall_clock(self):
        assert format_last_studied(datetime.now()) == "Today"


class TestResolveDeck:
    """Tests for deck resolution."""

    def _store(self) -> Store:
        return Store(
            [
                make_deck([make_card(days_ago=5)], deck_id="old"),
                make_deck([make_card(days_ago=1)], deck_id="recent"),
                make_deck([make_card()], deck_id="unstudied"),
            ]
        )

    def test_explicit_id_wins(self):
        assert resolve_deck_id(self._store(), "old") == "old"

    def test_falls_back_to_last_studied(self):
        assert resolve_deck_id(self._store()) == "recent"
        assert resolve_deck_id(self._store(), "") == "recent"

    def test_nothing_studied(self):
        store = Store([make_deck([make_card()], deck_id="a")])
        assert last_studied_deck_id(store) is None
        lookup = resolve_deck(store)
        assert not lookup.found
        assert lookup.message == NO_DECK_MESSAGE

    def test_empty_store(self):
        assert resolve_deck(Store()).message == NO_DECK_MESSAGE

    def test_unknown_explicit_id(self):
        lookup = resolve_deck(self._store(), "missing")
        assert lookup.deck is None
        assert lookup.message == NOT_FOUND_MESSAGE

    def test_found(self):
        lookup = resolve_deck(self._store())
        assert lookup.found
        assert lookup.deck.id == "recent"
        assert lookup.message is None
