"""Tests for app/services/analytics/streaks.py

Current/longest streaks, the at-risk flag, completion rate and the
consistency score, all computed against a fixed "today".
"""
import pytest

from app.services.analytics import streaks
from tests.conftest import TODAY, date_range


class TestCurrentStreak:
    """Tests for the streak ending today or yesterday."""

    def test_streak_including_today(self):
        """Three consecutive days ending today count as 3."""
        assert streaks.current_streak(["2024-03-13", "2024-03-14", "2024-03-15"], TODAY) == 3

    def test_streak_pending_from_yesterday(self):
        """Today not done yet: count back from yesterday."""
        assert streaks.current_streak(["2024-03-13", "2024-03-14"], TODAY) == 2

    def test_broken_streak_is_zero(self):
        assert streaks.current_streak(["2024-03-10", "2024-03-11", "2024-03-13"], TODAY) == 0

    def test_empty_set_is_zero(self):
        assert streaks.current_streak([], TODAY) == 0

    def test_future_dates_ignored(self):
        """Dates after today never start or extend the streak."""
        assert streaks.current_streak(["2024-03-16", "2024-03-17"], TODAY) == 0
        assert streaks.current_streak(["2024-03-14", "2024-03-15", "2024-03-16"], TODAY) == 2

    def test_input_order_does_not_matter(self):
        assert streaks.current_streak(["2024-03-15", "2024-03-13", "2024-03-14"], TODAY) == 3

    def test_malformed_dates_ignored(self):
        assert streaks.current_streak(["oops", "2024-03-14", "2024-03-15"], TODAY) == 2

    def test_gap_next_to_today_resets(self):
        """Adding today after a one-day gap starts a new streak of 1."""
        dates = ["2024-03-11", "2024-03-12", "2024-03-13"]

        assert streaks.current_streak(dates, TODAY) == 0
        assert streaks.current_streak(dates + [TODAY], TODAY) == 1

    def test_grows_as_trailing_days_added(self):
        dates = []
        previous = 0
        for day in reversed(date_range("2024-03-01", TODAY)):
            dates.append(day)
            current = streaks.current_streak(dates, TODAY)
            assert current >= previous
            previous = current
        assert previous == 15


class TestLongestStreak:
    """Tests for the longest run anywhere in the set."""

    def test_longest_across_gap(self):
        dates = date_range("2024-03-01", "2024-03-04") + date_range("2024-03-10", "2024-03-12")
        assert streaks.longest_streak(dates) == 4

    def test_empty_is_zero(self):
        assert streaks.longest_streak([]) == 0

    def test_single_date_is_one(self):
        assert streaks.longest_streak(["2024-03-01"]) == 1

    def test_duplicates_do_not_inflate(self):
        assert streaks.longest_streak(["2024-03-01", "2024-03-01", "2024-03-02"]) == 2

    @pytest.mark.parametrize(
        "dates",
        [
            ["2024-03-15"],
            ["2024-03-14"],
            date_range("2024-03-01", "2024-03-15"),
            date_range("2024-02-01", "2024-02-20") + ["2024-03-14", "2024-03-15"],
            ["2024-03-02", "2024-03-05", "2024-03-09"],
        ],
    )
    def test_longest_never_below_current(self, dates):
        assert streaks.longest_streak(dates) >= streaks.current_streak(dates, TODAY)


class TestStreakStartDate:
    """Tests for the first day of the current run."""

    def test_start_of_run_including_today(self):
        assert streaks.streak_start_date(date_range("2024-03-12", TODAY), TODAY) == "2024-03-12"

    def test_start_of_run_ending_yesterday(self):
        assert streaks.streak_start_date(date_range("2024-03-10", "2024-03-14"), TODAY) == "2024-03-10"

    def test_none_without_streak(self):
        assert streaks.streak_start_date(["2024-03-01"], TODAY) is None


class TestAtRisk:
    """Tests for the one-day-from-breaking flag."""

    def test_five_day_streak_missing_today_is_at_risk(self):
        assert streaks.is_at_risk(date_range("2024-03-10", "2024-03-14"), TODAY)

    def test_short_streak_not_at_risk(self):
        assert not streaks.is_at_risk(["2024-03-13", "2024-03-14"], TODAY)

    def test_exactly_three_days_not_at_risk(self):
        assert not streaks.is_at_risk(date_range("2024-03-12", "2024-03-14"), TODAY)

    def test_completed_today_not_at_risk(self):
        assert not streaks.is_at_risk(date_range("2024-03-10", TODAY), TODAY)

    def test_broken_streak_not_at_risk(self):
        assert not streaks.is_at_risk(date_range("2024-03-05", "2024-03-12"), TODAY)


class TestCompletionRate:
    """Tests for the windowed completion fraction."""

    def test_full_window(self):
        assert streaks.completion_rate(date_range("2024-03-09", TODAY), 7, TODAY) == 1.0

    def test_partial_window(self):
        assert streaks.completion_rate(["2024-03-15", "2024-03-14", "2024-03-01"], 10, TODAY) == 0.2

    def test_empty_set(self):
        assert streaks.completion_rate([], 30, TODAY) == 0.0

    def test_non_positive_window(self):
        assert streaks.completion_rate([TODAY], 0, TODAY) == 0.0
        assert streaks.completion_rate([TODAY], -3, TODAY) == 0.0

    def test_always_within_unit_range(self):
        dates = date_range("2024-01-01", "2024-04-30")
        for window in (1, 7, 30, 365):
            assert 0.0 <= streaks.completion_rate(dates, window, TODAY) <= 1.0


class TestConsistencyScore:
    """Tests for the 0-100 consistency metric."""

    def test_capped_at_hundred(self):
        dates = ["2024-03-13", "2024-03-14", "2024-03-15"]
        assert streaks.consistency_score(dates, "2024-03-13", TODAY) == 100

    def test_empty_set_is_zero(self):
        assert streaks.consistency_score([], "2024-01-01", TODAY) == 0

    def test_blends_rate_and_streak_bonus(self):
        """5 completions over 10 days plus a 2-day streak bonus: 0.5 + 0.04."""
        dates = ["2024-03-06", "2024-03-08", "2024-03-10", "2024-03-14", "2024-03-15"]
        assert streaks.consistency_score(dates, "2024-03-05", TODAY) == 54

    def test_streak_bonus_is_capped(self):
        """A 20-day streak earns at most 0.2."""
        dates = date_range("2024-02-25", TODAY)
        assert streaks.consistency_score(dates, "2023-03-16", TODAY) == 25

    def test_created_today_uses_one_day_minimum(self):
        assert streaks.consistency_score([TODAY], TODAY, TODAY) == 100

    def test_always_within_bounds(self):
        for created in ("2020-01-01", "2024-03-01", "2024-03-15", "2030-01-01"):
            score = streaks.consistency_score(date_range("2024-03-01", TODAY), created, TODAY)
            assert 0 <= score <= 100


class TestStreakData:
    """Tests for the combined statistics."""

    def test_three_day_habit(self):
        data = streaks.streak_data(["2024-03-13", "2024-03-14", "2024-03-15"], "2024-03-13", TODAY)

        assert data.current_streak == 3
        assert data.longest_streak == 3
        assert data.streak_start_date == "2024-03-13"
        assert data.consistency_score == 100

    def test_without_creation_date_has_no_score(self):
        data = streaks.streak_data(["2024-03-14"], today=TODAY)

        assert data.current_streak == 1
        assert data.consistency_score is None

    def test_no_streak_has_no_start(self):
        data = streaks.streak_data(["2024-03-01"], "2024-03-01", TODAY)

        assert data.current_streak == 0
        assert data.longest_streak == 1
        assert data.streak_start_date is None

    def test_serializes_with_camel_case(self):
        data = streaks.streak_data([TODAY], TODAY, TODAY).model_dump(by_alias=True)

        assert data["currentStreak"] == 1
        assert data["consistencyScore"] == 100
