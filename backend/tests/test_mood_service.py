"""Tests for app/services/moods/service.py

Mood logging, edits and the aggregate queries over the stored history.
"""
from datetime import datetime

import pytest

from app.core.exceptions import InvalidMoodDataError, MoodEntryNotFoundError
from app.services.moods import service as mood_service
from tests.conftest import TODAY


def _log(mood, day, hour=12, note=None):
    return mood_service.add_mood(mood, note, now=datetime(*map(int, day.split("-")), hour, 0))


class TestAddMood:
    """Tests for mood logging."""

    def test_logs_date_and_timestamp(self):
        entry = mood_service.add_mood("good", "sunny walk", ["walk"], now=datetime(2024, 3, 15, 9, 30))

        assert entry.id.startswith("mood_")
        assert entry.date == TODAY
        assert entry.time == "2024-03-15T09:30:00"
        assert entry.mood == "good"
        assert entry.activities == ["walk"]

    def test_rejects_unknown_mood(self):
        with pytest.raises(InvalidMoodDataError):
            mood_service.add_mood("meh")

    def test_history_is_append_only(self):
        first = _log("bad", "2024-03-14")
        second = _log("good", TODAY)

        assert [e.id for e in mood_service.get_all_moods()] == [first.id, second.id]


class TestUpdateAndDelete:
    """Tests for edits by id."""

    def test_update_note_keeps_id(self):
        entry = _log("neutral", TODAY)

        updated = mood_service.update_mood(entry.id, {"note": "better later", "id": "other"})

        assert updated.id == entry.id
        assert mood_service.get_mood_by_id(entry.id).note == "better later"

    def test_update_rejects_invalid_mood(self):
        entry = _log("neutral", TODAY)

        with pytest.raises(InvalidMoodDataError):
            mood_service.update_mood(entry.id, {"mood": "meh"})

    def test_update_unknown_entry(self):
        with pytest.raises(MoodEntryNotFoundError):
            mood_service.update_mood("mood_missing", {"note": "x"})

    def test_delete(self):
        entry = _log("neutral", TODAY)

        mood_service.delete_mood(entry.id)

        assert mood_service.get_all_moods() == []

    def test_delete_unknown_entry(self):
        with pytest.raises(MoodEntryNotFoundError):
            mood_service.delete_mood("mood_missing")


class TestQueries:
    """Tests for the aggregate queries."""

    def test_todays_mood_is_latest_entry(self):
        _log("bad", TODAY, hour=8)
        _log("excellent", TODAY, hour=21)
        _log("good", TODAY, hour=14)

        assert mood_service.get_todays_mood(TODAY).mood == "excellent"

    def test_date_queries(self):
        _log("bad", "2024-03-10")
        _log("good", "2024-03-12")
        _log("good", TODAY)

        assert len(mood_service.get_moods_for_date(TODAY)) == 1
        assert len(mood_service.get_moods_for_date_range("2024-03-10", "2024-03-12")) == 2
        assert len(mood_service.get_recent_moods(3, TODAY)) == 1

    def test_average_and_trend(self):
        for mood, day in [("bad", "2024-03-10"), ("good", "2024-03-11"),
                          ("good", "2024-03-12"), ("excellent", "2024-03-13")]:
            _log(mood, day)

        assert mood_service.get_average_mood_score(30, TODAY) == 3.8
        assert mood_service.get_mood_trend(10, TODAY) == "improving"
        assert mood_service.get_mood_distribution()["good"] == 2
        assert mood_service.get_best_day() == "2024-03-13"

    def test_stats_window(self):
        _log("terrible", "2024-01-05")
        _log("good", "2024-03-14")
        _log("excellent", TODAY)

        stats = mood_service.get_mood_stats(7, TODAY)

        assert stats.window_days == 7
        assert stats.entry_count == 2
        assert stats.average_score == 4.5
        assert stats.trend == "stable"
        assert stats.distribution["terrible"] == 0
        assert stats.best_day == TODAY

    def test_empty_history(self):
        stats = mood_service.get_mood_stats(30, TODAY)

        assert stats.entry_count == 0
        assert stats.average_score == 0
        assert stats.best_day is None
        assert mood_service.get_todays_mood(TODAY) is None
