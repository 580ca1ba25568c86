"""Tests for app/services/habits/service.py

Habit CRUD, completion toggling and per-habit streak lookups against the
in-memory store.
"""
import pytest

from app.core.exceptions import HabitNotFoundError, InvalidHabitDataError, StorageError
from app.services.habits import service as habit_service
from tests.conftest import TODAY, YESTERDAY


class TestAddHabit:
    """Tests for habit creation."""

    def test_creates_habit_with_empty_completions(self):
        habit = habit_service.add_habit("Meditate", category="mindfulness", today=TODAY)

        assert habit.id.startswith("habit_")
        assert habit.created_at == TODAY
        assert habit.completed_dates == []
        assert habit.active is True
        assert habit_service.get_habit_by_id(habit.id).name == "Meditate"

    def test_strips_name(self):
        assert habit_service.add_habit("  Read  ", today=TODAY).name == "Read"

    def test_rejects_blank_name(self):
        with pytest.raises(InvalidHabitDataError):
            habit_service.add_habit("   ")

    def test_generates_unique_ids(self):
        first = habit_service.add_habit("One", today=TODAY)
        second = habit_service.add_habit("Two", today=TODAY)

        assert first.id != second.id

    def test_storage_failure_raises(self, store, monkeypatch):
        monkeypatch.setattr(store, "set_item", lambda key, value: False)

        with pytest.raises(StorageError):
            habit_service.add_habit("Walk", today=TODAY)

    def test_stored_with_camel_case_fields(self, store):
        habit_service.add_habit("Walk", today=TODAY)

        record = store.get_item("habits")[0]
        assert record["completedDates"] == []
        assert record["createdAt"] == TODAY


class TestUpdateAndDelete:
    """Tests for field edits and removal."""

    def test_update_fields(self):
        habit = habit_service.add_habit("Run", today=TODAY)

        updated = habit_service.update_habit(habit.id, {"name": "Run 5k", "active": False})

        assert updated.name == "Run 5k"
        assert updated.active is False
        assert habit_service.get_habit_by_id(habit.id).name == "Run 5k"

    def test_update_ignores_protected_fields(self):
        habit = habit_service.add_habit("Run", today=TODAY)

        updated = habit_service.update_habit(habit.id, {"id": "other", "completed_dates": [TODAY]})

        assert updated.id == habit.id
        assert updated.completed_dates == []

    def test_update_rejects_invalid_category(self):
        habit = habit_service.add_habit("Run", today=TODAY)

        with pytest.raises(InvalidHabitDataError):
            habit_service.update_habit(habit.id, {"category": "astrology"})

    def test_update_unknown_habit(self):
        with pytest.raises(HabitNotFoundError):
            habit_service.update_habit("habit_missing", {"name": "x"})

    def test_delete(self):
        habit = habit_service.add_habit("Run", today=TODAY)

        habit_service.delete_habit(habit.id)

        assert habit_service.get_habit_by_id(habit.id) is None

    def test_delete_unknown_habit(self):
        with pytest.raises(HabitNotFoundError):
            habit_service.delete_habit("habit_missing")


class TestToggleCompletion:
    """Tests for adding and removing completion dates."""

    def test_toggle_adds_then_removes(self):
        habit = habit_service.add_habit("Floss", today=TODAY)

        added = habit_service.toggle_completion(habit.id, TODAY)
        removed = habit_service.toggle_completion(habit.id, TODAY)

        assert added.completed_dates == [TODAY]
        assert removed.completed_dates == []

    def test_dates_kept_sorted(self):
        habit = habit_service.add_habit("Floss", today=TODAY)

        habit_service.toggle_completion(habit.id, TODAY)
        updated = habit_service.toggle_completion(habit.id, "2024-03-10")

        assert updated.completed_dates == ["2024-03-10", TODAY]

    def test_invalid_date(self):
        habit = habit_service.add_habit("Floss", today=TODAY)

        with pytest.raises(InvalidHabitDataError):
            habit_service.toggle_completion(habit.id, "2024-02-30")

    def test_unknown_habit(self):
        with pytest.raises(HabitNotFoundError):
            habit_service.toggle_completion("habit_missing", TODAY)


class TestQueries:
    """Tests for filtered lists and streak lookups."""

    def test_active_and_category_filters(self):
        walk = habit_service.add_habit("Walk", category="health", today=TODAY)
        habit_service.add_habit("Plan", category="productivity", today=TODAY)
        habit_service.add_habit("Nap", category="health", active=False, today=TODAY)

        assert [h.name for h in habit_service.get_habits_by_category("health")] == ["Walk", "Nap"]
        assert [h.name for h in habit_service.get_active_habits()] == ["Walk", "Plan"]
        assert [h.id for h in habit_service.get_today_habits()] == [h.id for h in habit_service.get_active_habits()]
        assert walk.id in [h.id for h in habit_service.get_all_habits()]

    def test_streak_lookups(self):
        habit = habit_service.add_habit("Stretch", today="2024-03-01")
        for day in ("2024-03-13", YESTERDAY, TODAY):
            habit_service.toggle_completion(habit.id, day)

        assert habit_service.get_streak_for_habit(habit.id, TODAY) == 3
        assert habit_service.get_longest_streak_for_habit(habit.id) == 3
        assert habit_service.get_total_streaks(TODAY) == 3
        assert [h.id for h in habit_service.get_completed_today(TODAY)] == [habit.id]

    def test_unknown_habit_streaks_are_zero(self):
        assert habit_service.get_streak_for_habit("habit_missing", TODAY) == 0
        assert habit_service.get_longest_streak_for_habit("habit_missing") == 0

    def test_streak_data_unknown_habit(self):
        with pytest.raises(HabitNotFoundError):
            habit_service.get_streak_data_for_habit("habit_missing", TODAY)

    def test_today_summary(self):
        done = habit_service.add_habit("Done", today="2024-03-01")
        habit_service.add_habit("Pending", today="2024-03-01")
        habit_service.toggle_completion(done.id, TODAY)

        summary = habit_service.get_today_summary(TODAY)

        assert summary["date"] == TODAY
        assert summary["total_habits"] == 2
        assert summary["completed"] == 1
        assert summary["completion_rate"] == 50.0
        assert summary["habits"][0]["streak"]["currentStreak"] == 1

    def test_malformed_records_skipped(self, store):
        store.set_item("habits", [{"id": "broken"}, {
            "id": "habit_ok", "name": "Ok", "createdAt": TODAY, "completedDates": [],
        }])

        assert [h.id for h in habit_service.get_all_habits()] == ["habit_ok"]
