"""
Habits Repository - Centralized storage access layer
All reads and writes of the habit collection go through the key-value store
"""
from typing import List, Optional
import logging

from app.core import dependencies
from app.core.constants import HABITS_KEY
from app.core.exceptions import StorageError
from app.models.habit import Habit

logger = logging.getLogger(__name__)


# ============================================================================
# HABITS COLLECTION
# ============================================================================

def get_all_habits() -> List[Habit]:
    """
    Get all habits from the store

    Returns:
        List of habits (records that fail validation are skipped)
    """
    raw = dependencies.get_store().get_item(HABITS_KEY) or []
    if not isinstance(raw, list):
        logger.warning("[STORAGE] Ignoring stored habits: expected a list")
        return []
    habits = []
    for record in raw:
        try:
            habits.append(Habit.model_validate(record))
        except ValueError as e:
            logger.warning(f"[STORAGE] Skipping malformed habit record: {e}")
    return habits


def save_all_habits(habits: List[Habit]) -> None:
    """
    Replace the stored habit collection

    Raises:
        StorageError: If the store reports a failed write
    """
    records = [habit.model_dump(by_alias=True, mode="json") for habit in habits]
    if not dependencies.get_store().set_item(HABITS_KEY, records):
        raise StorageError("Failed to save habits")


def get_habit_by_id(habit_id: str) -> Optional[Habit]:
    """
    Get a single habit by ID

    Returns:
        Habit or None if not found
    """
    for habit in get_all_habits():
        if habit.id == habit_id:
            return habit
    return None


def create_habit(habit: Habit) -> Habit:
    """
    Append a new habit

    Raises:
        StorageError: If the write fails
    """
    habits = get_all_habits()
    habits.append(habit)
    save_all_habits(habits)
    return habit


def update_habit(habit: Habit) -> Optional[Habit]:
    """
    Replace the stored habit with the same ID

    Returns:
        The updated habit, or None if no habit has that ID

    Raises:
        StorageError: If the write fails
    """
    habits = get_all_habits()
    for index, existing in enumerate(habits):
        if existing.id == habit.id:
            habits[index] = habit
            save_all_habits(habits)
            return habit
    return None


def delete_habit(habit_id: str) -> Optional[Habit]:
    """
    Delete a habit

    Returns:
        The deleted habit, or None if no habit has that ID

    Raises:
        StorageError: If the write fails
    """
    habits = get_all_habits()
    remaining = [h for h in habits if h.id != habit_id]
    if len(remaining) == len(habits):
        return None
    deleted = next(h for h in habits if h.id == habit_id)
    save_all_habits(remaining)
    return deleted
