"""
Habits Service - Business logic for habit management
Handles creating, reading, updating, deleting and toggling habit completions
"""
from typing import Any, Dict, List, Optional
import logging

from app.core.exceptions import HabitNotFoundError, InvalidHabitDataError
from app.models.habit import Habit, StreakData
from app.services.analytics import streaks
from app.utils.dates import parse_date, today as get_today
from app.utils.ids import generate_id
from . import repository

logger = logging.getLogger(__name__)


def add_habit(
    name: str,
    description: Optional[str] = None,
    icon: Optional[str] = None,
    color: Optional[str] = None,
    category: Optional[str] = None,
    target_days: Optional[int] = None,
    active: bool = True,
    today: Optional[str] = None
) -> Habit:
    """
    Add a new habit with an empty completion set

    Args:
        name: Display name
        description, icon, color, category, target_days: Optional fields
        active: Whether the habit is tracked
        today: Optional injected creation date

    Returns:
        The created habit

    Raises:
        InvalidHabitDataError: If the name is blank
        StorageError: If the write fails
    """
    if not name or not name.strip():
        raise InvalidHabitDataError("Habit name must not be empty")

    habit = Habit(
        id=generate_id("habit"),
        name=name.strip(),
        description=description,
        icon=icon,
        color=color,
        category=category,
        created_at=today or get_today(),
        target_days=target_days,
        completed_dates=[],
        active=active,
    )
    repository.create_habit(habit)
    logger.info(f"[HABITS] Added habit '{habit.name}' ({habit.id})")
    return habit


def update_habit(habit_id: str, updates: Dict[str, Any]) -> Habit:
    """
    Apply field edits to a habit

    Args:
        habit_id: The habit ID
        updates: Fields to change (id, created_at and completed_dates are ignored)

    Returns:
        The updated habit

    Raises:
        HabitNotFoundError: If no habit has that ID
        InvalidHabitDataError: If an edited field is invalid
        StorageError: If the write fails
    """
    habit = repository.get_habit_by_id(habit_id)
    if habit is None:
        raise HabitNotFoundError(f"Habit '{habit_id}' not found")

    protected = {"id", "created_at", "completed_dates"}
    changes = {k: v for k, v in updates.items() if k not in protected}
    if "name" in changes and (changes["name"] is None or not str(changes["name"]).strip()):
        raise InvalidHabitDataError("Habit name must not be empty")

    try:
        updated = Habit.model_validate({**habit.model_dump(), **changes})
    except ValueError as e:
        raise InvalidHabitDataError(f"Invalid habit update: {e}")
    repository.update_habit(updated)
    return updated


def delete_habit(habit_id: str) -> Habit:
    """
    Delete a habit

    Raises:
        HabitNotFoundError: If no habit has that ID
        StorageError: If the write fails
    """
    deleted = repository.delete_habit(habit_id)
    if deleted is None:
        raise HabitNotFoundError(f"Habit '{habit_id}' not found")
    logger.info(f"[HABITS] Deleted habit '{deleted.name}' ({habit_id})")
    return deleted


def toggle_completion(habit_id: str, date: Optional[str] = None) -> Habit:
    """
    Add the date to the habit's completion set, or remove it if present

    Args:
        habit_id: The habit ID
        date: Date in YYYY-MM-DD format (defaults to today)

    Returns:
        The updated habit (completion dates kept sorted)

    Raises:
        HabitNotFoundError: If no habit has that ID
        InvalidHabitDataError: If the date is not a calendar date
        StorageError: If the write fails
    """
    target = date or get_today()
    if parse_date(target) is None:
        raise InvalidHabitDataError(f"Invalid date '{target}'. Use YYYY-MM-DD")

    habit = repository.get_habit_by_id(habit_id)
    if habit is None:
        raise HabitNotFoundError(f"Habit '{habit_id}' not found")

    dates = set(habit.completed_dates)
    if target in dates:
        dates.discard(target)
    else:
        dates.add(target)

    updated = habit.model_copy(update={"completed_dates": sorted(dates)})
    repository.update_habit(updated)
    return updated


def get_habit_by_id(habit_id: str) -> Optional[Habit]:
    return repository.get_habit_by_id(habit_id)


def get_all_habits() -> List[Habit]:
    return repository.get_all_habits()


def get_active_habits() -> List[Habit]:
    return [h for h in repository.get_all_habits() if h.active]


def get_habits_by_category(category: str) -> List[Habit]:
    return [h for h in repository.get_all_habits() if h.category == category]


def get_today_habits() -> List[Habit]:
    """
    Habits due today

    target_days is only used for progress display; every active habit is due.
    """
    return get_active_habits()


def get_streak_for_habit(habit_id: str, today: Optional[str] = None) -> int:
    """Current streak of a habit, 0 for an unknown ID"""
    habit = repository.get_habit_by_id(habit_id)
    if habit is None:
        return 0
    return streaks.current_streak(habit.completed_dates, today)


def get_longest_streak_for_habit(habit_id: str) -> int:
    """Longest streak of a habit, 0 for an unknown ID"""
    habit = repository.get_habit_by_id(habit_id)
    if habit is None:
        return 0
    return streaks.longest_streak(habit.completed_dates)


def get_streak_data_for_habit(habit_id: str, today: Optional[str] = None) -> StreakData:
    """
    Full streak statistics for a habit

    Raises:
        HabitNotFoundError: If no habit has that ID
    """
    habit = repository.get_habit_by_id(habit_id)
    if habit is None:
        raise HabitNotFoundError(f"Habit '{habit_id}' not found")
    return streaks.streak_data(habit.completed_dates, habit.created_at, today)


def get_completed_today(today: Optional[str] = None) -> List[Habit]:
    """Habits whose completion set contains today"""
    target = today or get_today()
    return [h for h in repository.get_all_habits() if target in h.completed_dates]


def get_total_streaks(today: Optional[str] = None) -> int:
    """Sum of current streaks across all habits"""
    return sum(streaks.current_streak(h.completed_dates, today) for h in repository.get_all_habits())


def get_today_summary(today: Optional[str] = None) -> Dict[str, Any]:
    """
    Today's habits with completion status and streak statistics

    Returns:
        Dict with date, totals, completion_rate and per-habit rows
    """
    target = today or get_today()
    habits = get_today_habits()

    rows = []
    for habit in habits:
        data = streaks.streak_data(habit.completed_dates, habit.created_at, target)
        rows.append({
            "habit": habit.model_dump(by_alias=True),
            "completed": target in habit.completed_dates,
            "at_risk": streaks.is_at_risk(habit.completed_dates, target),
            "streak": data.model_dump(by_alias=True),
        })

    completed_count = sum(1 for row in rows if row["completed"])
    completion_rate = (completed_count / len(rows) * 100) if rows else 0

    return {
        "date": target,
        "total_habits": len(rows),
        "completed": completed_count,
        "completion_rate": round(completion_rate, 2),
        "habits": rows,
    }
