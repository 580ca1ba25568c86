"""
Moods Service - Logging, editing and querying mood entries
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from app.core.constants import DEFAULT_MOOD_WINDOW_DAYS
from app.core.exceptions import InvalidMoodDataError, MoodEntryNotFoundError
from app.models.mood import MoodEntry, MoodStats, MoodTrend, MoodType
from app.services.analytics import mood as aggregator
from app.utils.ids import generate_id
from app.utils.dates import get_now, today as get_today
from . import repository

logger = logging.getLogger(__name__)


def add_mood(
    mood: str,
    note: Optional[str] = None,
    activities: Optional[List[str]] = None,
    now: Optional[datetime] = None
) -> MoodEntry:
    """
    Log a mood for today

    Args:
        mood: One of terrible, bad, neutral, good, excellent
        note: Optional free text
        activities: Optional activity tags
        now: Optional injected current datetime

    Returns:
        The created entry

    Raises:
        InvalidMoodDataError: If the mood is not on the scale
        StorageError: If the write fails
    """
    try:
        mood_type = MoodType(mood)
    except ValueError:
        raise InvalidMoodDataError(f"Unknown mood '{mood}'")

    current = now or get_now()
    entry = MoodEntry(
        id=generate_id("mood"),
        date=get_today(current),
        time=current.isoformat(),
        mood=mood_type,
        note=note,
        activities=activities,
    )
    repository.append_mood(entry)
    logger.info(f"[MOODS] Logged mood '{entry.mood}' for {entry.date}")
    return entry


def update_mood(mood_id: str, updates: Dict[str, Any]) -> MoodEntry:
    """
    Apply edits to a mood entry (id is never changed)

    Raises:
        MoodEntryNotFoundError: If no entry has that ID
        StorageError: If the write fails
    """
    entry = repository.get_mood_by_id(mood_id)
    if entry is None:
        raise MoodEntryNotFoundError(f"Mood entry '{mood_id}' not found")

    changes = {k: v for k, v in updates.items() if k != "id"}
    try:
        updated = MoodEntry.model_validate({**entry.model_dump(), **changes})
    except ValueError as e:
        raise InvalidMoodDataError(f"Invalid mood update: {e}")
    repository.update_mood(updated)
    return updated


def delete_mood(mood_id: str) -> MoodEntry:
    """
    Delete a mood entry

    Raises:
        MoodEntryNotFoundError: If no entry has that ID
    """
    deleted = repository.delete_mood(mood_id)
    if deleted is None:
        raise MoodEntryNotFoundError(f"Mood entry '{mood_id}' not found")
    return deleted


def get_mood_by_id(mood_id: str) -> Optional[MoodEntry]:
    return repository.get_mood_by_id(mood_id)


def get_all_moods() -> List[MoodEntry]:
    return repository.get_all_moods()


def get_todays_mood(today: Optional[str] = None) -> Optional[MoodEntry]:
    return aggregator.todays_mood(repository.get_all_moods(), today)


def get_moods_for_date(date: str) -> List[MoodEntry]:
    return aggregator.moods_for_date(repository.get_all_moods(), date)


def get_moods_for_date_range(start_date: str, end_date: str) -> List[MoodEntry]:
    return aggregator.moods_for_date_range(repository.get_all_moods(), start_date, end_date)


def get_recent_moods(days: int, today: Optional[str] = None) -> List[MoodEntry]:
    return aggregator.recent_moods(repository.get_all_moods(), days, today)


def get_average_mood_score(days: int = DEFAULT_MOOD_WINDOW_DAYS, today: Optional[str] = None) -> float:
    return aggregator.average_mood_score(repository.get_all_moods(), days, today)


def get_mood_trend(days: int, today: Optional[str] = None) -> MoodTrend:
    return aggregator.mood_trend(repository.get_all_moods(), days, today)


def get_mood_distribution() -> Dict[str, int]:
    return aggregator.mood_distribution(repository.get_all_moods())


def get_best_day() -> Optional[str]:
    return aggregator.best_day(repository.get_all_moods())


def get_mood_stats(days: int = DEFAULT_MOOD_WINDOW_DAYS, today: Optional[str] = None) -> MoodStats:
    """
    Window statistics in one pass over a single snapshot of the history

    Returns:
        MoodStats with average, trend, entry count, distribution and best day
    """
    entries = repository.get_all_moods()
    recent = aggregator.recent_moods(entries, days, today)
    return MoodStats(
        window_days=days,
        average_score=aggregator.average_mood_score(entries, days, today),
        trend=aggregator.mood_trend(entries, days, today),
        entry_count=len(recent),
        distribution=aggregator.mood_distribution(recent),
        best_day=aggregator.best_day(recent),
    )
