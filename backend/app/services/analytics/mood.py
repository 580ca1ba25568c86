"""
Mood Aggregator - averages, trend classification and window filtering over
mood entries. Entries are read, never mutated; "today" is injectable.
"""
import math
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from app.core.constants import (
    DEFAULT_MOOD_WINDOW_DAYS,
    MOOD_SCORES,
    MOOD_TREND_MIN_ENTRIES,
    MOOD_TREND_THRESHOLD,
)
from app.models.mood import MoodEntry, MoodTrend
from app.utils.dates import DateLike, format_iso_date, last_n_days, parse_timestamp, resolve_today


def mood_score(entry: MoodEntry) -> int:
    """Numeric score of an entry on the fixed 1..5 scale"""
    mood = entry.mood.value if hasattr(entry.mood, "value") else entry.mood
    return MOOD_SCORES[mood]


def _timestamp_key(entry: MoodEntry) -> datetime:
    moment = parse_timestamp(entry.time)
    if moment is None:
        return datetime.min
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def chronological(entries: Iterable[MoodEntry]) -> List[MoodEntry]:
    """Entries sorted by timestamp; unparseable timestamps sort first, ties keep order"""
    return sorted(entries or (), key=_timestamp_key)


def round_one_decimal(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def _mean(scores: List[int]) -> float:
    return sum(scores) / len(scores)


def recent_moods(entries: Iterable[MoodEntry], window_days: int, today: DateLike = None) -> List[MoodEntry]:
    """
    Entries dated within the last `window_days` days, in chronological order

    Args:
        entries: Mood entries in any order
        window_days: Window length in days (today included)
        today: Optional injected reference date

    Returns:
        Windowed entries sorted by timestamp
    """
    window = set(last_n_days(window_days, today))
    return chronological(entry for entry in entries or () if entry.date in window)


def average_mood_score(
    entries: Iterable[MoodEntry],
    window_days: int = DEFAULT_MOOD_WINDOW_DAYS,
    today: DateLike = None
) -> float:
    """
    Mean score of the windowed entries, rounded to one decimal

    Returns:
        Average score, or 0 when the window holds no entries
    """
    recent = recent_moods(entries, window_days, today)
    if not recent:
        return 0
    return round_one_decimal(_mean([mood_score(entry) for entry in recent]))


def mood_trend(entries: Iterable[MoodEntry], window_days: int, today: DateLike = None) -> MoodTrend:
    """
    Compare the first and second halves of the windowed entries

    Needs at least 3 entries; the first half holds floor(n/2) entries and the
    second half the remainder. A difference beyond 0.3 in the half means is
    improving/declining.

    Returns:
        MoodTrend.IMPROVING, MoodTrend.DECLINING or MoodTrend.STABLE
    """
    recent = recent_moods(entries, window_days, today)
    if len(recent) < MOOD_TREND_MIN_ENTRIES:
        return MoodTrend.STABLE

    split = len(recent) // 2
    first_mean = _mean([mood_score(entry) for entry in recent[:split]])
    second_mean = _mean([mood_score(entry) for entry in recent[split:]])

    if second_mean > first_mean + MOOD_TREND_THRESHOLD:
        return MoodTrend.IMPROVING
    if second_mean < first_mean - MOOD_TREND_THRESHOLD:
        return MoodTrend.DECLINING
    return MoodTrend.STABLE


def moods_for_date(entries: Iterable[MoodEntry], target_date: str) -> List[MoodEntry]:
    return [entry for entry in entries or () if entry.date == target_date]


def moods_for_date_range(entries: Iterable[MoodEntry], start_date: str, end_date: str) -> List[MoodEntry]:
    """Entries with start_date <= date <= end_date (inclusive, string order)"""
    return [entry for entry in entries or () if start_date <= entry.date <= end_date]


def todays_mood(entries: Iterable[MoodEntry], today: DateLike = None) -> Optional[MoodEntry]:
    """
    The mood for today: the chronologically last entry dated today

    Returns:
        MoodEntry, or None when nothing was logged today
    """
    todays = chronological(moods_for_date(entries, format_iso_date(resolve_today(today))))
    return todays[-1] if todays else None


def mood_distribution(entries: Iterable[MoodEntry]) -> Dict[str, int]:
    """Number of entries per mood category (every category present)"""
    distribution = {mood: 0 for mood in MOOD_SCORES}
    for entry in entries or ():
        mood = entry.mood.value if hasattr(entry.mood, "value") else entry.mood
        distribution[mood] += 1
    return distribution


def best_day(entries: Iterable[MoodEntry]) -> Optional[str]:
    """Date with the highest average mood; the earliest seen wins ties"""
    totals: Dict[str, List[int]] = {}
    for entry in entries or ():
        totals.setdefault(entry.date, []).append(mood_score(entry))

    best_date = None
    best_avg = 0.0
    for day, scores in totals.items():
        avg = _mean(scores)
        if avg > best_avg:
            best_avg = avg
            best_date = day
    return best_date
