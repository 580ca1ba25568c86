"""
Streak Engine - current/longest streaks, at-risk flag, completion rate and
consistency score computed from a habit's completion-date set.

All functions are pure: they read the supplied dates and an injected
"today" (None means the real clock) and never mutate their input.
Unparseable dates in the set are ignored.
"""
from datetime import date, timedelta
from typing import Iterable, Optional, Set

from app.core.constants import AT_RISK_MIN_STREAK, STREAK_BONUS_CAP, STREAK_BONUS_PER_DAY
from app.models.habit import StreakData
from app.utils.dates import (
    DateLike,
    day_difference,
    format_iso_date,
    last_n_days,
    parse_date,
    resolve_today,
)

ONE_DAY = timedelta(days=1)


def _completion_days(dates: Iterable[str]) -> Set[date]:
    days = set()
    for value in dates or ():
        parsed = parse_date(value)
        if parsed is not None:
            days.add(parsed)
    return days


def _streak_anchor(days: Set[date], today: date) -> Optional[date]:
    """Day the current streak is counted back from: today, else yesterday"""
    if today in days:
        return today
    if today - ONE_DAY in days:
        return today - ONE_DAY
    return None


def _walk_back(days: Set[date], anchor: date) -> int:
    streak = 0
    cursor = anchor
    while cursor in days:
        streak += 1
        cursor -= ONE_DAY
    return streak


def current_streak(dates: Iterable[str], today: DateLike = None) -> int:
    """
    Count consecutive completed days ending today, or ending yesterday when
    today is not completed yet. Dates after today never start a streak.

    Args:
        dates: Completion dates (YYYY-MM-DD)
        today: Optional injected reference date

    Returns:
        Current streak length (0 when neither today nor yesterday is completed)
    """
    days = _completion_days(dates)
    anchor = _streak_anchor(days, resolve_today(today))
    if anchor is None:
        return 0
    return _walk_back(days, anchor)


def longest_streak(dates: Iterable[str]) -> int:
    """
    Longest run of consecutive days anywhere in the completion set

    Returns:
        0 for an empty set, otherwise at least 1
    """
    longest = 0
    run = 0
    previous: Optional[date] = None
    for day in sorted(_completion_days(dates)):
        if previous is not None and day - previous == ONE_DAY:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day
    return longest


def streak_start_date(dates: Iterable[str], today: DateLike = None) -> Optional[str]:
    """First day of the current streak run, or None when there is no streak"""
    days = _completion_days(dates)
    anchor = _streak_anchor(days, resolve_today(today))
    if anchor is None:
        return None
    streak = _walk_back(days, anchor)
    return format_iso_date(anchor - timedelta(days=streak - 1))


def is_at_risk(dates: Iterable[str], today: DateLike = None) -> bool:
    """
    A streak is at risk when it is longer than 3 days, today is not completed
    yet and yesterday was (one day from breaking, not broken).
    """
    days = _completion_days(dates)
    reference = resolve_today(today)
    if reference in days or reference - ONE_DAY not in days:
        return False
    return _walk_back(days, reference - ONE_DAY) > AT_RISK_MIN_STREAK


def completion_rate(dates: Iterable[str], window_days: int, today: DateLike = None) -> float:
    """
    Fraction of the last `window_days` days (today included) that were completed

    Returns:
        Value in [0, 1]; 0 for an empty set or a non-positive window
    """
    if window_days <= 0:
        return 0.0
    completed = set(dates or ())
    if not completed:
        return 0.0
    hits = sum(1 for day in last_n_days(window_days, today) if day in completed)
    return hits / window_days


def consistency_score(dates: Iterable[str], created_at: DateLike, today: DateLike = None) -> int:
    """
    Blend of lifetime completion rate and a small current-streak bonus

    completionRate = completions / max(1, days since creation)
    streakBonus = min(currentStreak * 0.02, 0.2)

    Returns:
        Integer score in [0, 100]; 0 for an empty completion set
    """
    completed = {value for value in dates or () if parse_date(value) is not None}
    if not completed:
        return 0

    reference = resolve_today(today)
    days_since_creation = max(1, day_difference(reference, created_at))
    rate = len(completed) / days_since_creation
    bonus = min(current_streak(completed, reference) * STREAK_BONUS_PER_DAY, STREAK_BONUS_CAP)

    # round half up
    score = int((rate + bonus) * 100 + 0.5)
    return max(0, min(100, score))


def streak_data(dates: Iterable[str], created_at: DateLike = None, today: DateLike = None) -> StreakData:
    """
    Streak statistics for one habit

    Args:
        dates: Completion dates
        created_at: Habit creation date; enables the consistency score
        today: Optional injected reference date

    Returns:
        StreakData with current/longest streak, start date and consistency score
    """
    dates = list(dates or ())
    current = current_streak(dates, today)
    return StreakData(
        current_streak=current,
        longest_streak=longest_streak(dates),
        streak_start_date=streak_start_date(dates, today) if current else None,
        consistency_score=consistency_score(dates, created_at, today) if created_at is not None else None,
    )
