"""
Insight generation - rule-based patterns, achievements and suggestions over
habits and mood history for a recent time range
"""
from datetime import timedelta
from typing import Iterable, List, Optional

from app.core.constants import (
    INSIGHT_MAX_FOCUSED_HABITS,
    INSIGHT_MOOD_SAMPLE,
    INSIGHT_STREAK_ACHIEVEMENT_DAYS,
)
from app.models.habit import Habit
from app.models.insight import InsightPattern, InsightReport, InsightSummary
from app.models.mood import MoodEntry
from app.utils.dates import DateLike, format_iso_date, now_iso, resolve_today
from .mood import chronological, mood_score, round_one_decimal


def _completion_patterns(completion_rate: float, active_count: int):
    patterns: List[InsightPattern] = []
    achievements: List[str] = []
    suggestions: List[str] = []

    if completion_rate == 1 and active_count > 0:
        patterns.append(InsightPattern(
            type="positive",
            title="Perfect Day!",
            description="You completed all your habits today!",
        ))
        achievements.append("Perfect completion day")
    elif completion_rate >= 0.75:
        patterns.append(InsightPattern(
            type="positive",
            title="Great Progress",
            description=f"You completed {int(completion_rate * 100 + 0.5)}% of habits today.",
        ))
    elif completion_rate < 0.5 and active_count > 0:
        patterns.append(InsightPattern(
            type="negative",
            title="Room for Improvement",
            description="Try focusing on just one or two key habits today.",
        ))
        suggestions.append("Start with just one habit to build momentum")

    return patterns, achievements, suggestions


def _mood_patterns(recent_moods: List[MoodEntry]):
    patterns: List[InsightPattern] = []
    suggestions: List[str] = []

    if len(recent_moods) < INSIGHT_MOOD_SAMPLE:
        return patterns, suggestions

    scores = [mood_score(entry) for entry in recent_moods[-INSIGHT_MOOD_SAMPLE:]]
    trend = scores[-1] - scores[0]

    if trend > 0.5:
        patterns.append(InsightPattern(
            type="positive",
            title="Improving Mood",
            description="Your mood has been trending upward recently!",
        ))
    elif trend < -0.5:
        patterns.append(InsightPattern(
            type="negative",
            title="Mood Awareness",
            description="Your mood has been trending down. Consider self-care activities.",
        ))
        suggestions.append("Take time for yourself - a break can help reset your mood")

    return patterns, suggestions


def generate_insights(
    habits: Iterable[Habit],
    mood_history: Iterable[MoodEntry],
    time_range: int = 30,
    today: DateLike = None,
    generated_at: Optional[str] = None
) -> InsightReport:
    """
    Build the insight report for the last `time_range` days

    Args:
        habits: Habit snapshot
        mood_history: Mood entry snapshot
        time_range: Look-back window in days
        today: Optional injected reference date
        generated_at: Optional injected report timestamp

    Returns:
        InsightReport with summary, patterns, achievements and suggestions
    """
    reference = resolve_today(today)
    today_str = format_iso_date(reference)
    since = format_iso_date(reference - timedelta(days=time_range))

    habits = list(habits or ())
    active_habits = [h for h in habits if h.active]
    recent_moods = chronological(m for m in mood_history or () if since <= m.date <= today_str)

    completed_today = sum(1 for h in active_habits if today_str in h.completed_dates)
    completion_rate = completed_today / len(active_habits) if active_habits else 0
    avg_mood = (
        sum(mood_score(m) for m in recent_moods) / len(recent_moods) if recent_moods else 0
    )

    patterns, achievements, suggestions = _completion_patterns(completion_rate, len(active_habits))

    streak_habits = [
        h for h in active_habits
        if sum(1 for d in h.completed_dates if d >= since) >= INSIGHT_STREAK_ACHIEVEMENT_DAYS
    ]
    if streak_habits:
        achievements.append(
            f"Maintained {INSIGHT_STREAK_ACHIEVEMENT_DAYS}+ day streak on {len(streak_habits)} habit(s)"
        )

    mood_patterns, mood_suggestions = _mood_patterns(recent_moods)
    patterns.extend(mood_patterns)
    suggestions.extend(mood_suggestions)

    if not active_habits:
        suggestions.append("Start by adding one simple habit to track")
    elif len(active_habits) > INSIGHT_MAX_FOCUSED_HABITS:
        suggestions.append("You have many habits - consider consolidating to maintain focus")

    if len(recent_moods) < 3:
        suggestions.append("Track your mood regularly to discover patterns")

    return InsightReport(
        summary=InsightSummary(
            completion_rate=int(completion_rate * 100 + 0.5),  # round half up
            avg_mood=round_one_decimal(avg_mood),
            active_habits=len(active_habits),
            mood_entries=len(recent_moods),
        ),
        patterns=patterns,
        achievements=achievements,
        suggestions=suggestions,
        generated_at=generated_at or now_iso(),
    )
