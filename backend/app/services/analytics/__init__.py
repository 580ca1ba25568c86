"""
Analytics module - pure streak, mood and prediction engines
"""
from .streaks import (
    current_streak,
    longest_streak,
    streak_start_date,
    streak_data,
    is_at_risk,
    completion_rate,
    consistency_score
)
from .mood import (
    average_mood_score,
    mood_trend,
    recent_moods,
    todays_mood,
    mood_distribution,
    best_day
)
from .predictions import (
    assess_habit,
    continuation_probability,
    predict_risks,
    streak_alerts
)
from .insights import generate_insights

__all__ = [
    # Streak engine
    'current_streak',
    'longest_streak',
    'streak_start_date',
    'streak_data',
    'is_at_risk',
    'completion_rate',
    'consistency_score',

    # Mood aggregator
    'average_mood_score',
    'mood_trend',
    'recent_moods',
    'todays_mood',
    'mood_distribution',
    'best_day',

    # Rule engine
    'assess_habit',
    'continuation_probability',
    'predict_risks',
    'streak_alerts',
    'generate_insights'
]
