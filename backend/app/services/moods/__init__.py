"""
Moods module - Mood logging and aggregation over the stored history
"""
from . import repository
from . import service

from .service import (
    add_mood,
    update_mood,
    delete_mood,
    get_mood_by_id,
    get_all_moods,
    get_todays_mood,
    get_moods_for_date,
    get_moods_for_date_range,
    get_recent_moods,
    get_average_mood_score,
    get_mood_trend,
    get_mood_distribution,
    get_best_day,
    get_mood_stats
)

__all__ = [
    'repository',
    'service',
    'add_mood',
    'update_mood',
    'delete_mood',
    'get_mood_by_id',
    'get_all_moods',
    'get_todays_mood',
    'get_moods_for_date',
    'get_moods_for_date_range',
    'get_recent_moods',
    'get_average_mood_score',
    'get_mood_trend',
    'get_mood_distribution',
    'get_best_day',
    'get_mood_stats'
]
