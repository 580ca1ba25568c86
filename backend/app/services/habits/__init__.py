"""
Habits module - Core habit management functionality
"""
from . import repository
from . import service

# Export commonly used functions for convenience
from .service import (
    add_habit,
    update_habit,
    delete_habit,
    toggle_completion,
    get_habit_by_id,
    get_all_habits,
    get_active_habits,
    get_habits_by_category,
    get_today_habits,
    get_streak_for_habit,
    get_longest_streak_for_habit,
    get_streak_data_for_habit,
    get_completed_today,
    get_total_streaks,
    get_today_summary
)

__all__ = [
    # Modules
    'repository',
    'service',

    # Service functions
    'add_habit',
    'update_habit',
    'delete_habit',
    'toggle_completion',
    'get_habit_by_id',
    'get_all_habits',
    'get_active_habits',
    'get_habits_by_category',
    'get_today_habits',
    'get_streak_for_habit',
    'get_longest_streak_for_habit',
    'get_streak_data_for_habit',
    'get_completed_today',
    'get_total_streaks',
    'get_today_summary'
]
