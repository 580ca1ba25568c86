"""
Application constants - storage keys, mood scale, and rule thresholds
"""

# Storage
STORAGE_PREFIX = "habitTracker_"
HABITS_KEY = "habits"
MOODS_KEY = "moods"
CHAT_MESSAGES_KEY = "chat_messages"

# Mood scale (fixed total order)
MOOD_SCORES = {
    "terrible": 1,
    "bad": 2,
    "neutral": 3,
    "good": 4,
    "excellent": 5,
}

# Streak engine
AT_RISK_MIN_STREAK = 3
STREAK_BONUS_PER_DAY = 0.02
STREAK_BONUS_CAP = 0.2

# Mood aggregator
DEFAULT_MOOD_WINDOW_DAYS = 30
MOOD_TREND_MIN_ENTRIES = 3
MOOD_TREND_THRESHOLD = 0.3

# Prediction rule engine
HISTORICAL_WINDOW_DAYS = 30
DEFAULT_CONFIDENCE = 0.9
CONTINUATION_FLOOR = 0.3
CONTINUATION_CEILING = 0.95
CONTINUATION_BONUS = 0.1
RISK_ORDER = {"high": 0, "medium": 1, "low": 2}

# Insights
INSIGHT_STREAK_ACHIEVEMENT_DAYS = 7
INSIGHT_MAX_FOCUSED_HABITS = 7
INSIGHT_MOOD_SAMPLE = 5

# Chat
LLM_MODEL_DEFAULT = "gpt-4o-mini"
LLM_TEMPERATURE = 0.7
LLM_MAX_TOKENS = 500
CHAT_HISTORY_CONTEXT_SIZE = 10
