"""
Pydantic models for the application
"""
from app.models.habit import (
    Habit,
    HabitCategory,
    AddHabitRequest,
    UpdateHabitRequest,
    ToggleCompletionRequest,
    StreakData
)
from app.models.mood import (
    MoodType,
    MoodTrend,
    MoodEntry,
    AddMoodRequest,
    UpdateMoodRequest,
    MoodStats
)
from app.models.chat import (
    MessageRole,
    ChatMessage,
    ChatRequest,
    CoachReply,
    ChatResponse
)
from app.models.insight import (
    RiskLevel,
    RiskAssessment,
    InsightPattern,
    InsightSummary,
    InsightReport
)

__all__ = [
    "Habit",
    "HabitCategory",
    "AddHabitRequest",
    "UpdateHabitRequest",
    "ToggleCompletionRequest",
    "StreakData",
    "MoodType",
    "MoodTrend",
    "MoodEntry",
    "AddMoodRequest",
    "UpdateMoodRequest",
    "MoodStats",
    "MessageRole",
    "ChatMessage",
    "ChatRequest",
    "CoachReply",
    "ChatResponse",
    "RiskLevel",
    "RiskAssessment",
    "InsightPattern",
    "InsightSummary",
    "InsightReport"
]
