"""
Pydantic models for mood entries
"""
from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, List


class MoodType(str, Enum):
    TERRIBLE = "terrible"
    BAD = "bad"
    NEUTRAL = "neutral"
    GOOD = "good"
    EXCELLENT = "excellent"


class MoodTrend(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class MoodEntry(BaseModel):
    """One logged mood; several entries may share a calendar date"""
    id: str
    date: str = Field(..., description="Calendar date (YYYY-MM-DD)")
    time: str = Field(..., description="Full ISO timestamp")
    mood: MoodType
    note: Optional[str] = None
    activities: Optional[List[str]] = None

    model_config = {"use_enum_values": True}


class AddMoodRequest(BaseModel):
    """Request model for logging a mood"""
    mood: MoodType
    note: Optional[str] = Field(None, max_length=1000)
    activities: Optional[List[str]] = None

    model_config = {"use_enum_values": True}


class UpdateMoodRequest(BaseModel):
    """Request model for editing a mood entry (omitted fields are kept)"""
    mood: Optional[MoodType] = None
    note: Optional[str] = Field(None, max_length=1000)
    activities: Optional[List[str]] = None

    model_config = {"use_enum_values": True}


class MoodStats(BaseModel):
    """Aggregated mood statistics for a window"""
    window_days: int
    average_score: float
    trend: MoodTrend
    entry_count: int
    distribution: dict
    best_day: Optional[str] = None

    model_config = {"use_enum_values": True}
