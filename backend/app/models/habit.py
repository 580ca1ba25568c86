"""
Pydantic models for habits
"""
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List


class HabitCategory(str, Enum):
    HEALTH = "health"
    PRODUCTIVITY = "productivity"
    MINDFULNESS = "mindfulness"
    SOCIAL = "social"
    OTHER = "other"


def _validate_calendar_date(v: str) -> str:
    try:
        datetime.strptime(v, "%Y-%m-%d")
        return v
    except ValueError:
        raise ValueError(f"Invalid date '{v}'. Use YYYY-MM-DD")


class Habit(BaseModel):
    """A tracked habit and the set of calendar dates it was completed on"""
    id: str = Field(..., description="Opaque unique id")
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    category: Optional[HabitCategory] = None
    created_at: str = Field(..., alias="createdAt", description="Creation date (YYYY-MM-DD or ISO timestamp)")
    target_days: Optional[int] = Field(None, alias="targetDays", ge=1, le=7)
    completed_dates: List[str] = Field(default_factory=list, alias="completedDates")
    active: bool = True

    model_config = {"populate_by_name": True, "use_enum_values": True}

    @field_validator("completed_dates")
    @classmethod
    def dedupe_completed_dates(cls, v: List[str]) -> List[str]:
        """Completion dates form a set; stored sorted"""
        return sorted(set(v))


class AddHabitRequest(BaseModel):
    """Request model for adding a new habit"""
    name: str = Field(..., min_length=1, max_length=200, description="Habit name")
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    category: Optional[HabitCategory] = None
    target_days: Optional[int] = Field(None, alias="targetDays", ge=1, le=7)
    active: bool = True

    model_config = {"populate_by_name": True, "use_enum_values": True}


class UpdateHabitRequest(BaseModel):
    """Request model for editing habit fields (omitted fields are kept)"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    category: Optional[HabitCategory] = None
    target_days: Optional[int] = Field(None, alias="targetDays", ge=1, le=7)
    active: Optional[bool] = None

    model_config = {"populate_by_name": True, "use_enum_values": True}


class ToggleCompletionRequest(BaseModel):
    """Request model for toggling one completion date"""
    date: Optional[str] = Field(None, description="Date in YYYY-MM-DD format (defaults to today)")

    @field_validator("date")
    @classmethod
    def validate_date_format(cls, v: Optional[str]) -> Optional[str]:
        """Validate date format is YYYY-MM-DD if provided"""
        if v is None:
            return v
        return _validate_calendar_date(v)


class StreakData(BaseModel):
    """Derived streak statistics for one habit (never persisted)"""
    current_streak: int = Field(..., alias="currentStreak", ge=0)
    longest_streak: int = Field(..., alias="longestStreak", ge=0)
    streak_start_date: Optional[str] = Field(None, alias="streakStartDate")
    consistency_score: Optional[int] = Field(None, alias="consistencyScore", ge=0, le=100)

    model_config = {"populate_by_name": True}
