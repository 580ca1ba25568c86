"""
Insight Models - Derived risk assessments and insight reports
"""
from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, List


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskAssessment(BaseModel):
    """Streak risk assessment for one habit"""
    habit_id: str
    habit_name: str = ""
    current_streak: int = 0
    longest_streak: int = 0
    risk_level: RiskLevel = RiskLevel.LOW
    confidence: float = Field(..., ge=0, le=1)
    continuation_probability: float = Field(..., ge=0, le=1)
    factors: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    completed_today: bool = False
    historical_completion_rate: float = Field(0.0, ge=0, le=1)

    model_config = {"use_enum_values": True}


class InsightPattern(BaseModel):
    type: str = Field(..., description="'positive' or 'negative'")
    title: str
    description: str


class InsightSummary(BaseModel):
    completion_rate: int = Field(..., description="Percent of active habits completed today")
    avg_mood: float
    active_habits: int
    mood_entries: int


class InsightReport(BaseModel):
    """Rule-based insight report over habits and mood history"""
    summary: InsightSummary
    patterns: List[InsightPattern] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    generated_at: str


class InsightRequest(BaseModel):
    time_range: int = Field(30, ge=1, le=365)
    today: Optional[str] = None
