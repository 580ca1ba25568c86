"""
Prediction Rule Engine - ranked streak risk assessments for active habits

Each habit is run through an ordered threshold table over its current
streak and today's/yesterday's completion flags. Completion today always
wins: it is checked last and overwrites whatever an earlier rule set.
"""
import logging
from typing import Iterable, List

from app.core.constants import (
    CONTINUATION_BONUS,
    CONTINUATION_CEILING,
    CONTINUATION_FLOOR,
    DEFAULT_CONFIDENCE,
    HISTORICAL_WINDOW_DAYS,
    RISK_ORDER,
)
from app.models.habit import Habit
from app.models.insight import RiskAssessment, RiskLevel
from app.utils.dates import DateLike, format_iso_date, previous_day, resolve_today
from .streaks import completion_rate, current_streak, longest_streak

logger = logging.getLogger(__name__)


def continuation_probability(historical_rate: float, streak: int, completed_today: bool) -> float:
    """
    Heuristic likelihood that the habit keeps being completed

    min(0.95, max(0.3, historicalRate + 0.1 if streak > 0 + 0.1 if completed today))
    """
    bonus = 0.0
    if streak > 0:
        bonus += CONTINUATION_BONUS
    if completed_today:
        bonus += CONTINUATION_BONUS
    return min(CONTINUATION_CEILING, max(CONTINUATION_FLOOR, historical_rate + bonus))


def _apply_streak_rules(streak: int, completed_today: bool, completed_yesterday: bool) -> tuple:
    """
    Ordered risk table; returns (risk_level, confidence, factors, suggestions)
    """
    risk_level = RiskLevel.LOW
    confidence = DEFAULT_CONFIDENCE
    factors: List[str] = []
    suggestions: List[str] = []

    if streak >= 14 and not completed_today and completed_yesterday:
        risk_level = RiskLevel.HIGH
        confidence = 0.95
        factors = [f"You have a {streak}-day streak at risk"]
        suggestions = ["Complete this habit today to save your streak!"]
    elif streak >= 30 and not completed_today:
        risk_level = RiskLevel.HIGH
        confidence = 0.9
        factors = [f"You have a {streak}-day milestone streak"]
        suggestions = ["You've built something special - protect it!"]
    elif streak >= 7 and not completed_today and completed_yesterday:
        risk_level = RiskLevel.MEDIUM
        confidence = 0.85
        factors = [f"Your {streak}-day streak needs attention"]
        suggestions = ["Get back on track today"]
    elif streak >= 5 and not completed_today:
        risk_level = RiskLevel.MEDIUM
        confidence = 0.8
        factors = [f"Your {streak}-day streak is growing"]
        suggestions = ["Keep the momentum going!"]

    if completed_today:
        risk_level = RiskLevel.LOW
        confidence = DEFAULT_CONFIDENCE
        factors = ["Completed today!"]
        suggestions = ["You're on fire!"]

    return risk_level, confidence, factors, suggestions


def assess_habit(habit: Habit, today: DateLike = None) -> RiskAssessment:
    """
    Build the risk assessment for a single habit

    Args:
        habit: Habit snapshot
        today: Optional injected reference date

    Returns:
        RiskAssessment with risk level, confidence, continuation probability,
        factors and suggestions
    """
    reference = format_iso_date(resolve_today(today))
    dates = set(habit.completed_dates)
    completed_today = reference in dates
    completed_yesterday = previous_day(reference) in dates

    streak = current_streak(dates, reference)
    risk_level, confidence, factors, suggestions = _apply_streak_rules(
        streak, completed_today, completed_yesterday
    )
    historical_rate = completion_rate(dates, HISTORICAL_WINDOW_DAYS, reference)

    return RiskAssessment(
        habit_id=habit.id,
        habit_name=habit.name,
        current_streak=streak,
        longest_streak=longest_streak(dates),
        risk_level=risk_level,
        confidence=confidence,
        continuation_probability=continuation_probability(historical_rate, streak, completed_today),
        factors=factors,
        suggestions=suggestions,
        completed_today=completed_today,
        historical_completion_rate=historical_rate,
    )


def _severity(assessment: RiskAssessment) -> int:
    level = assessment.risk_level.value if hasattr(assessment.risk_level, "value") else assessment.risk_level
    return RISK_ORDER[level]


def predict_risks(habits: Iterable[Habit], today: DateLike = None) -> List[RiskAssessment]:
    """
    Assess every active habit and rank high < medium < low

    The sort is stable, so habits with the same risk keep their input order.

    Returns:
        Ranked list of RiskAssessment (empty when there are no active habits)
    """
    assessments = [assess_habit(habit, today) for habit in habits or () if habit.active]
    ranked = sorted(assessments, key=_severity)
    logger.debug(f"[PREDICT] Assessed {len(ranked)} active habit(s)")
    return ranked


def streak_alerts(habits: Iterable[Habit], today: DateLike = None) -> List[RiskAssessment]:
    """Alert-banner variant of predict_risks: only medium and high risks"""
    return [a for a in predict_risks(habits, today) if _severity(a) < RISK_ORDER["low"]]
