"""
Insight Routes - Streak predictions, alerts and insight reports
"""
from typing import Optional
from fastapi import APIRouter
from app.models.insight import InsightRequest
from app.services.analytics import predictions
from app.services.analytics.insights import generate_insights
from app.services.habits import repository as habit_repository
from app.services.moods import repository as mood_repository

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get("/predict")
async def predict_streaks(today: Optional[str] = None):
    """Ranked risk assessments for every active habit (high risk first)"""
    habits = habit_repository.get_all_habits()
    return {"predictions": [a.model_dump() for a in predictions.predict_risks(habits, today)]}


@router.get("/alerts")
async def get_streak_alerts(today: Optional[str] = None):
    """Medium and high risk streaks only, for an alert banner"""
    habits = habit_repository.get_all_habits()
    return {"alerts": [a.model_dump() for a in predictions.streak_alerts(habits, today)]}


@router.get("/report")
async def get_insight_report(time_range: int = 30, today: Optional[str] = None):
    """Rule-based patterns, achievements and suggestions"""
    report = generate_insights(
        habit_repository.get_all_habits(),
        mood_repository.get_all_moods(),
        time_range=time_range,
        today=today
    )
    return report.model_dump()


@router.post("/report")
async def post_insight_report(request: InsightRequest):
    """Same report as GET /insights/report with the window given in the body"""
    report = generate_insights(
        habit_repository.get_all_habits(),
        mood_repository.get_all_moods(),
        time_range=request.time_range,
        today=request.today
    )
    return report.model_dump()
