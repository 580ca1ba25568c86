"""
Habit Routes - Endpoints for habit management
"""
from typing import Optional
from fastapi import APIRouter, HTTPException
from app.models.habit import (
    AddHabitRequest,
    UpdateHabitRequest,
    ToggleCompletionRequest
)
from app.services.habits import service as habit_service
from app.core.exceptions import (
    HabitNotFoundError,
    InvalidHabitDataError,
    StorageError
)

router = APIRouter(prefix="/habits", tags=["habits"])


@router.get("")
async def list_habits(active: Optional[bool] = None, category: Optional[str] = None):
    """List habits, optionally filtered by active flag or category"""
    habits = habit_service.get_habits_by_category(category) if category else habit_service.get_all_habits()
    if active is not None:
        habits = [h for h in habits if h.active == active]
    return {"habits": [h.model_dump(by_alias=True) for h in habits]}


@router.post("", status_code=201)
async def add_habit(request: AddHabitRequest, today: Optional[str] = None):
    """Add a new habit"""
    try:
        habit = habit_service.add_habit(
            name=request.name,
            description=request.description,
            icon=request.icon,
            color=request.color,
            category=request.category,
            target_days=request.target_days,
            active=request.active,
            today=today
        )
        return {"status": "success", "habit": habit.model_dump(by_alias=True)}
    except InvalidHabitDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/today")
async def get_today_habits(today: Optional[str] = None):
    """Get active habits with today's completion status and streaks"""
    return habit_service.get_today_summary(today)


@router.get("/{habit_id}")
async def get_habit(habit_id: str):
    """Get a single habit"""
    habit = habit_service.get_habit_by_id(habit_id)
    if habit is None:
        raise HTTPException(status_code=404, detail=f"Habit '{habit_id}' not found")
    return habit.model_dump(by_alias=True)


@router.patch("/{habit_id}")
async def update_habit(habit_id: str, request: UpdateHabitRequest):
    """Edit habit fields"""
    try:
        habit = habit_service.update_habit(habit_id, request.model_dump(exclude_unset=True))
        return {"status": "success", "habit": habit.model_dump(by_alias=True)}
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidHabitDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{habit_id}")
async def delete_habit(habit_id: str):
    """Delete a habit"""
    try:
        habit = habit_service.delete_habit(habit_id)
        return {"status": "success", "message": f"Habit '{habit.name}' removed successfully"}
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{habit_id}/toggle")
async def toggle_completion(habit_id: str, request: ToggleCompletionRequest):
    """Mark or unmark a habit as completed on a date (default today)"""
    try:
        habit = habit_service.toggle_completion(habit_id, request.date)
        return {"status": "success", "habit": habit.model_dump(by_alias=True)}
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidHabitDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{habit_id}/streak")
async def get_habit_streak(habit_id: str, today: Optional[str] = None):
    """Get streak statistics for a habit"""
    try:
        return habit_service.get_streak_data_for_habit(habit_id, today).model_dump(by_alias=True)
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
