"""
Mood Routes - Endpoints for mood logging and statistics
"""
from typing import Optional
from fastapi import APIRouter, HTTPException
from app.models.mood import AddMoodRequest, UpdateMoodRequest
from app.services.moods import service as mood_service
from app.core.exceptions import (
    InvalidMoodDataError,
    MoodEntryNotFoundError,
    StorageError
)

router = APIRouter(prefix="/moods", tags=["moods"])


@router.get("")
async def list_moods(
    date: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None
):
    """List mood entries, optionally for one date or an inclusive date range"""
    if date:
        entries = mood_service.get_moods_for_date(date)
    elif start_date and end_date:
        entries = mood_service.get_moods_for_date_range(start_date, end_date)
    else:
        entries = mood_service.get_all_moods()
    return {"moods": [e.model_dump() for e in entries]}


@router.post("", status_code=201)
async def add_mood(request: AddMoodRequest):
    """Log a mood for today"""
    try:
        entry = mood_service.add_mood(request.mood, request.note, request.activities)
        return {"status": "success", "mood": entry.model_dump()}
    except InvalidMoodDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/today")
async def get_todays_mood(today: Optional[str] = None):
    """Get the latest mood logged today (null when none)"""
    entry = mood_service.get_todays_mood(today)
    return {"mood": entry.model_dump() if entry else None}


@router.get("/recent")
async def get_recent_moods(days: int = 7, today: Optional[str] = None):
    """Get entries from the last N days in chronological order"""
    return {"moods": [e.model_dump() for e in mood_service.get_recent_moods(days, today)]}


@router.get("/stats")
async def get_mood_stats(days: int = 30, today: Optional[str] = None):
    """Get average score, trend, distribution and best day for the last N days"""
    return mood_service.get_mood_stats(days, today).model_dump()


@router.patch("/{mood_id}")
async def update_mood(mood_id: str, request: UpdateMoodRequest):
    """Edit a mood entry"""
    try:
        entry = mood_service.update_mood(mood_id, request.model_dump(exclude_unset=True))
        return {"status": "success", "mood": entry.model_dump()}
    except MoodEntryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidMoodDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{mood_id}")
async def delete_mood(mood_id: str):
    """Delete a mood entry"""
    try:
        mood_service.delete_mood(mood_id)
        return {"status": "success"}
    except MoodEntryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
