"""
Data Routes - Export, import and reset of the stored data
"""
import logging
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse
from app.core import dependencies

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/data", tags=["data"])


@router.get("/export", response_class=PlainTextResponse)
async def export_data():
    """Export every stored key as a JSON document"""
    return dependencies.get_store().export_data()


@router.post("/import")
async def import_data(request: Request):
    """Import a document produced by /data/export (sent as the raw request body)"""
    body = await request.body()
    try:
        payload = body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Import failed: body is not UTF-8 text")

    if not dependencies.get_store().import_data(payload):
        raise HTTPException(status_code=400, detail="Import failed: invalid export document")
    logger.info("[STORAGE] Imported data document")
    return {"status": "success"}


@router.delete("")
async def clear_data():
    """Remove all habits, moods and chat messages"""
    if not dependencies.get_store().clear_all():
        raise HTTPException(status_code=500, detail="Failed to clear stored data")
    return {"status": "success"}
