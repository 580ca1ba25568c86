"""
Chat Routes - Coaching conversation endpoints
"""
import logging
from typing import Optional
from fastapi import APIRouter, HTTPException
from app.core.exceptions import StorageError
from app.models.chat import ChatRequest, ChatResponse
from app.services import chat as chat_service

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/message", response_model=ChatResponse)
async def send_message(request: ChatRequest, today: Optional[str] = None):
    """
    Send a message to the habit coach and return the reply

    The coach always answers: when the LLM is unavailable the reply comes
    from the canned fallback table and `fallback` is true.

    Example:
        ```json
        {"message": "How do I keep my streak going?"}
        ```
    """
    try:
        logger.info(f"[CHAT] Processing message: {request.message[:100]}...")
        reply, history = chat_service.process_user_input(request.message, request.context, today)
        logger.info(f"[CHAT] Response generated (fallback={reply.fallback})")
        return ChatResponse(response=reply.message, fallback=reply.fallback, conversation_history=history)
    except StorageError as e:
        logger.error(f"[CHAT ERROR] Failed to store conversation: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/history")
async def get_history(limit: int = 10):
    """Most recent messages, oldest first"""
    return {"messages": [m.model_dump() for m in chat_service.get_conversation_history(limit)]}


@router.delete("/history")
async def clear_history():
    """Delete the whole conversation"""
    try:
        chat_service.clear_messages()
        return {"status": "success", "message": "Conversation cleared"}
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
