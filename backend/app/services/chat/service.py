"""
Coaching chat - LLM replies with a deterministic fallback, plus the stored
conversation history
"""
from typing import Any, Dict, List, Optional
import logging

from app.core import dependencies
from app.core.config import settings
from app.core.constants import CHAT_HISTORY_CONTEXT_SIZE, LLM_MAX_TOKENS, LLM_TEMPERATURE
from app.core.exceptions import ChatMessageNotFoundError, ExternalServiceError
from app.models.chat import ChatMessage, CoachReply, MessageRole
from app.services.analytics import mood as mood_aggregator
from app.services.analytics import predictions
from app.services.habits import repository as habit_repository
from app.services.moods import repository as mood_repository
from app.utils.dates import now_iso, today as get_today
from app.utils.ids import generate_id
from app.utils.prompts import COACH_SYSTEM_PROMPT, format_coaching_context, get_fallback_response
from . import repository

logger = logging.getLogger(__name__)


# ============================================================================
# COACHING REPLIES
# ============================================================================

def gather_coaching_context(today: Optional[str] = None) -> Dict[str, Any]:
    """
    Snapshot habit risks and mood statistics for the LLM

    Returns:
        Dict with date, habits, average_mood and mood_trend
        (empty habits when the stores cannot be read)
    """
    target = today or get_today()
    try:
        assessments = predictions.predict_risks(habit_repository.get_all_habits(), target)
        moods = mood_repository.get_all_moods()
        return {
            "date": target,
            "habits": [
                {
                    "name": a.habit_name,
                    "current_streak": a.current_streak,
                    "completed_today": a.completed_today,
                    "risk_level": a.risk_level,
                }
                for a in assessments
            ],
            "average_mood": mood_aggregator.average_mood_score(moods, 30, target),
            "mood_trend": mood_aggregator.mood_trend(moods, 30, target).value,
        }
    except Exception as e:
        logger.error(f"[CHAT] Error gathering coaching context: {e}")
        return {"date": target, "habits": [], "error": str(e)}


def _request_completion(client: Any, message: str, context: Optional[Dict[str, Any]]) -> Optional[str]:
    """
    Ask the LLM for a coaching reply

    Raises:
        ExternalServiceError: If the OpenAI API call fails
    """
    messages = [{"role": "system", "content": COACH_SYSTEM_PROMPT}]
    if context:
        messages.append({"role": "system", "content": format_coaching_context(context)})
    messages.append({"role": "user", "content": message})

    try:
        response = client.chat.completions.create(
            model=settings.LLM_MODEL,
            messages=messages,
            temperature=LLM_TEMPERATURE,
            max_tokens=LLM_MAX_TOKENS,
        )
    except Exception as e:
        raise ExternalServiceError(f"Failed to get coaching reply from LLM: {e}")

    if not response.choices:
        return None
    content = response.choices[0].message.content
    return content.strip() if content else None


def get_coaching_reply(message: str, context: Optional[Dict[str, Any]] = None) -> CoachReply:
    """
    Reply to a user message as the habit coach

    Uses the OpenAI chat completions API when a key is configured. Without a
    key, on any API failure (quota errors included) or on an empty completion,
    a keyword-matched canned reply is returned instead. Never raises.

    Args:
        message: The user's message
        context: Optional habit/mood context (see gather_coaching_context)

    Returns:
        CoachReply with non-empty text and whether the fallback was used
    """
    try:
        client = dependencies.get_openai_client()
    except Exception as e:
        logger.error(f"[CHAT] Could not create OpenAI client: {e}")
        client = None

    if client is None:
        return CoachReply(message=get_fallback_response(message), fallback=True)

    try:
        content = _request_completion(client, message, context)
    except Exception as e:
        logger.error(f"[CHAT] LLM request failed, using fallback: {e}")
        return CoachReply(message=get_fallback_response(message), fallback=True)

    if not content:
        logger.warning("[CHAT] Empty completion, using fallback")
        return CoachReply(message=get_fallback_response(message), fallback=True)

    return CoachReply(message=content, fallback=False)


def process_user_input(
    user_input: str,
    context: Optional[Dict[str, Any]] = None,
    today: Optional[str] = None
) -> tuple[CoachReply, List[ChatMessage]]:
    """
    Record the user's message, get the coach's reply and record it too

    Args:
        user_input: The user's message
        context: Optional context; gathered from the stores when omitted
        today: Optional injected reference date for context gathering

    Returns:
        Tuple of (reply, recent conversation history)
    """
    add_message(MessageRole.USER.value, user_input)
    reply = get_coaching_reply(user_input, context if context is not None else gather_coaching_context(today))
    add_message(MessageRole.ASSISTANT.value, reply.message)
    return reply, get_conversation_history()


# ============================================================================
# CONVERSATION HISTORY
# ============================================================================

def add_message(role: str, content: str) -> ChatMessage:
    """
    Append a message to the stored conversation

    Returns:
        The stored message
    """
    message = ChatMessage(
        id=generate_id("msg"),
        role=role,
        content=content,
        timestamp=now_iso(),
    )
    messages = repository.get_all_messages()
    messages.append(message)
    repository.save_all_messages(messages)
    return message


def update_message(message_id: str, content: str) -> ChatMessage:
    """
    Replace a message's content and refresh its timestamp

    Raises:
        ChatMessageNotFoundError: If no message has that ID
    """
    messages = repository.get_all_messages()
    for index, message in enumerate(messages):
        if message.id == message_id:
            updated = message.model_copy(update={"content": content, "timestamp": now_iso()})
            messages[index] = updated
            repository.save_all_messages(messages)
            return updated
    raise ChatMessageNotFoundError(f"Message '{message_id}' not found")


def delete_message(message_id: str) -> bool:
    """
    Delete a message

    Returns:
        True if a message was removed, False if no message has that ID
    """
    messages = repository.get_all_messages()
    remaining = [m for m in messages if m.id != message_id]
    if len(remaining) == len(messages):
        return False
    repository.save_all_messages(remaining)
    return True


def clear_messages() -> None:
    repository.save_all_messages([])


def get_last_message() -> Optional[ChatMessage]:
    messages = repository.get_all_messages()
    return messages[-1] if messages else None


def get_messages_by_role(role: str) -> List[ChatMessage]:
    return [m for m in repository.get_all_messages() if m.role == role]


def get_conversation_history(limit: int = CHAT_HISTORY_CONTEXT_SIZE) -> List[ChatMessage]:
    """Most recent messages, oldest first"""
    messages = repository.get_all_messages()
    return messages[-limit:] if limit > 0 else []


def has_unread_assistant_message() -> bool:
    last = get_last_message()
    return last is not None and last.role == MessageRole.ASSISTANT.value
