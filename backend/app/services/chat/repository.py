"""
Chat Repository - Storage access for the coaching conversation
"""
from typing import List
import logging

from app.core import dependencies
from app.core.constants import CHAT_MESSAGES_KEY
from app.core.exceptions import StorageError
from app.models.chat import ChatMessage

logger = logging.getLogger(__name__)


def get_all_messages() -> List[ChatMessage]:
    raw = dependencies.get_store().get_item(CHAT_MESSAGES_KEY) or []
    if not isinstance(raw, list):
        logger.warning("[STORAGE] Ignoring stored chat messages: expected a list")
        return []
    messages = []
    for record in raw:
        try:
            messages.append(ChatMessage.model_validate(record))
        except ValueError as e:
            logger.warning(f"[STORAGE] Skipping malformed chat record: {e}")
    return messages


def save_all_messages(messages: List[ChatMessage]) -> None:
    """
    Replace the stored conversation

    Raises:
        StorageError: If the store reports a failed write
    """
    records = [message.model_dump(mode="json") for message in messages]
    if not dependencies.get_store().set_item(CHAT_MESSAGES_KEY, records):
        raise StorageError("Failed to save chat messages")
