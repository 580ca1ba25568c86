"""
Chat service module - habit coaching replies and conversation history
Exports the main public interface for chat functionality
"""
from .service import (
    gather_coaching_context,
    get_coaching_reply,
    process_user_input,
    add_message,
    update_message,
    delete_message,
    clear_messages,
    get_last_message,
    get_messages_by_role,
    get_conversation_history,
    has_unread_assistant_message
)

__all__ = [
    # Coaching
    'gather_coaching_context',
    'get_coaching_reply',
    'process_user_input',

    # Conversation history
    'add_message',
    'update_message',
    'delete_message',
    'clear_messages',
    'get_last_message',
    'get_messages_by_role',
    'get_conversation_history',
    'has_unread_assistant_message'
]
