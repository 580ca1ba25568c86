"""
Chat Models - Request/Response schemas for chat endpoints
"""
from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ChatMessage(BaseModel):
    """Single stored message in the coaching conversation"""
    id: str
    role: MessageRole = Field(..., description="Message role: 'user', 'assistant', or 'system'")
    content: str = Field(..., description="Message content")
    timestamp: str

    model_config = {"use_enum_values": True}


class ChatRequest(BaseModel):
    """Request to process a chat message"""
    message: str = Field(..., min_length=1, description="User message to process")
    context: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Optional habit/mood context; gathered from the stores when omitted"
    )


class CoachReply(BaseModel):
    """Reply from the coaching collaborator"""
    message: str = Field(..., min_length=1)
    fallback: bool = Field(default=False, description="True when canned text was used")


class ChatResponse(BaseModel):
    """Response from chat processing"""
    response: str = Field(..., description="Assistant's response text")
    fallback: bool = False
    conversation_history: List[ChatMessage] = Field(
        ...,
        description="Most recent messages including the new exchange"
    )
