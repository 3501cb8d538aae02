"""
Request and response models for the chat endpoint.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """One turn of a conversation."""
    role: Literal["system", "user", "assistant"] = Field(..., description="Author of the turn")
    content: str = Field(..., description="Message text")


class ChatRequest(BaseModel):
    """Payload for a chat turn.

    - messages: Conversation so far, oldest first
    - userId: Optional owner of the conversation
    - conversationId: When set, the exchange is recorded in that conversation
    """
    model_config = ConfigDict(populate_by_name=True)

    messages: List[ChatMessage] = Field(..., description="Conversation turns in chronological order")
    user_id: Optional[str] = Field(None, alias="userId", description="User identifier")
    conversation_id: Optional[str] = Field(
        None, alias="conversationId", description="Conversation to record the exchange in"
    )


class ChatResponse(BaseModel):
    """Generated assistant reply."""
    content: str = Field(..., description="Reply text, empty when the model returned nothing")
