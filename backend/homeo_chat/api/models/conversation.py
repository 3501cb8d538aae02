"""
Request and response models for conversation endpoints.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from homeo_chat.services.store import ConversationRecord, MessageRecord


class CreateConversationRequest(BaseModel):
    """Request model for starting a conversation."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1, description="Owning user identifier")


class CreateConversationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversation_id: str = Field(..., serialization_alias="conversationId")


class ConversationListResponse(BaseModel):
    """Conversations of a user, newest first."""
    conversations: List[ConversationRecord] = Field(default_factory=list)


class MessageListResponse(BaseModel):
    """Messages of a conversation, oldest first."""
    messages: List[MessageRecord] = Field(default_factory=list)
