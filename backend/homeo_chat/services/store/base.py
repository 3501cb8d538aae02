"""
Conversation store interface and record models.
"""
from datetime import datetime
from typing import List, Literal, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant"]


class StoreRecord(BaseModel):
    # Hosted Postgres may hand back integer or UUID primary keys
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")


class ConversationRecord(StoreRecord):
    """A conversation owned by a user."""
    id: str = Field(..., description="Conversation identifier")
    user_id: str = Field(..., description="Owning user identifier")
    title: Optional[str] = Field(None, description="Conversation title")
    created_at: datetime = Field(..., description="Creation timestamp")


class MessageRecord(StoreRecord):
    """A single persisted turn of a conversation."""
    id: str = Field(..., description="Message identifier")
    conversation_id: str = Field(..., description="Conversation the message belongs to")
    role: Role = Field(..., description="Author of the turn")
    content: str = Field(..., description="Message text")
    created_at: datetime = Field(..., description="Creation timestamp")


class UserRecord(StoreRecord):
    """A locally registered account."""
    id: str = Field(..., description="User identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email address")
    password_hash: str = Field(..., description="bcrypt hash of the password")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")


class ConversationStore(Protocol):
    """
    Persistence operations the API needs.

    Conversations are listed newest-first, messages oldest-first.
    Implementations raise :class:`~homeo_chat.exceptions.StoreError`
    when the backend call fails.
    """

    name: str

    async def ping(self) -> None:
        ...

    async def create_conversation(self, user_id: str, title: str) -> ConversationRecord:
        ...

    async def list_conversations(self, user_id: str) -> List[ConversationRecord]:
        ...

    async def append_message(self, conversation_id: str, role: Role, content: str) -> MessageRecord:
        ...

    async def list_messages(self, conversation_id: str) -> List[MessageRecord]:
        ...

    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    async def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        ...
