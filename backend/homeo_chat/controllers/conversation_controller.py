"""
Conversation controller.

Creates conversations and lists conversations and their messages.
"""
import logging
from typing import Optional

from homeo_chat.api.models.conversation import (
    ConversationListResponse,
    CreateConversationResponse,
    MessageListResponse,
)
from homeo_chat.exceptions import StoreNotConfiguredError
from homeo_chat.services.store import ConversationStore

logger = logging.getLogger(__name__)


class ConversationController:
    """Controller for conversation history operations."""

    def __init__(self, store: Optional[ConversationStore], default_title: str):
        self.store = store
        self.default_title = default_title

    def _require_store(self) -> ConversationStore:
        if self.store is None:
            raise StoreNotConfiguredError("Conversation storage is not configured")
        return self.store

    async def create_conversation(self, user_id: str) -> CreateConversationResponse:
        store = self._require_store()
        record = await store.create_conversation(user_id, self.default_title)
        logger.info(f"Created conversation {record.id} for user {user_id}")
        return CreateConversationResponse(conversation_id=record.id)

    async def list_conversations(self, user_id: str) -> ConversationListResponse:
        """Conversations of ``user_id``, newest first."""
        store = self._require_store()
        return ConversationListResponse(conversations=await store.list_conversations(user_id))

    async def list_messages(self, conversation_id: str) -> MessageListResponse:
        """Messages of ``conversation_id``, oldest first."""
        store = self._require_store()
        return MessageListResponse(messages=await store.list_messages(conversation_id))
