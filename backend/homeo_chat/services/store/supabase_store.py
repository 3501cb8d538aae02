"""
Supabase-backed conversation store.

Tables:
    conversations (id, user_id, title, created_at)
    messages      (id, conversation_id, role, content, created_at)
    users         (id, name, email unique, password_hash, created_at)

The Supabase Python client is blocking, so every call is pushed to the
threadpool to keep the event loop free.
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

import httpx
from postgrest import APIError as PostgrestError
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from supabase import Client

from homeo_chat.exceptions import DuplicateUserError, StoreError
from homeo_chat.services.store.base import (
    ConversationRecord,
    MessageRecord,
    Role,
    StoreRecord,
    UserRecord,
)

logger = logging.getLogger(__name__)

CONVERSATIONS_TABLE = "conversations"
MESSAGES_TABLE = "messages"
USERS_TABLE = "users"

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

RecordT = TypeVar("RecordT", bound=StoreRecord)


class SupabaseConversationStore:
    """Implementation of :class:`ConversationStore` on top of Supabase tables."""

    name = "supabase"

    def __init__(self, client: Client):
        self.client = client

    async def _execute(self, operation: str, build: Callable[[], Any]) -> List[Dict[str, Any]]:
        """
        Run a PostgREST query in the threadpool and return its rows.

        Raises:
            StoreError: If the request fails
        """
        try:
            response = await run_in_threadpool(lambda: build().execute())
        except PostgrestError as e:
            logger.error(f"Supabase {operation} failed: {e.message} (code={e.code})")
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateUserError(e.message or "Duplicate record") from e
            raise StoreError(f"{operation} failed: {e.message}") from e
        except httpx.HTTPError as e:
            logger.error(f"Supabase {operation} failed: {type(e).__name__}")
            raise StoreError(f"{operation} failed: {type(e).__name__}") from e
        return response.data or []

    @staticmethod
    def _records(model: Type[RecordT], rows: List[Dict[str, Any]], operation: str) -> List[RecordT]:
        """
        Parse rows into record models.

        Raises:
            StoreError: If a row does not match the expected columns
        """
        try:
            return [model(**row) for row in rows]
        except ValidationError as e:
            logger.error(f"Supabase {operation} returned malformed rows: {e.error_count()} errors")
            raise StoreError(f"{operation} returned malformed rows") from e

    @classmethod
    def _single(cls, model: Type[RecordT], rows: List[Dict[str, Any]], operation: str) -> RecordT:
        if not rows:
            raise StoreError(f"{operation} returned no rows")
        return cls._records(model, rows[:1], operation)[0]

    async def ping(self) -> None:
        await self._execute(
            "ping",
            lambda: self.client.table(CONVERSATIONS_TABLE).select("id").limit(1),
        )

    async def create_conversation(self, user_id: str, title: str) -> ConversationRecord:
        rows = await self._execute(
            "create_conversation",
            lambda: self.client.table(CONVERSATIONS_TABLE).insert(
                {"user_id": user_id, "title": title}
            ),
        )
        return self._single(ConversationRecord, rows, "create_conversation")

    async def list_conversations(self, user_id: str) -> List[ConversationRecord]:
        rows = await self._execute(
            "list_conversations",
            lambda: self.client.table(CONVERSATIONS_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True),
        )
        return self._records(ConversationRecord, rows, "list_conversations")

    async def append_message(self, conversation_id: str, role: Role, content: str) -> MessageRecord:
        rows = await self._execute(
            "append_message",
            lambda: self.client.table(MESSAGES_TABLE).insert(
                {"conversation_id": conversation_id, "role": role, "content": content}
            ),
        )
        return self._single(MessageRecord, rows, "append_message")

    async def list_messages(self, conversation_id: str) -> List[MessageRecord]:
        rows = await self._execute(
            "list_messages",
            lambda: self.client.table(MESSAGES_TABLE)
            .select("*")
            .eq("conversation_id", conversation_id)
            .order("created_at", desc=False),
        )
        return self._records(MessageRecord, rows, "list_messages")

    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        rows = await self._execute(
            "find_user_by_email",
            lambda: self.client.table(USERS_TABLE).select("*").eq("email", email).limit(1),
        )
        return self._single(UserRecord, rows, "find_user_by_email") if rows else None

    async def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        rows = await self._execute(
            "create_user",
            lambda: self.client.table(USERS_TABLE).insert(
                {"name": name, "email": email, "password_hash": password_hash}
            ),
        )
        return self._single(UserRecord, rows, "create_user")
