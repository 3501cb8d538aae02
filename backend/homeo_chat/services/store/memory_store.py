"""
Process-local conversation store.

Used when the service runs without a hosted database and as the store
double in tests. Data is lost on restart.
"""
import itertools
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from homeo_chat.exceptions import DuplicateUserError
from homeo_chat.services.store.base import (
    ConversationRecord,
    MessageRecord,
    Role,
    UserRecord,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryConversationStore:
    """In-memory implementation of :class:`ConversationStore`."""

    name = "memory"

    def __init__(self):
        # Insertion sequence breaks ties between equal timestamps
        self._sequence = itertools.count()
        self._conversations: List[Tuple[int, ConversationRecord]] = []
        self._messages: List[Tuple[int, MessageRecord]] = []
        self._users: Dict[str, UserRecord] = {}

    async def ping(self) -> None:
        return None

    async def create_conversation(self, user_id: str, title: str) -> ConversationRecord:
        record = ConversationRecord(
            id=str(uuid.uuid4()),
            user_id=user_id,
            title=title,
            created_at=_now(),
        )
        self._conversations.append((next(self._sequence), record))
        return record

    async def list_conversations(self, user_id: str) -> List[ConversationRecord]:
        rows = [row for row in self._conversations if row[1].user_id == user_id]
        rows.sort(key=lambda row: (row[1].created_at, row[0]), reverse=True)
        return [record for _, record in rows]

    async def append_message(self, conversation_id: str, role: Role, content: str) -> MessageRecord:
        record = MessageRecord(
            id=str(uuid.uuid4()),
            conversation_id=conversation_id,
            role=role,
            content=content,
            created_at=_now(),
        )
        self._messages.append((next(self._sequence), record))
        return record

    async def list_messages(self, conversation_id: str) -> List[MessageRecord]:
        rows = [row for row in self._messages if row[1].conversation_id == conversation_id]
        rows.sort(key=lambda row: (row[1].created_at, row[0]))
        return [record for _, record in rows]

    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        return self._users.get(email)

    async def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        if email in self._users:
            raise DuplicateUserError(f"User with email {email} already exists")
        record = UserRecord(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=_now(),
        )
        self._users[email] = record
        return record

    @property
    def users(self) -> List[UserRecord]:
        return list(self._users.values())
