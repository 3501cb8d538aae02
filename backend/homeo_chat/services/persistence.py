"""
Best-effort persistence of chat exchanges.

Writes are scheduled after the HTTP response is sent. A failed write is
logged and counted but never reaches the caller, so the counters are the
only way to notice lost messages.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from homeo_chat.exceptions import StoreError
from homeo_chat.services.store import ConversationStore, Role

logger = logging.getLogger(__name__)


@dataclass
class PersistenceStats:
    writes: int = 0
    failures: int = 0


class PersistenceRecorder:
    """Appends chat turns to the store and tracks failed writes."""

    def __init__(self, store: ConversationStore):
        self.store = store
        self.stats = PersistenceStats()

    async def _append(self, conversation_id: str, role: Role, content: str) -> bool:
        try:
            await self.store.append_message(conversation_id, role, content)
        except StoreError as e:
            self.stats.failures += 1
            logger.error(
                f"Failed to persist {role} message for conversation {conversation_id}: {e}"
            )
            return False
        except Exception:
            self.stats.failures += 1
            logger.exception(
                f"Unexpected error persisting {role} message for conversation {conversation_id}"
            )
            return False

        self.stats.writes += 1
        return True

    async def record_exchange(
        self,
        conversation_id: str,
        user_message: Optional[str],
        reply: str,
    ) -> None:
        """
        Append the user's turn (if any) and the assistant reply.

        Each write is attempted on its own; a failed user write does not
        prevent the assistant write.
        """
        if user_message is not None:
            await self._append(conversation_id, "user", user_message)
        await self._append(conversation_id, "assistant", reply)

    def snapshot(self) -> Dict[str, int]:
        return {"writes": self.stats.writes, "failures": self.stats.failures}
