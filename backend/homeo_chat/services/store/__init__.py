"""
Conversation stores and the factory that picks one from settings.
"""
import logging
from typing import Optional

from homeo_chat.config.settings import Settings
from homeo_chat.exceptions import MissingConfigurationError

from .base import (
    ConversationRecord,
    ConversationStore,
    MessageRecord,
    Role,
    UserRecord,
)
from .memory_store import InMemoryConversationStore

logger = logging.getLogger(__name__)


def build_conversation_store(settings: Settings) -> Optional[ConversationStore]:
    """
    Build the store selected by ``STORE_BACKEND``.

    Returns None when the service runs without persistence.

    Raises:
        MissingConfigurationError: If Supabase is requested but not configured.
    """
    backend = settings.resolved_store_backend

    if backend == "none":
        return None
    if backend == "memory":
        logger.warning("Using in-memory conversation store; data is lost on restart")
        return InMemoryConversationStore()

    if not settings.supabase_configured:
        raise MissingConfigurationError(
            "STORE_BACKEND=supabase requires SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY"
        )

    # Imported lazily so deployments without a store never load the client
    from homeo_chat.config.database import create_supabase_client
    from .supabase_store import SupabaseConversationStore

    return SupabaseConversationStore(create_supabase_client(settings))


__all__ = [
    "ConversationRecord",
    "ConversationStore",
    "InMemoryConversationStore",
    "MessageRecord",
    "Role",
    "UserRecord",
    "build_conversation_store",
]
