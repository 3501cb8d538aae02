"""
Shared fixtures: a scripted completion provider, stores and app clients.

No test talks to OpenAI or Supabase.
"""
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

# Add backend to path
backend_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(backend_dir))

from homeo_chat.app import create_app  # noqa: E402
from homeo_chat.config.settings import Settings  # noqa: E402
from homeo_chat.exceptions import StoreError  # noqa: E402
from homeo_chat.services.store import InMemoryConversationStore  # noqa: E402

TEST_API_KEY = "sk-test-0123456789abcdef"


class FakeCompletionProvider:
    """Records every message list it receives and answers from a script."""

    def __init__(self, reply: str = "Hallo! Welche Symptome hast du?", error: Optional[Exception] = None):
        self.model = "fake-model"
        self.reply = reply
        self.error = error
        self.calls: List[List[Dict[str, str]]] = []

    async def complete(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


class RecordingStore(InMemoryConversationStore):
    """In-memory store that counts append attempts and can be told to fail."""

    def __init__(self, fail_appends: bool = False, fail_ping: bool = False):
        super().__init__()
        self.fail_appends = fail_appends
        self.fail_ping = fail_ping
        self.append_attempts = []

    async def ping(self):
        if self.fail_ping:
            raise StoreError("connection refused")

    async def append_message(self, conversation_id, role, content):
        self.append_attempts.append((conversation_id, role, content))
        if self.fail_appends:
            raise StoreError("insert failed")
        return await super().append_message(conversation_id, role, content)


def make_settings(**overrides) -> Settings:
    values = {
        "openai_api_key": TEST_API_KEY,
        "store_backend": "none",
        "supabase_url": "",
        "supabase_service_role_key": "",
        "supabase_anon_key": "",
        "environment": "test",
        "bcrypt_rounds": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def provider() -> FakeCompletionProvider:
    return FakeCompletionProvider()


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def client(settings, provider, store):
    app = create_app(settings=settings, completion_provider=provider, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def stateless_client(settings, provider):
    """App without any conversation store."""
    app = create_app(settings=settings, completion_provider=provider)
    with TestClient(app) as test_client:
        yield test_client
