"""
Dependency injection for endpoint controllers.

Collaborators are created once by :func:`homeo_chat.app.create_app` and
kept on ``app.state``; controllers are built per request from them.
"""
from typing import Optional

from fastapi import Request

from homeo_chat.config.settings import Settings
from homeo_chat.controllers.auth_controller import AuthController
from homeo_chat.controllers.chat_controller import ChatController
from homeo_chat.controllers.conversation_controller import ConversationController
from homeo_chat.services.completion import CompletionProvider
from homeo_chat.services.persistence import PersistenceRecorder
from homeo_chat.services.store import ConversationStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_completion_provider(request: Request) -> CompletionProvider:
    return request.app.state.completion_provider


def get_store(request: Request) -> Optional[ConversationStore]:
    return request.app.state.store


def get_recorder(request: Request) -> Optional[PersistenceRecorder]:
    return request.app.state.recorder


def get_chat_controller(request: Request) -> ChatController:
    """Dependency injection for ChatController."""
    settings = get_app_settings(request)
    return ChatController(
        provider=get_completion_provider(request),
        system_prompt=settings.system_prompt,
        recorder=get_recorder(request),
    )


def get_conversation_controller(request: Request) -> ConversationController:
    """Dependency injection for ConversationController."""
    settings = get_app_settings(request)
    return ConversationController(
        store=get_store(request),
        default_title=settings.default_conversation_title,
    )


def get_auth_controller(request: Request) -> AuthController:
    """Dependency injection for AuthController."""
    settings = get_app_settings(request)
    return AuthController(store=get_store(request), bcrypt_rounds=settings.bcrypt_rounds)
