from .auth import RegisterRequest, RegisterResponse
from .chat import ChatMessage, ChatRequest, ChatResponse
from .conversation import (
    ConversationListResponse,
    CreateConversationRequest,
    CreateConversationResponse,
    MessageListResponse,
)
from .error import ErrorResponse
from .health import HealthResponse

__all__ = [
    "ErrorResponse",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ConversationListResponse",
    "CreateConversationRequest",
    "CreateConversationResponse",
    "HealthResponse",
    "MessageListResponse",
    "RegisterRequest",
    "RegisterResponse",
]
