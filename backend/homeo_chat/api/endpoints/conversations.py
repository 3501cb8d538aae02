"""
Conversation history endpoints.
"""
from fastapi import APIRouter, Depends, status

from homeo_chat.api.dependencies import get_conversation_controller
from homeo_chat.api.models import (
    ConversationListResponse,
    CreateConversationRequest,
    CreateConversationResponse,
    ErrorResponse,
    MessageListResponse,
)
from homeo_chat.controllers.conversation_controller import ConversationController

router = APIRouter()

ERROR_RESPONSES = {
    500: {"model": ErrorResponse, "description": "Database error"},
    503: {"model": ErrorResponse, "description": "Storage not configured"},
}


@router.post(
    "/conversations",
    status_code=status.HTTP_200_OK,
    response_model=CreateConversationResponse,
    responses={400: {"model": ErrorResponse, "description": "userId required"}, **ERROR_RESPONSES},
)
async def create_conversation(
    request: CreateConversationRequest,
    controller: ConversationController = Depends(get_conversation_controller),
) -> CreateConversationResponse:
    """Start a new conversation for a user."""
    return await controller.create_conversation(request.user_id)


@router.get(
    "/conversations/{user_id}",
    response_model=ConversationListResponse,
    responses=ERROR_RESPONSES,
)
async def list_conversations(
    user_id: str,
    controller: ConversationController = Depends(get_conversation_controller),
) -> ConversationListResponse:
    """List a user's conversations, newest first."""
    return await controller.list_conversations(user_id)


@router.get(
    "/conversations/{conversation_id}/messages",
    response_model=MessageListResponse,
    responses=ERROR_RESPONSES,
)
async def list_messages(
    conversation_id: str,
    controller: ConversationController = Depends(get_conversation_controller),
) -> MessageListResponse:
    """List the messages of a conversation in the order they were written."""
    return await controller.list_messages(conversation_id)
