"""
Chat endpoint.

Forwards the conversation to the completion API behind the homeopath
system prompt and returns the generated reply.
"""
from fastapi import APIRouter, BackgroundTasks, Depends, status

from homeo_chat.api.dependencies import get_chat_controller
from homeo_chat.api.models import ChatRequest, ChatResponse, ErrorResponse
from homeo_chat.controllers.chat_controller import ChatController

router = APIRouter()


@router.post(
    "/chat",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Messages array required"},
        500: {"model": ErrorResponse, "description": "Chat request failed"},
        504: {"model": ErrorResponse, "description": "Language model timed out"},
    },
)
async def chat(
    request: ChatRequest,
    background_tasks: BackgroundTasks,
    controller: ChatController = Depends(get_chat_controller),
) -> ChatResponse:
    """
    Generate the assistant's next turn.

    The exchange is recorded after the response is sent when a
    conversationId is supplied; recording failures never affect the reply.
    """
    return await controller.chat(request, background_tasks)
