"""
Account registration endpoint.
"""
from fastapi import APIRouter, Depends, status

from homeo_chat.api.dependencies import get_auth_controller
from homeo_chat.api.models import ErrorResponse, RegisterRequest, RegisterResponse
from homeo_chat.controllers.auth_controller import AuthController

router = APIRouter()


@router.post(
    "/auth/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
        503: {"model": ErrorResponse, "description": "Storage not configured"},
    },
)
async def register(
    request: RegisterRequest,
    controller: AuthController = Depends(get_auth_controller),
) -> RegisterResponse:
    """
    Register a local account.

    The password is stored as a bcrypt hash and never returned.
    """
    return await controller.register(request)
