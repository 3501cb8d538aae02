"""
Registration of local accounts.
"""
import logging
from typing import Optional

import bcrypt
from fastapi import HTTPException, status
from starlette.concurrency import run_in_threadpool

from homeo_chat.api.models.auth import RegisterRequest, RegisterResponse
from homeo_chat.exceptions import DuplicateUserError, StoreNotConfiguredError
from homeo_chat.services.store import ConversationStore

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int) -> str:
    """Salted bcrypt hash of ``password``."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


class AuthController:
    """Controller for account registration."""

    def __init__(self, store: Optional[ConversationStore], bcrypt_rounds: int = 10):
        self.store = store
        self.bcrypt_rounds = bcrypt_rounds

    def _validate_request(self, request: RegisterRequest) -> RegisterRequest:
        """
        Normalize and validate a registration request.

        Raises:
            HTTPException 400: If a field is blank or the password is too long
        """
        name = request.name.strip()
        email = request.email.strip().lower()
        if not name or not email or not request.password.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="name, email and password are required",
            )
        if len(request.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"password must not exceed {MAX_PASSWORD_BYTES} bytes",
            )
        return request.model_copy(update={"name": name, "email": email})

    async def register(self, request: RegisterRequest) -> RegisterResponse:
        """
        Create a user account.

        Raises:
            HTTPException 400: If a field is blank
            DuplicateUserError: If the email is already registered
            StoreNotConfiguredError: If no store is configured
        """
        request = self._validate_request(request)
        if self.store is None:
            raise StoreNotConfiguredError("User storage is not configured")

        if await self.store.find_user_by_email(request.email) is not None:
            raise DuplicateUserError(f"User with email {request.email} already exists")

        password_hash = await run_in_threadpool(hash_password, request.password, self.bcrypt_rounds)
        user = await self.store.create_user(request.name, request.email, password_hash)
        logger.info(f"Registered user {user.id}")

        return RegisterResponse(user_id=user.id, name=user.name, email=user.email)
