"""
Request and response models for account registration.
"""
from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request model for registering a local account."""
    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=3, description="Email address, unique per account")
    password: str = Field(..., min_length=1, description="Plaintext password, hashed before storage")


class RegisterResponse(BaseModel):
    """Created account. Never carries the password or its hash."""
    user_id: str = Field(..., serialization_alias="userId")
    name: str
    email: str
