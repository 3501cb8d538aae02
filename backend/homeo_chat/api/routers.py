from fastapi import APIRouter

from .endpoints import auth
from .endpoints import chat
from .endpoints import conversations
from .endpoints import health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, prefix="", tags=["health"])
api_router.include_router(chat.router, prefix="", tags=["chat"])
api_router.include_router(auth.router, prefix="", tags=["auth"])
api_router.include_router(conversations.router, prefix="", tags=["conversations"])
