"""
FastAPI application factory.

Collaborators (completion provider, conversation store) are built here
from settings, or injected by the caller, and stored on ``app.state``.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from homeo_chat import __version__
from homeo_chat.api.routers import api_router
from homeo_chat.config.settings import Settings, get_settings
from homeo_chat.middleware.body_limit import BodySizeLimitMiddleware
from homeo_chat.middleware.error_handling import (
    ErrorHandlingMiddleware,
    register_exception_handlers,
)
from homeo_chat.middleware.request_logging import RequestLoggingMiddleware
from homeo_chat.services.completion import CompletionProvider, build_completion_provider
from homeo_chat.services.persistence import PersistenceRecorder
from homeo_chat.services.store import ConversationStore, build_conversation_store

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Set the root log level and format."""
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} ({settings.environment})")
    logger.info(f"- OPENAI_API_KEY: {'SET' if settings.openai_api_key else 'MISSING'}")
    logger.info(f"- model: {app.state.completion_provider.model}")
    logger.info(f"- store: {app.state.store.name if app.state.store is not None else 'none'}")

    yield

    logger.info("Shutting down...")
    if app.state.recorder is not None:
        logger.info(f"Persistence stats: {app.state.recorder.snapshot()}")


def create_app(
    settings: Optional[Settings] = None,
    completion_provider: Optional[CompletionProvider] = None,
    store: Optional[ConversationStore] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use; defaults to the environment
        completion_provider: Provider to use instead of the OpenAI client
        store: Store to use instead of the one selected by STORE_BACKEND

    Raises:
        MissingConfigurationError: If OPENAI_API_KEY is missing and no
            provider was given, or the selected store is not configured.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    # Fail fast: a missing credential stops startup instead of failing every request
    if completion_provider is None:
        completion_provider = build_completion_provider(settings)
    if store is None:
        store = build_conversation_store(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Chat proxy for the digital homeopath assistant",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.completion_provider = completion_provider
    app.state.store = store
    app.state.recorder = PersistenceRecorder(store) if store is not None else None

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Added last runs first: logging -> size limit -> error handling -> CORS
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware, log_bodies=not settings.is_production)

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    return app
