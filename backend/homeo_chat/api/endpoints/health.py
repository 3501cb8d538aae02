"""
Health check endpoint.
Reports process liveness and, when a store is configured, store liveness.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from homeo_chat.api.dependencies import get_app_settings, get_recorder, get_store
from homeo_chat.api.models import HealthResponse
from homeo_chat.config.settings import Settings
from homeo_chat.exceptions import StoreError
from homeo_chat.services.persistence import PersistenceRecorder
from homeo_chat.services.store import ConversationStore
from homeo_chat.utils import redact

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/db/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse, "description": "Store unreachable"}},
)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    store: Optional[ConversationStore] = Depends(get_store),
    recorder: Optional[PersistenceRecorder] = Depends(get_recorder),
):
    """Liveness of the API and its store. Only booleans are reported for integrations."""
    health = HealthResponse(
        ok=True,
        timestamp=datetime.now(timezone.utc).isoformat(),
        openai=bool(settings.openai_api_key),
        supabase=settings.supabase_configured,
        store=store.name if store is not None else "none",
        persistence=recorder.snapshot() if recorder is not None else None,
    )

    if store is None:
        return health

    try:
        await store.ping()
    except StoreError as e:
        logger.error(f"Health check: store ping failed: {e}")
        health.ok = False
        health.error = redact(str(e), settings.secret_values())
    except Exception as e:
        logger.exception("Health check: unexpected error pinging store")
        health.ok = False
        health.error = redact(f"{type(e).__name__}: {e}", settings.secret_values())

    if not health.ok:
        return JSONResponse(status_code=503, content=health.model_dump())
    return health
