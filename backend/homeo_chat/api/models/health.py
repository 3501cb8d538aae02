"""
Response model for the health endpoint.
"""
from typing import Dict, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness of the process and of the configured store."""
    ok: bool
    timestamp: str = Field(..., description="ISO-8601 UTC timestamp")
    openai: bool = Field(..., description="Whether a completion provider is configured")
    supabase: bool = Field(..., description="Whether Supabase credentials are configured")
    store: str = Field(..., description="Active store backend")
    persistence: Optional[Dict[str, int]] = Field(None, description="Background write counters")
    error: Optional[str] = None
