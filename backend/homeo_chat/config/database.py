"""
Supabase client construction.

Clients are built explicitly from settings and handed to the store;
there is no module-level client.
"""
import logging

from supabase import Client, create_client
from supabase.client import ClientOptions

from homeo_chat.config.settings import Settings
from homeo_chat.exceptions import MissingConfigurationError

logger = logging.getLogger(__name__)


def create_supabase_client(
    settings: Settings,
    schema: str = "public",
) -> Client:
    """
    Returns a Supabase client for the configured project.

    Args:
        settings: Application settings
        schema: The Postgres schema to use (defaults to "public")

    Returns:
        Client: Configured Supabase client.

    Raises:
        MissingConfigurationError: If SUPABASE_URL or a Supabase key is not set.
    """
    if not settings.supabase_configured:
        raise MissingConfigurationError(
            "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (or SUPABASE_ANON_KEY) must be set in environment variables"
        )

    options = ClientOptions(
        postgrest_client_timeout=settings.supabase_timeout_seconds,
        storage_client_timeout=settings.supabase_timeout_seconds,
        schema=schema,
    )
    if not settings.supabase_service_role_key:
        logger.warning("Using SUPABASE_ANON_KEY; row level security applies to backend writes")
    return create_client(settings.supabase_url, settings.supabase_key, options=options)
