"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from homeo_chat.services.prompts import HOMEOPATH_SYSTEM_PROMPT

STORE_BACKENDS = ("auto", "supabase", "memory", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Variables used by other tooling (Supabase CLI etc.) may live in the same .env
    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
    )

    # Application settings
    app_name: str = "Homeopath Chat API"
    environment: str = Field(default="local")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)
    max_body_bytes: int = Field(default=1024 * 1024, ge=1)

    # CORS settings
    allowed_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Logging settings
    log_level: str = Field(default="INFO")
    enable_request_logging: bool = Field(default=True)

    # OpenAI settings
    openai_api_key: str = Field(default="")
    openai_model: str = Field(default="gpt-4o-mini")
    openai_base_url: Optional[str] = Field(default=None)
    openai_timeout_seconds: float = Field(default=60.0, gt=0)
    system_prompt: str = Field(default=HOMEOPATH_SYSTEM_PROMPT)

    # Database settings
    store_backend: str = Field(default="auto")
    supabase_url: str = Field(default="")
    supabase_service_role_key: str = Field(default="")
    supabase_anon_key: str = Field(default="")
    supabase_timeout_seconds: int = Field(default=10, ge=1)
    default_conversation_title: str = Field(default="Neue Unterhaltung")

    # Authentication settings
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_local(self) -> bool:
        """Check if running in local development environment."""
        return self.environment == "local"

    @property
    def supabase_key(self) -> str:
        """Key used by the backend: the service role key, else the anon key."""
        return self.supabase_service_role_key or self.supabase_anon_key

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    @property
    def resolved_store_backend(self) -> str:
        """
        Store backend after resolving "auto".

        "auto" picks Supabase when both URL and key are present, otherwise
        runs without persistence.
        """
        backend = self.store_backend.strip().lower()
        if backend not in STORE_BACKENDS:
            raise ValueError(
                f"STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, got {self.store_backend!r}"
            )
        if backend == "auto":
            return "supabase" if self.supabase_configured else "none"
        return backend

    def secret_values(self) -> List[str]:
        """Credential strings that must never reach a client or a log line."""
        candidates = (
            self.openai_api_key,
            self.supabase_service_role_key,
            self.supabase_anon_key,
        )
        return [value for value in candidates if value]


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
