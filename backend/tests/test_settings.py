"""
Tests for settings and the application factory's startup checks.
"""
import pytest

from homeo_chat.app import create_app
from homeo_chat.config.settings import Settings
from homeo_chat.exceptions import MissingConfigurationError

from conftest import TEST_API_KEY, make_settings


def test_defaults():
    settings = make_settings()

    assert settings.openai_model == "gpt-4o-mini"
    assert settings.port == 3001
    assert settings.max_body_bytes == 1024 * 1024
    assert settings.system_prompt.startswith("Du bist ein digitaler Homöopath.")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SYSTEM_PROMPT", "Antworte knapp.")

    settings = Settings(_env_file=None)

    assert settings.openai_model == "gpt-4o"
    assert settings.port == 8080
    assert settings.system_prompt == "Antworte knapp."


def test_store_backend_resolution():
    assert make_settings(store_backend="auto").resolved_store_backend == "none"
    configured = make_settings(
        store_backend="auto",
        supabase_url="https://example.supabase.co",
        supabase_anon_key="anon",
    )
    assert configured.resolved_store_backend == "supabase"
    assert configured.supabase_key == "anon"
    assert make_settings(store_backend="Memory").resolved_store_backend == "memory"

    with pytest.raises(ValueError):
        make_settings(store_backend="redis").resolved_store_backend


def test_secret_values_only_lists_set_credentials():
    settings = make_settings(supabase_service_role_key="service")

    assert settings.secret_values() == [TEST_API_KEY, "service"]


def test_create_app_fails_fast_without_api_key():
    with pytest.raises(MissingConfigurationError):
        create_app(settings=make_settings(openai_api_key=""))


def test_create_app_fails_fast_without_supabase_credentials():
    with pytest.raises(MissingConfigurationError):
        create_app(settings=make_settings(store_backend="supabase"))


def test_create_app_builds_memory_store():
    app = create_app(settings=make_settings(store_backend="memory"))

    assert app.state.store.name == "memory"
    assert app.state.recorder is not None
    assert app.state.completion_provider.model == "gpt-4o-mini"
