"""
Tests for the OpenAI completion provider, using a stand-in for AsyncOpenAI.
"""
import asyncio
from types import SimpleNamespace

import httpx
import openai
import pytest

from homeo_chat.exceptions import CompletionError, CompletionTimeoutError, MissingConfigurationError
from homeo_chat.services.completion import OpenAICompletionProvider, build_completion_provider

from conftest import make_settings

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


class FakeCompletions:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        return self.response


def fake_client(response=None, error=None):
    completions = FakeCompletions(response, error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def completion(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


def provider_with(response=None, error=None):
    client, completions = fake_client(response, error)
    provider = OpenAICompletionProvider(api_key="sk-test", model="gpt-4o-mini", client=client)
    return provider, completions


def test_returns_first_choice_content():
    provider, completions = provider_with(completion("Arnica C30", "ignored"))
    messages = [{"role": "system", "content": "s"}, {"role": "user", "content": "Hallo"}]

    assert asyncio.run(provider.complete(messages)) == "Arnica C30"
    assert completions.kwargs == {"model": "gpt-4o-mini", "messages": messages}


def test_no_choices_yields_empty_string():
    provider, _ = provider_with(completion())

    assert asyncio.run(provider.complete([])) == ""


def test_null_content_yields_empty_string():
    provider, _ = provider_with(completion(None))

    assert asyncio.run(provider.complete([])) == ""


def test_timeout_maps_to_completion_timeout():
    provider, _ = provider_with(error=openai.APITimeoutError(request=REQUEST))

    with pytest.raises(CompletionTimeoutError):
        asyncio.run(provider.complete([]))


def test_api_error_maps_to_completion_error():
    provider, _ = provider_with(error=openai.APIConnectionError(request=REQUEST))

    with pytest.raises(CompletionError) as exc_info:
        asyncio.run(provider.complete([]))
    assert not isinstance(exc_info.value, CompletionTimeoutError)


def test_build_provider_requires_api_key():
    with pytest.raises(MissingConfigurationError):
        build_completion_provider(make_settings(openai_api_key=""))


def test_build_provider_uses_settings():
    provider = build_completion_provider(
        make_settings(openai_model="gpt-4o", openai_timeout_seconds=5)
    )

    assert provider.model == "gpt-4o"
    assert provider.client.max_retries == 0
    assert provider.client.timeout == 5
