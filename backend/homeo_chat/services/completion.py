"""
Completion provider for chat turns.

Wraps the OpenAI chat completions API behind a small protocol so that
controllers can be handed a real client or a test double.
"""
import logging
from typing import Any, Dict, List, Optional, Protocol

import openai
from openai import AsyncOpenAI

from homeo_chat.config.settings import Settings
from homeo_chat.exceptions import (
    CompletionError,
    CompletionTimeoutError,
    MissingConfigurationError,
)

logger = logging.getLogger(__name__)


class CompletionProvider(Protocol):
    """Anything that turns a role-tagged message list into reply text."""

    model: str

    async def complete(self, messages: List[Dict[str, str]]) -> str:
        ...


class OpenAICompletionProvider:
    """Completion provider backed by ``AsyncOpenAI``."""

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: float = 60.0,
        base_url: Optional[str] = None,
        client: Optional[Any] = None,
    ):
        """
        Args:
            api_key: OpenAI API key
            model: Model identifier sent with every request
            timeout: Seconds before a request is abandoned
            base_url: Optional OpenAI-compatible endpoint
            client: Pre-built client, mainly for tests
        """
        self.model = model
        # A failed call surfaces immediately; the caller decides whether to retry.
        self.client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    async def complete(self, messages: List[Dict[str, str]]) -> str:
        """
        Request a completion and return the first choice's text.

        Returns an empty string when the response has no choices or the
        first choice carries no content.

        Raises:
            CompletionTimeoutError: If the request timed out
            CompletionError: For any other API failure
        """
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
            )
        except openai.APITimeoutError as e:
            logger.error(f"Completion request timed out (model={self.model})")
            raise CompletionTimeoutError("Completion request timed out") from e
        except openai.OpenAIError as e:
            logger.error(f"Completion request failed (model={self.model}): {type(e).__name__}")
            raise CompletionError(str(e)) from e

        choices = getattr(completion, "choices", None) or []
        if not choices:
            logger.warning("Completion response contained no choices")
            return ""

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        return content or ""


def build_completion_provider(settings: Settings) -> OpenAICompletionProvider:
    """
    Build the OpenAI completion provider from settings.

    Raises:
        MissingConfigurationError: If OPENAI_API_KEY is not set.
    """
    if not settings.openai_api_key:
        raise MissingConfigurationError(
            "OPENAI_API_KEY must be set in environment variables"
        )

    return OpenAICompletionProvider(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.openai_timeout_seconds,
        base_url=settings.openai_base_url,
    )
