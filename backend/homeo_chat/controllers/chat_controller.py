"""
Chat controller.

Prepends the system prompt to the client's turns, asks the completion
provider for a reply and hands the exchange to the persistence recorder.
"""
import logging
from typing import Dict, List, Optional

from fastapi import BackgroundTasks

from homeo_chat.api.models.chat import ChatMessage, ChatRequest, ChatResponse
from homeo_chat.services.completion import CompletionProvider
from homeo_chat.services.persistence import PersistenceRecorder

logger = logging.getLogger(__name__)


class ChatController:
    """Controller for chat completions."""

    def __init__(
        self,
        provider: CompletionProvider,
        system_prompt: str,
        recorder: Optional[PersistenceRecorder] = None,
    ):
        self.provider = provider
        self.system_prompt = system_prompt
        self.recorder = recorder

    def build_messages(self, messages: List[ChatMessage]) -> List[Dict[str, str]]:
        """Outgoing sequence: one system message followed by the client turns in order."""
        return [
            {"role": "system", "content": self.system_prompt},
            *({"role": m.role, "content": m.content} for m in messages),
        ]

    @staticmethod
    def latest_user_message(messages: List[ChatMessage]) -> Optional[str]:
        for message in reversed(messages):
            if message.role == "user":
                return message.content
        return None

    async def chat(
        self,
        request: ChatRequest,
        background_tasks: BackgroundTasks,
    ) -> ChatResponse:
        """
        Generate the assistant reply for a conversation.

        Raises:
            CompletionError: If the completion call fails; nothing is persisted
        """
        logger.info(
            f"Chat request received ({len(request.messages)} messages, model={self.provider.model})"
        )
        content = await self.provider.complete(self.build_messages(request.messages))
        logger.info(f"Completion received ({len(content)} chars)")

        if request.conversation_id:
            if self.recorder is None:
                logger.warning(
                    f"conversationId {request.conversation_id} supplied but no store is configured; not persisting"
                )
            else:
                background_tasks.add_task(
                    self.recorder.record_exchange,
                    request.conversation_id,
                    self.latest_user_message(request.messages),
                    content,
                )

        return ChatResponse(content=content)
