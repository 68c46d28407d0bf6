"""
Tutor chat service.

Answers free-form student questions in a multi-turn conversation that is
not tied to any stored file. The client sends the whole history each turn;
nothing is persisted.

Dependencies: backend.core.analysis, backend.models.chat
System role: Tutor conversation orchestration
"""

import logging
from collections.abc import Sequence

from backend.core.analysis import LLMClient, build_tutor_messages
from backend.core.exceptions import ValidationError
from backend.models.chat import ChatMessage, ChatResponse

logger = logging.getLogger(__name__)


class ChatService:
    """Multi-turn tutor conversation over the configured chat models."""

    def __init__(self, llm_client: LLMClient) -> None:
        self.llm_client = llm_client

    async def reply(
        self,
        messages: Sequence[ChatMessage],
        model: str | None = None,
    ) -> ChatResponse:
        """
        Generate the tutor's next turn.

        Args:
            messages: Conversation so far, oldest first
            model: Model key (defaults to the configured default)

        Returns:
            ChatResponse: Tutor reply and the model that wrote it

        Raises:
            ValidationError: Empty conversation, last turn not from the
                student, or unknown model
            AnalysisError: Model call failed
        """
        if not messages or messages[-1].role != "user":
            raise ValidationError(
                "Conversation must end with a user message", field="messages"
            )
        model_key, option = self.llm_client.resolve_model(model)
        prompt = build_tutor_messages([(message.role, message.content) for message in messages])

        logger.info(
            f"{__name__}:reply - Tutor turn with {option.name}",
            extra={"turns": len(messages)},
        )
        reply = await self.llm_client.generate(prompt, model_key)
        return ChatResponse(reply=reply, model=option.name, model_key=model_key)
