"""
Test suite for ChatService.

The LLM client's generate call is mocked so the rendered tutor prompt can
be inspected.

System role: Verification of tutor conversation orchestration
"""

from unittest.mock import AsyncMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from backend.application.services.chat_service import ChatService
from backend.configs import LLMSettings
from backend.core.analysis import LLMClient
from backend.core.exceptions import AnalysisError, ValidationError
from backend.models.chat import ChatMessage

MODEL = "gemini-2.5-flash"


@pytest.fixture
def llm_client() -> LLMClient:
    client = LLMClient(LLMSettings(api_key="test-key", default_model=MODEL))
    client.generate = AsyncMock(return_value="Let's break it into steps.")
    return client


class TestReply:
    """Test suite for ChatService.reply()."""

    @pytest.mark.asyncio
    async def test_reply_should_send_system_prompt_and_full_history(
        self, llm_client: LLMClient
    ) -> None:
        """Test the tutor prompt leads and every turn follows in order."""
        # Arrange
        history = [
            ChatMessage(role="user", content="What is a derivative?"),
            ChatMessage(role="assistant", content="The rate of change of a function."),
            ChatMessage(role="user", content="Show me with f(x) = {x}^2"),
        ]

        # Act
        response = await ChatService(llm_client).reply(history)

        # Assert
        messages, model_key = llm_client.generate.await_args.args
        assert model_key == MODEL
        assert [type(message) for message in messages] == [
            SystemMessage,
            HumanMessage,
            AIMessage,
            HumanMessage,
        ]
        assert "step-by-step" in messages[0].content
        assert messages[3].content == "Show me with f(x) = {x}^2"
        assert response.reply == "Let's break it into steps."
        assert response.model == "Gemini 2.5 Flash"

    @pytest.mark.asyncio
    async def test_reply_should_require_user_turn_last(self, llm_client: LLMClient) -> None:
        """Test a conversation ending with the tutor is rejected before any model call."""
        with pytest.raises(ValidationError):
            await ChatService(llm_client).reply(
                [ChatMessage(role="assistant", content="Anything else?")]
            )

        llm_client.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_model_failure_should_propagate(self, llm_client: LLMClient) -> None:
        """Test model errors surface as AnalysisError."""
        llm_client.generate.side_effect = AnalysisError("Failed to generate analysis")

        with pytest.raises(AnalysisError):
            await ChatService(llm_client).reply([ChatMessage(role="user", content="Hi")])
