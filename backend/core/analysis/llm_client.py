"""
Chat model client for study material generation.

Wraps LangChain chat models (Gemini by default) behind a single async
generate call. One model instance is created per supported model key and
reused.

Dependencies: langchain_core, langchain_google_genai, backend.configs
System role: LLM boundary for the analysis service
"""

import logging
from collections.abc import Callable, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from backend.configs import LLMSettings, ModelOption
from backend.core.exceptions import AnalysisError, ValidationError

logger = logging.getLogger(__name__)

ModelFactory = Callable[[str, ModelOption], BaseChatModel]


def _response_text(content: str | list) -> str:
    # Gemini may return a list of content parts instead of a plain string
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class LLMClient:
    """Async text generation over configured chat models."""

    def __init__(
        self,
        settings: LLMSettings,
        model_factory: ModelFactory | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            settings: Supported models and API key
            model_factory: Builds a chat model for a model key (defaults to
                ChatGoogleGenerativeAI)
        """
        self.settings = settings
        self._model_factory = model_factory or self._google_model
        self._models: dict[str, BaseChatModel] = {}

    def _google_model(self, model_key: str, option: ModelOption) -> BaseChatModel:
        kwargs = {}
        if self.settings.api_key:
            kwargs["google_api_key"] = self.settings.api_key
        return ChatGoogleGenerativeAI(
            model=model_key,
            temperature=option.temperature,
            max_output_tokens=option.max_tokens,
            **kwargs,
        )

    def resolve_model(self, model_key: str | None) -> tuple[str, ModelOption]:
        """
        Look up a supported model, falling back to the default key.

        Raises:
            ValidationError: Model key is not supported
        """
        key = model_key or self.settings.default_model
        option = self.settings.supported_models.get(key)
        if option is None:
            raise ValidationError(
                f"Unsupported model: {key}",
                field="model",
                details={"supported_models": sorted(self.settings.supported_models)},
            )
        return key, option

    def get_model(self, model_key: str) -> BaseChatModel:
        """Return the cached chat model for a supported key."""
        if model_key not in self._models:
            key, option = self.resolve_model(model_key)
            self._models[key] = self._model_factory(key, option)
        return self._models[model_key]

    async def generate(self, messages: Sequence[BaseMessage], model_key: str) -> str:
        """
        Generate text for a prompt.

        Args:
            messages: System and user messages
            model_key: Supported model key

        Returns:
            str: Model output text

        Raises:
            ValidationError: Model key is not supported
            AnalysisError: Model call failed
        """
        model = self.get_model(model_key)
        logger.info(
            f"{__name__}:generate - Calling model",
            extra={"model_key": model_key, "message_count": len(messages)},
        )
        try:
            response = await model.ainvoke(list(messages))
        except Exception as e:
            logger.error(
                f"{__name__}:generate - Model call failed",
                extra={"model_key": model_key, "error_type": type(e).__name__, "error_msg": str(e)},
            )
            raise AnalysisError(
                "Failed to generate analysis",
                details={"model": model_key, "error": str(e)},
            ) from e
        return _response_text(response.content)
