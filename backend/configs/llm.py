"""
Language model configuration settings.

Lists the chat models the analysis endpoint accepts and their generation
parameters.

Dependencies: pydantic, pydantic_settings
System role: LLM client configuration for quiz, flashcard and tutor generation
"""

from pydantic import BaseModel, Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class ModelOption(BaseModel):
    """Generation parameters for a supported chat model."""

    name: str = Field(description="Human-readable model name")
    description: str = Field(default="", description="Short model description")
    max_tokens: int = Field(default=4000, description="Maximum output tokens")
    temperature: float = Field(default=0.7, description="Sampling temperature")


class LLMSettings(BaseSettings):
    """Chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Google Generative AI API key (falls back to GOOGLE_API_KEY)",
    )
    default_model: str = Field(
        default="gemini-2.5-flash",
        description="Model key used when a request does not name one",
    )
    supported_models: dict[str, ModelOption] = Field(
        default_factory=lambda: {
            "gemini-2.5-flash": ModelOption(
                name="Gemini 2.5 Flash",
                description="Fast and efficient for document analysis",
                max_tokens=4000,
                temperature=0.7,
            ),
        },
        description="Model key to generation parameters",
    )
