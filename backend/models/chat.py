"""
Tutor chat request/response schemas.

Dependencies: pydantic
System role: Tutor chat API contracts
"""

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """One turn of a tutor conversation."""

    role: Literal["user", "assistant"] = Field(description="Message role: 'user' or 'assistant'")
    content: str = Field(min_length=1)


class ChatRequest(BaseModel):
    """Conversation so far, ending with the student's latest message."""

    messages: list[ChatMessage] = Field(min_length=1)
    model: str | None = Field(
        default=None,
        description="Model key; defaults to the configured default model",
    )


class ChatResponse(BaseModel):
    """Tutor reply."""

    reply: str
    model: str = Field(description="Model display name")
    model_key: str
