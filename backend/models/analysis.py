"""
Analysis request/response schemas.

Dependencies: pydantic, backend.boundary.db.models
System role: Analysis API contracts
"""

import uuid

from pydantic import BaseModel, Field

from backend.boundary.db.models.analysis_result_model import AnalysisAction


class AnalysisRequest(BaseModel):
    """Request schema for generating study material from a file."""

    file_name: str = Field(min_length=1, description="Display name of the analysed file")
    file_id: uuid.UUID | None = Field(
        default=None,
        description="Stored file id; enables cached results and retrieval",
    )
    action: str = Field(description="One of quiz, flashcards, chat")
    query: str | None = Field(
        default=None,
        description="Question or focus; selects chunks when present",
    )
    model: str | None = Field(
        default=None,
        description="Model key; defaults to the configured default model",
    )


class AnalysisResponse(BaseModel):
    """Generated analysis text."""

    analysis: str
    action: AnalysisAction
    file_name: str
    model: str = Field(description="Model display name")
    model_key: str
    cached: bool = False
