"""
Retrieval response schemas.

Dependencies: pydantic
System role: Chunk search and context API contracts
"""

from pydantic import BaseModel, Field


class ChunkSearchResponse(BaseModel):
    """Chunk texts selected for a query."""

    chunks: list[str] = Field(description="Chunk texts in index order")
    degraded: bool = Field(
        default=False,
        description="True when the positional fallback was used",
    )
    cause: str | None = Field(default=None, description="Fallback cause code")


class ContextResponse(BaseModel):
    """Assembled prompt context for a query."""

    context: str = Field(description="Chunk texts joined by blank lines")
    chunk_count: int = Field(default=0)
    degraded: bool = False
    cause: str | None = None
