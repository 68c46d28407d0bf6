"""
Chunk domain models.

Write payload, read payload and batch reports for document chunks used in
retrieval-augmented prompting.

Dependencies: pydantic
System role: Document chunk data structures
"""

from pydantic import BaseModel, ConfigDict, Field


class ChunkMetadata(BaseModel):
    """Derived attributes computed once when a chunk is created."""

    model_config = ConfigDict(frozen=True)

    chunk_length: int = Field(description="Character length of the chunk text")
    word_count: int = Field(description="Whitespace-separated token count")

    @classmethod
    def from_text(cls, text: str) -> "ChunkMetadata":
        return cls(chunk_length=len(text), word_count=len(text.split()))


class ChunkRecord(BaseModel):
    """Chunk as handed to the store for insertion."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Zero-based position within the document")
    text: str = Field(min_length=1, description="Chunk text content")
    metadata: ChunkMetadata = Field(description="Length and word count")


class StoredChunk(ChunkRecord):
    """Chunk as returned by the store."""

    document_id: str = Field(description="Identifier of the owning document")


class FailedBatch(BaseModel):
    """Insert batch that the store rejected."""

    start_index: int = Field(description="Index of the first chunk in the batch")
    size: int = Field(description="Number of chunks in the batch")
    error: str = Field(description="Error message reported by the store")


class BatchInsertReport(BaseModel):
    """Outcome of a batched chunk insert."""

    document_id: str
    total_count: int = Field(default=0, description="Chunks submitted")
    stored_count: int = Field(default=0, description="Chunks committed")
    failed_batches: list[FailedBatch] = Field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_batches)


class IngestionReport(BaseModel):
    """Summary of chunking and persisting one document."""

    document_id: str
    chunk_count: int = Field(default=0, description="Chunks produced by the chunker")
    stored_count: int = Field(default=0, description="Chunks persisted")
    failed_batches: list[FailedBatch] = Field(default_factory=list)
    chunking_degraded: bool = Field(
        default=False,
        description="True when the chunker fell back to a single truncated chunk",
    )
