"""
File domain models and schemas.

Request/response schemas for file registration, listing and ingestion
summaries.

Dependencies: pydantic, backend.boundary.db.models
System role: File API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from backend.boundary.db.models.file_model import FileStatus


class FileCreateRequest(BaseModel):
    """Request schema for registering a file and its extracted text."""

    name: str = Field(min_length=1, max_length=255, description="Original filename")
    type: str = Field(
        default="application/octet-stream",
        description="MIME type reported by the client",
    )
    size: int = Field(default=0, ge=0, description="File size in bytes")
    extracted_text: str | None = Field(
        default=None,
        description="Text extracted from the file; chunked and stored when present",
    )
    subject: str | None = Field(default=None, description="Subject label")
    tags: list[str] = Field(default_factory=list, description="Tags stored as given")


class IngestionSummary(BaseModel):
    """Chunk ingestion outcome returned with a created file."""

    chunk_count: int = Field(description="Chunks produced from the extracted text")
    stored_count: int = Field(description="Chunks persisted")
    failed_batches: int = Field(default=0, description="Insert batches that failed")
    degraded: bool = Field(default=False)
    cause: str | None = Field(default=None, description="Degradation cause code")


class FileResponse(BaseModel):
    """Response schema for file operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    type: str
    size: int
    subject: str | None = None
    status: FileStatus
    progress: int
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class FileCreateResponse(FileResponse):
    """Created file with its ingestion summary."""

    ingestion: IngestionSummary | None = None


class FileListResponse(BaseModel):
    """File list response, newest first."""

    files: list[FileResponse]
    total: int
