"""
File ORM model.

Represents an uploaded study file with its extracted text and processing state.
Owns the document chunks and cached analysis results derived from it.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: File persistence for ingestion tracking
"""

import enum

from sqlalchemy import JSON, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class FileStatus(str, enum.Enum):
    """
    File processing lifecycle states.

    PROCESSING: Record created, text extraction or chunking in progress
    COMPLETED: Extracted text stored and chunk ingestion attempted
    ERROR: Processing failed; progress reset to 0
    """

    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class FileModel(Base, UUIDMixin, TimestampMixin):
    """
    File ORM model tracking extraction and chunking state.

    Lifecycle: Upload (PROCESSING) -> text stored and chunked (COMPLETED)
    or failure (ERROR). Deleting a file deletes its chunks and cached
    analysis results.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Original filename (255 char limit)
        type: MIME type reported by the client
        size: File size in bytes
        subject: Optional subject label
        status: Current processing state
        progress: Processing progress 0-100
        extracted_text: Full extracted text, null until extraction finishes
        tags: JSON array of tag strings as supplied by the client
        created_at: Upload timestamp (UTC)
        updated_at: Last change timestamp (UTC)

    Relationships:
        chunks: DocumentChunkModel rows (cascade delete)
        analysis_results: AnalysisResultModel rows (cascade delete)
    """

    __tablename__ = "files"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Original filename",
    )

    type: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="application/octet-stream",
        doc="MIME type",
    )

    size: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="File size in bytes",
    )

    subject: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        doc="Subject label",
    )

    status: Mapped[FileStatus] = mapped_column(
        Enum(FileStatus, native_enum=False),
        nullable=False,
        default=FileStatus.PROCESSING,
    )

    progress: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    extracted_text: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        doc="Full text extracted from the file",
    )

    tags: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    # Relationships
    chunks = relationship(
        "DocumentChunkModel",
        back_populates="file",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    analysis_results = relationship(
        "AnalysisResultModel",
        back_populates="file",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
