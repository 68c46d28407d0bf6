"""
Document chunk ORM model.

Stores one overlapping text window of a file's extracted text with its
ordinal index, used for substring retrieval and positional fallback.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Chunk persistence for retrieval-augmented prompting
"""

import uuid

from sqlalchemy import JSON, ForeignKey, Index, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class DocumentChunkModel(Base, UUIDMixin, TimestampMixin):
    """
    Document chunk ORM model.

    Chunks are written once per extraction and never updated. Index values
    per file are contiguous from 0 unless a batch insert partially failed.
    No unique constraint on (file_id, chunk_index): inserting the same
    document twice duplicates rows.

    Attributes:
        id: UUID primary key (auto-generated)
        file_id: Owning file (ON DELETE CASCADE)
        chunk_index: Zero-based position within the file
        chunk_text: Trimmed window text
        chunk_metadata: JSON with chunk_length and word_count (column "metadata")
    """

    __tablename__ = "document_chunks"
    __table_args__ = (
        Index("ix_document_chunks_file_id_chunk_index", "file_id", "chunk_index"),
    )

    file_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("files.id", ondelete="CASCADE"),
        nullable=False,
    )

    chunk_index: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        doc="Zero-based position within the file",
    )

    chunk_text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # "metadata" is reserved on declarative classes
    chunk_metadata: Mapped[dict] = mapped_column(
        "metadata",
        JSON,
        nullable=False,
        default=dict,
    )

    # Relationships
    file = relationship("FileModel", back_populates="chunks")
