"""
Document chunk CRUD operations.

Provides bulk insert, ordered lookup with optional substring filter, and
per-file deletion for DocumentChunkModel.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Chunk persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.document_chunk_model import DocumentChunkModel
from backend.models.chunk import ChunkRecord


class DocumentChunkCRUD(BaseCRUD[DocumentChunkModel]):
    """
    CRUD operations for DocumentChunkModel.

    Every read is scoped to one file and ordered by chunk_index ascending.
    """

    def __init__(self) -> None:
        """Initialize DocumentChunkCRUD with DocumentChunkModel."""
        super().__init__(DocumentChunkModel)

    async def bulk_create(
        self,
        session: AsyncSession,
        file_id: UUID,
        records: Sequence[ChunkRecord],
    ) -> list[DocumentChunkModel]:
        """
        Insert chunk records for a file in a single flush.

        Args:
            session: Async database session
            file_id: Owning file UUID
            records: Chunk records with index, text and metadata

        Returns:
            Created DocumentChunkModel rows
        """
        rows = [
            {
                "file_id": file_id,
                "chunk_index": record.index,
                "chunk_text": record.text,
                "chunk_metadata": record.metadata.model_dump(),
            }
            for record in records
        ]
        return await self.create_many(session, rows)

    async def list_by_file(
        self,
        session: AsyncSession,
        file_id: UUID,
        contains: str | None = None,
        limit: int | None = None,
    ) -> Sequence[DocumentChunkModel]:
        """
        Retrieve chunks of a file ordered by chunk_index.

        Args:
            session: Async database session
            file_id: Owning file UUID
            contains: Case-insensitive literal substring the text must contain
            limit: Maximum number of chunks to return

        Returns:
            Sequence of DocumentChunkModel rows
        """
        stmt = select(DocumentChunkModel).where(DocumentChunkModel.file_id == file_id)
        if contains:
            # autoescape makes % and _ in the query match literally
            stmt = stmt.where(DocumentChunkModel.chunk_text.icontains(contains, autoescape=True))
        stmt = stmt.order_by(DocumentChunkModel.chunk_index.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_by_file(self, session: AsyncSession, file_id: UUID) -> int:
        """Count stored chunks of a file."""
        stmt = select(func.count()).select_from(DocumentChunkModel).where(
            DocumentChunkModel.file_id == file_id
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def delete_by_file(self, session: AsyncSession, file_id: UUID) -> int:
        """
        Delete all chunks of a file.

        Args:
            session: Async database session
            file_id: Owning file UUID

        Returns:
            Number of deleted rows
        """
        stmt = delete(DocumentChunkModel).where(DocumentChunkModel.file_id == file_id)
        result = await session.execute(stmt)
        return result.rowcount or 0


document_chunk_crud = DocumentChunkCRUD()
