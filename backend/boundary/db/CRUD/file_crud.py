"""
File CRUD operations.

Provides Create, Read, Update, Delete operations for FileModel
with status transitions and cascading deletion of derived rows.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: File persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.analysis_result_model import AnalysisResultModel
from backend.boundary.db.models.document_chunk_model import DocumentChunkModel
from backend.boundary.db.models.file_model import FileModel, FileStatus


class FileCRUD(BaseCRUD[FileModel]):
    """
    CRUD operations for FileModel.

    Extends BaseCRUD with listing newest first and processing status updates.
    """

    def __init__(self) -> None:
        """Initialize FileCRUD with FileModel."""
        super().__init__(FileModel)

    async def list_recent(
        self,
        session: AsyncSession,
        limit: int | None = None,
    ) -> Sequence[FileModel]:
        """
        Retrieve files ordered by upload time, newest first.

        Args:
            session: Async database session
            limit: Maximum number of files to return

        Returns:
            Sequence of FileModel rows
        """
        return await self.get_all(session, limit=limit, newest_first=True)

    async def mark_completed(
        self,
        session: AsyncSession,
        id: UUID,
        extracted_text: str,
    ) -> FileModel | None:
        """
        Store extracted text and mark the file as fully processed.

        Args:
            session: Async database session
            id: File UUID
            extracted_text: Text extracted from the file

        Returns:
            Updated FileModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            id,
            extracted_text=extracted_text,
            status=FileStatus.COMPLETED,
            progress=100,
        )

    async def mark_error(self, session: AsyncSession, id: UUID) -> FileModel | None:
        """
        Mark file as failed and reset progress.

        Args:
            session: Async database session
            id: File UUID

        Returns:
            Updated FileModel if found, None otherwise
        """
        return await self.update_by_id(session, id, status=FileStatus.ERROR, progress=0)

    async def delete_with_children(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a file together with its chunks and cached analysis results.

        Children are removed explicitly because bulk deletes bypass ORM
        cascades and SQLite does not enforce ON DELETE CASCADE by default.

        Args:
            session: Async database session
            id: File UUID

        Returns:
            True if the file was deleted, False if not found
        """
        await session.execute(delete(DocumentChunkModel).where(DocumentChunkModel.file_id == id))
        await session.execute(delete(AnalysisResultModel).where(AnalysisResultModel.file_id == id))
        return await self.delete_by_id(session, id)


file_crud = FileCRUD()
