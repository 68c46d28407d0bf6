"""
SQL-backed chunk store.

Persists chunks in the document_chunks table through DocumentChunkCRUD,
opening a fresh session per batch or lookup so every batch commits on its own.

Dependencies: sqlalchemy, backend.boundary.db, backend.boundary.chunk_store.base
System role: Production chunk store
"""

import logging
import uuid
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.chunk_store.base import DEFAULT_BATCH_SIZE, BaseChunkStore
from backend.boundary.db.CRUD.document_chunk_crud import document_chunk_crud
from backend.boundary.db.connection import get_async_session_factory
from backend.boundary.db.models.document_chunk_model import DocumentChunkModel
from backend.core.exceptions import ChunkStoreError
from backend.models.chunk import ChunkMetadata, ChunkRecord, StoredChunk

logger = logging.getLogger(__name__)


def _parse_document_id(document_id: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(document_id))
    except ValueError:
        return None


class SQLChunkStore(BaseChunkStore):
    """Chunk store over the relational database."""

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession] | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        timeout_seconds: float | None = None,
    ) -> None:
        """
        Initialize SQL chunk store.

        Args:
            session_factory: Callable returning a new AsyncSession (defaults to
                the application session factory)
            batch_size: Number of chunks written per batch
            timeout_seconds: Default deadline for a single store call
        """
        super().__init__(batch_size=batch_size, timeout_seconds=timeout_seconds)
        self._session_factory = session_factory or get_async_session_factory()

    async def _insert_batch(self, document_id: str, batch: list[ChunkRecord]) -> None:
        file_id = _parse_document_id(document_id)
        if file_id is None:
            raise ChunkStoreError(
                f"Invalid document id: {document_id}",
                operation="insert",
                details={"document_id": document_id},
            )

        async with self._session_factory() as session:
            try:
                await document_chunk_crud.bulk_create(session, file_id, batch)
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise ChunkStoreError(
                    "Failed to insert chunk batch",
                    operation="insert",
                    details={"document_id": document_id, "error": str(e)},
                ) from e

    async def _list(
        self,
        document_id: str,
        contains: str | None,
        limit: int | None,
    ) -> list[StoredChunk]:
        file_id = _parse_document_id(document_id)
        if file_id is None:
            logger.debug(f"{__name__}:_list - Non-UUID document id {document_id!r}, no chunks")
            return []

        async with self._session_factory() as session:
            try:
                rows = await document_chunk_crud.list_by_file(
                    session, file_id, contains=contains, limit=limit
                )
            except SQLAlchemyError as e:
                raise ChunkStoreError(
                    "Failed to list chunks",
                    operation="list",
                    details={"document_id": document_id, "error": str(e)},
                ) from e
        return [self._to_stored(row) for row in rows]

    async def delete_chunks(self, document_id: str) -> int:
        file_id = _parse_document_id(document_id)
        if file_id is None:
            return 0

        async with self._session_factory() as session:
            try:
                deleted = await document_chunk_crud.delete_by_file(session, file_id)
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise ChunkStoreError(
                    "Failed to delete chunks",
                    operation="delete",
                    details={"document_id": document_id, "error": str(e)},
                ) from e
        return deleted

    @staticmethod
    def _to_stored(row: DocumentChunkModel) -> StoredChunk:
        metadata = (
            ChunkMetadata(**row.chunk_metadata)
            if row.chunk_metadata
            else ChunkMetadata.from_text(row.chunk_text)
        )
        return StoredChunk(
            document_id=str(row.file_id),
            index=row.chunk_index,
            text=row.chunk_text,
            metadata=metadata,
        )
