"""
File service orchestrator.

Coordinates file registration, listing and deletion, and hands extracted
text to the ingestion service.

Dependencies: backend.boundary.db.CRUD, backend.application.services.ingestion_service
System role: File use case orchestration
"""

import logging
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.ingestion_service import IngestionService
from backend.boundary.db.CRUD.file_crud import file_crud
from backend.boundary.db.models.file_model import FileModel, FileStatus
from backend.core.exceptions import ChunkStoreError, DocumentNotFoundError
from backend.core.result import Result
from backend.models.chunk import IngestionReport
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class FileService:
    """File service orchestrator."""

    def __init__(self, db: AsyncSession, ingestion: IngestionService) -> None:
        """
        Initialize file service.

        Args:
            db: Async SQLAlchemy session
            ingestion: Service chunking and storing extracted text
        """
        self.db = db
        self.ingestion = ingestion

    async def create_file(
        self,
        name: str,
        type: str,
        size: int,
        extracted_text: str | None = None,
        subject: str | None = None,
        tags: list[str] | None = None,
    ) -> tuple[FileModel, Result[IngestionReport] | None]:
        """
        Register a file and ingest its extracted text.

        Steps:
        1. Create record with PROCESSING status
        2. Without extracted text, stop there (text arrives later)
        3. Store text and mark COMPLETED, committing before chunks reference it
        4. Chunk and store; degradation is reported, never raised
        5. Mark ERROR when chunks were produced but none could be stored

        Args:
            name: Original filename
            type: MIME type
            size: Size in bytes
            extracted_text: Text extracted from the file
            subject: Optional subject label
            tags: Tags stored as given

        Returns:
            tuple: Persisted file and the ingestion result (None without text)
        """
        file = await file_crud.create(
            self.db,
            name=name,
            type=type,
            size=size,
            subject=subject,
            tags=list(tags or []),
            status=FileStatus.PROCESSING,
            progress=0,
        )
        logger.info(
            f"{__name__}:create_file - File registered",
            extra={"file_id": str(file.id), "file_name": name, "size": size},
        )

        if extracted_text is None:
            await self.db.commit()
            return file, None

        file = await file_crud.mark_completed(self.db, file.id, extracted_text)
        await self.db.commit()

        ingestion = await self.ingestion.ingest(str(file.id), extracted_text)
        report = ingestion.data
        if report.chunk_count and not report.stored_count:
            logger.warning(
                f"{__name__}:create_file - No chunks stored, marking file as error",
                extra={"file_id": str(file.id), "cause": ingestion.cause},
            )
            file = await self.mark_error(file.id)
        return file, ingestion

    async def list_files(self, limit: int | None = None) -> Sequence[FileModel]:
        """List files newest first."""
        return await file_crud.list_recent(self.db, limit=limit)

    async def get_file(self, file_id: UUID) -> FileModel:
        """
        Get file by ID.

        Raises:
            DocumentNotFoundError: File does not exist
        """
        file = await file_crud.get_by_id(self.db, file_id)
        if file is None:
            raise DocumentNotFoundError(str(file_id))
        return file

    async def delete_file(self, file_id: UUID) -> None:
        """
        Delete a file together with its chunks and cached analysis results.

        Raises:
            DocumentNotFoundError: File does not exist
        """
        deleted = await file_crud.delete_with_children(self.db, file_id)
        if not deleted:
            await self.db.rollback()
            raise DocumentNotFoundError(str(file_id))
        await self.db.commit()

        # chunk stores outside the database keep their own copy
        try:
            await self.ingestion.store.delete_chunks(str(file_id))
        except ChunkStoreError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:delete_file - Chunk store cleanup failed",
                e,
                file_id=file_id,
            )

        logger.info(
            f"{__name__}:delete_file - File deleted with its chunks",
            extra={"file_id": str(file_id)},
        )

    async def mark_error(self, file_id: UUID) -> FileModel:
        """
        Mark a file as failed.

        Raises:
            DocumentNotFoundError: File does not exist
        """
        file = await file_crud.mark_error(self.db, file_id)
        if file is None:
            raise DocumentNotFoundError(str(file_id))
        await self.db.commit()
        return file
