"""
Test suite for FileService against SQLite and the in-memory chunk store.

Tests file registration with ingestion, listing, lookup and deletion of a
file together with its chunks.

System role: Verification of file use case orchestration
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.file_service import FileService
from backend.application.services.ingestion_service import IngestionService
from backend.boundary.chunk_store import InMemoryChunkStore
from backend.boundary.db.models import FileStatus
from backend.core.exceptions import DocumentNotFoundError


class RejectingStore(InMemoryChunkStore):
    """Store whose every batch fails."""

    async def _insert_batch(self, document_id, batch):
        raise ConnectionRefusedError("database unreachable")


@pytest.fixture
def file_service(test_async_db: AsyncSession, memory_store: InMemoryChunkStore) -> FileService:
    return FileService(test_async_db, IngestionService(memory_store))


class TestCreateFile:
    """Test suite for FileService.create_file()."""

    @pytest.mark.asyncio
    async def test_create_with_text_should_complete_and_ingest(
        self,
        file_service: FileService,
        memory_store: InMemoryChunkStore,
        lecture_text: str,
    ) -> None:
        """Test extracted text is stored, the file completed and its chunks written."""
        # Act
        file, ingestion = await file_service.create_file(
            name="biology.pdf",
            type="application/pdf",
            size=2048,
            extracted_text=lecture_text,
            subject="Biology",
            tags=["cells", "exam"],
        )
        stored = await memory_store.list_chunks(str(file.id))

        # Assert
        assert file.status == FileStatus.COMPLETED
        assert file.progress == 100
        assert file.tags == ["cells", "exam"]
        assert ingestion is not None
        assert not ingestion.is_degraded
        assert ingestion.data.stored_count == len(stored) > 0

    @pytest.mark.asyncio
    async def test_create_without_text_should_stay_processing(
        self, file_service: FileService
    ) -> None:
        """Test a file without text is registered but not ingested."""
        # Act
        file, ingestion = await file_service.create_file(
            name="scan.png", type="image/png", size=10
        )

        # Assert
        assert ingestion is None
        assert file.status == FileStatus.PROCESSING
        assert file.progress == 0
        assert file.tags == []

    @pytest.mark.asyncio
    async def test_create_with_every_batch_failing_should_mark_error(
        self, test_async_db: AsyncSession, lecture_text: str
    ) -> None:
        """Test a file whose chunks could not be stored at all ends in ERROR."""
        # Arrange
        service = FileService(test_async_db, IngestionService(RejectingStore()))

        # Act
        file, ingestion = await service.create_file(
            name="broken.pdf",
            type="application/pdf",
            size=64,
            extracted_text=lecture_text,
        )
        fetched = await service.get_file(file.id)

        # Assert
        assert ingestion.is_degraded
        assert ingestion.data.chunk_count > 0
        assert ingestion.data.stored_count == 0
        assert fetched.status == FileStatus.ERROR
        assert fetched.progress == 0
        assert fetched.extracted_text == lecture_text


class TestReadFiles:
    """Test suite for listing and lookup."""

    @pytest.mark.asyncio
    async def test_list_and_get_should_return_created_files(
        self, file_service: FileService
    ) -> None:
        """Test created files are listed and retrievable by id."""
        # Arrange
        file, _ = await file_service.create_file(name="a.pdf", type="application/pdf", size=1)

        # Act
        listed = await file_service.list_files()
        fetched = await file_service.get_file(file.id)

        # Assert
        assert [item.id for item in listed] == [file.id]
        assert fetched.name == "a.pdf"

    @pytest.mark.asyncio
    async def test_get_unknown_file_should_raise(self, file_service: FileService) -> None:
        """Test a missing file raises DocumentNotFoundError."""
        with pytest.raises(DocumentNotFoundError):
            await file_service.get_file(uuid.uuid4())


class TestDeleteFile:
    """Test suite for FileService.delete_file()."""

    @pytest.mark.asyncio
    async def test_delete_should_remove_file_and_chunks(
        self,
        file_service: FileService,
        memory_store: InMemoryChunkStore,
        lecture_text: str,
    ) -> None:
        """Test deleting a file also removes its stored chunks."""
        # Arrange
        file, _ = await file_service.create_file(
            name="doomed.pdf", type="application/pdf", size=5, extracted_text=lecture_text
        )

        # Act
        await file_service.delete_file(file.id)

        # Assert
        assert await memory_store.list_chunks(str(file.id)) == []
        with pytest.raises(DocumentNotFoundError):
            await file_service.get_file(file.id)

    @pytest.mark.asyncio
    async def test_delete_unknown_file_should_raise(self, file_service: FileService) -> None:
        """Test deleting a missing file raises DocumentNotFoundError."""
        with pytest.raises(DocumentNotFoundError):
            await file_service.delete_file(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_mark_error_should_flag_file(self, file_service: FileService) -> None:
        """Test a file can be marked as failed."""
        file, _ = await file_service.create_file(name="x.pdf", type="application/pdf", size=1)

        updated = await file_service.mark_error(file.id)

        assert updated.status == FileStatus.ERROR
