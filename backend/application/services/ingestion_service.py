"""
Ingestion service orchestrator.

Turns a document's extracted text into stored chunks: chunk, assign indices
and metadata, then persist in batches. Partial persistence and chunker
fallbacks are reported, never raised.

Dependencies: backend.core.chunking, backend.boundary.chunk_store, backend.models
System role: Chunk ingestion use case orchestration
"""

import logging

from backend.boundary.chunk_store.base import ChunkStore
from backend.core.chunking import TextChunker
from backend.core.exceptions import ValidationError
from backend.core.result import Degraded, Ok, Result
from backend.models.chunk import FailedBatch, IngestionReport
from backend.observability.log_utils import log_exception_with_context, log_result

logger = logging.getLogger(__name__)

CAUSE_PARTIAL_INSERT = "partial_insert"
CAUSE_STORE_FAILED = "store_failed"


class IngestionService:
    """Chunk and persist extracted document text."""

    def __init__(self, store: ChunkStore, chunker: TextChunker | None = None) -> None:
        """
        Initialize ingestion service.

        Args:
            store: Chunk store receiving the records
            chunker: Configured chunker (defaults to 1000/200 windows)
        """
        self.store = store
        self.chunker = chunker or TextChunker()

    async def ingest(
        self,
        document_id: str,
        text: str | None,
        timeout: float | None = None,
    ) -> Result[IngestionReport]:
        """
        Chunk a document and store its chunks.

        Steps:
        1. Validate identifiers and text type
        2. Split text into windows (degrades to one truncated chunk on fault)
        3. Build indexed records with metadata
        4. Insert in batches; failed batches are skipped and reported

        Args:
            document_id: Owning document identifier
            text: Extracted text; None is treated as empty
            timeout: Deadline per store batch in seconds

        Returns:
            Ok with the ingestion report, or Degraded when chunking fell back
            or any batch was not stored

        Raises:
            ValidationError: Blank document id or non-string text
        """
        if not document_id or not str(document_id).strip():
            raise ValidationError("document_id must not be blank", field="document_id")
        if text is not None and not isinstance(text, str):
            raise ValidationError(
                f"text must be a string, got {type(text).__name__}", field="text"
            )

        chunked = self.chunker.split(text)
        records = self.chunker.build_records(chunked.data)
        report = IngestionReport(
            document_id=document_id,
            chunk_count=len(records),
            chunking_degraded=chunked.is_degraded,
        )

        if not records:
            if chunked.is_degraded:
                result = Degraded(report, cause=chunked.cause, error=chunked.error)
            else:
                result = Ok(report)
            log_result(
                logger,
                f"{__name__}:ingest - No chunks to store",
                result,
                document_id=document_id,
            )
            return result

        try:
            insert_report = await self.store.insert_chunks(document_id, records, timeout=timeout)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:ingest - Chunk store failed, nothing stored",
                e,
                document_id=document_id,
                chunk_count=len(records),
            )
            report.failed_batches = [
                FailedBatch(start_index=0, size=len(records), error=str(e))
            ]
            return Degraded(report, cause=CAUSE_STORE_FAILED, error=e)

        report.stored_count = insert_report.stored_count
        report.failed_batches = list(insert_report.failed_batches)

        if chunked.is_degraded:
            result = Degraded(report, cause=chunked.cause, error=chunked.error)
        elif insert_report.is_partial:
            result = Degraded(report, cause=CAUSE_PARTIAL_INSERT)
        else:
            result = Ok(report)

        log_result(
            logger,
            f"{__name__}:ingest - Stored {report.stored_count}/{report.chunk_count} chunks",
            result,
            document_id=document_id,
        )
        return result
