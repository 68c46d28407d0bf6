"""
Chunk store contract and shared batching logic.

Defines the interface the ingestion and retrieval code depend on, and a base
class that implements batched inserts and per-call deadlines on top of two
primitive operations supplied by concrete stores.

Dependencies: asyncio, backend.models.chunk, backend.core.exceptions,
backend.observability.log_utils
System role: Storage boundary for document chunks
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from backend.core.exceptions import ChunkStoreError
from backend.models.chunk import BatchInsertReport, ChunkRecord, FailedBatch, StoredChunk
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BATCH_SIZE = 5


@runtime_checkable
class ChunkStore(Protocol):
    """Operations required from any chunk persistence backend."""

    async def insert_chunks(
        self,
        document_id: str,
        chunks: Sequence[ChunkRecord],
        timeout: float | None = None,
    ) -> BatchInsertReport: ...

    async def list_chunks(
        self,
        document_id: str,
        contains: str | None = None,
        limit: int | None = None,
        timeout: float | None = None,
    ) -> list[StoredChunk]: ...

    async def delete_chunks(self, document_id: str) -> int: ...


class BaseChunkStore(ABC):
    """
    Batched inserts and deadlines shared by all chunk stores.

    Inserts are not idempotent: calling insert_chunks twice for the same
    document stores the chunks twice. Each batch is committed on its own and
    a failed batch never rolls back the ones before it.
    """

    def __init__(
        self,
        batch_size: int = DEFAULT_BATCH_SIZE,
        timeout_seconds: float | None = None,
    ) -> None:
        """
        Initialize store configuration.

        Args:
            batch_size: Number of chunks written per batch
            timeout_seconds: Default deadline for a single store call
        """
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.batch_size = batch_size
        self.timeout_seconds = timeout_seconds

    @abstractmethod
    async def _insert_batch(self, document_id: str, batch: list[ChunkRecord]) -> None:
        """Persist one batch atomically; any exception marks the batch failed."""

    @abstractmethod
    async def _list(
        self,
        document_id: str,
        contains: str | None,
        limit: int | None,
    ) -> list[StoredChunk]:
        """Return chunks ordered by index, filtered and capped, or raise ChunkStoreError."""

    @abstractmethod
    async def delete_chunks(self, document_id: str) -> int:
        """Delete all chunks of a document and return how many were removed."""

    async def _with_deadline(
        self,
        operation: str,
        awaitable: Awaitable[T],
        timeout: float | None,
    ) -> T:
        deadline = timeout if timeout is not None else self.timeout_seconds
        if deadline is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, deadline)
        except asyncio.TimeoutError as e:
            raise ChunkStoreError(
                f"Chunk store {operation} exceeded deadline of {deadline}s",
                operation=operation,
                details={"timeout_seconds": deadline},
            ) from e

    async def insert_chunks(
        self,
        document_id: str,
        chunks: Sequence[ChunkRecord],
        timeout: float | None = None,
    ) -> BatchInsertReport:
        """
        Insert chunks in fixed-size batches.

        Args:
            document_id: Owning document identifier
            chunks: Chunk records in index order
            timeout: Deadline per batch in seconds (defaults to timeout_seconds)

        Returns:
            BatchInsertReport: Stored count and the batches that failed
        """
        report = BatchInsertReport(document_id=document_id, total_count=len(chunks))

        for start in range(0, len(chunks), self.batch_size):
            batch = list(chunks[start : start + self.batch_size])
            try:
                await self._with_deadline(
                    "insert", self._insert_batch(document_id, batch), timeout
                )
            except Exception as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:insert_chunks - Batch failed, continuing with next batch",
                    e,
                    document_id=document_id,
                    start_index=batch[0].index,
                    batch_size=len(batch),
                )
                report.failed_batches.append(
                    FailedBatch(start_index=batch[0].index, size=len(batch), error=str(e))
                )
                continue
            report.stored_count += len(batch)

        logger.info(
            f"{__name__}:insert_chunks - Stored {report.stored_count}/{report.total_count} chunks",
            extra={"document_id": document_id, "failed_batches": len(report.failed_batches)},
        )
        return report

    async def list_chunks(
        self,
        document_id: str,
        contains: str | None = None,
        limit: int | None = None,
        timeout: float | None = None,
    ) -> list[StoredChunk]:
        """
        List a document's chunks ordered by index ascending.

        Args:
            document_id: Owning document identifier
            contains: Case-insensitive substring the chunk text must contain
            limit: Maximum number of chunks (None for all)
            timeout: Deadline in seconds (defaults to timeout_seconds)

        Returns:
            list[StoredChunk]: Matching chunks; empty for unknown documents

        Raises:
            ChunkStoreError: Store unreachable, failing, or past the deadline
        """
        if limit is not None and limit <= 0:
            return []
        return await self._with_deadline(
            "list", self._list(document_id, contains, limit), timeout
        )
