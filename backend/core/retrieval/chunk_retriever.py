"""
Chunk retrieval with positional fallback.

Selects up to `limit` chunks of a document whose text contains the query
(case-insensitive), ordered by index. When the store fails, or the query
matches nothing, the first `limit` chunks in stored order are returned
instead, so prompt construction never blocks on a store fault.

Dependencies: backend.boundary.chunk_store, backend.core.result
System role: RAG retrieval business logic
"""

import logging

from backend.boundary.chunk_store.base import ChunkStore
from backend.core.result import Degraded, Ok, Result
from backend.models.chunk import StoredChunk

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5

CAUSE_STORE_ERROR = "store_error"
CAUSE_NO_MATCH = "no_match"
CAUSE_STORE_UNAVAILABLE = "store_unavailable"


class ChunkRetriever:
    """Substring retrieval over a chunk store."""

    def __init__(
        self,
        store: ChunkStore,
        fallback_on_no_match: bool = True,
        timeout_seconds: float | None = None,
    ) -> None:
        """
        Initialize retriever with its chunk store.

        Args:
            store: Chunk store to read from
            fallback_on_no_match: Return positional chunks when nothing matches
            timeout_seconds: Deadline passed to each store lookup
        """
        self._store = store
        self._fallback_on_no_match = fallback_on_no_match
        self._timeout_seconds = timeout_seconds

    async def retrieve(
        self,
        document_id: str,
        query: str | None,
        limit: int = DEFAULT_LIMIT,
    ) -> Result[list[str]]:
        """
        Retrieve chunk texts relevant to a query.

        Never raises on store faults: they degrade to the positional
        fallback, and if that fails too, to an empty list.

        Args:
            document_id: Owning document identifier
            query: Free-text query; blank queries return positional chunks
            limit: Maximum number of chunks to return

        Returns:
            Ok with matching chunk texts, or Degraded with the fallback texts
        """
        if limit <= 0:
            return Ok([])

        if not query or not query.strip():
            return await self._positional(document_id, limit)

        try:
            matches = await self._store.list_chunks(
                document_id,
                contains=query,
                limit=limit,
                timeout=self._timeout_seconds,
            )
        except Exception as e:
            logger.warning(
                f"{__name__}:retrieve - Substring lookup failed, using positional fallback",
                extra={"document_id": document_id, "error": str(e)},
            )
            return await self._fallback(document_id, limit, CAUSE_STORE_ERROR, e)

        if not matches and self._fallback_on_no_match:
            logger.info(
                f"{__name__}:retrieve - No chunk matched query, using positional fallback",
                extra={"document_id": document_id, "query_length": len(query)},
            )
            return await self._fallback(document_id, limit, CAUSE_NO_MATCH, None)

        return Ok(self._texts(matches, limit))

    async def retrieve_texts(
        self,
        document_id: str,
        query: str | None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[str]:
        """Retrieve chunk texts, discarding whether the fallback was used."""
        result = await self.retrieve(document_id, query, limit)
        return result.data

    async def _positional(self, document_id: str, limit: int) -> Result[list[str]]:
        try:
            chunks = await self._store.list_chunks(
                document_id, limit=limit, timeout=self._timeout_seconds
            )
        except Exception as e:
            logger.error(
                f"{__name__}:_positional - Chunk store unavailable",
                extra={"document_id": document_id, "error": str(e)},
            )
            return Degraded([], cause=CAUSE_STORE_UNAVAILABLE, error=e)
        return Ok(self._texts(chunks, limit))

    async def _fallback(
        self,
        document_id: str,
        limit: int,
        cause: str,
        error: BaseException | None,
    ) -> Result[list[str]]:
        positional = await self._positional(document_id, limit)
        if positional.is_degraded:
            return positional
        return Degraded(positional.data, cause=cause, error=error)

    @staticmethod
    def _texts(chunks: list[StoredChunk], limit: int) -> list[str]:
        # never more than limit, whatever the store returned
        return [chunk.text for chunk in chunks[:limit]]
