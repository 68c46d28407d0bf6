"""
In-memory chunk store for local development.

Keeps chunks in a process-local dict keyed by document id, with the same
batching, ordering and filtering semantics as the SQL store.

Dependencies: backend.boundary.chunk_store.base
System role: Development and test chunk store
"""

from backend.boundary.chunk_store.base import BaseChunkStore
from backend.models.chunk import ChunkRecord, StoredChunk


class InMemoryChunkStore(BaseChunkStore):
    """Chunk store backed by a dict of lists."""

    def __init__(self, batch_size: int = 5, timeout_seconds: float | None = None) -> None:
        super().__init__(batch_size=batch_size, timeout_seconds=timeout_seconds)
        self._chunks: dict[str, list[StoredChunk]] = {}

    async def _insert_batch(self, document_id: str, batch: list[ChunkRecord]) -> None:
        stored = [
            StoredChunk(document_id=document_id, **record.model_dump())
            for record in batch
        ]
        self._chunks.setdefault(document_id, []).extend(stored)

    async def _list(
        self,
        document_id: str,
        contains: str | None,
        limit: int | None,
    ) -> list[StoredChunk]:
        chunks = sorted(self._chunks.get(document_id, []), key=lambda chunk: chunk.index)
        if contains:
            needle = contains.lower()
            chunks = [chunk for chunk in chunks if needle in chunk.text.lower()]
        if limit is not None:
            chunks = chunks[:limit]
        return chunks

    async def delete_chunks(self, document_id: str) -> int:
        return len(self._chunks.pop(document_id, []))

    def clear(self) -> None:
        """Forget every stored chunk."""
        self._chunks.clear()
