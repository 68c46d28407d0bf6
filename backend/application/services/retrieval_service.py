"""
Retrieval service orchestrator.

Selects chunks for a file and assembles them into prompt context.

Dependencies: backend.core.retrieval
System role: Retrieval use case orchestration
"""

from dataclasses import dataclass
from uuid import UUID

from backend.core.result import Result
from backend.core.retrieval import ChunkRetriever, ContextAssembler
from backend.core.retrieval.chunk_retriever import DEFAULT_LIMIT


@dataclass(frozen=True)
class AssembledContext:
    """Context string with the retrieval outcome it came from."""

    context: str
    chunk_count: int
    degraded: bool
    cause: str | None


class RetrievalService:
    """Chunk search and context assembly for a single file."""

    def __init__(
        self,
        retriever: ChunkRetriever,
        assembler: ContextAssembler | None = None,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            retriever: Chunk retriever with positional fallback
            assembler: Joins chunk texts into context
            default_limit: Chunk count used when a call gives no limit
        """
        self.retriever = retriever
        self.assembler = assembler or ContextAssembler()
        self.default_limit = default_limit

    async def search_chunks(
        self,
        file_id: UUID | str,
        query: str | None,
        limit: int | None = None,
    ) -> Result[list[str]]:
        """
        Select up to limit chunk texts of a file for a query.

        Never raises on store faults; see ChunkRetriever.retrieve.
        """
        if limit is None:
            limit = self.default_limit
        return await self.retriever.retrieve(str(file_id), query, limit)

    async def build_context(
        self,
        file_id: UUID | str,
        query: str | None,
        limit: int | None = None,
    ) -> AssembledContext:
        """
        Retrieve chunks and join them into one context string.

        Args:
            file_id: File whose chunks are searched
            query: Free-text query
            limit: Maximum number of chunks (defaults to default_limit)

        Returns:
            AssembledContext: Context plus degraded flag and cause
        """
        result = await self.search_chunks(file_id, query, limit)
        return AssembledContext(
            context=self.assembler.assemble(result.data),
            chunk_count=len(result.data),
            degraded=result.is_degraded,
            cause=result.cause,
        )
