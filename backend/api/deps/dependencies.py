"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary, backend.core
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services import (
    AnalysisService,
    ChatService,
    FileService,
    IngestionService,
    RetrievalService,
)
from backend.boundary.chunk_store import BaseChunkStore, get_chunk_store
from backend.boundary.db import get_async_db
from backend.configs import get_settings
from backend.core.analysis import LLMClient
from backend.core.chunking import TextChunker
from backend.core.retrieval import ChunkRetriever


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._chunk_store = None
        self._chunker = None
        self._retriever = None
        self._llm_client = None

    @property
    def chunk_store(self) -> BaseChunkStore:
        """Get cached chunk store."""
        if self._chunk_store is None:
            self._chunk_store = get_chunk_store()
        return self._chunk_store

    @property
    def chunker(self) -> TextChunker:
        """Get cached chunker configured from CHUNKING_* settings."""
        if self._chunker is None:
            self._chunker = TextChunker.from_settings(get_settings().chunking)
        return self._chunker

    @property
    def retriever(self) -> ChunkRetriever:
        """Get cached retriever over the chunk store."""
        if self._retriever is None:
            store_settings = get_settings().chunk_store
            self._retriever = ChunkRetriever(
                store=self.chunk_store,
                fallback_on_no_match=store_settings.fallback_on_no_match,
                timeout_seconds=store_settings.timeout_seconds,
            )
        return self._retriever

    @property
    def llm_client(self) -> LLMClient:
        """Get cached LLM client."""
        if self._llm_client is None:
            self._llm_client = LLMClient(get_settings().llm)
        return self._llm_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._chunk_store = None
        self._chunker = None
        self._retriever = None
        self._llm_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_ingestion_service() -> IngestionService:
    """
    Get ingestion service over the cached chunk store and chunker.

    Returns:
        IngestionService: Ingestion service instance
    """
    cache = get_service_cache()
    return IngestionService(store=cache.chunk_store, chunker=cache.chunker)


def get_retrieval_service() -> RetrievalService:
    """
    Get retrieval service over the cached retriever.

    Returns:
        RetrievalService: Retrieval service instance
    """
    return RetrievalService(
        retriever=get_service_cache().retriever,
        default_limit=get_settings().chunk_store.retrieval_limit,
    )


def get_file_service(
    db: AsyncSession = Depends(get_async_db),
    ingestion: IngestionService = Depends(get_ingestion_service),
) -> FileService:
    """
    Get file service instance.

    Args:
        db: Async database session (injected via Depends)
        ingestion: Ingestion service (injected via Depends)

    Returns:
        FileService: File service instance
    """
    return FileService(db=db, ingestion=ingestion)


def get_llm_client() -> LLMClient:
    """Get cached LLM client."""
    return get_service_cache().llm_client


def get_analysis_service(
    db: AsyncSession = Depends(get_async_db),
    retrieval: RetrievalService = Depends(get_retrieval_service),
    llm_client: LLMClient = Depends(get_llm_client),
) -> AnalysisService:
    """
    Get analysis service instance.

    Args:
        db: Async database session (injected via Depends)
        retrieval: Retrieval service (injected via Depends)
        llm_client: Chat model client (injected via Depends)

    Returns:
        AnalysisService: Analysis service instance
    """
    return AnalysisService(db=db, retrieval=retrieval, llm_client=llm_client)


def get_chat_service(llm_client: LLMClient = Depends(get_llm_client)) -> ChatService:
    """Get tutor chat service over the cached LLM client."""
    return ChatService(llm_client=llm_client)
