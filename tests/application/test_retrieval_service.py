"""
Test suite for RetrievalService.

System role: Verification of chunk search and context assembly
"""

import pytest

from backend.application.services.retrieval_service import RetrievalService
from backend.boundary.chunk_store import InMemoryChunkStore
from backend.core.chunking import TextChunker
from backend.core.retrieval import ChunkRetriever

TEXTS = [
    "Photosynthesis converts light energy into chemical energy in plants.",
    "Mitochondria produce ATP through cellular respiration in the cell.",
    "Chlorophyll absorbs light most strongly in the blue and red spectrum.",
    "Ribosomes translate messenger RNA into chains of amino acids.",
]


@pytest.fixture
async def service(memory_store: InMemoryChunkStore, document_id: str) -> RetrievalService:
    await memory_store.insert_chunks(document_id, TextChunker.build_records(TEXTS))
    return RetrievalService(ChunkRetriever(memory_store), default_limit=3)


class TestSearchChunks:
    """Test suite for RetrievalService.search_chunks()."""

    @pytest.mark.asyncio
    async def test_search_should_return_matching_chunks(
        self, service: RetrievalService, document_id: str
    ) -> None:
        """Test case-insensitive matches come back in index order."""
        result = await service.search_chunks(document_id, "LIGHT")

        assert not result.is_degraded
        assert result.data == [TEXTS[0], TEXTS[2]]

    @pytest.mark.asyncio
    async def test_search_without_limit_should_use_default_limit(
        self, service: RetrievalService, document_id: str
    ) -> None:
        """Test a missing limit falls back to the configured default."""
        result = await service.search_chunks(document_id, None)

        assert result.data == TEXTS[:3]

    @pytest.mark.asyncio
    async def test_search_without_match_should_fall_back(
        self, service: RetrievalService, document_id: str
    ) -> None:
        """Test an unmatched query returns the first chunks as degraded."""
        result = await service.search_chunks(document_id, "plate tectonics", limit=2)

        assert result.is_degraded
        assert result.cause == "no_match"
        assert result.data == TEXTS[:2]


class TestBuildContext:
    """Test suite for RetrievalService.build_context()."""

    @pytest.mark.asyncio
    async def test_build_context_should_join_chunks(
        self, service: RetrievalService, document_id: str
    ) -> None:
        """Test chunk texts are joined with blank lines."""
        assembled = await service.build_context(document_id, "light")

        assert assembled.context == f"{TEXTS[0]}\n\n{TEXTS[2]}"
        assert assembled.chunk_count == 2
        assert assembled.degraded is False
        assert assembled.cause is None

    @pytest.mark.asyncio
    async def test_build_context_for_unknown_file_should_be_empty(
        self, service: RetrievalService
    ) -> None:
        """Test a file without chunks gives empty context."""
        assembled = await service.build_context("unknown-file", "light")

        assert assembled.context == ""
        assert assembled.chunk_count == 0
