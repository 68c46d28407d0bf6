"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database sessions, chunk stores, sample texts, service mocks
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from backend.boundary.chunk_store.memory_chunk_store import InMemoryChunkStore


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine sharing one connection across sessions
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from backend.boundary.db.base import Base

    # Register every model on Base.metadata
    from backend.boundary.db import models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Session factory bound to the in-memory engine."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create in-memory SQLite async database session for testing.

    Yields:
        AsyncSession: Test database session, rolled back afterwards
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def memory_store() -> InMemoryChunkStore:
    """Empty in-memory chunk store with batches of 5."""
    return InMemoryChunkStore(batch_size=5)


@pytest.fixture
def document_id() -> str:
    """Generate a test document ID."""
    return str(uuid.uuid4())


@pytest.fixture
def lecture_text() -> str:
    """
    Multi-paragraph study text, about 2600 characters.

    Long enough for several 1000-character windows.
    """
    paragraphs = [
        "Photosynthesis converts light energy into chemical energy stored in glucose. "
        "It takes place in the chloroplasts of plant cells, where chlorophyll absorbs "
        "mostly red and blue light and reflects green light.",
        "The light-dependent reactions occur in the thylakoid membranes. Water is split, "
        "oxygen is released, and ATP and NADPH are produced to power the next stage.",
        "The Calvin cycle runs in the stroma. Carbon dioxide is fixed by the enzyme "
        "RuBisCO and reduced using ATP and NADPH into three-carbon sugars.",
        "Cellular respiration is the reverse process: glucose is oxidised in the "
        "mitochondria, releasing energy that is captured as ATP through glycolysis, "
        "the Krebs cycle and oxidative phosphorylation.",
    ]
    return ("\n\n".join(paragraphs) + "\n\n") * 3


@pytest.fixture
def mock_db_session():
    """
    Create mock AsyncSession for service tests.

    Returns:
        AsyncMock: Session with async commit and rollback
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session
