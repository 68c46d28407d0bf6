"""
Chunk store factory for selecting between the database and in-memory stores.

Depends on CHUNK_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: backend.boundary.chunk_store, backend.configs
System role: Chunk store instantiation and selection
"""

import logging

from backend.boundary.chunk_store.base import BaseChunkStore
from backend.boundary.chunk_store.memory_chunk_store import InMemoryChunkStore
from backend.boundary.chunk_store.sql_chunk_store import SQLChunkStore
from backend.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def get_chunk_store(settings: Settings | None = None) -> BaseChunkStore:
    """
    Factory function to get chunk store based on environment configuration.

    Args:
        settings: Application settings (defaults to cached settings)

    Returns:
        SQLChunkStore or InMemoryChunkStore: Configured chunk store instance

    Raises:
        ValueError: If CHUNK_STORE_STORE_TYPE is invalid
    """
    settings = settings or get_settings()
    store_type = settings.chunk_store.store_type.lower()
    batch_size = settings.chunking.insert_batch_size
    timeout_seconds = settings.chunk_store.timeout_seconds

    if store_type == "memory":
        logger.info(f"{__name__}:get_chunk_store - Creating in-memory chunk store (local dev mode)")
        return InMemoryChunkStore(batch_size=batch_size, timeout_seconds=timeout_seconds)

    elif store_type == "sql":
        logger.info(f"{__name__}:get_chunk_store - Creating SQL chunk store")
        return SQLChunkStore(batch_size=batch_size, timeout_seconds=timeout_seconds)

    else:
        raise ValueError(
            f"Invalid CHUNK_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'sql' or 'memory' (dev)."
        )
