"""
Chunk store boundary layer.

Provides chunk persistence behind a single contract:
- SQLChunkStore: Relational store (PostgreSQL in production, SQLite locally)
- InMemoryChunkStore: Process-local store for development and tests

Dependencies: sqlalchemy
System role: Chunk storage adapter for retrieval-augmented prompting
"""

from backend.boundary.chunk_store.base import BaseChunkStore, ChunkStore
from backend.boundary.chunk_store.chunk_store_factory import get_chunk_store
from backend.boundary.chunk_store.memory_chunk_store import InMemoryChunkStore
from backend.boundary.chunk_store.sql_chunk_store import SQLChunkStore

__all__ = [
    "BaseChunkStore",
    "ChunkStore",
    "InMemoryChunkStore",
    "SQLChunkStore",
    "get_chunk_store",
]
