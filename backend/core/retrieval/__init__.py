"""
Chunk retrieval and context assembly.

Exports the substring retriever with positional fallback and the
context assembler consumed by prompt construction.
"""

from backend.core.retrieval.chunk_retriever import (
    CAUSE_NO_MATCH,
    CAUSE_STORE_ERROR,
    CAUSE_STORE_UNAVAILABLE,
    ChunkRetriever,
)
from backend.core.retrieval.context_assembler import (
    CONTEXT_SEPARATOR,
    ContextAssembler,
    assemble_context,
)

__all__ = [
    "CAUSE_NO_MATCH",
    "CAUSE_STORE_ERROR",
    "CAUSE_STORE_UNAVAILABLE",
    "CONTEXT_SEPARATOR",
    "ChunkRetriever",
    "ContextAssembler",
    "assemble_context",
]
