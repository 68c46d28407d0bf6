"""
Text chunking for retrieval-augmented prompting.

Exports the fixed-size window chunker and its lazy chunk sequence.
"""

from backend.core.chunking.text_chunker import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    MIN_CHUNK_LENGTH,
    TextChunker,
    TextChunks,
    chunk_text,
)

__all__ = [
    "DEFAULT_CHUNK_OVERLAP",
    "DEFAULT_CHUNK_SIZE",
    "MIN_CHUNK_LENGTH",
    "TextChunker",
    "TextChunks",
    "chunk_text",
]
