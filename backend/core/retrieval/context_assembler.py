"""
Context assembly for prompt construction.

Joins retrieved chunk texts into the single context string that prompt
templates embed. No truncation, deduplication or summarisation happens here.

Dependencies: None
System role: Last step before prompt construction
"""

from collections.abc import Iterable

CONTEXT_SEPARATOR = "\n\n"


def assemble_context(chunks: Iterable[str], separator: str = CONTEXT_SEPARATOR) -> str:
    """
    Join chunk texts in order with a blank line between them.

    Args:
        chunks: Chunk texts in retrieval order
        separator: String placed between chunks

    Returns:
        str: Joined context; empty string for no chunks
    """
    return separator.join(chunks)


class ContextAssembler:
    """Injectable wrapper around assemble_context."""

    def __init__(self, separator: str = CONTEXT_SEPARATOR) -> None:
        self.separator = separator

    def assemble(self, chunks: Iterable[str]) -> str:
        return assemble_context(chunks, self.separator)
