"""
Fixed-size window chunker with overlap.

Splits extracted document text into overlapping character windows for
retrieval-augmented prompting. Windows are trimmed and near-empty fragments
are dropped so they are never stored or retrieved as noise.

Dependencies: backend.models.chunk, backend.core.result, backend.configs
System role: First stage of chunk ingestion
"""

import logging
from collections.abc import Iterable, Iterator

from backend.configs.chunking import ChunkingSettings
from backend.core.exceptions import ValidationError
from backend.core.result import Degraded, Ok, Result
from backend.models.chunk import ChunkMetadata, ChunkRecord

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200
MIN_CHUNK_LENGTH = 50


def _validate_window(chunk_size: int, overlap: int) -> None:
    if chunk_size <= 0:
        raise ValidationError(
            f"chunk_size must be positive, got {chunk_size}", field="chunk_size"
        )
    if overlap < 0:
        raise ValidationError(
            f"overlap must not be negative, got {overlap}", field="overlap"
        )
    # step = chunk_size - overlap must stay positive
    if overlap >= chunk_size:
        raise ValidationError(
            f"overlap ({overlap}) must be smaller than chunk_size ({chunk_size})",
            field="overlap",
        )


class TextChunks:
    """
    Lazy, restartable sequence of chunk texts.

    Every call to iter() walks the text again from offset 0, so the same
    instance can be consumed more than once with identical results.
    """

    def __init__(
        self,
        text: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        overlap: int = DEFAULT_CHUNK_OVERLAP,
        min_length: int = MIN_CHUNK_LENGTH,
    ) -> None:
        _validate_window(chunk_size, overlap)
        self._text = text
        self.chunk_size = chunk_size
        self.overlap = overlap
        self.min_length = min_length

    def windows(self) -> Iterator[tuple[int, int]]:
        """
        Yield raw (start, end) offsets before trimming and filtering.

        Each window spans [start, min(start + chunk_size, len(text))) and the
        next one starts chunk_size - overlap characters later.
        """
        length = len(self._text)
        step = self.chunk_size - self.overlap
        start = 0
        while start < length:
            yield start, min(start + self.chunk_size, length)
            start += step

    def __iter__(self) -> Iterator[str]:
        for start, end in self.windows():
            window = self._text[start:end].strip()
            if window and len(window) >= self.min_length:
                yield window

    def __repr__(self) -> str:
        return (
            f"TextChunks(length={len(self._text)}, chunk_size={self.chunk_size}, "
            f"overlap={self.overlap})"
        )


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
    min_length: int = MIN_CHUNK_LENGTH,
) -> TextChunks:
    """
    Split text into overlapping, trimmed windows.

    Args:
        text: Extracted document text (may be empty)
        chunk_size: Window size in characters
        overlap: Characters shared by consecutive windows, smaller than chunk_size
        min_length: Windows shorter than this after trimming are dropped

    Returns:
        TextChunks: Lazy iterable of chunk texts

    Raises:
        ValidationError: When chunk_size or overlap cannot make forward progress
    """
    return TextChunks(text, chunk_size=chunk_size, overlap=overlap, min_length=min_length)


class TextChunker:
    """Chunker configured once and reused for every ingested document."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        min_chunk_length: int = MIN_CHUNK_LENGTH,
    ) -> None:
        """
        Initialize chunker with window configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
            min_chunk_length: Minimum trimmed length of a kept chunk

        Raises:
            ValidationError: When the overlap is not smaller than the chunk size
        """
        _validate_window(chunk_size, chunk_overlap)
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.min_chunk_length = min_chunk_length

    @classmethod
    def from_settings(cls, settings: ChunkingSettings) -> "TextChunker":
        return cls(
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
            min_chunk_length=settings.min_chunk_length,
        )

    def chunk(self, text: str) -> TextChunks:
        """Return the lazy chunk sequence for text."""
        return chunk_text(
            text,
            chunk_size=self.chunk_size,
            overlap=self.chunk_overlap,
            min_length=self.min_chunk_length,
        )

    def split(self, text: str | None) -> Result[list[str]]:
        """
        Materialise the chunks of a document, degrading instead of raising.

        On any internal fault the result is a single chunk holding at most the
        first chunk_size characters, so ingestion can carry on.

        Args:
            text: Extracted document text; None is treated as empty

        Returns:
            Ok with the chunk texts, or Degraded with the truncated fallback
        """
        if text is None:
            return Ok([])
        if not isinstance(text, str):
            logger.warning(
                f"{__name__}:split - Coercing non-string input to str",
                extra={"input_type": type(text).__name__},
            )
            text = str(text)

        try:
            chunks = list(self.chunk(text))
        except Exception as e:
            logger.exception(
                f"{__name__}:split - Chunking failed, falling back to truncated text",
                extra={"text_length": len(text), "error": str(e)},
            )
            fallback = str(text)[: self.chunk_size].strip()
            return Degraded([fallback] if fallback else [], cause="chunking_failed", error=e)

        if not chunks and text.strip():
            logger.info(
                f"{__name__}:split - Document shorter than minimum chunk length, no chunks produced",
                extra={"text_length": len(text), "min_chunk_length": self.min_chunk_length},
            )
        return Ok(chunks)

    @staticmethod
    def build_records(chunks: Iterable[str]) -> list[ChunkRecord]:
        """
        Assign contiguous zero-based indices and metadata to chunk texts.

        Args:
            chunks: Chunk texts in document order

        Returns:
            list[ChunkRecord]: Records ready for the chunk store
        """
        return [
            ChunkRecord(index=index, text=text, metadata=ChunkMetadata.from_text(text))
            for index, text in enumerate(chunks)
        ]
