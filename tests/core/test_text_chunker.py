"""
Test suite for the fixed-size window chunker.

Tests window coverage and ordering, minimum length filtering, determinism,
configuration validation and the degraded fallback of TextChunker.split.

System role: Verification of chunk ingestion's first stage
"""

import pytest

from backend.configs.chunking import ChunkingSettings
from backend.core.chunking import TextChunker, chunk_text
from backend.core.exceptions import ValidationError


class ExplodingText(str):
    """String whose slicing fails, to force the chunker's fallback path."""

    def __getitem__(self, key):
        raise RuntimeError("slicing failed")


class TestChunkWindows:
    """Test suite for TextChunks.windows() offsets."""

    def test_windows_should_cover_whole_text_without_gaps(self, lecture_text: str) -> None:
        """Test consecutive windows overlap and the last one reaches the end."""
        # Arrange
        chunks = chunk_text(lecture_text, chunk_size=1000, overlap=200)

        # Act
        windows = list(chunks.windows())

        # Assert
        assert windows[0][0] == 0
        assert windows[-1][1] == len(lecture_text)
        for (_, previous_end), (next_start, _) in zip(windows, windows[1:]):
            assert next_start <= previous_end

    def test_windows_should_advance_by_size_minus_overlap(self, lecture_text: str) -> None:
        """Test window starts strictly increase by chunk_size - overlap."""
        # Act
        starts = [start for start, _ in chunk_text(lecture_text, 300, 50).windows()]

        # Assert
        assert starts == list(range(0, len(lecture_text), 250))

    def test_windows_should_match_reference_scenario(self) -> None:
        """Test 2500 characters with 1000/200 windows start at 0, 800, 1600, 2400."""
        # Act
        windows = list(chunk_text("A" * 2500).windows())

        # Assert
        assert windows == [(0, 1000), (800, 1800), (1600, 2500), (2400, 2500)]


class TestChunkText:
    """Test suite for chunk_text() output."""

    def test_reference_scenario_should_yield_four_chunks(self) -> None:
        """Test "A" * 2500 yields chunks of 1000, 1000, 900 and 100 characters."""
        # Act
        chunks = list(chunk_text("A" * 2500, chunk_size=1000, overlap=200))

        # Assert
        assert [len(chunk) for chunk in chunks] == [1000, 1000, 900, 100]

    def test_short_text_should_yield_no_chunks(self) -> None:
        """Test text below the minimum length produces nothing."""
        # Act
        chunks = list(chunk_text("short"))

        # Assert
        assert chunks == []

    def test_empty_text_should_yield_no_chunks(self) -> None:
        """Test empty text produces no windows and no chunks."""
        # Act
        chunks = chunk_text("")

        # Assert
        assert list(chunks) == []
        assert list(chunks.windows()) == []

    def test_chunks_should_respect_minimum_length(self, lecture_text: str) -> None:
        """Test every chunk is trimmed and at least 50 characters long."""
        # Act
        chunks = list(chunk_text(lecture_text, chunk_size=120, overlap=20))

        # Assert
        assert chunks
        for chunk in chunks:
            assert chunk == chunk.strip()
            assert len(chunk) >= 50

    def test_short_trailing_window_should_be_dropped(self) -> None:
        """Test a final window under 50 characters after trimming is discarded."""
        # Arrange
        text = "B" * 1000 + "   tail"

        # Act
        chunks = list(chunk_text(text, chunk_size=1000, overlap=0))

        # Assert
        assert chunks == ["B" * 1000]

    def test_chunks_should_be_substrings_of_text(self, lecture_text: str) -> None:
        """Test every chunk is a contiguous slice of the source text."""
        # Act
        chunks = list(chunk_text(lecture_text))

        # Assert
        assert all(chunk in lecture_text for chunk in chunks)

    def test_chunking_should_be_deterministic_and_restartable(self, lecture_text: str) -> None:
        """Test the same input gives the same chunks, and iterating twice repeats them."""
        # Arrange
        chunks = chunk_text(lecture_text)

        # Act
        first = list(chunks)
        second = list(chunks)
        fresh = list(chunk_text(lecture_text))

        # Assert
        assert first == second == fresh

    @pytest.mark.parametrize(
        ("chunk_size", "overlap"),
        [(0, 0), (-5, 0), (100, -1), (100, 100), (100, 150)],
    )
    def test_invalid_configuration_should_raise(self, chunk_size: int, overlap: int) -> None:
        """Test window settings that cannot make progress are rejected eagerly."""
        # Act & Assert
        with pytest.raises(ValidationError):
            chunk_text("some text", chunk_size=chunk_size, overlap=overlap)


class TestTextChunkerSplit:
    """Test suite for TextChunker.split() outcomes."""

    def test_split_should_return_ok_with_chunks(self, lecture_text: str) -> None:
        """Test normal text is chunked on the primary path."""
        # Arrange
        chunker = TextChunker()

        # Act
        result = chunker.split(lecture_text)

        # Assert
        assert not result.is_degraded
        assert result.data == list(chunk_text(lecture_text))

    def test_split_none_should_return_empty_ok(self) -> None:
        """Test None is treated as empty text."""
        # Act
        result = TextChunker().split(None)

        # Assert
        assert not result.is_degraded
        assert result.data == []

    def test_split_should_coerce_non_string_input(self) -> None:
        """Test non-string input is converted with str() before chunking."""
        # Arrange
        value = ["term"] * 40

        # Act
        result = TextChunker().split(value)

        # Assert
        assert not result.is_degraded
        assert result.data == [str(value)]

    def test_split_should_degrade_to_truncated_text_on_fault(self) -> None:
        """Test an internal fault yields one chunk of at most chunk_size characters."""
        # Arrange
        chunker = TextChunker(chunk_size=1000, chunk_overlap=200)
        text = ExplodingText("x" * 1500)

        # Act
        result = chunker.split(text)

        # Assert
        assert result.is_degraded
        assert result.cause == "chunking_failed"
        assert isinstance(result.error, RuntimeError)
        assert result.data == ["x" * 1000]

    def test_split_should_degrade_to_empty_list_for_blank_fallback(self) -> None:
        """Test a fault on whitespace-only text degrades to no chunks."""
        # Act
        result = TextChunker().split(ExplodingText("   "))

        # Assert
        assert result.is_degraded
        assert result.data == []


class TestTextChunkerConfiguration:
    """Test suite for TextChunker construction and record building."""

    def test_from_settings_should_use_configured_windows(self) -> None:
        """Test chunker picks up size, overlap and minimum length from settings."""
        # Arrange
        settings = ChunkingSettings(chunk_size=500, chunk_overlap=100, min_chunk_length=10)

        # Act
        chunker = TextChunker.from_settings(settings)

        # Assert
        assert (chunker.chunk_size, chunker.chunk_overlap, chunker.min_chunk_length) == (
            500,
            100,
            10,
        )

    def test_invalid_overlap_should_raise(self) -> None:
        """Test overlap not smaller than chunk size is rejected."""
        with pytest.raises(ValidationError):
            TextChunker(chunk_size=200, chunk_overlap=200)

    def test_build_records_should_assign_contiguous_indices(self) -> None:
        """Test records are indexed 0..n-1 with length and word count metadata."""
        # Arrange
        chunks = ["alpha beta gamma " * 5, "delta epsilon " * 6]

        # Act
        records = TextChunker.build_records(chunks)

        # Assert
        assert [record.index for record in records] == [0, 1]
        assert records[0].metadata.chunk_length == len(chunks[0])
        assert records[0].metadata.word_count == 15
        assert records[1].metadata.word_count == 12
