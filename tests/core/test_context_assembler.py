"""
Test suite for context assembly.

System role: Verification of prompt context construction
"""

from backend.core.retrieval import CONTEXT_SEPARATOR, ContextAssembler, assemble_context


class TestAssembleContext:
    """Test suite for assemble_context()."""

    def test_chunks_should_be_joined_with_blank_line(self) -> None:
        """Test chunks are separated by a blank line, in order."""
        # Act
        context = assemble_context(["first chunk", "second chunk", "third chunk"])

        # Assert
        assert context == "first chunk\n\nsecond chunk\n\nthird chunk"

    def test_empty_input_should_give_empty_string(self) -> None:
        """Test no chunks produce an empty context."""
        assert assemble_context([]) == ""

    def test_single_chunk_should_be_returned_unchanged(self) -> None:
        """Test one chunk is passed through without separators."""
        assert assemble_context(["only chunk"]) == "only chunk"

    def test_duplicates_should_be_kept(self) -> None:
        """Test the assembler neither deduplicates nor reorders."""
        assert assemble_context(["b", "a", "b"]) == "b\n\na\n\nb"

    def test_generator_input_should_be_accepted(self) -> None:
        """Test any iterable of strings can be assembled."""
        assert assemble_context(text for text in ("x", "y")) == "x\n\ny"


class TestContextAssembler:
    """Test suite for the injectable ContextAssembler."""

    def test_default_separator_should_match_module_constant(self) -> None:
        """Test the assembler uses the blank-line separator by default."""
        # Act
        assembler = ContextAssembler()

        # Assert
        assert assembler.separator == CONTEXT_SEPARATOR
        assert assembler.assemble(["a", "b"]) == "a\n\nb"

    def test_custom_separator_should_be_used(self) -> None:
        """Test a configured separator replaces the blank line."""
        assert ContextAssembler(separator=" | ").assemble(["a", "b"]) == "a | b"
