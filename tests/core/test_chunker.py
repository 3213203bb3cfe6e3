"""
Test suite for ContentChunker.

Tests sentence splitting, greedy packing against the size limit,
oversized sentences and source offsets.

System role: Verification of document chunking
"""

import pytest

from backend.core.chunker import ContentChunker


@pytest.fixture
def chunker() -> ContentChunker:
    """Provide chunker with a small limit so packing is observable."""
    return ContentChunker(max_chunk_size=20)


class TestContentChunkerInit:
    """Test suite for ContentChunker initialization."""

    def test_init_should_reject_non_positive_limit(self) -> None:
        with pytest.raises(ValueError):
            ContentChunker(max_chunk_size=0)

    def test_init_should_default_to_thousand_characters(self) -> None:
        assert ContentChunker().max_chunk_size == 1000


class TestContentChunkerSplit:
    """Test suite for ContentChunker.split method."""

    def test_split_should_normalize_terminators(self) -> None:
        # Arrange
        chunker = ContentChunker(max_chunk_size=1000)

        # Act
        chunks = chunker.split("First sentence.  Second sentence! Third?")

        # Assert
        assert len(chunks) == 1
        assert chunks[0].content == "First sentence. Second sentence. Third."

    def test_split_should_flush_before_exceeding_limit(self, chunker: ContentChunker) -> None:
        # Act
        chunks = chunker.split("Alpha beta. Gamma delta. Epsilon.")

        # Assert
        assert [c.content for c in chunks] == ["Alpha beta.", "Gamma delta. Epsilon."]
        assert [c.index for c in chunks] == [0, 1]

    def test_split_should_keep_oversized_sentence_whole(self) -> None:
        # Arrange
        chunker = ContentChunker(max_chunk_size=5)

        # Act
        chunks = chunker.split("Extraordinary sentence. Ok.")

        # Assert
        assert chunks[0].content == "Extraordinary sentence."
        assert chunks[1].content == "Ok."

    @pytest.mark.parametrize("text", ["", "   ", "...", "?!.", None])
    def test_split_should_return_empty_list_without_sentences(self, text) -> None:
        assert ContentChunker().split(text) == []

    def test_split_should_track_source_offsets(self, chunker: ContentChunker) -> None:
        # Arrange
        text = "Alpha beta. Gamma delta. Epsilon."

        # Act
        chunks = chunker.split(text)

        # Assert
        assert chunks[0].start_offset == 0
        assert chunks[1].start_offset == text.index("Gamma")
        assert text[chunks[1].start_offset:chunks[1].end_offset] == "Gamma delta. Epsilon"

    def test_split_should_not_produce_empty_chunks(self) -> None:
        chunks = ContentChunker(max_chunk_size=10).split("One. . . Two.\n\nThree!")

        assert chunks
        assert all(chunk.content.strip() for chunk in chunks)
