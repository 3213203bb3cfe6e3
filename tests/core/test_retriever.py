"""
Test suite for RetrievalEngine.

Tests threshold filtering, context formatting, the no-context sentinel
and document-scoped search. Uses a mocked vector index.

System role: Verification of RAG retrieval
"""

import pytest

from backend.core.retriever import NO_CONTEXT_SENTINEL, RetrievalEngine, format_hit


@pytest.fixture
def retrieval(embedder, mock_index, settings) -> RetrievalEngine:
    """Provide RetrievalEngine over the mocked index."""
    return RetrievalEngine(embedder, mock_index, settings.vector_store)


class TestFormatHit:
    """Test suite for format_hit."""

    def test_format_hit_should_render_metadata_and_score(self, make_hit) -> None:
        # Arrange
        hit = make_hit(0.876, title="Photosynthesis", content="Plants make sugar.")

        # Act
        line = format_hit(hit)

        # Assert
        assert line == (
            "[Biology - Beginner] Photosynthesis: Plants make sugar. "
            "(Source: Manual, Relevance: 0.88)"
        )


class TestRetrievalEngineRetrieve:
    """Test suite for RetrievalEngine.retrieve method."""

    @pytest.mark.asyncio
    async def test_retrieve_should_drop_hits_at_or_below_threshold(
        self, retrieval, mock_index, make_hit
    ) -> None:
        # Arrange
        mock_index.search.return_value = [
            make_hit(0.9, title="A"),
            make_hit(0.5, title="B"),
            make_hit(0.1, title="C"),
        ]

        # Act
        result = await retrieval.retrieve("What is photosynthesis?")

        # Assert
        assert result.hit_count == 2
        assert result.hits_found == 3
        assert result.best_score == 0.9
        assert result.average_score == pytest.approx(0.7)
        assert "A:" in result.context and "B:" in result.context
        assert "C:" not in result.context
        assert not result.used_fallback

    @pytest.mark.asyncio
    async def test_retrieve_should_return_sentinel_without_relevant_hits(
        self, retrieval, mock_index, make_hit
    ) -> None:
        # Arrange
        mock_index.search.return_value = [make_hit(0.15)]

        # Act
        result = await retrieval.retrieve("Unrelated question")

        # Assert
        assert result.context == NO_CONTEXT_SENTINEL
        assert result.used_fallback
        assert result.best_score == 0.15
        assert result.hit_count == 0
        assert result.sources == []

    @pytest.mark.asyncio
    async def test_retrieve_should_skip_hits_without_content(
        self, retrieval, mock_index, make_hit
    ) -> None:
        # Arrange
        mock_index.search.return_value = [make_hit(0.8, content="  ")]

        # Act
        result = await retrieval.retrieve("Question")

        # Assert
        assert result.context == NO_CONTEXT_SENTINEL

    @pytest.mark.asyncio
    async def test_retrieve_should_request_chat_limit_with_threshold(
        self, retrieval, mock_index
    ) -> None:
        # Act
        result = await retrieval.retrieve("Question")

        # Assert
        _, kwargs = mock_index.search.call_args
        assert kwargs["limit"] == 5
        assert kwargs["score_threshold"] == 0.2
        assert kwargs["document_id"] is None
        assert result.best_score is None

    @pytest.mark.asyncio
    async def test_retrieve_should_scope_to_document_when_given(
        self, retrieval, mock_index, make_hit
    ) -> None:
        # Arrange
        mock_index.search.return_value = [make_hit(0.7, title="Chunk 1", document_id="doc-1")]

        # Act
        result = await retrieval.retrieve("Question", document_id="doc-1")

        # Assert
        _, kwargs = mock_index.search.call_args
        assert kwargs["document_id"] == "doc-1"
        assert kwargs["score_threshold"] == 0.2
        assert result.hit_count == 1

    @pytest.mark.asyncio
    async def test_retrieve_should_list_sources_as_subject_and_title(
        self, retrieval, mock_index, make_hit
    ) -> None:
        # Arrange
        mock_index.search.return_value = [make_hit(0.7, title="Cells")]

        # Act
        result = await retrieval.retrieve("Question")

        # Assert
        assert result.sources == ["Biology: Cells"]


class TestRetrievalEngineSearch:
    """Test suite for search and search_document."""

    @pytest.mark.asyncio
    async def test_search_should_use_search_limit_without_threshold(
        self, retrieval, mock_index
    ) -> None:
        await retrieval.search("atoms")

        _, kwargs = mock_index.search.call_args
        assert kwargs == {"limit": 10}

    @pytest.mark.asyncio
    async def test_search_document_should_filter_by_document(
        self, retrieval, mock_index
    ) -> None:
        await retrieval.search_document("question", "doc-1")

        _, kwargs = mock_index.search.call_args
        assert kwargs == {"limit": 5, "document_id": "doc-1"}
