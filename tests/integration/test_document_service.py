"""
Integration tests for DocumentService.

Document and chunk rows live in the in-memory SQLite database; the
vector index is mocked and embeddings are faked.

System role: Verification of the document lifecycle
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from backend.application.services.document_service import (
    NO_DOCUMENT_CONTEXT_ANSWER,
    DocumentService,
    chunk_point_id,
    preview,
)
from backend.boundary.db.CRUD.chunk_crud import chunk_crud
from backend.boundary.db.CRUD.document_crud import document_crud
from backend.boundary.db.models.document_model import DocumentStatus
from backend.configs.ingestion import IngestionSettings
from backend.core.exceptions import (
    DocumentNotFoundError,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
    VectorStoreError,
)
from backend.core.retriever import RetrievalEngine

SAMPLE_TEXT = (
    "Photosynthesis converts light into chemical energy. "
    "It happens in the chloroplasts of plant cells. "
    "Oxygen is released as a by-product."
)


@pytest.fixture
def answers() -> MagicMock:
    mock = MagicMock()
    mock.answer_from_document = AsyncMock(return_value="It happens in chloroplasts.")
    return mock


@pytest.fixture
def document_service(test_async_db, mock_index, embedder, answers, settings) -> DocumentService:
    """Provide DocumentService with a small chunk size."""
    return DocumentService(
        test_async_db,
        mock_index,
        embedder,
        RetrievalEngine(embedder, mock_index, settings.vector_store),
        answers,
        settings.vector_store,
        IngestionSettings(chunk_size=60),
    )


class TestHelpers:
    """Test suite for module helpers."""

    def test_chunk_point_id_should_be_stable_per_chunk(self) -> None:
        document_id = uuid.uuid4()

        assert chunk_point_id(document_id, 0) == chunk_point_id(document_id, 0)
        assert chunk_point_id(document_id, 0) != chunk_point_id(document_id, 1)

    def test_preview_should_truncate_long_text(self) -> None:
        assert preview("x" * 250) == "x" * 200 + "..."
        assert preview("short") == "short"


class TestUploadDocument:
    """Test suite for DocumentService.upload_document."""

    @pytest.mark.asyncio
    async def test_upload_document_should_require_user(self, document_service) -> None:
        with pytest.raises(UnauthorizedError):
            await document_service.upload_document(None, "notes.txt", SAMPLE_TEXT)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("file_name", ["notes.exe", "README", "slides.pptx"])
    async def test_upload_document_should_reject_unsupported_type(
        self, document_service, test_user, file_name
    ) -> None:
        with pytest.raises(ValidationError):
            await document_service.upload_document(test_user.id, file_name, SAMPLE_TEXT)

    @pytest.mark.asyncio
    async def test_upload_document_should_index_and_complete(
        self, document_service, test_user, test_async_db, mock_index
    ) -> None:
        # Act
        document = await document_service.upload_document(
            test_user.id, "Notes.TXT", SAMPLE_TEXT, subject="Biology"
        )

        # Assert
        assert document.processing_status == DocumentStatus.COMPLETED
        assert document.total_chunks == 3
        assert document.title == "Notes.TXT"
        assert document.grade == "All"
        assert document.file_size == len(SAMPLE_TEXT.encode("utf-8"))

        points = mock_index.upsert_batched.call_args.args[0]
        assert [p.payload.chunk_index for p in points] == [0, 1, 2]
        assert all(p.payload.document_id == str(document.id) for p in points)
        assert all(p.payload.source == "User Upload" for p in points)
        assert points[0].id == chunk_point_id(document.id, 0)

        chunks = await chunk_crud.get_by_document(test_async_db, document.id)
        assert [c.vector_point_id for c in chunks] == [str(p.id) for p in points]

    @pytest.mark.asyncio
    async def test_upload_document_should_mark_failed_on_index_error(
        self, document_service, test_user, test_async_db, mock_index
    ) -> None:
        # Arrange
        mock_index.upsert_batched.side_effect = VectorStoreError("unreachable", operation="upsert")

        # Act
        document = await document_service.upload_document(test_user.id, "notes.txt", SAMPLE_TEXT)

        # Assert
        assert document.processing_status == DocumentStatus.FAILED
        assert "unreachable" in document.processing_error
        assert document.processed_at is not None
        assert await chunk_crud.get_by_document(test_async_db, document.id) == []

    @pytest.mark.asyncio
    async def test_upload_document_should_fail_for_text_without_sentences(
        self, document_service, test_user
    ) -> None:
        document = await document_service.upload_document(test_user.id, "empty.txt", " ... ")

        assert document.processing_status == DocumentStatus.FAILED
        assert document.processing_error.startswith("Document contains no indexable text")


class TestAskDocument:
    """Test suite for DocumentService.ask_document."""

    @pytest.mark.asyncio
    async def test_ask_document_should_answer_from_top_chunks(
        self, document_service, test_user, mock_index, answers, make_hit
    ) -> None:
        # Arrange
        document = await document_service.upload_document(test_user.id, "bio.txt", SAMPLE_TEXT)
        mock_index.search.return_value = [
            make_hit(0.9, content="c1"),
            make_hit(0.8, content="c2"),
            make_hit(0.7, content="c3"),
            make_hit(0.2, content="c4"),
        ]

        # Act
        response = await document_service.ask_document(test_user.id, document.id, "Where?")

        # Assert
        answers.answer_from_document.assert_awaited_once_with("Where?", "c1\n\nc2\n\nc3", "bio.txt")
        assert response.answer == "It happens in chloroplasts."
        assert response.context_used == ["c1", "c2", "c3"]
        assert response.chunks_found == 4
        assert response.confidence == pytest.approx(0.65)
        assert mock_index.search.call_args.kwargs["document_id"] == str(document.id)

    @pytest.mark.asyncio
    async def test_ask_document_should_explain_missing_context(
        self, document_service, test_user, answers
    ) -> None:
        # Arrange
        document = await document_service.upload_document(test_user.id, "bio.txt", SAMPLE_TEXT)

        # Act
        response = await document_service.ask_document(test_user.id, document.id, "Unrelated?")

        # Assert
        assert response.answer == NO_DOCUMENT_CONTEXT_ANSWER
        assert response.confidence == 0.0
        assert response.chunks_found == 0
        answers.answer_from_document.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ask_document_should_enforce_ownership(
        self, document_service, test_user
    ) -> None:
        # Arrange
        document = await document_service.upload_document(test_user.id, "bio.txt", SAMPLE_TEXT)

        # Act / Assert
        with pytest.raises(ForbiddenError):
            await document_service.ask_document(uuid.uuid4(), document.id, "Where?")
        with pytest.raises(DocumentNotFoundError):
            await document_service.ask_document(test_user.id, uuid.uuid4(), "Where?")
        with pytest.raises(ValidationError):
            await document_service.ask_document(test_user.id, document.id, " ")


class TestListAndDelete:
    """Test suite for list_documents and delete_document."""

    @pytest.mark.asyncio
    async def test_list_documents_should_return_owned_documents(
        self, document_service, test_user
    ) -> None:
        # Arrange
        await document_service.upload_document(test_user.id, "a.txt", SAMPLE_TEXT)
        await document_service.upload_document(test_user.id, "b.pdf", SAMPLE_TEXT)

        # Act
        documents = await document_service.list_documents(test_user.id)

        # Assert
        assert sorted(d.file_name for d in documents) == ["a.txt", "b.pdf"]
        assert await document_service.list_documents(uuid.uuid4()) == []

    @pytest.mark.asyncio
    async def test_delete_document_should_remove_points_and_rows(
        self, document_service, test_user, test_async_db, mock_index
    ) -> None:
        # Arrange
        document = await document_service.upload_document(test_user.id, "a.txt", SAMPLE_TEXT)

        # Act
        await document_service.delete_document(test_user.id, document.id)

        # Assert
        mock_index.delete_by_document.assert_awaited_once_with(str(document.id))
        assert await document_crud.get_by_id(test_async_db, document.id) is None
        assert await chunk_crud.get_by_document(test_async_db, document.id) == []

    @pytest.mark.asyncio
    async def test_delete_document_should_reject_other_user(
        self, document_service, test_user, mock_index
    ) -> None:
        # Arrange
        document = await document_service.upload_document(test_user.id, "a.txt", SAMPLE_TEXT)

        # Act / Assert
        with pytest.raises(ForbiddenError):
            await document_service.delete_document(uuid.uuid4(), document.id)
        mock_index.delete_by_document.assert_not_awaited()
