"""
Document service orchestrator.

Coordinates document upload, chunk indexing (vector point plus relational
chunk row per chunk), document-scoped questions, listing and deletion.
Ownership is checked on every per-document operation.

Dependencies: backend.boundary.vdb, backend.boundary.db, backend.core
System role: Document management orchestration
"""

import logging
import uuid
from pathlib import PurePath
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.chunk_crud import chunk_crud
from backend.boundary.db.CRUD.document_crud import document_crud
from backend.boundary.db.models.document_model import DocumentModel, DocumentStatus
from backend.boundary.llm.embeddings import EmbeddingAdapter
from backend.boundary.vdb.qdrant_index import VectorIndexClient
from backend.boundary.vdb.vector_schemas import ContentSource, VectorPayload, VectorPoint
from backend.configs.ingestion import IngestionSettings
from backend.configs.vector_store import VectorStoreSettings
from backend.core.answer_orchestrator import AnswerOrchestrator
from backend.core.chunker import ContentChunker
from backend.core.exceptions import (
    DocumentNotFoundError,
    DocumentProcessingError,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from backend.core.retriever import RetrievalEngine
from backend.models.document import DocumentAskResponse, DocumentResponse
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

NO_DOCUMENT_CONTEXT_ANSWER = (
    "I couldn't find relevant information in this document to answer your question. "
    "Try rephrasing your question or ask something else about the document."
)
CONTEXT_PREVIEW_LENGTH = 200


def chunk_point_id(document_id: UUID, chunk_index: int) -> UUID:
    """Stable vector point id for a document chunk."""
    return uuid.uuid5(document_id, f"chunk-{chunk_index}")


def preview(text: str, length: int = CONTEXT_PREVIEW_LENGTH) -> str:
    return text[:length] + "..." if len(text) > length else text


class DocumentService:
    """
    Document service orchestrator.

    Handles document lifecycle: upload, indexing, questions, deletion.
    """

    def __init__(
        self,
        db: AsyncSession,
        index: VectorIndexClient,
        embedder: EmbeddingAdapter,
        retrieval: RetrievalEngine,
        answers: AnswerOrchestrator,
        vector_settings: VectorStoreSettings,
        ingestion_settings: IngestionSettings,
    ) -> None:
        """
        Initialize document service.

        Args:
            db: AsyncSession for document and chunk records
            index: Vector index client
            embedder: Embedding adapter for chunks
            retrieval: Retrieval engine for document-scoped search
            answers: Answer orchestrator for document questions
            vector_settings: Limits for document questions
            ingestion_settings: Chunk size and allowed file types
        """
        self.db = db
        self.index = index
        self.embedder = embedder
        self.retrieval = retrieval
        self.answers = answers
        self.vector_settings = vector_settings
        self.ingestion_settings = ingestion_settings
        self.chunker = ContentChunker(ingestion_settings.chunk_size)

    async def _get_owned_document(self, user_id: UUID | None, document_id: UUID) -> DocumentModel:
        if user_id is None:
            raise UnauthorizedError()
        document = await document_crud.get_by_id(self.db, document_id)
        if document is None:
            raise DocumentNotFoundError(str(document_id))
        if document.uploaded_by != user_id:
            raise ForbiddenError("Document belongs to another user", {"document_id": str(document_id)})
        return document

    async def upload_document(
        self,
        user_id: UUID | None,
        file_name: str,
        text: str,
        content_type: str = "text/plain",
        file_size: int | None = None,
        title: str | None = None,
        subject: str | None = None,
        grade: str | None = None,
    ) -> DocumentResponse:
        """
        Register an uploaded document and index its extracted text.

        Steps:
        1. Validate caller and file type
        2. Create document record with PENDING status
        3. Index chunks (vector points + chunk rows)
        4. Mark COMPLETED, or FAILED with the error message

        Args:
            user_id: Caller (owner) id
            file_name: Original file name, its extension must be allowed
            text: Text already extracted from the file
            content_type: MIME type
            file_size: Size in bytes (defaults to the UTF-8 text size)
            title: Display title (defaults to file_name)
            subject: Subject label (defaults to "General")
            grade: Grade label (defaults to "All")

        Returns:
            DocumentResponse: Final document state, possibly FAILED

        Raises:
            UnauthorizedError: No caller identity
            ValidationError: Unsupported file type
        """
        if user_id is None:
            raise UnauthorizedError()

        extension = PurePath(file_name).suffix.lower()
        if extension not in self.ingestion_settings.allowed_extensions:
            raise ValidationError(
                f"Unsupported file type: {extension or 'none'}",
                field="file_name",
                details={"allowed": list(self.ingestion_settings.allowed_extensions)},
            )

        document = await document_crud.create(
            self.db,
            title=title or file_name,
            file_name=file_name,
            content_type=content_type,
            file_size=file_size if file_size is not None else len(text.encode("utf-8")),
            uploaded_by=user_id,
            subject=subject or "General",
            grade=grade or "All",
            processing_status=DocumentStatus.PENDING,
        )
        await self.db.commit()
        document_id = document.id
        logger.info(f"{__name__}:upload_document - Created document {document_id} ({file_name})")

        try:
            chunk_count = await self.index_document(text, document_id, user_id)
            document = await document_crud.mark_completed(self.db, document_id, chunk_count)
            await self.db.commit()
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:upload_document - Indexing failed",
                e,
                document_id=document_id,
            )
            await self.db.rollback()
            document = await document_crud.mark_failed(self.db, document_id, str(e))
            await self.db.commit()

        return DocumentResponse.model_validate(document)

    async def index_document(self, text: str, document_id: UUID, owner_id: UUID) -> int:
        """
        Chunk, embed and dual-write a document's text.

        A chunk whose embedding or record fails is skipped. Points are
        written with batched upserts after all chunks are prepared. The
        caller commits the chunk rows.

        Returns:
            int: Number of chunks indexed

        Raises:
            DocumentProcessingError: The text yields no chunks
            VectorStoreError: The batched upsert failed
        """
        chunks = self.chunker.split(text)
        if not chunks:
            raise DocumentProcessingError("Document contains no indexable text", str(document_id))

        document = await document_crud.get_by_id(self.db, document_id)
        title = document.title if document else str(document_id)
        subject = document.subject if document else "General"

        points: list[VectorPoint] = []
        for chunk in chunks:
            try:
                vector = await self.embedder.embed(chunk.content)
                point_id = chunk_point_id(document_id, chunk.index)
                point = VectorPoint(
                    id=point_id,
                    vector=vector,
                    payload=VectorPayload(
                        title=title,
                        content=chunk.content,
                        subject=subject,
                        source=ContentSource.USER_UPLOAD.value,
                        document_id=str(document_id),
                        user_id=str(owner_id),
                        chunk_index=chunk.index,
                    ),
                )
                await chunk_crud.create(
                    self.db,
                    document_id=document_id,
                    chunk_index=chunk.index,
                    content=chunk.content,
                    start_position=chunk.start_offset,
                    end_position=chunk.end_offset,
                    vector_point_id=str(point_id),
                )
                points.append(point)
            except Exception as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:index_document - Skipping chunk {chunk.index}",
                    e,
                    document_id=document_id,
                )

        await self.index.upsert_batched(points)
        logger.info(f"{__name__}:index_document - Indexed {len(points)}/{len(chunks)} chunks for {document_id}")
        return len(points)

    async def ask_document(
        self,
        user_id: UUID | None,
        document_id: UUID,
        question: str,
    ) -> DocumentAskResponse:
        """
        Answer a question from the chunks of one document.

        Raises:
            UnauthorizedError: No caller identity
            DocumentNotFoundError: Unknown document
            ForbiddenError: Document belongs to another user
            ValidationError: Empty question
        """
        document = await self._get_owned_document(user_id, document_id)
        if not question or not question.strip():
            raise ValidationError("Question is required", field="question")

        hits = await self.retrieval.search_document(
            question,
            str(document_id),
            limit=self.vector_settings.document_limit,
        )
        if not hits:
            return DocumentAskResponse(
                answer=NO_DOCUMENT_CONTEXT_ANSWER,
                confidence=0.0,
                chunks_found=0,
                document_title=document.title,
            )

        top = hits[: self.vector_settings.document_context_chunks]
        context = "\n\n".join(hit.content for hit in top)
        answer = await self.answers.answer_from_document(question, context, document.title)

        return DocumentAskResponse(
            answer=answer,
            context_used=[preview(hit.content) for hit in top],
            confidence=sum(hit.score for hit in hits) / len(hits),
            chunks_found=len(hits),
            document_title=document.title,
        )

    async def list_documents(self, user_id: UUID | None) -> list[DocumentResponse]:
        if user_id is None:
            raise UnauthorizedError()
        documents = await document_crud.get_by_owner(self.db, user_id)
        return [DocumentResponse.model_validate(document) for document in documents]

    async def delete_document(self, user_id: UUID | None, document_id: UUID) -> None:
        """
        Delete a document's vector points, then its rows.

        The two stores are not updated atomically; a failure after the
        vector delete leaves the relational rows in place.
        """
        document = await self._get_owned_document(user_id, document_id)
        await self.index.delete_by_document(str(document_id))
        await chunk_crud.delete_by_document(self.db, document.id)
        await document_crud.delete_by_id(self.db, document.id)
        await self.db.commit()
        logger.info(f"{__name__}:delete_document - Deleted document {document_id}")
