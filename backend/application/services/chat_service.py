"""
Chat service for educational Q&A with RAG.

Orchestrates the chat flow: retrieval, answer generation, and persistence
of the exchange in the caller's current conversation session.

Dependencies: backend.core, backend.boundary.db
System role: Chat service orchestration layer
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import utc_now
from backend.core.answer_orchestrator import AnswerOrchestrator
from backend.core.exceptions import ForbiddenError, UnauthorizedError, ValidationError
from backend.core.retriever import RetrievalEngine
from backend.core.session_manager import ConversationStateManager
from backend.models.chat import AskResponse, MessageResponse, SearchMetadata, SessionResponse

logger = logging.getLogger(__name__)

AUTO_LANGUAGE = "auto"


class ChatService:
    """
    Chat service for single-turn questions with conversation persistence.

    Each answered question is appended to the caller's most recently
    active session (created on first use).
    """

    def __init__(
        self,
        db: AsyncSession,
        retrieval: RetrievalEngine,
        answers: AnswerOrchestrator,
        embedding_dimensions: int,
    ) -> None:
        """
        Initialize chat service.

        Args:
            db: AsyncSession for conversation persistence
            retrieval: Retrieval engine for context lookup
            answers: Answer orchestrator for generation
            embedding_dimensions: Reported in search metadata
        """
        self.db = db
        self.retrieval = retrieval
        self.answers = answers
        self.embedding_dimensions = embedding_dimensions
        self.conversations = ConversationStateManager(db)

    async def ask(self, user_id: UUID | None, question: str) -> AskResponse:
        """
        Answer a question and record it in the caller's session.

        Flow:
        1. Retrieve context (chat limit, score threshold)
        2. Generate grounded or persona answer
        3. Save the exchange (failure is logged and reported, not raised)

        Raises:
            UnauthorizedError: No caller identity
            ValidationError: Empty question
        """
        if user_id is None:
            raise UnauthorizedError()
        if not question or not question.strip():
            raise ValidationError("Question is required", field="question")

        logger.info(f"{__name__}:ask - START user_id={user_id}")

        # Step 1: Retrieve context
        retrieval = await self.retrieval.retrieve(question)
        logger.info(
            f"{__name__}:ask - Retrieval done: kept={retrieval.hit_count}, "
            f"best_score={retrieval.best_score}"
        )

        # Step 2: Generate answer
        answer = await self.answers.answer(question, retrieval.context)

        # Step 3: Persist exchange
        session_id = None
        saved = False
        try:
            session = await self.conversations.get_or_create_session(user_id)
            await self.conversations.save_message(
                session.id,
                question=question,
                answer=answer,
                question_language=AUTO_LANGUAGE,
                answer_language=AUTO_LANGUAGE,
                used_rag=not retrieval.used_fallback,
                search_score=retrieval.best_score,
            )
            session_id = session.id
            saved = True
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:ask - Saving message failed: {type(e).__name__}: {e}")
            await self.db.rollback()

        return AskResponse(
            question=question,
            answer=answer,
            context_used=retrieval.context,
            session_id=session_id,
            search_metadata=SearchMetadata(
                embedding_dimensions=self.embedding_dimensions,
                search_results_found=retrieval.hit_count,
                context_type="General Knowledge" if retrieval.used_fallback else "Specific Context",
                search_timestamp=utc_now(),
                saved_to_database=saved,
            ),
        )

    async def list_sessions(self, user_id: UUID | None) -> list[SessionResponse]:
        """Caller's sessions, most recent first."""
        if user_id is None:
            raise UnauthorizedError()
        summaries = await self.conversations.list_sessions(user_id)
        return [SessionResponse(**summary.model_dump()) for summary in summaries]

    async def list_messages(self, user_id: UUID | None, session_id: UUID) -> list[MessageResponse]:
        """
        Messages of one of the caller's sessions, oldest first.

        Raises:
            UnauthorizedError: No caller identity
            SessionNotFoundError: Unknown session
            ForbiddenError: Session belongs to another user
        """
        if user_id is None:
            raise UnauthorizedError()
        session = await self.conversations.get_session(session_id)
        if session.user_id != user_id:
            raise ForbiddenError("Session belongs to another user", {"session_id": str(session_id)})
        messages = await self.conversations.list_messages(session_id)
        return [MessageResponse.model_validate(message) for message in messages]
