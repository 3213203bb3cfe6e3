"""
Conversation state manager.

Owns the lifecycle of chat sessions and messages: resume-or-create,
append with activity touch, placeholder title replacement, and ordered
listings.

Dependencies: sqlalchemy, backend.boundary.db
System role: Conversation persistence logic
"""

import logging
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import utc_now
from backend.boundary.db.CRUD.chat_crud import chat_message_crud, chat_session_crud
from backend.boundary.db.models.chat_model import (
    DEFAULT_SESSION_TITLE,
    ChatMessageModel,
    ChatSessionModel,
)
from backend.core.exceptions import SessionNotFoundError

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 50
PLACEHOLDER_TITLE_PREFIX = "Chat "


def is_placeholder_title(title: str) -> bool:
    return title == DEFAULT_SESSION_TITLE or title.startswith(PLACEHOLDER_TITLE_PREFIX)


def title_from_question(question: str) -> str:
    """First 50 characters of the question, with "..." when it was cut."""
    if len(question) > TITLE_MAX_LENGTH:
        return question[:TITLE_MAX_LENGTH] + "..."
    return question


class SessionSummary(BaseModel):
    """Session listing row."""

    id: UUID
    title: str
    created_at: datetime
    updated_at: datetime
    is_active: bool
    message_count: int


class ConversationStateManager:
    """
    Session and message persistence for one database session.

    get_or_create_session reads then creates without a lock, so two
    concurrent first requests of the same user can create two sessions.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_or_create_session(
        self,
        user_id: UUID,
        title: str = DEFAULT_SESSION_TITLE,
    ) -> ChatSessionModel:
        """
        Resume the user's most recently updated active session, or start one.

        Args:
            user_id: Owner UUID
            title: Title for a newly created session

        Returns:
            ChatSessionModel: Existing or newly committed session
        """
        existing = await chat_session_crud.get_latest_active(self.db, user_id)
        if existing is not None:
            logger.debug(f"{__name__}:get_or_create_session - Resuming session {existing.id}")
            return existing

        session = await chat_session_crud.create(
            self.db,
            user_id=user_id,
            title=title,
            is_active=True,
        )
        await self.db.commit()
        logger.info(f"{__name__}:get_or_create_session - Created session {session.id} for user {user_id}")
        return session

    async def save_message(
        self,
        session_id: UUID,
        question: str,
        answer: str,
        question_language: str = "en",
        answer_language: str = "en",
        used_rag: bool = False,
        search_score: float | None = None,
    ) -> ChatMessageModel:
        """
        Append a message and mark the session as recently active.

        A placeholder title is replaced with the (truncated) question.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        session = await chat_session_crud.get_by_id(self.db, session_id)
        if session is None:
            raise SessionNotFoundError(str(session_id))

        message = await chat_message_crud.create(
            self.db,
            session_id=session_id,
            question=question,
            answer=answer,
            question_language=question_language,
            answer_language=answer_language,
            used_rag=used_rag,
            search_score=search_score,
        )

        session.updated_at = utc_now()
        if is_placeholder_title(session.title):
            session.title = title_from_question(question)

        await self.db.commit()
        logger.info(f"{__name__}:save_message - Saved message {message.id} to session {session_id}")
        return message

    async def get_session(self, session_id: UUID) -> ChatSessionModel:
        session = await chat_session_crud.get_by_id(self.db, session_id)
        if session is None:
            raise SessionNotFoundError(str(session_id))
        return session

    async def list_sessions(self, user_id: UUID) -> list[SessionSummary]:
        """User's sessions, most recently updated first, with message counts."""
        rows = await chat_session_crud.list_with_message_counts(self.db, user_id)
        return [
            SessionSummary(
                id=session.id,
                title=session.title,
                created_at=session.created_at,
                updated_at=session.updated_at,
                is_active=session.is_active,
                message_count=count,
            )
            for session, count in rows
        ]

    async def list_messages(self, session_id: UUID) -> list[ChatMessageModel]:
        """Messages of a session, oldest first."""
        return list(await chat_message_crud.get_by_session(self.db, session_id))
