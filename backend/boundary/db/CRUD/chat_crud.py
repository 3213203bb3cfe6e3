"""
Chat session and message CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Conversation persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.chat_model import ChatMessageModel, ChatSessionModel


class ChatSessionCRUD(BaseCRUD[ChatSessionModel]):
    """
    CRUD operations for ChatSessionModel.

    Extends BaseCRUD with per-user lookups ordered by recent activity.
    """

    def __init__(self) -> None:
        super().__init__(ChatSessionModel)

    async def get_latest_active(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> ChatSessionModel | None:
        """
        Most recently updated active session of a user.

        Args:
            session: Async database session
            user_id: Owner UUID

        Returns:
            ChatSessionModel if the user has an active session, None otherwise
        """
        stmt = (
            select(ChatSessionModel)
            .where(ChatSessionModel.user_id == user_id, ChatSessionModel.is_active.is_(True))
            .order_by(ChatSessionModel.updated_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def list_with_message_counts(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> list[tuple[ChatSessionModel, int]]:
        """
        A user's sessions with their message counts, most recent first.

        Returns:
            list of (ChatSessionModel, message_count)
        """
        message_count = (
            select(func.count(ChatMessageModel.id))
            .where(ChatMessageModel.session_id == ChatSessionModel.id)
            .correlate(ChatSessionModel)
            .scalar_subquery()
        )
        stmt = (
            select(ChatSessionModel, message_count)
            .where(ChatSessionModel.user_id == user_id)
            .order_by(ChatSessionModel.updated_at.desc())
        )
        result = await session.execute(stmt)
        return [(row[0], int(row[1])) for row in result.all()]


class ChatMessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel (append-only)."""

    def __init__(self) -> None:
        super().__init__(ChatMessageModel)

    async def get_by_session(
        self,
        session: AsyncSession,
        session_id: UUID,
    ) -> Sequence[ChatMessageModel]:
        """Messages of a session in chronological order."""
        stmt = (
            select(ChatMessageModel)
            .where(ChatMessageModel.session_id == session_id)
            .order_by(ChatMessageModel.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


chat_session_crud = ChatSessionCRUD()
chat_message_crud = ChatMessageCRUD()
