"""
Conversation ORM models.

A chat session groups the question/answer pairs of one user. Messages are
append-only.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Conversation persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now

DEFAULT_SESSION_TITLE = "New Chat"


class ChatSessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Chat session ORM model.

    updated_at is touched on every saved message and drives "most recent
    session" ordering.

    Attributes:
        user_id: Owner
        title: Display title, replaced by the first question while it is a placeholder
        is_active: Sessions are never closed, but only active ones are resumed
    """

    __tablename__ = "chat_sessions"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False, default=DEFAULT_SESSION_TITLE)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    user = relationship("UserModel", back_populates="chat_sessions")
    messages = relationship(
        "ChatMessageModel",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="ChatMessageModel.created_at",
    )


class ChatMessageModel(Base, UUIDMixin):
    """
    Chat message ORM model.

    Attributes:
        session_id: Parent chat session
        question: User question as asked
        answer: Generated answer
        question_language: ISO code, or "auto" when not determined
        answer_language: ISO code, or "auto" when not determined
        used_rag: Whether retrieved context (not the general fallback) grounded the answer
        search_score: Best raw similarity score of the retrieval, if any
        created_at: Insert timestamp (UTC)
    """

    __tablename__ = "chat_messages"

    session_id: Mapped[UUID] = mapped_column(
        ForeignKey("chat_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    question_language: Mapped[str] = mapped_column(String(10), nullable=False, default="en")
    answer_language: Mapped[str] = mapped_column(String(10), nullable=False, default="en")
    used_rag: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    search_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    session = relationship("ChatSessionModel", back_populates="messages")
