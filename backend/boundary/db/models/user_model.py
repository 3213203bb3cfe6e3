"""
User ORM model.

Represents an authenticated learner. Identity is issued elsewhere; this
table only anchors ownership of sessions and documents.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Owner record for conversations and uploads
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        google_id: External identity provider subject
        email: Unique email address
        name: Display name
        picture: Avatar URL
        role: Role name, "Student" unless changed
        is_active: Soft-disable flag
        last_login_at: Last successful sign-in
    """

    __tablename__ = "users"

    google_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    picture: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="Student")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    chat_sessions = relationship(
        "ChatSessionModel",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    documents = relationship(
        "DocumentModel",
        back_populates="owner",
        cascade="all, delete-orphan",
    )
