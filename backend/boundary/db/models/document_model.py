"""
Document ORM model.

Represents an uploaded study document and its indexing status. The text
itself lives in document_chunks and in the vector index.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Document ledger for the indexing pipeline
"""

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class DocumentStatus(str, enum.Enum):
    """Document indexing status."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class DocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Document ORM model.

    created_at doubles as the upload timestamp.

    Attributes:
        title: Display title (defaults to the file name)
        file_name: Original file name
        content_type: MIME type reported by the uploader
        file_size: Size in bytes
        uploaded_by: Owner user id
        subject: Subject label, "General" by default
        grade: Grade label, "All" by default
        processing_status: pending, completed or failed
        processing_error: Failure message when status is failed
        processed_at: When indexing finished (either way)
        total_chunks: Number of chunks indexed
    """

    __tablename__ = "documents"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    file_name: Mapped[str] = mapped_column(String(500), nullable=False)
    content_type: Mapped[str] = mapped_column(String(255), nullable=False, default="text/plain")
    file_size: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    uploaded_by: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subject: Mapped[str] = mapped_column(String(100), nullable=False, default="General")
    grade: Mapped[str] = mapped_column(String(50), nullable=False, default="All")
    processing_status: Mapped[DocumentStatus] = mapped_column(
        Enum(DocumentStatus, native_enum=False, length=20),
        nullable=False,
        default=DocumentStatus.PENDING,
    )
    processing_error: Mapped[str | None] = mapped_column(Text, nullable=True)
    processed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    total_chunks: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    owner = relationship("UserModel", back_populates="documents")
    chunks = relationship(
        "DocumentChunkModel",
        back_populates="document",
        cascade="all, delete-orphan",
        order_by="DocumentChunkModel.chunk_index",
    )
