"""
Document chunk ORM model.

One row per indexed chunk, mirroring the vector point written for it.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Relational half of the chunk dual-write
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class DocumentChunkModel(Base, UUIDMixin, TimestampMixin):
    """
    Document chunk ORM model.

    Attributes:
        document_id: Parent document
        chunk_index: Position within the document, from 0
        content: Chunk text
        start_position: Offset of the first character in the source text
        end_position: Offset just past the last sentence in the source text
        vector_point_id: Id of the matching point in the vector index
    """

    __tablename__ = "document_chunks"
    __table_args__ = (UniqueConstraint("document_id", "chunk_index", name="uq_document_chunk_index"),)

    document_id: Mapped[UUID] = mapped_column(
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    start_position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    end_position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    vector_point_id: Mapped[str] = mapped_column(String(64), nullable=False)

    document = relationship("DocumentModel", back_populates="chunks")
