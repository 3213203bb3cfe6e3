"""
Document domain models and schemas.

Dependencies: pydantic
System role: Document upload and question contracts
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from backend.boundary.db.models.document_model import DocumentStatus


class DocumentResponse(BaseModel):
    """Document metadata as returned to its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    file_name: str
    content_type: str
    file_size: int
    subject: str
    grade: str
    processing_status: DocumentStatus
    processing_error: str | None = None
    processed_at: datetime | None = None
    total_chunks: int
    created_at: datetime


class DocumentAskResponse(BaseModel):
    """Answer to a question about one uploaded document."""

    answer: str
    context_used: list[str] = Field(default_factory=list)
    confidence: float
    chunks_found: int
    document_title: str
