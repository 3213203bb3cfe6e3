"""
Chat domain models and schemas.

Response schemas for questions, sessions and message history.

Dependencies: pydantic
System role: Chat operation contracts
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SearchMetadata(BaseModel):
    """Retrieval details returned alongside an answer."""

    embedding_dimensions: int
    search_results_found: int = Field(description="Hits that made it into the context")
    context_type: str = Field(description="'Specific Context' or 'General Knowledge'")
    search_timestamp: datetime
    saved_to_database: bool


class AskResponse(BaseModel):
    """Response schema for a chat question."""

    question: str
    answer: str
    context_used: str
    session_id: UUID | None = None
    search_metadata: SearchMetadata


class SessionResponse(BaseModel):
    """Chat session listing row."""

    id: UUID
    title: str
    created_at: datetime
    updated_at: datetime
    is_active: bool
    message_count: int = 0


class MessageResponse(BaseModel):
    """Single stored question/answer pair."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    question: str
    answer: str
    question_language: str
    answer_language: str
    used_rag: bool
    search_score: float | None = None
    created_at: datetime
