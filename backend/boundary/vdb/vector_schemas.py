"""
Vector database schemas.

Pydantic models for points written to and hits read from the learning
content collection.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

import enum
import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Difficulty(str, enum.Enum):
    """Content difficulty levels."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @classmethod
    def parse(cls, value: "str | Difficulty") -> "Difficulty":
        """Case-insensitive lookup, raising ValueError for unknown levels."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown difficulty: {value!r}")


PAYLOAD_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def payload_timestamp() -> str:
    """Current UTC time in the payload created_at format."""
    return datetime.now(timezone.utc).strftime(PAYLOAD_TIMESTAMP_FORMAT)


class ContentSource(str, enum.Enum):
    """Where a point's content came from (stored in the payload)."""

    MANUAL = "Manual"
    BULK_UPLOAD = "Bulk Upload"
    BASIC_SAMPLE = "Basic Sample"
    COMPREHENSIVE = "Comprehensive Built-in"
    ENCYCLOPEDIA = "Wikipedia"
    STRUCTURED_FILE = "JSON Dataset"
    MODEL_GENERATED = "AI Generated"
    USER_UPLOAD = "User Upload"


class VectorPayload(BaseModel):
    """
    Metadata stored with each vector.

    Optional document fields are only set on chunks of uploaded documents;
    ``document_id`` is the field used for scoped search and deletion.
    """

    model_config = ConfigDict(use_enum_values=True)

    title: str
    content: str
    subject: str = "General"
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    source: str = ContentSource.MANUAL.value
    created_at: str = Field(default_factory=payload_timestamp)
    document_id: str | None = None
    user_id: str | None = None
    chunk_index: int | None = None
    keywords: str | None = None

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value):
        return Difficulty.parse(value)

    def to_qdrant(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


PointId = int | uuid.UUID


class VectorPoint(BaseModel):
    """A point ready for upsert."""

    id: PointId
    vector: list[float]
    payload: VectorPayload


def relevance_label(score: float) -> str:
    """Bucket a similarity score for display."""
    if score > 0.8:
        return "Very High"
    if score > 0.6:
        return "High"
    if score > 0.4:
        return "Medium"
    return "Low"


class RetrievalHit(BaseModel):
    """Single result from vector search."""

    point_id: str
    score: float
    payload: dict[str, Any] = Field(default_factory=dict)

    @property
    def title(self) -> str:
        return str(self.payload.get("title") or "")

    @property
    def content(self) -> str:
        return str(self.payload.get("content") or "")

    @property
    def subject(self) -> str:
        return str(self.payload.get("subject") or "")

    @property
    def difficulty(self) -> str:
        return str(self.payload.get("difficulty") or "")

    @property
    def source(self) -> str:
        return str(self.payload.get("source") or "")

    @property
    def relevance(self) -> str:
        return relevance_label(self.score)
