"""
Learning content models and schemas.

Dependencies: pydantic
System role: Content indexing and search contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from backend.boundary.vdb.vector_schemas import Difficulty


class ContentItem(BaseModel):
    """One piece of content submitted for indexing."""

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    subject: str = Field(default="General", min_length=1)
    difficulty: Difficulty = Difficulty.INTERMEDIATE

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value):
        return Difficulty.parse(value)


class IndexContentResult(BaseModel):
    point_id: int
    title: str
    subject: str


class BulkIndexResult(BaseModel):
    count: int
    subjects: list[str]


class SearchResultItem(BaseModel):
    """Ranked search hit with a relevance bucket."""

    id: str
    score: float
    title: str
    content: str
    subject: str
    difficulty: str
    source: str
    relevance: str


class SearchResponse(BaseModel):
    query: str
    results: list[SearchResultItem]
    total_found: int


class SubjectsResponse(BaseModel):
    subjects: dict[str, int] = Field(description="Subject name to number of points")
    total_subjects: int
    total_content: int


class SetupResult(BaseModel):
    collection: str
    created: bool
    sample_count: int


class DatasetLoadResult(BaseModel):
    source: str
    total_points: int
    subjects: list[str]
    processed_at: datetime


class EmbeddingResponse(BaseModel):
    dimensions: int
    embedding: list[float]


class IndexStatus(BaseModel):
    collection: str
    exists: bool
    point_count: int
