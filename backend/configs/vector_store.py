"""
Vector store configuration settings.

Manages the Qdrant collection that holds learning content and document
chunks, plus the retrieval limits used by each ask path.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Qdrant vector index configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    url: str = Field(default="http://localhost:6333", description="Qdrant endpoint")
    api_key: str | None = Field(default=None, description="Qdrant API key (cloud only)")
    timeout: int = Field(default=30, description="Qdrant request timeout in seconds")
    collection_name: str = Field(
        default="learning_content",
        description="Collection shared by curated content and uploaded documents",
    )
    embedding_dimension: int = Field(
        default=1536,
        description="Vector dimension, must match the embedding model output",
    )

    batch_size: int = Field(default=50, description="Points per upsert call")
    batch_delay_seconds: float = Field(
        default=0.5,
        description="Pause between consecutive upsert batches",
    )

    score_threshold: float = Field(
        default=0.2,
        description="Minimum similarity score for a hit to enter the context",
    )
    chat_limit: int = Field(default=5, description="Hits fetched for chat questions")
    narration_limit: int = Field(default=3, description="Hits fetched for video narration")
    search_limit: int = Field(default=10, description="Hits returned by content search")
    document_limit: int = Field(default=5, description="Hits fetched for document questions")
    document_context_chunks: int = Field(
        default=3,
        description="Top document chunks joined into the answer context",
    )
