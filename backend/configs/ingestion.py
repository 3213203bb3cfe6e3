"""
Ingestion configuration settings.

Rate-limit delays and text limits for the dataset batchers and the
document chunker.

Dependencies: pydantic, pydantic_settings
System role: Content ingestion configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class IngestionSettings(BaseSettings):
    """Dataset loading and document indexing configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INGESTION_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    chunk_size: int = Field(default=1000, description="Max characters per document chunk")

    encyclopedia_base_url: str = Field(
        default="https://en.wikipedia.org/api/rest_v1/page/summary",
        description="Summary endpoint, the topic is appended as a path segment",
    )
    encyclopedia_delay_seconds: float = Field(default=0.2)
    encyclopedia_content_limit: int = Field(
        default=1500,
        description="Fetched extracts longer than this are cut and suffixed with '...'",
    )
    http_timeout_seconds: float = Field(default=30.0)
    user_agent: str = Field(default="AITeachingPlatform/1.0 (educational content loader)")

    generation_delay_seconds: float = Field(default=2.0)

    allowed_extensions: tuple[str, ...] = Field(default=(".txt", ".pdf", ".docx"))
