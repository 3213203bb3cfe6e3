"""
Model provider configuration settings.

Manages credentials and model choices for embeddings, answer generation,
translation and language detection. A missing API key is a valid state:
adapters degrade to their fallbacks instead of failing.

Dependencies: pydantic, pydantic_settings
System role: LLM and embedding provider configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class ProviderSettings(BaseSettings):
    """Google Generative AI provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PROVIDER_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    google_api_key: SecretStr | None = Field(
        default=None,
        description="Google Generative AI API key",
    )

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID (supports configurable output dimensionality)",
    )
    embedding_max_input_chars: int = Field(
        default=8192,
        description="Embedding input is truncated to this many characters",
    )

    chat_model: str = Field(default="gemini-2.5-flash", description="Answer generation model")
    chat_temperature: float = Field(default=0.7, description="Answer generation temperature")
    chat_max_tokens: int = Field(default=800, description="Answer generation token cap")

    utility_model: str = Field(
        default="gemini-2.5-flash-lite",
        description="Model used for translation and language detection",
    )
    translation_temperature: float = Field(default=0.3)
    translation_max_tokens: int = Field(default=1000)
    detection_temperature: float = Field(default=0.1)
    detection_max_tokens: int = Field(default=10)

    content_max_tokens: int = Field(
        default=400,
        description="Token cap for model-generated corpus entries",
    )

    @property
    def is_configured(self) -> bool:
        """Whether a provider credential is present."""
        return self.google_api_key is not None and bool(
            self.google_api_key.get_secret_value().strip()
        )
