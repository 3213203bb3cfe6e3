"""
Core business logic module.

Contains the RAG pipeline stages (chunking, retrieval, answer generation,
multilingual handling, conversation state) and the exception hierarchy.
"""

from backend.core.exceptions import (
    TeachingPlatformError,
    ValidationError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    SessionNotFoundError,
    DocumentNotFoundError,
    DocumentProcessingError,
    EmbeddingError,
    VectorStoreError,
    ProviderError,
    ProviderNotConfiguredError,
    ProviderResponseError,
)

__all__ = [
    "TeachingPlatformError",
    "ValidationError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "SessionNotFoundError",
    "DocumentNotFoundError",
    "DocumentProcessingError",
    "EmbeddingError",
    "VectorStoreError",
    "ProviderError",
    "ProviderNotConfiguredError",
    "ProviderResponseError",
]
