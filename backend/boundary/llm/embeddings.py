"""
Embedding adapter.

Turns text into a fixed-dimension vector. The adapter never raises: a
missing credential, a provider failure or a reply of the wrong size all
produce a fallback vector seeded from the text, so repeated calls with the
same input return the same fallback.

Dependencies: langchain_google_genai, fastapi (threadpool helper)
System role: Embedding boundary for indexing and retrieval
"""

import hashlib
import logging
import random
from typing import List

from fastapi.concurrency import run_in_threadpool
from langchain_core.embeddings import Embeddings
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from backend.configs.providers import ProviderSettings
from backend.core.exceptions import EmbeddingError, ProviderNotConfiguredError
from backend.core.fallback import degrade

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """
    GoogleGenerativeAIEmbeddings with a fixed output dimensionality.

    The base class does not apply output_dimensionality from the
    constructor, so every embed call passes it explicitly.
    """

    _output_dimensionality: int = 1536

    def __init__(self, output_dimensionality: int = 1536, **kwargs) -> None:
        super().__init__(**kwargs)
        self._output_dimensionality = output_dimensionality

    def embed_documents(self, texts: List[str], **kwargs) -> List[List[float]]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return super().embed_documents(texts, **kwargs)

    def embed_query(self, text: str, **kwargs) -> List[float]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return super().embed_query(text, **kwargs)


def fallback_vector(text: str, dimension: int) -> list[float]:
    """
    Build a repeatable pseudo-random vector for ``text``.

    Values are uniform in [-1, 1]; the generator is seeded from a SHA-256
    digest of the text.
    """
    seed = int.from_bytes(hashlib.sha256(text.encode("utf-8")).digest()[:8], "big")
    rng = random.Random(seed)
    return [rng.uniform(-1.0, 1.0) for _ in range(dimension)]


class EmbeddingAdapter:
    """Text to fixed-dimension vector, degrading to a seeded fallback."""

    def __init__(
        self,
        settings: ProviderSettings,
        dimension: int,
        embeddings: Embeddings | None = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            settings: Provider settings (model, key, input limit)
            dimension: Required vector length
            embeddings: Pre-built LangChain embeddings (tests inject fakes here)
        """
        self.dimension = dimension
        self._max_input_chars = settings.embedding_max_input_chars
        self._embeddings = embeddings

        if self._embeddings is None and settings.is_configured:
            self._embeddings = FixedDimensionEmbeddings(
                model=settings.embedding_model,
                google_api_key=settings.google_api_key,
                output_dimensionality=dimension,
            )
            logger.info(
                f"{__name__}:__init__ - Using {settings.embedding_model} "
                f"with output_dimensionality={dimension}"
            )
        elif self._embeddings is None:
            logger.warning(f"{__name__}:__init__ - No embedding credential, fallback vectors only")

    @property
    def is_configured(self) -> bool:
        return self._embeddings is not None

    def _fallback(self, text: str) -> list[float]:
        return fallback_vector(text[: self._max_input_chars], self.dimension)

    @degrade(lambda self, text: self._fallback(text), operation="embed")
    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Args:
            text: Input text, truncated to the provider input limit

        Returns:
            list[float]: Vector of exactly ``dimension`` floats
        """
        if self._embeddings is None:
            raise ProviderNotConfiguredError("embedding provider")

        truncated = text[: self._max_input_chars]
        vector = await run_in_threadpool(self._embeddings.embed_query, truncated)

        if len(vector) != self.dimension:
            raise EmbeddingError(
                "Embedding dimension mismatch",
                details={"expected": self.dimension, "received": len(vector)},
            )
        return [float(v) for v in vector]
