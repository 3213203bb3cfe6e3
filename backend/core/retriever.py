"""
Retrieval engine.

Embeds a question, queries the vector index and turns the surviving hits
into a plain-text context block for the answer prompt.

Dependencies: backend.boundary.llm, backend.boundary.vdb
System role: RAG retrieval business logic
"""

import logging

from pydantic import BaseModel, Field

from backend.boundary.llm.embeddings import EmbeddingAdapter
from backend.boundary.vdb.qdrant_index import VectorIndexClient
from backend.boundary.vdb.vector_schemas import RetrievalHit
from backend.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)

NO_CONTEXT_SENTINEL = (
    "No highly relevant context found. The AI will provide general educational knowledge."
)


def format_hit(hit: RetrievalHit) -> str:
    """Render one hit as a context line."""
    return (
        f"[{hit.subject} - {hit.difficulty}] {hit.title}: {hit.content} "
        f"(Source: {hit.source}, Relevance: {hit.score:.2f})"
    )


class RetrievalResult(BaseModel):
    """Context assembled for one question."""

    context: str
    best_score: float | None = None
    hits_found: int = 0
    hit_count: int = 0
    average_score: float = 0.0
    hits: list[RetrievalHit] = Field(default_factory=list)

    @property
    def used_fallback(self) -> bool:
        return self.context == NO_CONTEXT_SENTINEL

    @property
    def sources(self) -> list[str]:
        return [f"{hit.subject}: {hit.title}" for hit in self.hits]


class RetrievalEngine:
    """Question to context block, via embedding and similarity search."""

    def __init__(
        self,
        embedder: EmbeddingAdapter,
        index: VectorIndexClient,
        settings: VectorStoreSettings,
    ) -> None:
        self._embedder = embedder
        self._index = index
        self._settings = settings

    async def retrieve(
        self,
        question: str,
        limit: int | None = None,
        document_id: str | None = None,
    ) -> RetrievalResult:
        """
        Build the context block for a question.

        Hits at or below the score threshold, or without content, are
        dropped. When nothing survives the context is the fixed sentinel.

        Args:
            question: User question
            limit: Number of hits to request (chat default when None)
            document_id: Restrict hits to the chunks of one uploaded document

        Returns:
            RetrievalResult: context, best raw score and hit statistics
        """
        threshold = self._settings.score_threshold
        vector = await self._embedder.embed(question)
        hits = await self._index.search(
            vector,
            limit=limit or self._settings.chat_limit,
            document_id=document_id,
            score_threshold=threshold,
        )

        kept = [hit for hit in hits if hit.score > threshold and hit.content.strip()]
        logger.info(
            f"{__name__}:retrieve - {len(hits)} hits returned, {len(kept)} kept "
            f"(threshold={threshold})"
        )

        best_score = hits[0].score if hits else None
        if not kept:
            return RetrievalResult(
                context=NO_CONTEXT_SENTINEL,
                best_score=best_score,
                hits_found=len(hits),
            )

        return RetrievalResult(
            context="\n\n".join(format_hit(hit) for hit in kept),
            best_score=best_score,
            hits_found=len(hits),
            hit_count=len(kept),
            average_score=sum(hit.score for hit in kept) / len(kept),
            hits=kept,
        )

    async def search(self, query: str, limit: int | None = None) -> list[RetrievalHit]:
        """Ranked hits for a free-text query, without threshold filtering."""
        vector = await self._embedder.embed(query)
        return await self._index.search(vector, limit=limit or self._settings.search_limit)

    async def search_document(
        self,
        question: str,
        document_id: str,
        limit: int | None = None,
    ) -> list[RetrievalHit]:
        """Hits restricted to the chunks of one uploaded document."""
        vector = await self._embedder.embed(question)
        return await self._index.search(
            vector,
            limit=limit or self._settings.document_limit,
            document_id=document_id,
        )
