"""
Learning content service.

Manual and bulk indexing, collection setup, subject listing, ranked
search, narration answers, and the embedding diagnostic.

Dependencies: backend.boundary.vdb, backend.boundary.llm, backend.core
System role: Content indexing and search orchestration
"""

import logging
import time

from backend.application.ingestion.base import StaticBatcher
from backend.application.ingestion.catalog import BASIC_SAMPLES
from backend.boundary.llm.embeddings import EmbeddingAdapter
from backend.boundary.vdb.qdrant_index import VectorIndexClient
from backend.boundary.vdb.vector_schemas import ContentSource, VectorPayload, VectorPoint
from backend.configs.vector_store import VectorStoreSettings
from backend.core.answer_orchestrator import AnswerOrchestrator
from backend.core.exceptions import ValidationError
from backend.core.retriever import RetrievalEngine
from backend.models.content import (
    BulkIndexResult,
    ContentItem,
    EmbeddingResponse,
    IndexContentResult,
    IndexStatus,
    SearchResponse,
    SearchResultItem,
    SetupResult,
    SubjectsResponse,
)

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class ContentService:
    """Learning content indexing and search."""

    def __init__(
        self,
        index: VectorIndexClient,
        embedder: EmbeddingAdapter,
        retrieval: RetrievalEngine,
        answers: AnswerOrchestrator,
        settings: VectorStoreSettings,
    ) -> None:
        self.index = index
        self.embedder = embedder
        self.retrieval = retrieval
        self.answers = answers
        self.settings = settings

    async def _point_for(self, item: ContentItem, point_id: int, source: ContentSource) -> VectorPoint:
        vector = await self.embedder.embed(f"{item.title} {item.content}")
        return VectorPoint(
            id=point_id,
            vector=vector,
            payload=VectorPayload(
                title=item.title,
                content=item.content,
                subject=item.subject,
                difficulty=item.difficulty,
                source=source.value,
            ),
        )

    async def index_content(self, item: ContentItem) -> IndexContentResult:
        """
        Index one manually submitted item.

        The point id is the current unix time in milliseconds.

        Returns:
            IndexContentResult: Point id and echo of title/subject
        """
        point = await self._point_for(item, _now_ms(), ContentSource.MANUAL)
        await self.index.upsert([point])
        logger.info(f"{__name__}:index_content - Indexed '{item.title}' as point {point.id}")
        return IndexContentResult(point_id=point.id, title=item.title, subject=item.subject)

    async def bulk_index(self, items: list[ContentItem]) -> BulkIndexResult:
        """
        Index several items in a single upsert.

        Ids are the current unix milliseconds plus the item position.

        Raises:
            ValidationError: Empty item list
        """
        if not items:
            raise ValidationError("At least one content item is required", field="items")

        base_id = _now_ms()
        points = [
            await self._point_for(item, base_id + position, ContentSource.BULK_UPLOAD)
            for position, item in enumerate(items)
        ]
        await self.index.upsert(points)

        subjects = sorted({item.subject for item in items})
        logger.info(f"{__name__}:bulk_index - Indexed {len(points)} items across {len(subjects)} subjects")
        return BulkIndexResult(count=len(points), subjects=subjects)

    async def setup_collection(self) -> SetupResult:
        """Ensure the collection exists and write the basic sample items (ids from 1)."""
        created = await self.index.ensure_collection(self.embedder.dimension)
        batcher = StaticBatcher(
            name="basic-sample",
            payload_source=ContentSource.BASIC_SAMPLE.value,
            id_offset=1,
            records=BASIC_SAMPLES,
        )
        points = await batcher.build_points(self.embedder)
        await self.index.upsert(points)
        return SetupResult(
            collection=self.index.collection_name,
            created=created,
            sample_count=len(points),
        )

    async def index_status(self) -> IndexStatus:
        """Whether the collection exists and how many points it holds."""
        exists = await self.index.collection_exists()
        return IndexStatus(
            collection=self.index.collection_name,
            exists=exists,
            point_count=await self.index.count() if exists else 0,
        )

    async def list_subjects(self) -> SubjectsResponse:
        counts = await self.index.subject_counts()
        return SubjectsResponse(
            subjects=dict(sorted(counts.items())),
            total_subjects=len(counts),
            total_content=sum(counts.values()),
        )

    async def search(self, query: str, limit: int | None = None) -> SearchResponse:
        """
        Ranked content search with relevance buckets.

        Raises:
            ValidationError: Empty query
        """
        if not query or not query.strip():
            raise ValidationError("Query is required", field="query")

        hits = await self.retrieval.search(query, limit=limit or self.settings.search_limit)
        results = [
            SearchResultItem(
                id=hit.point_id,
                score=hit.score,
                title=hit.title,
                content=hit.content,
                subject=hit.subject,
                difficulty=hit.difficulty,
                source=hit.source,
                relevance=hit.relevance,
            )
            for hit in hits
        ]
        return SearchResponse(query=query, results=results, total_found=len(results))

    async def answer_for_narration(self, question: str) -> str:
        """Answer text for the video collaborator, using the narrower hit limit."""
        retrieval = await self.retrieval.retrieve(question, limit=self.settings.narration_limit)
        return await self.answers.answer(question, retrieval.context)

    async def embed(self, text: str) -> EmbeddingResponse:
        """Diagnostic passthrough to the embedding adapter."""
        vector = await self.embedder.embed(text)
        return EmbeddingResponse(dimensions=len(vector), embedding=vector)
