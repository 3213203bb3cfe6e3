"""
Dataset loading service.

Resolves a dataset source name to its batcher(s), builds the points and
writes them with batched upserts.

Dependencies: backend.application.ingestion, backend.boundary.vdb
System role: Multi-source dataset ingestion orchestration
"""

import logging

from backend.application.ingestion.base import BaseBatcher, StaticBatcher
from backend.application.ingestion.catalog import BUILTIN_CONTENT
from backend.application.ingestion.encyclopedia import EncyclopediaBatcher
from backend.application.ingestion.model_generated import ModelGeneratedBatcher
from backend.application.ingestion.structured_file import StructuredFileBatcher
from backend.boundary.db.base import utc_now
from backend.boundary.llm.embeddings import EmbeddingAdapter
from backend.boundary.vdb.qdrant_index import VectorIndexClient
from backend.boundary.vdb.vector_schemas import ContentSource, VectorPoint
from backend.configs.ingestion import IngestionSettings
from backend.core.answer_orchestrator import AnswerOrchestrator
from backend.core.exceptions import ValidationError
from backend.models.content import DatasetLoadResult

logger = logging.getLogger(__name__)

# Accepted spellings for each source
SOURCE_ALIASES: dict[str, str] = {
    "encyclopedia": "encyclopedia",
    "wikipedia": "encyclopedia",
    "structured-file": "structured-file",
    "json": "structured-file",
    "model-generated": "model-generated",
    "ai-generated": "model-generated",
    "comprehensive": "comprehensive",
}


class DatasetService:
    """Loads curated datasets into the vector index."""

    def __init__(
        self,
        index: VectorIndexClient,
        embedder: EmbeddingAdapter,
        answers: AnswerOrchestrator,
        provider_configured: bool,
        settings: IngestionSettings,
    ) -> None:
        self.index = index
        self.embedder = embedder
        self.answers = answers
        self.provider_configured = provider_configured
        self.settings = settings

    def builtin_batcher(self) -> StaticBatcher:
        return StaticBatcher(
            name="comprehensive",
            payload_source=ContentSource.COMPREHENSIVE.value,
            id_offset=1000,
            records=BUILTIN_CONTENT,
        )

    def batchers_for(self, source: str, file_path: str | None = None) -> list[BaseBatcher]:
        """
        Build the batchers for a source name.

        Raises:
            ValidationError: Unknown source, or structured-file without a path
            ProviderNotConfiguredError: model-generated without a provider key
        """
        resolved = SOURCE_ALIASES.get((source or "").strip().lower())
        if resolved is None:
            raise ValidationError(
                "Supported sources: encyclopedia, structured-file, model-generated, comprehensive",
                field="source",
                details={"source": source},
            )

        if resolved == "encyclopedia":
            return [EncyclopediaBatcher(self.settings)]
        if resolved == "structured-file":
            if not file_path:
                raise ValidationError("file_path is required for the structured-file source", field="file_path")
            return [StructuredFileBatcher(file_path)]
        if resolved == "model-generated":
            return [
                ModelGeneratedBatcher(
                    self.answers,
                    provider_configured=self.provider_configured,
                    delay_seconds=self.settings.generation_delay_seconds,
                )
            ]
        return [EncyclopediaBatcher(self.settings), self.builtin_batcher()]

    async def load_dataset(self, source: str, file_path: str | None = None) -> DatasetLoadResult:
        """
        Load a named dataset into the index.

        For the comprehensive source an encyclopedia failure is logged and
        the built-in corpus is still loaded.

        Returns:
            DatasetLoadResult: Point count and distinct subjects
        """
        batchers = self.batchers_for(source, file_path)
        points: list[VectorPoint] = []

        for batcher in batchers:
            try:
                points.extend(await batcher.build_points(self.embedder))
            except Exception:
                if len(batchers) == 1:
                    raise
                logger.exception(f"{__name__}:load_dataset - {batcher.name} failed, continuing")

        if points:
            await self.index.upsert_batched(points)

        subjects = list(dict.fromkeys(point.payload.subject for point in points))
        logger.info(f"{__name__}:load_dataset - Loaded {len(points)} points from {source}")
        return DatasetLoadResult(
            source=source,
            total_points=len(points),
            subjects=subjects,
            processed_at=utc_now(),
        )
