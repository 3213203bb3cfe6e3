"""
Dataset batcher base class.

A batcher yields content records from one source and turns them into
vector points with ids from the source's static offset. Failures on a
single record are logged and skipped; the batch carries on.

Dependencies: pydantic, backend.boundary
System role: Shared ingestion loop for all dataset sources
"""

import logging
from abc import ABC, abstractmethod
from typing import AsyncIterator

from pydantic import BaseModel

from backend.boundary.llm.embeddings import EmbeddingAdapter
from backend.boundary.vdb.vector_schemas import VectorPayload, VectorPoint
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class ContentRecord(BaseModel):
    """One piece of educational content before embedding."""

    title: str
    content: str
    subject: str
    difficulty: str
    keywords: list[str] | None = None


class BaseBatcher(ABC):
    """
    Base class for dataset sources.

    Subclasses set ``name`` (the dataset source key), ``payload_source``
    (stored in each payload) and ``id_offset`` (first point id).
    """

    name: str
    payload_source: str
    id_offset: int

    @abstractmethod
    def iter_records(self) -> AsyncIterator[ContentRecord]:
        """Yield records, handling per-item failures and rate limits."""
        raise NotImplementedError

    async def build_points(self, embedder: EmbeddingAdapter) -> list[VectorPoint]:
        """
        Embed every record as "{title} {content}" and assign sequential ids.

        Returns:
            list[VectorPoint]: One point per record that could be built
        """
        points: list[VectorPoint] = []
        next_id = self.id_offset

        async for record in self.iter_records():
            try:
                vector = await embedder.embed(f"{record.title} {record.content}")
                payload = VectorPayload(
                    title=record.title,
                    content=record.content,
                    subject=record.subject,
                    difficulty=record.difficulty,
                    source=self.payload_source,
                    keywords=", ".join(record.keywords) if record.keywords is not None else None,
                )
            except Exception as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:build_points - Skipping record '{record.title}'",
                    e,
                    source=self.name,
                )
                continue

            points.append(VectorPoint(id=next_id, vector=vector, payload=payload))
            next_id += 1

        logger.info(f"{__name__}:build_points - {self.name}: built {len(points)} points")
        return points


class StaticBatcher(BaseBatcher):
    """Batcher over an in-memory list of (title, content, subject, difficulty)."""

    def __init__(
        self,
        name: str,
        payload_source: str,
        id_offset: int,
        records: list[tuple[str, str, str, str]],
    ) -> None:
        self.name = name
        self.payload_source = payload_source
        self.id_offset = id_offset
        self._records = records

    async def iter_records(self) -> AsyncIterator[ContentRecord]:
        for title, content, subject, difficulty in self._records:
            yield ContentRecord(title=title, content=content, subject=subject, difficulty=difficulty)
