"""
Qdrant vector index client.

Wraps the synchronous QdrantClient for the learning content collection.
Client calls run in the threadpool so they never block the event loop.
Writes raise VectorStoreError; search degrades to an empty hit list.

Dependencies: qdrant_client, fastapi (threadpool helper)
System role: Vector storage boundary for indexing and retrieval
"""

import asyncio
import logging
from collections import Counter
from typing import Sequence

from fastapi.concurrency import run_in_threadpool
from qdrant_client import QdrantClient
from qdrant_client.http import models

from backend.boundary.vdb.vector_schemas import RetrievalHit, VectorPoint
from backend.configs.vector_store import VectorStoreSettings
from backend.core.exceptions import VectorStoreError
from backend.core.fallback import degrade

logger = logging.getLogger(__name__)

DOCUMENT_ID_FIELD = "document_id"


def _document_filter(document_id: str) -> models.Filter:
    return models.Filter(
        must=[
            models.FieldCondition(
                key=DOCUMENT_ID_FIELD,
                match=models.MatchValue(value=document_id),
            )
        ]
    )


class VectorIndexClient:
    """Collection-scoped operations on a Qdrant instance."""

    def __init__(
        self,
        settings: VectorStoreSettings,
        client: QdrantClient | None = None,
    ) -> None:
        """
        Initialize the index client.

        Args:
            settings: Vector store settings (collection, batching)
            client: Pre-built QdrantClient (tests inject mocks here)
        """
        self.collection_name = settings.collection_name
        self.dimension = settings.embedding_dimension
        self.batch_size = settings.batch_size
        self.batch_delay = settings.batch_delay_seconds

        if client is None:
            client_kwargs = {"url": settings.url, "timeout": settings.timeout}
            if settings.api_key:
                client_kwargs["api_key"] = settings.api_key
            client = QdrantClient(**client_kwargs)
        self._client = client

    async def collection_exists(self) -> bool:
        try:
            return await run_in_threadpool(self._client.collection_exists, self.collection_name)
        except Exception as e:
            raise VectorStoreError(f"Failed to check collection: {e}", operation="collection_exists") from e

    async def ensure_collection(self, dimension: int | None = None) -> bool:
        """
        Create the collection (cosine distance) if it does not exist.

        Returns:
            bool: True if the collection was created by this call
        """
        size = dimension or self.dimension
        try:
            if await run_in_threadpool(self._client.collection_exists, self.collection_name):
                logger.info(f"{__name__}:ensure_collection - {self.collection_name} already exists")
                return False

            await run_in_threadpool(
                self._client.create_collection,
                collection_name=self.collection_name,
                vectors_config=models.VectorParams(size=size, distance=models.Distance.COSINE),
            )
            await run_in_threadpool(
                self._client.create_payload_index,
                collection_name=self.collection_name,
                field_name=DOCUMENT_ID_FIELD,
                field_schema=models.PayloadSchemaType.KEYWORD,
            )
            logger.info(f"{__name__}:ensure_collection - Created {self.collection_name} (dimension={size})")
            return True
        except Exception as e:
            raise VectorStoreError(
                f"Failed to ensure collection: {e}",
                operation="ensure_collection",
                details={"collection": self.collection_name},
            ) from e

    async def upsert(self, points: Sequence[VectorPoint]) -> int:
        """
        Write points in a single call.

        Returns:
            int: Number of points written
        """
        if not points:
            return 0
        structs = [
            models.PointStruct(
                id=point.id if isinstance(point.id, int) else str(point.id),
                vector=point.vector,
                payload=point.payload.to_qdrant(),
            )
            for point in points
        ]
        try:
            await run_in_threadpool(
                self._client.upsert,
                collection_name=self.collection_name,
                points=structs,
                wait=True,
            )
        except Exception as e:
            raise VectorStoreError(
                f"Failed to upsert points: {e}",
                operation="upsert",
                details={"count": len(points)},
            ) from e
        logger.debug(f"{__name__}:upsert - Upserted {len(points)} points")
        return len(points)

    async def upsert_batched(self, points: Sequence[VectorPoint]) -> int:
        """
        Write points in sequential batches with a fixed pause between them.

        Issues exactly ceil(len(points) / batch_size) upsert calls.

        Returns:
            int: Number of points written
        """
        total = 0
        batch_count = (len(points) + self.batch_size - 1) // self.batch_size
        for batch_number in range(batch_count):
            batch = points[batch_number * self.batch_size:(batch_number + 1) * self.batch_size]
            total += await self.upsert(batch)
            logger.info(
                f"{__name__}:upsert_batched - Batch {batch_number + 1}/{batch_count} "
                f"({len(batch)} points)"
            )
            if batch_number < batch_count - 1 and self.batch_delay > 0:
                await asyncio.sleep(self.batch_delay)
        return total

    @degrade(lambda *args, **kwargs: [], operation="vector_search")
    async def search(
        self,
        vector: list[float],
        limit: int,
        document_id: str | None = None,
        score_threshold: float | None = None,
    ) -> list[RetrievalHit]:
        """
        Similarity search, best match first.

        Args:
            vector: Query vector
            limit: Maximum number of hits
            document_id: Restrict to chunks of one uploaded document
            score_threshold: Minimum score applied by the index

        Returns:
            list[RetrievalHit]: Hits ordered by descending score, [] on failure
        """
        response = await run_in_threadpool(
            self._client.query_points,
            collection_name=self.collection_name,
            query=vector,
            limit=limit,
            query_filter=_document_filter(document_id) if document_id else None,
            score_threshold=score_threshold,
            with_payload=True,
        )
        hits = [
            RetrievalHit(point_id=str(point.id), score=point.score, payload=point.payload or {})
            for point in response.points
        ]
        hits.sort(key=lambda hit: hit.score, reverse=True)
        return hits

    async def delete_by_document(self, document_id: str) -> None:
        """Delete every point whose payload carries ``document_id``."""
        try:
            await run_in_threadpool(
                self._client.delete,
                collection_name=self.collection_name,
                points_selector=models.FilterSelector(filter=_document_filter(document_id)),
                wait=True,
            )
        except Exception as e:
            raise VectorStoreError(
                f"Failed to delete document points: {e}",
                operation="delete",
                details={"document_id": document_id},
            ) from e
        logger.info(f"{__name__}:delete_by_document - Deleted points for document {document_id}")

    async def count(self) -> int:
        """Exact number of points in the collection."""
        try:
            result = await run_in_threadpool(
                self._client.count,
                collection_name=self.collection_name,
                exact=True,
            )
        except Exception as e:
            raise VectorStoreError(f"Failed to count points: {e}", operation="count") from e
        return result.count

    async def subject_counts(self, page_size: int = 256) -> dict[str, int]:
        """
        Count points per payload subject by scrolling the collection.

        Returns:
            dict[str, int]: Subject name to number of points
        """
        counts: Counter[str] = Counter()
        offset = None
        try:
            while True:
                records, offset = await run_in_threadpool(
                    self._client.scroll,
                    collection_name=self.collection_name,
                    limit=page_size,
                    offset=offset,
                    with_payload=["subject"],
                    with_vectors=False,
                )
                for record in records:
                    subject = (record.payload or {}).get("subject")
                    if subject:
                        counts[subject] += 1
                if offset is None:
                    break
        except Exception as e:
            raise VectorStoreError(f"Failed to scroll collection: {e}", operation="scroll") from e
        return dict(counts)
