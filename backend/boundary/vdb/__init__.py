"""
Vector database boundary: Qdrant client and point/hit schemas.

Dependencies: qdrant_client, pydantic
System role: Vector storage adapter
"""

from backend.boundary.vdb.qdrant_index import VectorIndexClient
from backend.boundary.vdb.vector_schemas import (
    ContentSource,
    Difficulty,
    RetrievalHit,
    VectorPayload,
    VectorPoint,
    payload_timestamp,
    relevance_label,
)

__all__ = [
    "VectorIndexClient",
    "ContentSource",
    "Difficulty",
    "RetrievalHit",
    "VectorPayload",
    "VectorPoint",
    "payload_timestamp",
    "relevance_label",
]
