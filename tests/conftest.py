"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, settings without network endpoints,
fake embedding/generative providers and a mocked vector index
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from typing import Sequence
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.messages import BaseMessage

from backend.boundary.llm.envelope import CompletionEnvelope


class FakeEmbeddings(Embeddings):
    """Deterministic embeddings: every text maps to the same unit-ish vector."""

    def __init__(self, dimension: int = 8, fail: bool = False) -> None:
        self.dimension = dimension
        self.fail = fail
        self.calls: list[str] = []

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail:
            raise RuntimeError("embedding backend down")
        return [0.1] * self.dimension


class FakeProvider:
    """Generative provider returning queued replies and recording prompts."""

    def __init__(self, replies: Sequence[str] | None = None, configured: bool = True) -> None:
        self.replies = list(replies or [])
        self.configured = configured
        self.calls: list[dict] = []
        self.error: Exception | None = None

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def complete(
        self,
        messages: Sequence[BaseMessage],
        *,
        temperature: float,
        max_tokens: int,
        model: str | None = None,
    ) -> CompletionEnvelope:
        self.calls.append({
            "messages": list(messages),
            "temperature": temperature,
            "max_tokens": max_tokens,
            "model": model,
        })
        if self.error is not None:
            raise self.error
        reply = self.replies.pop(0) if self.replies else ""
        return CompletionEnvelope.parse({"choices": [{"message": {"content": reply}}]})


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from backend.boundary.db.base import Base
    from backend.boundary.db import models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_user(test_async_db):
    """Persisted user owning sessions and documents in integration tests."""
    from backend.boundary.db.CRUD.user_crud import user_crud

    user = await user_crud.create(
        test_async_db,
        google_id=f"google-{uuid.uuid4()}",
        email=f"{uuid.uuid4()}@example.com",
        name="Test Student",
    )
    await test_async_db.commit()
    return user


@pytest.fixture
def settings():
    """Application settings with fast batching and no credentials."""
    from backend.configs import Settings
    from backend.configs.database import DatabaseSettings
    from backend.configs.ingestion import IngestionSettings
    from backend.configs.providers import ProviderSettings
    from backend.configs.vector_store import VectorStoreSettings

    return Settings(
        database=DatabaseSettings(url_override="sqlite+aiosqlite:///:memory:"),
        vector_store=VectorStoreSettings(embedding_dimension=8, batch_delay_seconds=0),
        providers=ProviderSettings(google_api_key=None),
        ingestion=IngestionSettings(encyclopedia_delay_seconds=0, generation_delay_seconds=0),
    )


@pytest.fixture
def fake_embeddings() -> FakeEmbeddings:
    return FakeEmbeddings(dimension=8)


@pytest.fixture
def embedder(settings, fake_embeddings):
    """EmbeddingAdapter backed by FakeEmbeddings."""
    from backend.boundary.llm.embeddings import EmbeddingAdapter

    return EmbeddingAdapter(settings.providers, dimension=8, embeddings=fake_embeddings)


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider(replies=["A generated answer."])


@pytest.fixture
def make_provider():
    """Provide the FakeProvider class for tests that need custom replies."""
    return FakeProvider


@pytest.fixture
def mock_index():
    """
    Mocked VectorIndexClient.

    Returns:
        MagicMock: Index with async methods and no hits by default
    """
    index = MagicMock()
    index.collection_name = "learning_content"
    index.dimension = 8
    index.search = AsyncMock(return_value=[])
    index.upsert = AsyncMock(side_effect=lambda points: len(points))
    index.upsert_batched = AsyncMock(side_effect=lambda points: len(points))
    index.ensure_collection = AsyncMock(return_value=True)
    index.delete_by_document = AsyncMock()
    index.subject_counts = AsyncMock(return_value={})
    index.count = AsyncMock(return_value=0)
    index.collection_exists = AsyncMock(return_value=True)
    return index


@pytest.fixture
def make_hit():
    """
    Factory for RetrievalHit objects with a complete payload.

    Returns:
        Callable: make_hit(score, title=..., content=..., **payload)
    """
    from backend.boundary.vdb.vector_schemas import RetrievalHit

    def _make_hit(score: float, title: str = "Topic", content: str = "Some content", **payload):
        base = {
            "title": title,
            "content": content,
            "subject": "Biology",
            "difficulty": "Beginner",
            "source": "Manual",
        }
        base.update(payload)
        return RetrievalHit(point_id=str(uuid.uuid4()), score=score, payload=base)

    return _make_hit
