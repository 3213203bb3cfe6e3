"""
Dependency injection container.

ServiceCache builds every component once from an immutable Settings
object. Stateless collaborators (index client, providers, pipelines) are
cached; database-bound services are created per AsyncSession.

Dependencies: backend.configs, backend.application, backend.boundary, backend.core
System role: DI container for service injection
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from backend.application.services.chat_service import ChatService
from backend.application.services.content_service import ContentService
from backend.application.services.dataset_service import DatasetService
from backend.application.services.document_service import DocumentService
from backend.application.services.multilingual_service import MultilingualService
from backend.boundary.db.connection import create_tables, get_async_engine, get_async_session_factory
from backend.boundary.llm.embeddings import EmbeddingAdapter
from backend.boundary.llm.generative import GenerativeProvider, GoogleGenerativeProvider
from backend.boundary.vdb.qdrant_index import VectorIndexClient
from backend.configs import Settings, get_settings
from backend.core.answer_orchestrator import AnswerOrchestrator
from backend.core.language_detector import LanguageDetector
from backend.core.multilingual import MultilingualPipeline
from backend.core.retriever import RetrievalEngine
from backend.core.translator import Translator
from backend.observability.logger import configure_logging

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(
        self,
        settings: Settings,
        index: VectorIndexClient | None = None,
        embedder: EmbeddingAdapter | None = None,
        provider: GenerativeProvider | None = None,
    ) -> None:
        """
        Initialize the container.

        Args:
            settings: Application settings
            index: Pre-built vector index client (tests inject fakes here)
            embedder: Pre-built embedding adapter
            provider: Pre-built generative provider
        """
        self.settings = settings
        self._index = index
        self._embedder = embedder
        self._provider = provider
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._retrieval: RetrievalEngine | None = None
        self._answers: AnswerOrchestrator | None = None
        self._detector: LanguageDetector | None = None
        self._translator: Translator | None = None
        self._pipeline: MultilingualPipeline | None = None

    @property
    def index(self) -> VectorIndexClient:
        if self._index is None:
            self._index = VectorIndexClient(self.settings.vector_store)
        return self._index

    @property
    def embedder(self) -> EmbeddingAdapter:
        if self._embedder is None:
            self._embedder = EmbeddingAdapter(
                self.settings.providers,
                dimension=self.settings.vector_store.embedding_dimension,
            )
        return self._embedder

    @property
    def provider(self) -> GenerativeProvider:
        if self._provider is None:
            self._provider = GoogleGenerativeProvider(self.settings.providers)
        return self._provider

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = get_async_engine(self.settings.database)
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._session_factory = get_async_session_factory(self.engine)
        return self._session_factory

    @property
    def retrieval(self) -> RetrievalEngine:
        if self._retrieval is None:
            self._retrieval = RetrievalEngine(self.embedder, self.index, self.settings.vector_store)
        return self._retrieval

    @property
    def answers(self) -> AnswerOrchestrator:
        if self._answers is None:
            self._answers = AnswerOrchestrator(self.provider, self.settings.providers)
        return self._answers

    @property
    def detector(self) -> LanguageDetector:
        if self._detector is None:
            self._detector = LanguageDetector(self.provider, self.settings.providers)
        return self._detector

    @property
    def translator(self) -> Translator:
        if self._translator is None:
            self._translator = Translator(self.provider, self.settings.providers)
        return self._translator

    @property
    def pipeline(self) -> MultilingualPipeline:
        if self._pipeline is None:
            self._pipeline = MultilingualPipeline(
                self.detector,
                self.translator,
                self.retrieval,
                self.answers,
            )
        return self._pipeline

    def content_service(self) -> ContentService:
        return ContentService(
            self.index,
            self.embedder,
            self.retrieval,
            self.answers,
            self.settings.vector_store,
        )

    def dataset_service(self) -> DatasetService:
        return DatasetService(
            self.index,
            self.embedder,
            self.answers,
            provider_configured=self.provider.is_configured,
            settings=self.settings.ingestion,
        )

    def multilingual_service(self) -> MultilingualService:
        return MultilingualService(self.pipeline, self.detector)

    def chat_service(self, db: AsyncSession) -> ChatService:
        return ChatService(
            db,
            self.retrieval,
            self.answers,
            embedding_dimensions=self.embedder.dimension,
        )

    def document_service(self, db: AsyncSession) -> DocumentService:
        return DocumentService(
            db,
            self.index,
            self.embedder,
            self.retrieval,
            self.answers,
            self.settings.vector_store,
            self.settings.ingestion,
        )

    @asynccontextmanager
    async def db_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Scoped database session.

        Usage:
            async with cache.db_session() as db:
                response = await cache.chat_service(db).ask(user_id, question)
        """
        async with self.session_factory() as session:
            yield session

    async def startup(self) -> None:
        """Configure logging, create tables and ensure the vector collection."""
        configure_logging(self.settings.log_level)
        await create_tables(self.engine)
        await self.index.ensure_collection(self.settings.vector_store.embedding_dimension)
        logger.info(f"{__name__}:startup - Services ready (environment={self.settings.environment})")

    async def shutdown(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None


_service_cache: ServiceCache | None = None


def get_service_cache() -> ServiceCache:
    """Get service cache singleton built from the cached settings."""
    global _service_cache
    if _service_cache is None:
        _service_cache = ServiceCache(get_settings())
    return _service_cache
