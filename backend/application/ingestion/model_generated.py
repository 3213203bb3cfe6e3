"""
Model-generated corpus batcher.

Asks the generative model for a short explanation of each catalog topic,
pausing after every call to stay under provider rate limits.

Dependencies: backend.core.answer_orchestrator
System role: Model-generated dataset source
"""

import asyncio
import logging
from typing import AsyncIterator

from backend.application.ingestion.base import BaseBatcher, ContentRecord
from backend.application.ingestion.catalog import GENERATION_TOPICS, difficulty_for_topic
from backend.boundary.vdb.vector_schemas import ContentSource
from backend.core.answer_orchestrator import AnswerOrchestrator
from backend.core.exceptions import ProviderNotConfiguredError

logger = logging.getLogger(__name__)


class ModelGeneratedBatcher(BaseBatcher):
    """Topic explanations written by the generative model."""

    name = "model-generated"
    payload_source = ContentSource.MODEL_GENERATED.value
    id_offset = 4000

    def __init__(
        self,
        answers: AnswerOrchestrator,
        provider_configured: bool,
        delay_seconds: float,
        topics: dict[str, list[str]] | None = None,
    ) -> None:
        """
        Initialize the batcher.

        Raises:
            ProviderNotConfiguredError: No generative provider credential
        """
        if not provider_configured:
            raise ProviderNotConfiguredError("Generative model for dataset generation")
        self._answers = answers
        self._delay = delay_seconds
        self._topics = topics if topics is not None else GENERATION_TOPICS

    async def iter_records(self) -> AsyncIterator[ContentRecord]:
        for subject, topics in self._topics.items():
            for topic in topics:
                content = await self._answers.generate_topic_content(subject, topic)
                if content:
                    logger.info(f"{__name__}:iter_records - Generated: {topic} ({subject})")
                    yield ContentRecord(
                        title=topic,
                        content=content,
                        subject=subject,
                        difficulty=difficulty_for_topic(topic),
                    )
                else:
                    logger.warning(f"{__name__}:iter_records - No content generated for {topic}")

                if self._delay > 0:
                    await asyncio.sleep(self._delay)
