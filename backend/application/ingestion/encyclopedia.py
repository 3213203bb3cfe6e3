"""
Encyclopedia summary batcher.

Fetches the summary extract of each catalog topic from the Wikipedia REST
API, one request at a time with a fixed pause after each call.

Dependencies: requests, fastapi (threadpool helper)
System role: External-encyclopedia dataset source
"""

import asyncio
import logging
from typing import AsyncIterator
from urllib.parse import quote

import requests
from fastapi.concurrency import run_in_threadpool

from backend.application.ingestion.base import BaseBatcher, ContentRecord
from backend.application.ingestion.catalog import ENCYCLOPEDIA_TOPICS
from backend.boundary.vdb.vector_schemas import ContentSource
from backend.configs.ingestion import IngestionSettings

logger = logging.getLogger(__name__)


def clean_extract(extract: str | None, limit: int) -> str:
    """Flatten newlines and cut to ``limit`` characters plus "..."."""
    text = (extract or "").replace("\n", " ").strip()
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class EncyclopediaBatcher(BaseBatcher):
    """Wikipedia summaries for a fixed topic list."""

    name = "encyclopedia"
    payload_source = ContentSource.ENCYCLOPEDIA.value
    id_offset = 2000

    def __init__(
        self,
        settings: IngestionSettings,
        topics: list[tuple[str, str, str]] | None = None,
        http: requests.Session | None = None,
    ) -> None:
        self._settings = settings
        self._topics = topics if topics is not None else ENCYCLOPEDIA_TOPICS
        self._http = http or requests.Session()
        self._http.headers.setdefault("User-Agent", settings.user_agent)

    def _fetch_sync(self, topic: str) -> str:
        url = f"{self._settings.encyclopedia_base_url}/{quote(topic, safe='')}"
        response = self._http.get(url, timeout=self._settings.http_timeout_seconds)
        response.raise_for_status()
        return clean_extract(response.json().get("extract"), self._settings.encyclopedia_content_limit)

    async def fetch_summary(self, topic: str) -> str:
        """
        Fetch and clean one topic summary.

        Returns:
            str: Cleaned extract, empty string if the request failed
        """
        try:
            return await run_in_threadpool(self._fetch_sync, topic)
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"{__name__}:fetch_summary - Encyclopedia error for {topic}: {e}")
            return ""

    async def iter_records(self) -> AsyncIterator[ContentRecord]:
        for topic, subject, difficulty in self._topics:
            content = await self.fetch_summary(topic)
            if content:
                logger.info(f"{__name__}:iter_records - Loaded: {topic} ({subject})")
                yield ContentRecord(title=topic, content=content, subject=subject, difficulty=difficulty)

            if self._settings.encyclopedia_delay_seconds > 0:
                await asyncio.sleep(self._settings.encyclopedia_delay_seconds)
