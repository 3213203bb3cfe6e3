"""
Structured JSON dataset batcher.

Expected layout (key case does not matter):

    {"subjects": [{"name": "Biology",
                   "topics": [{"title": ..., "content": ...,
                               "difficulty": ..., "keywords": [...]}]}]}

Dependencies: json, pathlib
System role: Structured-file dataset source
"""

import json
import logging
from pathlib import Path
from typing import Any, AsyncIterator

from pydantic import ValidationError as PydanticValidationError

from backend.application.ingestion.base import BaseBatcher, ContentRecord
from backend.boundary.vdb.vector_schemas import ContentSource
from backend.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _get(mapping: dict[str, Any], key: str, default: Any = None) -> Any:
    for candidate, value in mapping.items():
        if candidate.lower() == key:
            return value
    return default


class StructuredFileBatcher(BaseBatcher):
    """Subjects and topics from a JSON file."""

    name = "structured-file"
    payload_source = ContentSource.STRUCTURED_FILE.value
    id_offset = 3000

    def __init__(self, file_path: str | Path) -> None:
        self._path = Path(file_path)

    def load(self) -> dict[str, Any]:
        """
        Read and parse the dataset file.

        Raises:
            ValidationError: Missing file or invalid JSON
        """
        if not self._path.is_file():
            raise ValidationError(f"Dataset file not found: {self._path}", field="file_path")
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValidationError(f"Dataset file is not valid JSON: {e}", field="file_path") from e
        if not isinstance(data, dict):
            raise ValidationError("Dataset root must be an object", field="file_path")
        return data

    async def iter_records(self) -> AsyncIterator[ContentRecord]:
        data = self.load()
        subjects = _get(data, "subjects") or []
        if not isinstance(subjects, list):
            raise ValidationError("Dataset 'subjects' must be a list", field="file_path")

        for subject in subjects:
            if not isinstance(subject, dict):
                logger.warning(f"{__name__}:iter_records - Skipping non-object subject entry")
                continue
            subject_name = _get(subject, "name", "General")
            topics = _get(subject, "topics") or []
            if not isinstance(topics, list):
                logger.warning(f"{__name__}:iter_records - Skipping {subject_name}: topics is not a list")
                continue

            for topic in topics:
                if not isinstance(topic, dict):
                    logger.warning(f"{__name__}:iter_records - Skipping non-object topic in {subject_name}")
                    continue
                title = _get(topic, "title")
                content = _get(topic, "content")
                if not title or not content:
                    logger.warning(f"{__name__}:iter_records - Skipping topic without title/content in {subject_name}")
                    continue

                keywords = _get(topic, "keywords") or []
                try:
                    record = ContentRecord(
                        title=title,
                        content=content,
                        subject=subject_name,
                        difficulty=_get(topic, "difficulty", "Intermediate"),
                        keywords=[keywords] if isinstance(keywords, str) else list(keywords),
                    )
                except (PydanticValidationError, TypeError) as e:
                    logger.warning(
                        f"{__name__}:iter_records - Skipping invalid topic in {subject_name}: "
                        f"{type(e).__name__}: {e}"
                    )
                    continue
                yield record
