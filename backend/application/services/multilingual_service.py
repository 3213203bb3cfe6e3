"""
Multilingual service.

Thin service layer over the multilingual pipeline and language detector,
plus the supported language catalog.

Dependencies: backend.core
System role: Multilingual Q&A entry points
"""

import logging

from backend.core.language_detector import LanguageDetector
from backend.core.languages import PRIMARY_LANGUAGE_CODES, SUPPORTED_LANGUAGES
from backend.core.multilingual import MultilingualPipeline, MultilingualResult
from backend.core.exceptions import ValidationError
from backend.models.language import LanguageDetectionResponse, SupportedLanguagesResponse

logger = logging.getLogger(__name__)


class MultilingualService:
    """Questions in any supported language, and language utilities."""

    def __init__(self, pipeline: MultilingualPipeline, detector: LanguageDetector) -> None:
        self.pipeline = pipeline
        self.detector = detector

    async def ask(
        self,
        question: str,
        language: str | None = None,
        auto_detect: bool = True,
        translate_back: bool = False,
    ) -> MultilingualResult:
        return await self.pipeline.run(
            question,
            language=language,
            auto_detect=auto_detect,
            translate_back=translate_back,
        )

    async def detect_language(self, text: str) -> LanguageDetectionResponse:
        """
        Detect the language of a text.

        Raises:
            ValidationError: Empty text
        """
        if not text or not text.strip():
            raise ValidationError("Text is required", field="text")
        result = await self.detector.detect(text)
        return LanguageDetectionResponse(
            text=text,
            detected_language=result.language,
            language_name=result.language_name,
            confidence=result.confidence,
            is_supported=result.is_supported,
        )

    def supported_languages(self) -> SupportedLanguagesResponse:
        languages = list(SUPPORTED_LANGUAGES.values())
        return SupportedLanguagesResponse(
            languages=languages,
            primary_languages=[SUPPORTED_LANGUAGES[code] for code in PRIMARY_LANGUAGE_CODES],
            total_supported=len(languages),
        )
