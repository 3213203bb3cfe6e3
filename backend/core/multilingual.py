"""
Multilingual question pipeline.

Linear stages: detect, translate to English, retrieve, answer in the
question's language, optionally translate the answer back. Every stage
degrades on its own; the pipeline itself only raises on invalid input.

Dependencies: backend.core
System role: Multilingual RAG orchestration
"""

import logging
from datetime import datetime

from pydantic import BaseModel, Field

from backend.boundary.db.base import utc_now
from backend.core.answer_orchestrator import AnswerOrchestrator
from backend.core.exceptions import ValidationError
from backend.core.language_detector import LanguageDetector
from backend.core.languages import ENGLISH, is_supported, language_name, looks_english
from backend.core.retriever import RetrievalEngine
from backend.core.translator import Translator

logger = logging.getLogger(__name__)


class MultilingualResult(BaseModel):
    """Outcome of one multilingual question."""

    question: str
    question_language: str
    english_translation: str  # empty when the question was not translated
    answer: str
    answer_language: str
    translated_answer: str | None = None
    context_sources: list[str] = Field(default_factory=list)
    used_fallback: bool
    processed_at: datetime = Field(default_factory=utc_now)


class MultilingualPipeline:
    """Detect, translate, retrieve, answer, translate back."""

    def __init__(
        self,
        detector: LanguageDetector,
        translator: Translator,
        retrieval: RetrievalEngine,
        answers: AnswerOrchestrator,
    ) -> None:
        self._detector = detector
        self._translator = translator
        self._retrieval = retrieval
        self._answers = answers

    async def run(
        self,
        question: str,
        language: str | None = None,
        auto_detect: bool = True,
        translate_back: bool = False,
    ) -> MultilingualResult:
        """
        Answer a question asked in any supported language.

        Args:
            question: Question text
            language: Known ISO code; skips detection when given
            auto_detect: Detect when no language is given (English otherwise)
            translate_back: Translate the answer into the question language
                when the model answered in English anyway

        Returns:
            MultilingualResult

        Raises:
            ValidationError: Empty question or unsupported language code
        """
        if not question or not question.strip():
            raise ValidationError("Question is required", field="question")

        # Step 1: Determine question language
        if language:
            if not is_supported(language):
                raise ValidationError(f"Unsupported language: {language}", field="language")
            code = language.lower()
        elif auto_detect:
            detection = await self._detector.detect(question)
            code = detection.language
            logger.info(
                f"{__name__}:run - Detected {code} ({detection.confidence:.2f}, {detection.method})"
            )
        else:
            code = ENGLISH

        # Step 2: Translate question to English
        english_question = question
        if code != ENGLISH:
            english_question = await self._translator.translate(question, code, ENGLISH)

        # Step 3: Retrieve context
        retrieval = await self._retrieval.retrieve(english_question)

        # Step 4: Answer in the question language
        answer = await self._answers.answer(
            english_question,
            retrieval.context,
            language_name=language_name(code) if code != ENGLISH else None,
        )

        # Step 5: Optional translate-back
        translated_answer = None
        if translate_back and code != ENGLISH and looks_english(answer):
            logger.info(f"{__name__}:run - Answer came back in English, translating to {code}")
            final_answer = await self._translator.translate(answer, ENGLISH, code)
            if final_answer != answer:
                translated_answer = final_answer

        return MultilingualResult(
            question=question,
            question_language=code,
            english_translation=english_question if english_question != question else "",
            answer=translated_answer or answer,
            answer_language=code,
            translated_answer=translated_answer,
            context_sources=retrieval.sources,
            used_fallback=retrieval.used_fallback,
        )
