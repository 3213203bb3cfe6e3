"""
Language detection.

Asks the generative provider for an ISO 639-1 code first; if the provider
is unavailable, fails, or answers with a code outside the catalog, falls
back to script and keyword rules.

Dependencies: re, backend.boundary.llm
System role: First stage of the multilingual pipeline
"""

import logging
import re

from pydantic import BaseModel

from backend.boundary.llm.generative import GenerativeProvider
from backend.configs.providers import ProviderSettings
from backend.core.fallback import degrade
from backend.core.languages import ENGLISH, is_supported, language_name
from backend.core.prompts import LANGUAGE_DETECTION_PROMPT

logger = logging.getLogger(__name__)

PROVIDER_CONFIDENCE = 0.95
SCRIPT_CONFIDENCE = 0.9
KEYWORD_CONFIDENCE = 0.8
DEFAULT_CONFIDENCE = 0.7

# Unambiguous scripts, checked before any keyword rule
_SCRIPT_RULES: list[tuple[str, re.Pattern[str]]] = [
    ("hi", re.compile(r"[\u0900-\u097F]")),
    ("ja", re.compile(r"[\u3040-\u30FF]")),
    ("ko", re.compile(r"[\uAC00-\uD7AF\u1100-\u11FF]")),
    ("zh", re.compile(r"[\u4E00-\u9FFF]")),
]

_KEYWORDS: dict[str, set[str]] = {
    "es": {"qué", "cómo", "cuál", "dónde", "cuándo", "por", "es", "la", "el", "una", "uno", "los", "las"},
    "fr": {"qu'est-ce", "comment", "où", "quand", "pourquoi", "c'est", "le", "la", "les", "est", "une", "des"},
    "de": {"was", "wie", "wo", "wann", "warum", "ist", "das", "der", "die", "ein", "eine", "und"},
    "en": {"the", "and", "is", "are", "this", "that", "with", "for", "can", "will", "what", "how", "why", "was"},
}

_CHARACTERS: dict[str, set[str]] = {
    "es": {"¿", "¡", "ñ", "á", "í", "ó", "ú"},
    "fr": {"ç", "à", "è", "ê", "â", "ô", "û", "é"},
    "de": {"ä", "ö", "ü", "ß"},
}

_TOKEN_PATTERN = re.compile(r"[\w'’-]+")

# Tie-break order when two languages score the same
_KEYWORD_ORDER = ("es", "fr", "de")


class LanguageDetectionResult(BaseModel):
    """Detected language with a confidence score."""

    language: str
    language_name: str
    confidence: float
    method: str

    @property
    def is_supported(self) -> bool:
        return is_supported(self.language)


def _result(code: str, confidence: float, method: str) -> LanguageDetectionResult:
    return LanguageDetectionResult(
        language=code,
        language_name=language_name(code),
        confidence=confidence,
        method=method,
    )


def detect_by_rules(text: str) -> LanguageDetectionResult:
    """
    Rule-based detection.

    Script ranges decide first. Otherwise whole-word function words and
    distinctive characters are scored per language; a foreign language
    wins only when it outscores English.
    """
    for code, pattern in _SCRIPT_RULES:
        if pattern.search(text):
            return _result(code, SCRIPT_CONFIDENCE, "rules")

    lowered = text.lower()
    tokens = _TOKEN_PATTERN.findall(lowered)

    scores: dict[str, int] = {}
    for code, keywords in _KEYWORDS.items():
        scores[code] = sum(1 for token in tokens if token in keywords)
    for code, characters in _CHARACTERS.items():
        scores[code] += 2 * sum(1 for char in characters if char in lowered)

    best = max(_KEYWORD_ORDER, key=lambda code: (scores[code], -_KEYWORD_ORDER.index(code)))
    if scores[best] > 0 and scores[best] > scores["en"]:
        return _result(best, KEYWORD_CONFIDENCE, "rules")
    return _result(ENGLISH, DEFAULT_CONFIDENCE, "rules")


class LanguageDetector:
    """Provider-first language detector with rule-based fallback."""

    def __init__(self, provider: GenerativeProvider, settings: ProviderSettings) -> None:
        self._provider = provider
        self._settings = settings

    async def detect(self, text: str) -> LanguageDetectionResult:
        """
        Detect the language of a text.

        Returns:
            LanguageDetectionResult: provider result (0.95) when the provider
            names a supported code, rule-based result otherwise
        """
        if self._provider.is_configured:
            code = await self._detect_with_provider(text)
            if code and is_supported(code):
                return _result(code, PROVIDER_CONFIDENCE, "provider")
            logger.info(f"{__name__}:detect - Provider gave no supported code ({code!r}), using rules")

        return detect_by_rules(text)

    @degrade(lambda *args, **kwargs: None, operation="detect_language")
    async def _detect_with_provider(self, text: str) -> str | None:
        envelope = await self._provider.complete(
            LANGUAGE_DETECTION_PROMPT.format_messages(text=text),
            temperature=self._settings.detection_temperature,
            max_tokens=self._settings.detection_max_tokens,
            model=self._settings.utility_model,
        )
        return envelope.first_content().strip().strip("'\".").lower()
