"""
Text translation through the generative provider.

Translation is best-effort: on a missing credential, provider failure or
empty reply the original text is returned unchanged.

Dependencies: backend.boundary.llm
System role: Translation stage of the multilingual pipeline
"""

import logging

from backend.boundary.llm.generative import GenerativeProvider
from backend.configs.providers import ProviderSettings
from backend.core.fallback import degrade
from backend.core.languages import language_name
from backend.core.prompts import TRANSLATION_PROMPT

logger = logging.getLogger(__name__)


class Translator:
    """Provider-backed translator that never raises."""

    def __init__(self, provider: GenerativeProvider, settings: ProviderSettings) -> None:
        self._provider = provider
        self._settings = settings

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        """
        Translate text between two catalog codes.

        Args:
            text: Text to translate
            source_language: ISO code of the text
            target_language: ISO code to translate into

        Returns:
            str: Translation, or ``text`` unchanged when translation is not possible
        """
        if not text.strip() or source_language.lower() == target_language.lower():
            return text
        if not self._provider.is_configured:
            logger.debug(f"{__name__}:translate - Provider not configured, returning original text")
            return text
        return await self._translate(text, source_language, target_language)

    @degrade(lambda self, text, *args, **kwargs: text, operation="translate")
    async def _translate(self, text: str, source_language: str, target_language: str) -> str:
        envelope = await self._provider.complete(
            TRANSLATION_PROMPT.format_messages(
                text=text,
                source_language=language_name(source_language),
                target_language=language_name(target_language),
            ),
            temperature=self._settings.translation_temperature,
            max_tokens=self._settings.translation_max_tokens,
            model=self._settings.utility_model,
        )
        # first_content raises on an empty reply, which degrades to the original text
        return envelope.first_content()
