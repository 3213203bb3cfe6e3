"""
Test suite for language detection.

Tests script and keyword rules, provider-first detection and the
fallback to rules when the provider is absent or answers off-catalog.

System role: Verification of the multilingual detection stage
"""

import pytest

from backend.core.language_detector import LanguageDetector, detect_by_rules
from backend.core.languages import SUPPORTED_LANGUAGES, is_supported, language_name, looks_english


class TestDetectByRules:
    """Test suite for detect_by_rules."""

    @pytest.mark.parametrize(
        "text,code",
        [
            ("नमस्ते, आप कैसे हैं?", "hi"),
            ("これは何ですか", "ja"),
            ("안녕하세요", "ko"),
            ("光合作用是什么", "zh"),
        ],
    )
    def test_detect_by_rules_should_recognize_scripts(self, text, code) -> None:
        # Act
        result = detect_by_rules(text)

        # Assert
        assert result.language == code
        assert result.confidence >= 0.8
        assert result.method == "rules"

    @pytest.mark.parametrize(
        "text,code",
        [
            ("¿Qué es la fotosíntesis?", "es"),
            ("Qu'est-ce que la photosynthèse?", "fr"),
            ("Was ist das Wetter?", "de"),
        ],
    )
    def test_detect_by_rules_should_score_keywords(self, text, code) -> None:
        # Act
        result = detect_by_rules(text)

        # Assert
        assert result.language == code
        assert result.confidence == 0.8
        assert result.language_name == language_name(code)

    def test_detect_by_rules_should_default_to_english(self) -> None:
        # Act
        result = detect_by_rules("What is photosynthesis?")

        # Assert
        assert result.language == "en"
        assert result.confidence == 0.7

    def test_detect_by_rules_should_match_whole_words_only(self) -> None:
        # "lasagna" and "estimate" contain Spanish function words as substrings
        assert detect_by_rules("Estimate the lasagna weight").language == "en"


class TestLanguageDetector:
    """Test suite for LanguageDetector.detect method."""

    @pytest.mark.asyncio
    async def test_detect_should_trust_provider_for_catalog_code(
        self, settings, make_provider
    ) -> None:
        # Arrange
        provider = make_provider(replies=["'FR'."])
        detector = LanguageDetector(provider, settings.providers)

        # Act
        result = await detector.detect("Bonjour tout le monde")

        # Assert
        assert result.language == "fr"
        assert result.confidence == 0.95
        assert result.method == "provider"
        assert provider.calls[0]["model"] == settings.providers.utility_model
        assert provider.calls[0]["max_tokens"] == 10

    @pytest.mark.asyncio
    async def test_detect_should_use_rules_for_unknown_provider_code(
        self, settings, make_provider
    ) -> None:
        # Arrange
        detector = LanguageDetector(make_provider(replies=["sw"]), settings.providers)

        # Act
        result = await detector.detect("¿Dónde está la biblioteca?")

        # Assert
        assert result.language == "es"
        assert result.method == "rules"

    @pytest.mark.asyncio
    async def test_detect_should_use_rules_when_provider_fails(
        self, settings, make_provider
    ) -> None:
        # Arrange
        provider = make_provider()
        provider.error = RuntimeError("network")
        detector = LanguageDetector(provider, settings.providers)

        # Act
        result = await detector.detect("नमस्ते")

        # Assert
        assert result.language == "hi"
        assert result.confidence == 0.9

    @pytest.mark.asyncio
    async def test_detect_should_skip_unconfigured_provider(
        self, settings, make_provider
    ) -> None:
        # Arrange
        provider = make_provider(replies=["de"], configured=False)
        detector = LanguageDetector(provider, settings.providers)

        # Act
        result = await detector.detect("Hello there")

        # Assert
        assert result.language == "en"
        assert provider.calls == []


class TestLanguageCatalog:
    """Test suite for the language catalog helpers."""

    def test_catalog_should_hold_ten_languages(self) -> None:
        assert len(SUPPORTED_LANGUAGES) == 10

    def test_is_supported_should_ignore_case(self) -> None:
        assert is_supported("ES")
        assert not is_supported("xx")
        assert not is_supported(None)

    def test_language_name_should_report_unknown(self) -> None:
        assert language_name("xx") == "Unknown"

    def test_looks_english_should_need_spaced_marker(self) -> None:
        assert looks_english("Photosynthesis is the process")
        assert not looks_english("La fotosíntesis es un proceso")
