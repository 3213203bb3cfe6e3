"""
Language models and schemas.

Dependencies: pydantic
System role: Language detection and catalog contracts
"""

from pydantic import BaseModel

from backend.core.languages import SupportedLanguage


class LanguageDetectionResponse(BaseModel):
    text: str
    detected_language: str
    language_name: str
    confidence: float
    is_supported: bool


class SupportedLanguagesResponse(BaseModel):
    languages: list[SupportedLanguage]
    primary_languages: list[SupportedLanguage]
    total_supported: int
