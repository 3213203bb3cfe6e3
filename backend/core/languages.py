"""
Supported language catalog.

Dependencies: pydantic
System role: Static language metadata for detection and translation
"""

from pydantic import BaseModel, ConfigDict


class SupportedLanguage(BaseModel):
    """One supported language."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    native_name: str


SUPPORTED_LANGUAGES: dict[str, SupportedLanguage] = {
    lang.code: lang
    for lang in (
        SupportedLanguage(code="en", name="English", native_name="English"),
        SupportedLanguage(code="es", name="Spanish", native_name="Español"),
        SupportedLanguage(code="fr", name="French", native_name="Français"),
        SupportedLanguage(code="hi", name="Hindi", native_name="हिन्दी"),
        SupportedLanguage(code="de", name="German", native_name="Deutsch"),
        SupportedLanguage(code="pt", name="Portuguese", native_name="Português"),
        SupportedLanguage(code="it", name="Italian", native_name="Italiano"),
        SupportedLanguage(code="zh", name="Chinese", native_name="中文"),
        SupportedLanguage(code="ja", name="Japanese", native_name="日本語"),
        SupportedLanguage(code="ko", name="Korean", native_name="한국어"),
    )
}

PRIMARY_LANGUAGE_CODES: tuple[str, ...] = ("en", "es", "fr", "hi", "de")

ENGLISH = "en"


def is_supported(code: str | None) -> bool:
    return bool(code) and code.lower() in SUPPORTED_LANGUAGES


def language_name(code: str) -> str:
    """English name for a code, "Unknown" if not in the catalog."""
    language = SUPPORTED_LANGUAGES.get(code.lower())
    return language.name if language else "Unknown"


_ENGLISH_MARKERS = ("the", "and", "is", "are", "this", "that", "with", "for", "can", "will")


def looks_english(text: str) -> bool:
    """
    Cheap check whether text is already English.

    True when any common English function word appears surrounded by spaces.
    """
    lowered = text.lower()
    return any(f" {word} " in lowered for word in _ENGLISH_MARKERS)
