"""
Test suite for CompletionEnvelope.

System role: Verification of provider reply parsing
"""

import pytest

from backend.boundary.llm.envelope import CompletionEnvelope
from backend.core.exceptions import ProviderResponseError


class TestCompletionEnvelope:
    """Test suite for CompletionEnvelope.parse and first_content."""

    def test_first_content_should_strip_text(self) -> None:
        envelope = CompletionEnvelope.parse({"choices": [{"message": {"content": "  Hello  "}}]})

        assert envelope.first_content() == "Hello"

    def test_parse_should_flatten_content_parts(self) -> None:
        # Arrange
        raw = {
            "model": "gemini",
            "choices": [
                {"message": {"content": [{"type": "text", "text": "Part one. "}, "Part two."]}}
            ],
        }

        # Act
        envelope = CompletionEnvelope.parse(raw)

        # Assert
        assert envelope.first_content() == "Part one. Part two."

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            {"choices": "not a list"},
            {"choices": [{"message": {}}]},
            {"choices": [{"message": {"content": 42}}]},
        ],
    )
    def test_parse_should_raise_for_malformed_reply(self, raw) -> None:
        with pytest.raises(ProviderResponseError):
            CompletionEnvelope.parse(raw)

    def test_first_content_should_raise_without_choices(self) -> None:
        with pytest.raises(ProviderResponseError):
            CompletionEnvelope.parse({"choices": []}).first_content()

    def test_first_content_should_raise_for_blank_text(self) -> None:
        with pytest.raises(ProviderResponseError):
            CompletionEnvelope.parse({"choices": [{"message": {"content": " "}}]}).first_content()
