"""
Completion reply envelope.

Provider replies are parsed into this explicit structure before any field
is read. A reply that does not fit surfaces as ProviderResponseError rather
than an attribute or key error deep inside the pipeline.

Dependencies: pydantic
System role: Typed boundary between chat providers and the answer pipeline
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from backend.core.exceptions import ProviderResponseError


class CompletionMessage(BaseModel):
    """A single assistant message."""

    role: str = "assistant"
    content: str

    @field_validator("content", mode="before")
    @classmethod
    def flatten_content_parts(cls, value: Any) -> Any:
        # Multimodal replies arrive as a list of parts; keep only the text
        if isinstance(value, list):
            parts = []
            for part in value:
                if isinstance(part, str):
                    parts.append(part)
                elif isinstance(part, dict) and isinstance(part.get("text"), str):
                    parts.append(part["text"])
            return "".join(parts)
        return value


class CompletionChoice(BaseModel):
    """One candidate completion."""

    index: int = 0
    message: CompletionMessage
    finish_reason: str | None = None


class CompletionEnvelope(BaseModel):
    """Parsed provider reply."""

    model: str | None = None
    choices: list[CompletionChoice] = Field(default_factory=list)

    @classmethod
    def parse(cls, raw: Any) -> "CompletionEnvelope":
        """
        Validate a raw provider reply.

        Raises:
            ProviderResponseError: If the payload does not match the envelope
        """
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise ProviderResponseError(
                "Malformed completion reply",
                {"errors": e.error_count()},
            ) from e

    def first_content(self) -> str:
        """
        Return the stripped text of the first choice.

        Raises:
            ProviderResponseError: If there is no choice or the text is empty
        """
        if not self.choices:
            raise ProviderResponseError("Completion reply has no choices", {"model": self.model})
        content = self.choices[0].message.content.strip()
        if not content:
            raise ProviderResponseError("Completion reply is empty", {"model": self.model})
        return content
