"""
Generative model provider.

Defines the provider interface used by answer generation, translation,
language detection and model-generated content, plus the Google Gemini
implementation built on LangChain.

Dependencies: langchain_core, langchain_google_genai
System role: Chat completion boundary
"""

import logging
from typing import Protocol, Sequence

from langchain_core.messages import BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from backend.boundary.llm.envelope import CompletionEnvelope
from backend.configs.providers import ProviderSettings
from backend.core.exceptions import ProviderNotConfiguredError

logger = logging.getLogger(__name__)


class GenerativeProvider(Protocol):
    """Anything that turns chat messages into a completion envelope."""

    @property
    def is_configured(self) -> bool: ...

    async def complete(
        self,
        messages: Sequence[BaseMessage],
        *,
        temperature: float,
        max_tokens: int,
        model: str | None = None,
    ) -> CompletionEnvelope: ...


class GoogleGenerativeProvider:
    """
    Gemini chat provider.

    Chat model clients are created per (model, temperature, max_tokens)
    combination and cached for reuse.
    """

    def __init__(self, settings: ProviderSettings) -> None:
        self._settings = settings
        self._models: dict[tuple[str, float, int], ChatGoogleGenerativeAI] = {}

    @property
    def is_configured(self) -> bool:
        return self._settings.is_configured

    def _get_model(self, model: str, temperature: float, max_tokens: int) -> ChatGoogleGenerativeAI:
        key = (model, temperature, max_tokens)
        if key not in self._models:
            logger.info(
                f"{__name__}:_get_model - Creating chat model {model} "
                f"(temperature={temperature}, max_tokens={max_tokens})"
            )
            self._models[key] = ChatGoogleGenerativeAI(
                model=model,
                temperature=temperature,
                max_output_tokens=max_tokens,
                google_api_key=self._settings.google_api_key,
            )
        return self._models[key]

    async def complete(
        self,
        messages: Sequence[BaseMessage],
        *,
        temperature: float,
        max_tokens: int,
        model: str | None = None,
    ) -> CompletionEnvelope:
        """
        Run one chat completion.

        Args:
            messages: Prompt messages (system + human)
            temperature: Sampling temperature
            max_tokens: Output token cap
            model: Model override, defaults to the configured chat model

        Returns:
            CompletionEnvelope: Parsed reply

        Raises:
            ProviderNotConfiguredError: No API key configured
            ProviderResponseError: Reply did not fit the envelope
        """
        if not self.is_configured:
            raise ProviderNotConfiguredError("Google Generative AI")

        model_name = model or self._settings.chat_model
        chat_model = self._get_model(model_name, temperature, max_tokens)
        reply = await chat_model.ainvoke(list(messages))

        metadata = getattr(reply, "response_metadata", None) or {}
        return CompletionEnvelope.parse({
            "model": model_name,
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": reply.content},
                    "finish_reason": str(metadata["finish_reason"]) if metadata.get("finish_reason") else None,
                }
            ],
        })
