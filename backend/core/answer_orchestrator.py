"""
Answer orchestration.

Chooses the prompt for a question (grounded, subject persona, or
document tutor), calls the generative provider and reads the reply
through the completion envelope. Provider failures become fixed
friendly answers.

Dependencies: langchain_core, backend.boundary.llm
System role: Generation stage of the RAG pipeline
"""

import logging
from typing import Sequence

from langchain_core.messages import BaseMessage

from backend.boundary.llm.generative import GenerativeProvider
from backend.configs.providers import ProviderSettings
from backend.core.fallback import degrade
from backend.core.prompts import (
    CONTENT_GENERATION_PROMPT,
    get_answer_prompt,
    get_document_prompt,
    select_persona,
)
from backend.core.retriever import NO_CONTEXT_SENTINEL

logger = logging.getLogger(__name__)

ANSWER_FALLBACK = "I'm here to help with your educational questions!"
DOCUMENT_ANSWER_FALLBACK = "Sorry, I encountered an error generating the answer."


class AnswerOrchestrator:
    """Turns (question, context) into an answer string. Never raises."""

    def __init__(self, provider: GenerativeProvider, settings: ProviderSettings) -> None:
        self._provider = provider
        self._settings = settings

    async def answer(
        self,
        question: str,
        context: str,
        language_name: str | None = None,
    ) -> str:
        """
        Generate an answer grounded in the retrieval context.

        When the context is the no-context sentinel, a subject persona is
        chosen from the question keywords instead.

        Args:
            question: Question text (English when coming from the multilingual path)
            context: Retrieval context block or the sentinel
            language_name: Answer language; English or None adds no instruction

        Returns:
            str: Answer text, or the generic fallback answer on any failure
        """
        grounded = context != NO_CONTEXT_SENTINEL
        translate_to = (
            language_name if language_name and language_name.lower() != "english" else None
        )

        variables = {"question": question}
        if grounded:
            variables["context"] = context
        else:
            variables["persona"] = select_persona(question)
        if translate_to:
            variables["language_name"] = translate_to

        logger.info(
            f"{__name__}:answer - grounded={grounded}, language={translate_to or 'English'}"
        )
        messages = get_answer_prompt(grounded, translate_to).format_messages(**variables)
        return await self._complete_answer(messages)

    async def answer_from_document(
        self,
        question: str,
        context: str,
        document_title: str,
    ) -> str:
        """Answer using chunks of a single uploaded document."""
        messages = get_document_prompt().format_messages(
            question=question,
            context=context,
            document_title=document_title,
        )
        return await self._complete_document_answer(messages)

    async def generate_topic_content(self, subject: str, topic: str) -> str:
        """
        Ask the model for a short educational text on a topic.

        Returns:
            str: Generated text, empty string on failure
        """
        messages = CONTENT_GENERATION_PROMPT.format_messages(subject=subject, topic=topic)
        return await self._complete_content(messages)

    async def _complete(self, messages: Sequence[BaseMessage], max_tokens: int) -> str:
        envelope = await self._provider.complete(
            messages,
            temperature=self._settings.chat_temperature,
            max_tokens=max_tokens,
        )
        return envelope.first_content()

    @degrade(lambda *args, **kwargs: ANSWER_FALLBACK, operation="answer")
    async def _complete_answer(self, messages: Sequence[BaseMessage]) -> str:
        return await self._complete(messages, self._settings.chat_max_tokens)

    @degrade(lambda *args, **kwargs: DOCUMENT_ANSWER_FALLBACK, operation="document_answer")
    async def _complete_document_answer(self, messages: Sequence[BaseMessage]) -> str:
        return await self._complete(messages, self._settings.chat_max_tokens)

    @degrade(lambda *args, **kwargs: "", operation="generate_topic_content")
    async def _complete_content(self, messages: Sequence[BaseMessage]) -> str:
        return await self._complete(messages, self._settings.content_max_tokens)
