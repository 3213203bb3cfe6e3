"""
Sentence-greedy content chunker.

Splits raw document text on sentence terminators and packs sentences into
chunks of at most ``max_chunk_size`` characters. A single sentence longer
than the limit still becomes its own (oversized) chunk.

Dependencies: re, pydantic
System role: First stage of the document indexing pipeline
"""

import re

from pydantic import BaseModel, Field

_SENTENCE_PATTERN = re.compile(r"[^.!?]+")


class TextChunk(BaseModel):
    """One chunk of a source text, with character offsets into that text."""

    index: int = Field(..., ge=0)
    content: str = Field(..., min_length=1)
    start_offset: int = Field(..., ge=0)
    end_offset: int = Field(..., ge=0)


class ContentChunker:
    """Greedy sentence packer used by document indexing."""

    def __init__(self, max_chunk_size: int = 1000) -> None:
        if max_chunk_size <= 0:
            raise ValueError("max_chunk_size must be positive")
        self.max_chunk_size = max_chunk_size

    def split(self, text: str) -> list[TextChunk]:
        """
        Split text into ordered, non-empty chunks.

        Each sentence is stripped and re-terminated with ". " before being
        appended. The buffer is flushed before a sentence that would push it
        past the limit, unless the buffer is empty.

        Args:
            text: Raw document text

        Returns:
            list[TextChunk]: Chunks in source order, indexed from 0
        """
        chunks: list[TextChunk] = []
        buffer = ""
        start: int | None = None
        end = 0

        for match in _SENTENCE_PATTERN.finditer(text or ""):
            sentence = match.group().strip()
            if not sentence:
                continue

            if buffer and len(buffer) + len(sentence) > self.max_chunk_size:
                chunks.append(self._make_chunk(len(chunks), buffer, start, end))
                buffer = ""
                start = None

            if start is None:
                start = match.start() + (len(match.group()) - len(match.group().lstrip()))
            end = match.start() + len(match.group().rstrip())
            buffer += sentence + ". "

        if buffer.strip():
            chunks.append(self._make_chunk(len(chunks), buffer, start, end))

        return chunks

    @staticmethod
    def _make_chunk(index: int, buffer: str, start: int | None, end: int) -> TextChunk:
        return TextChunk(
            index=index,
            content=buffer.strip(),
            start_offset=start or 0,
            end_offset=end,
        )
