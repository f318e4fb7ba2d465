# src/campusqa/chunker/paragraph.py
"""Paragraph-aware chunker with size bounds."""

import re

from campusqa.chunker.base import Chunker

DEFAULT_MIN_CHARS = 300
DEFAULT_MAX_CHARS = 600

_PARAGRAPH_BREAK = re.compile(r"\n{2,}")


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank lines into trimmed, non-empty paragraphs."""
    normalized = text.replace("\r\n", "\n")
    return [p.strip() for p in _PARAGRAPH_BREAK.split(normalized) if p.strip()]


def chunk_text(
    text: str,
    min_chars: int = DEFAULT_MIN_CHARS,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> list[str]:
    """Split text into chunks of at most ``max_chars`` characters.

    Paragraphs are packed into a buffer joined by single newlines. When the
    next paragraph does not fit:

    - a buffer of at least ``min_chars`` is flushed and the paragraph is
      considered again against the empty buffer;
    - a paragraph longer than ``max_chars`` is cut into ``max_chars`` slices
      (after flushing whatever the buffer held);
    - otherwise the short buffer is topped up with the head of the paragraph
      to exactly ``max_chars`` and the rest of the paragraph is carried over.

    Chunk boundaries fall exactly at the cut, so whitespace at a cut point
    stays with one of the two chunks.

    Args:
        text: Raw document text
        min_chars: Buffer size at which a chunk may be emitted on its own
        max_chars: Hard upper bound on chunk length

    Returns:
        Chunks in document order. Empty if the text has no paragraphs.

    Raises:
        ValueError: If max_chars <= 0 or min_chars > max_chars
    """
    if max_chars <= 0:
        raise ValueError(f"max_chars must be positive, got {max_chars}")
    if min_chars > max_chars:
        raise ValueError(f"min_chars ({min_chars}) must not exceed max_chars ({max_chars})")

    chunks: list[str] = []
    buffer = ""

    def emit(content: str) -> None:
        if content.strip():
            chunks.append(content)

    for paragraph in split_paragraphs(text):
        while True:
            candidate = f"{buffer}\n{paragraph}" if buffer else paragraph
            if len(candidate) <= max_chars:
                buffer = candidate
                break

            if buffer and len(buffer) >= min_chars:
                emit(buffer)
                buffer = ""
                continue

            if len(paragraph) > max_chars:
                emit(buffer)
                buffer = ""
                for start in range(0, len(paragraph), max_chars):
                    emit(paragraph[start : start + max_chars])
                break

            # Short buffer, paragraph fits alone, combination does not.
            emit(candidate[:max_chars])
            buffer = candidate[max_chars:]
            break

    emit(buffer)
    return chunks


class ParagraphChunker(Chunker):
    """Chunker that packs blank-line separated paragraphs into bounded chunks.

    Example:
        chunker = ParagraphChunker(min_chars=300, max_chars=600)
        pieces = chunker.chunk(document_text)
    """

    def __init__(
        self,
        min_chars: int = DEFAULT_MIN_CHARS,
        max_chars: int = DEFAULT_MAX_CHARS,
    ) -> None:
        """Initialize the chunker.

        Raises:
            ValueError: If max_chars <= 0 or min_chars > max_chars
        """
        if max_chars <= 0:
            raise ValueError(f"max_chars must be positive, got {max_chars}")
        if min_chars > max_chars:
            raise ValueError(f"min_chars ({min_chars}) must not exceed max_chars ({max_chars})")
        self.min_chars = min_chars
        self.max_chars = max_chars

    def chunk(self, text: str) -> list[str]:
        """Split text into paragraph-aware chunks."""
        return chunk_text(text, min_chars=self.min_chars, max_chars=self.max_chars)
