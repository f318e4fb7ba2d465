# src/campusqa/chunker/__init__.py
"""Text chunking for campus-qa."""

from campusqa.chunker.base import Chunker
from campusqa.chunker.paragraph import ParagraphChunker, chunk_text, split_paragraphs

__all__ = ["Chunker", "ParagraphChunker", "chunk_text", "split_paragraphs"]
