# src/campusqa/chunker/base.py
"""Chunker abstract base class."""

from abc import ABC, abstractmethod


class Chunker(ABC):
    """Abstract base class for splitting document text into chunks."""

    @abstractmethod
    def chunk(self, text: str) -> list[str]:
        """Split raw document text into ordered, non-empty chunks."""
        ...
