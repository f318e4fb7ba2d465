# src/campusqa/stores/base.py
"""Abstract base class for chunk storage."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from campusqa.models import DocumentChunk


class SourceSummary(BaseModel):
    """One distinct source document in the store."""

    title: str
    source_url: str
    chunks: int


def merge_chunk(existing: DocumentChunk | None, incoming: DocumentChunk) -> DocumentChunk:
    """Merge an incoming chunk over a stored one.

    Only fields explicitly set on ``incoming`` overwrite ``existing``.
    """
    if existing is None:
        return incoming
    updates = {name: getattr(incoming, name) for name in incoming.model_fields_set}
    return existing.model_copy(update=updates)


class ChunkStore(ABC):
    """Abstract base class for chunk storage.

    Writes are upserts keyed by chunk id with merge semantics: fields the
    caller did not set on the written model keep their stored values.
    """

    @abstractmethod
    def get_all(self) -> list[DocumentChunk]:
        """Return every stored chunk, in insertion order."""
        ...

    @abstractmethod
    def get(self, chunk_id: str) -> DocumentChunk | None:
        """Retrieve a chunk by ID. Returns None if not found."""
        ...

    @abstractmethod
    def upsert(self, chunk: DocumentChunk) -> None:
        """Store a chunk, merging into an existing one with the same ID."""
        ...

    @abstractmethod
    def upsert_many(self, chunks: list[DocumentChunk]) -> None:
        """Store multiple chunks as one atomic batch."""
        ...

    @abstractmethod
    def count_chunks(self) -> int:
        """Count the total number of chunks in the store."""
        ...

    @abstractmethod
    def list_sources(self) -> list[SourceSummary]:
        """List distinct (title, source_url) pairs with their chunk counts."""
        ...
