# src/campusqa/stores/memory.py
"""In-memory chunk store."""

import threading

from campusqa.models import DocumentChunk
from campusqa.stores.base import ChunkStore, SourceSummary, merge_chunk


class InMemoryChunkStore(ChunkStore):
    """Dict-backed chunk store, useful for tests and one-off sessions.

    Writes are serialized so the store can be shared by concurrent ingestion.
    """

    def __init__(self) -> None:
        self._chunks: dict[str, DocumentChunk] = {}
        self._lock = threading.Lock()

    def get_all(self) -> list[DocumentChunk]:
        return list(self._chunks.values())

    def get(self, chunk_id: str) -> DocumentChunk | None:
        return self._chunks.get(chunk_id)

    def upsert(self, chunk: DocumentChunk) -> None:
        with self._lock:
            self._chunks[chunk.id] = merge_chunk(self._chunks.get(chunk.id), chunk)

    def upsert_many(self, chunks: list[DocumentChunk]) -> None:
        with self._lock:
            # Merge into a copy so a failing batch leaves the store untouched
            staged = dict(self._chunks)
            for chunk in chunks:
                staged[chunk.id] = merge_chunk(staged.get(chunk.id), chunk)
            self._chunks = staged

    def count_chunks(self) -> int:
        return len(self._chunks)

    def list_sources(self) -> list[SourceSummary]:
        counts: dict[tuple[str, str], int] = {}
        for chunk in self.get_all():
            key = (chunk.title, chunk.source_url)
            counts[key] = counts.get(key, 0) + 1
        return [
            SourceSummary(title=title, source_url=url, chunks=n)
            for (title, url), n in counts.items()
        ]
