# src/campusqa/stores/__init__.py
"""Storage for campus-qa document chunks."""

from campusqa.stores.base import ChunkStore, SourceSummary
from campusqa.stores.memory import InMemoryChunkStore
from campusqa.stores.sqlite_chunk import SQLiteChunkStore

__all__ = ["ChunkStore", "InMemoryChunkStore", "SQLiteChunkStore", "SourceSummary"]
