# src/campusqa/configuration/storage/local.py
"""Local filesystem storage configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from campusqa.stores import ChunkStore


@dataclass(frozen=True)
class LocalStorage:
    """Local filesystem storage using SQLite.

    Chunks are persisted to ``chunks.db`` in the given directory.

    Args:
        data_dir: Base directory for storage files. Created if it doesn't exist.

    Example:
        qa = CampusQA(
            provider=LiteLLMProvider(),
            storage=LocalStorage("./campusqa_data"),
        )
    """

    data_dir: str

    def build_chunk_store(self) -> ChunkStore:
        """Build the SQLite chunk store, creating the data directory if needed."""
        from campusqa.stores import SQLiteChunkStore

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)
        return SQLiteChunkStore(os.path.join(self.data_dir, "chunks.db"))
