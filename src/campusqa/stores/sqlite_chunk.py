# src/campusqa/stores/sqlite_chunk.py
"""SQLite chunk store implementation."""

import json
import sqlite3
from pathlib import Path

from campusqa.models import DocumentChunk
from campusqa.stores.base import ChunkStore, SourceSummary, merge_chunk

_COLUMNS = "id, title, chunk_text, source_url, updated_at, embedding, tags"


def _row_to_chunk(row: tuple) -> DocumentChunk:
    return DocumentChunk(
        id=row[0],
        title=row[1],
        chunk_text=row[2],
        source_url=row[3],
        updated_at=row[4],
        embedding=json.loads(row[5]),
        tags=set(json.loads(row[6])),
    )


def _chunk_to_row(chunk: DocumentChunk) -> tuple:
    return (
        chunk.id,
        chunk.title,
        chunk.chunk_text,
        chunk.source_url,
        chunk.updated_at,
        json.dumps(chunk.embedding),
        json.dumps(sorted(chunk.tags), ensure_ascii=False),
    )


class SQLiteChunkStore(ChunkStore):
    """SQLite-based chunk store.

    Embeddings and tags are stored as JSON text. Rows keep their original
    position on update, so ``get_all`` returns chunks in first-insertion order.
    """

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS chunks (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    chunk_text TEXT NOT NULL,
                    source_url TEXT NOT NULL,
                    updated_at TEXT NOT NULL,
                    embedding TEXT NOT NULL,
                    tags TEXT NOT NULL
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_source_url ON chunks(source_url)")
            conn.commit()

    def _fetch(self, conn: sqlite3.Connection, chunk_id: str) -> DocumentChunk | None:
        row = conn.execute(f"SELECT {_COLUMNS} FROM chunks WHERE id = ?", (chunk_id,)).fetchone()
        return _row_to_chunk(row) if row else None

    def _write(self, conn: sqlite3.Connection, chunk: DocumentChunk) -> None:
        merged = merge_chunk(self._fetch(conn, chunk.id), chunk)
        conn.execute(
            f"""
            INSERT INTO chunks ({_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                title = excluded.title,
                chunk_text = excluded.chunk_text,
                source_url = excluded.source_url,
                updated_at = excluded.updated_at,
                embedding = excluded.embedding,
                tags = excluded.tags
            """,
            _chunk_to_row(merged),
        )

    def get_all(self) -> list[DocumentChunk]:
        """Return every stored chunk."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(f"SELECT {_COLUMNS} FROM chunks ORDER BY rowid")
            return [_row_to_chunk(row) for row in cursor.fetchall()]

    def get(self, chunk_id: str) -> DocumentChunk | None:
        """Retrieve a chunk by ID."""
        with sqlite3.connect(self.db_path) as conn:
            return self._fetch(conn, chunk_id)

    def upsert(self, chunk: DocumentChunk) -> None:
        """Store a chunk, merging into an existing row."""
        with sqlite3.connect(self.db_path) as conn:
            self._write(conn, chunk)
            conn.commit()

    def upsert_many(self, chunks: list[DocumentChunk]) -> None:
        """Store multiple chunks in a single transaction."""
        if not chunks:
            return
        # The connection context manager rolls back if any write fails
        with sqlite3.connect(self.db_path) as conn:
            for chunk in chunks:
                self._write(conn, chunk)

    def count_chunks(self) -> int:
        """Count the total number of chunks in the store."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT COUNT(id) FROM chunks")
            count = cursor.fetchone()
            return count[0] if count else 0

    def list_sources(self) -> list[SourceSummary]:
        """List distinct sources with chunk counts."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                SELECT title, source_url, COUNT(id)
                FROM chunks
                GROUP BY title, source_url
                ORDER BY MIN(rowid)
                """
            )
            return [
                SourceSummary(title=row[0], source_url=row[1], chunks=row[2])
                for row in cursor.fetchall()
            ]
