# src/campusqa/ingestor.py
"""Ingestion pipeline for campus-qa."""

import asyncio
import logging
import re
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from campusqa.chunker import Chunker
from campusqa.embedder import Embedder
from campusqa.exceptions import EmbeddingError
from campusqa.models import (
    DocumentChunk,
    DocumentIngestFailure,
    DocumentIngestResult,
    IngestReport,
)
from campusqa.sources import DocumentSource
from campusqa.stores import ChunkStore

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int, str], None]
"""Callback for ingestion progress updates.

Args:
    event: Event type: "chunking", "embedding", "storing" or "document"
    current: Current progress count (0 to total)
    total: Total items to process
    message: Human-readable status message

Example:
    def on_progress(event: str, current: int, total: int, message: str) -> None:
        print(f"[{event}] {current}/{total}: {message}")
"""

_UNSAFE_ID_CHARS = re.compile(r"[^a-zA-Z0-9_-]+")


def sanitize_id(document_id: str) -> str:
    """Replace each run of characters outside ``[A-Za-z0-9_-]`` with ``_``."""
    return _UNSAFE_ID_CHARS.sub("_", document_id)


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Ingestor:
    """Orchestrates the ingestion pipeline.

    Pipeline, per document:
    1. Split the raw text into bounded chunks
    2. Embed the chunks in batches
    3. Upsert all chunks of the document in one batch

    Chunk ids are ``{sanitized document id}_{index}``, so re-ingesting a
    document overwrites its chunks in place.
    """

    def __init__(
        self,
        chunk_store: ChunkStore,
        embedder: Embedder,
        chunker: Chunker,
        embedding_batch_size: int = 250,
    ) -> None:
        """Initialize the ingestor.

        Args:
            chunk_store: Store receiving the chunks
            embedder: Component to embed chunk text
            chunker: Component to split documents into chunks
            embedding_batch_size: Maximum texts per embedding request

        Raises:
            ValueError: If embedding_batch_size is not positive
        """
        if embedding_batch_size <= 0:
            raise ValueError(f"embedding_batch_size must be positive, got {embedding_batch_size}")
        self.chunk_store = chunk_store
        self.embedder = embedder
        self.chunker = chunker
        self.embedding_batch_size = embedding_batch_size

    def _embed(
        self,
        texts: list[str],
        progress: Callable[[str, int, int, str], None],
    ) -> list[list[float]]:
        embeddings: list[list[float]] = []
        for start in range(0, len(texts), self.embedding_batch_size):
            batch = texts[start : start + self.embedding_batch_size]
            vectors = self.embedder.embed_texts(batch)
            if len(vectors) != len(batch):
                raise EmbeddingError(
                    f"Embedding service returned {len(vectors)} vectors for {len(batch)} texts",
                    expected=len(batch),
                    received=len(vectors),
                )
            embeddings.extend(vectors)
            progress("embedding", len(embeddings), len(texts), "Embedding chunks...")
        return embeddings

    def ingest_document(
        self,
        raw_text: str,
        title: str,
        source_url: str,
        tags: Iterable[str] = (),
        document_id: str | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> DocumentIngestResult:
        """Chunk, embed and store one document.

        Args:
            raw_text: Full document text
            title: Display title used in citations
            source_url: Citation URL
            tags: Tags attached to every chunk
            document_id: Stable document identifier (default: title)
            on_progress: Optional callback(event, current, total, message)

        Returns:
            DocumentIngestResult with the number of chunks written

        Raises:
            EmbeddingError: If the embedding service returned the wrong number of vectors
        """

        def progress(event: str, current: int, total: int, message: str = "") -> None:
            if on_progress:
                on_progress(event, current, total, message)

        document_id = document_id or title
        texts = self.chunker.chunk(raw_text)
        progress("chunking", len(texts), len(texts), f"Split {title} into {len(texts)} chunks")

        if not texts:
            logger.info("Document %s has no text; nothing stored", document_id)
            return DocumentIngestResult(document_id=document_id, title=title, chunks=0)

        embeddings = self._embed(texts, progress)

        base_id = sanitize_id(document_id)
        updated_at = _utc_timestamp()
        tag_set = set(tags)
        chunks = [
            DocumentChunk(
                id=f"{base_id}_{index}",
                title=title,
                chunk_text=text,
                source_url=source_url,
                updated_at=updated_at,
                embedding=embedding,
                tags=tag_set,
            )
            for index, (text, embedding) in enumerate(zip(texts, embeddings, strict=True))
        ]

        progress("storing", 0, len(chunks), "Storing chunks...")
        self.chunk_store.upsert_many(chunks)
        progress("storing", len(chunks), len(chunks), "Stored chunks")

        logger.info("Ingested %s: %d chunks", document_id, len(chunks))
        return DocumentIngestResult(document_id=document_id, title=title, chunks=len(chunks))

    def _ingest_named(
        self,
        source: DocumentSource,
        name: str,
        tags: Iterable[str],
    ) -> DocumentIngestResult:
        return self.ingest_document(
            source.read_text(name),
            title=source.title_for(name),
            source_url=source.url_for(name),
            tags=tags,
            document_id=name,
        )

    def ingest_source(
        self,
        source: DocumentSource,
        prefix: str = "",
        tags: Iterable[str] = (),
        on_progress: ProgressCallback | None = None,
    ) -> IngestReport:
        """Ingest every document under a prefix, one at a time.

        A failing document is recorded in the report and does not stop the
        remaining documents.

        Args:
            source: Document source to read from
            prefix: Only documents whose name starts with this are ingested
            tags: Tags attached to every chunk
            on_progress: Optional callback, called once per document

        Returns:
            IngestReport listing processed and failed documents
        """
        tags = tuple(tags)
        names = source.list_documents(prefix)
        report = IngestReport()

        for i, name in enumerate(names, 1):
            try:
                report.processed.append(self._ingest_named(source, name, tags))
            except Exception as e:
                logger.exception("Failed to ingest %s", name)
                report.failed.append(DocumentIngestFailure(document_id=name, error=str(e)))
            if on_progress:
                on_progress("document", i, len(names), name)

        return report

    async def aingest_source(
        self,
        source: DocumentSource,
        prefix: str = "",
        tags: Iterable[str] = (),
        on_progress: ProgressCallback | None = None,
        max_concurrent: int = 4,
    ) -> IngestReport:
        """Ingest every document under a prefix with bounded concurrency.

        Documents are processed in worker threads, at most ``max_concurrent``
        at a time. Each document is still chunked, embedded and stored in
        order. The report lists documents in source order.
        """
        tags = tuple(tags)
        names = source.list_documents(prefix)
        semaphore = asyncio.Semaphore(max_concurrent)
        done = 0

        async def ingest_with_limit(name: str) -> DocumentIngestResult:
            nonlocal done
            async with semaphore:
                try:
                    return await asyncio.to_thread(self._ingest_named, source, name, tags)
                finally:
                    done += 1
                    if on_progress:
                        on_progress("document", done, len(names), name)

        results = await asyncio.gather(
            *(ingest_with_limit(name) for name in names), return_exceptions=True
        )

        report = IngestReport()
        for name, result in zip(names, results, strict=True):
            if isinstance(result, BaseException):
                logger.error("Failed to ingest %s: %s", name, result)
                report.failed.append(DocumentIngestFailure(document_id=name, error=str(result)))
                continue
            report.processed.append(result)
        return report
