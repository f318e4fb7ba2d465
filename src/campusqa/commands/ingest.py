# src/campusqa/commands/ingest.py
"""Ingest command - index a file or directory of documents.

This module provides the core ingest logic that the CLI uses.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from campusqa.commands.base import (
    CommandStage,
    DocumentResult,
    IngestResult,
    ProgressCallback,
    ProgressUpdate,
)
from campusqa.config import ConfigError, create_campusqa, get_campusqa_config
from campusqa.models import DocumentIngestFailure, IngestReport
from campusqa.sources import LocalDirectorySource

logger = logging.getLogger(__name__)

# Ingestor events -> command stages
_STAGES = {
    "chunking": CommandStage.CHUNKING,
    "embedding": CommandStage.EMBEDDING,
    "storing": CommandStage.STORING,
    "document": CommandStage.INGESTING,
}


def _result_from_report(report: IngestReport) -> IngestResult:
    result = IngestResult(
        success=bool(report.processed) or not report.failed,
        documents_processed=len(report.processed),
        documents_failed=len(report.failed),
        total_chunks=report.total_chunks,
    )
    result.document_results.extend(
        DocumentResult(document_id=r.document_id, chunks=r.chunks) for r in report.processed
    )
    result.document_results.extend(
        DocumentResult(document_id=f.document_id, error=f.error) for f in report.failed
    )
    if not result.success:
        result.error = f"All {len(report.failed)} documents failed to ingest"
    return result


def ingest(
    path: str | Path,
    prefix: str = "",
    tags: Iterable[str] = (),
    base_url: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_progress: ProgressCallback | None = None,
) -> IngestResult:
    """Ingest a file, or every file under a directory, into the store.

    Args:
        path: File or directory to ingest
        prefix: For directories, only ingest documents whose relative name starts with this
        tags: Tags attached to every chunk
        base_url: Public URL prefix for citations (default: config, then file:// URIs)
        data_dir: Override data directory (uses config if not provided)
        config_path: Override config file path
        on_progress: Callback receiving stage updates for a single file, and one
            update per document

    Returns:
        IngestResult with aggregated statistics and per-document results
    """
    path = Path(path)
    if not path.exists():
        return IngestResult(success=False, error=f"Path not found: {path}")

    config = get_campusqa_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return IngestResult(success=False, error=config.message, suggestion=config.suggestion)

    try:
        qa = create_campusqa(config)
        source = LocalDirectorySource(
            path if path.is_dir() else path.parent,
            base_url=base_url or config.source_base_url,
        )
    except Exception as e:
        return IngestResult(success=False, error=f"Failed to create CampusQA: {e}")

    tags = tuple(tags)

    def progress(event: str, current: int, total: int, message: str) -> None:
        if on_progress and event in _STAGES:
            on_progress(ProgressUpdate(_STAGES[event], current, total, message))

    if path.is_dir():
        report = qa.ingest_source(source, prefix=prefix, tags=tags, on_progress=progress)
    else:
        name = path.name
        report = IngestReport()
        try:
            report.processed.append(
                qa.ingest_document(
                    source.read_text(name),
                    title=source.title_for(name),
                    source_url=source.url_for(name),
                    tags=tags,
                    document_id=name,
                    on_progress=progress,
                )
            )
        except Exception as e:
            logger.exception("Failed to ingest %s", name)
            report.failed.append(DocumentIngestFailure(document_id=name, error=str(e)))
        progress("document", 1, 1, name)

    if not report.processed and not report.failed:
        return IngestResult(success=True, error="No documents found")

    return _result_from_report(report)
