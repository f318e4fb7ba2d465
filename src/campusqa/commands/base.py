# src/campusqa/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Progress callbacks for long-running operations
- Result types for each command
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class CommandStage(Enum):
    """Stages of command execution for progress reporting."""

    # Ingest stages
    CHUNKING = "Chunking"
    EMBEDDING = "Embedding"
    STORING = "Storing"
    INGESTING = "Ingesting"


@dataclass
class ProgressUpdate:
    """Progress update for long-running operations.

    Attributes:
        stage: Current stage of the operation
        current: Current item number (1-indexed)
        total: Total number of items (0 for indeterminate)
        message: Optional status message
    """

    stage: CommandStage
    current: int
    total: int
    message: str | None = None

    @property
    def is_indeterminate(self) -> bool:
        """True if progress is indeterminate (total unknown)."""
        return self.total == 0

    @property
    def percentage(self) -> int:
        """Progress as percentage (0-100). Returns 0 if indeterminate."""
        if self.total == 0:
            return 0
        return int(100 * self.current / self.total)


# Callback type for progress updates
ProgressCallback = Callable[[ProgressUpdate], None]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None
    suggestion: str | None = None


@dataclass
class SourceHit:
    """A source cited by an answer."""

    title: str
    source_url: str
    updated_at: str
    score: float


@dataclass
class AskResult(CommandResult):
    """Result of the ask command.

    Attributes:
        question: The original question
        answer: Generated answer, or a fixed notice when nothing is indexed
        sources: Cited sources, most similar first
    """

    question: str = ""
    answer: str = ""
    sources: list[SourceHit] = field(default_factory=list)


@dataclass
class DocumentResult:
    """Result for a single document."""

    document_id: str
    chunks: int = 0
    error: str | None = None


@dataclass
class IngestResult(CommandResult):
    """Result of the ingest command.

    Attributes:
        documents_processed: Number of documents successfully ingested
        documents_failed: Number of documents that failed
        total_chunks: Total chunks written
        document_results: Per-document results, failures included
    """

    documents_processed: int = 0
    documents_failed: int = 0
    total_chunks: int = 0
    document_results: list[DocumentResult] = field(default_factory=list)


@dataclass
class SourceInfo:
    """Information about an indexed source document."""

    title: str
    source_url: str
    chunk_count: int


@dataclass
class StatusResult(CommandResult):
    """Result of the status command.

    Attributes:
        data_dir: Data directory that was inspected
        total_sources: Number of indexed source documents
        total_chunks: Total chunks in the store
        sources: Per-source breakdown
    """

    data_dir: str = ""
    total_sources: int = 0
    total_chunks: int = 0
    sources: list[SourceInfo] = field(default_factory=list)
