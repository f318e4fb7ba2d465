# src/campusqa/models/__init__.py
"""Data models for campus-qa."""

from campusqa.models.chunk import DocumentChunk
from campusqa.models.results import (
    Answer,
    DocumentIngestFailure,
    DocumentIngestResult,
    IngestReport,
    ScoredChunk,
    Source,
)

__all__ = [
    "DocumentChunk",
    "ScoredChunk",
    "Source",
    "Answer",
    "DocumentIngestResult",
    "DocumentIngestFailure",
    "IngestReport",
]
