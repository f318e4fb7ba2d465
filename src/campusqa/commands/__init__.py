# src/campusqa/commands/__init__.py
"""UI-agnostic command layer for campus-qa.

Commands return data structures, allowing UIs to render results appropriately.

Usage:
    from campusqa.commands import ask, ingest, status

    result = ingest.ingest("./seed", on_progress=my_callback)
    result = ask.ask("图书馆几点关门？")
    result = status.status()
"""

from campusqa.commands import ask, ingest, status
from campusqa.commands.base import (
    AskResult,
    CommandResult,
    CommandStage,
    DocumentResult,
    IngestResult,
    ProgressCallback,
    ProgressUpdate,
    SourceHit,
    SourceInfo,
    StatusResult,
)

__all__ = [
    # Base types
    "CommandStage",
    "ProgressUpdate",
    "ProgressCallback",
    "CommandResult",
    # Result types
    "AskResult",
    "SourceHit",
    "IngestResult",
    "DocumentResult",
    "StatusResult",
    "SourceInfo",
    # Command modules
    "ask",
    "ingest",
    "status",
]
