# src/campusqa/sources/__init__.py
"""Document sources for ingestion."""

from campusqa.sources.base import DocumentSource
from campusqa.sources.local import LocalDirectorySource

__all__ = ["DocumentSource", "LocalDirectorySource"]
