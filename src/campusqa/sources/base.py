# src/campusqa/sources/base.py
"""Document source abstract base class."""

from abc import ABC, abstractmethod
from posixpath import basename


class DocumentSource(ABC):
    """Abstract base class for a store of raw documents addressed by name.

    Names are slash-separated object keys, as in a cloud bucket.
    """

    @abstractmethod
    def list_documents(self, prefix: str = "") -> list[str]:
        """List document names starting with ``prefix``, excluding directories."""
        ...

    @abstractmethod
    def read_text(self, name: str) -> str:
        """Read a document as UTF-8 text."""
        ...

    @abstractmethod
    def url_for(self, name: str) -> str:
        """Return the citation URL of a document."""
        ...

    def title_for(self, name: str) -> str:
        """Return the display title of a document: the last path segment."""
        return basename(name.rstrip("/")) or name
