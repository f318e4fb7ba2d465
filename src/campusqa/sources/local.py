# src/campusqa/sources/local.py
"""Local directory document source."""

from pathlib import Path
from urllib.parse import quote

from campusqa.sources.base import DocumentSource

# Characters left unescaped, matching JavaScript's encodeURIComponent
_URL_SAFE = "-_.!~*'()"


class LocalDirectorySource(DocumentSource):
    """Serve documents from a directory tree.

    Document names are POSIX paths relative to ``root``.

    Example:
        source = LocalDirectorySource("./seed", base_url="https://storage.googleapis.com/my-bucket")
        for name in source.list_documents("handbook/"):
            text = source.read_text(name)
    """

    def __init__(self, root: str | Path, base_url: str | None = None) -> None:
        """Initialize the source.

        Args:
            root: Directory containing the documents
            base_url: Optional public URL prefix for citations. Without it,
                      documents are cited by their file:// URI.

        Raises:
            NotADirectoryError: If root is not an existing directory
        """
        self.root = Path(root).resolve()
        if not self.root.is_dir():
            raise NotADirectoryError(f"Not a directory: {root}")
        self.base_url = base_url.rstrip("/") if base_url else None

    def _path(self, name: str) -> Path:
        path = (self.root / name).resolve()
        if not path.is_relative_to(self.root):
            raise ValueError(f"Document name escapes source root: {name}")
        return path

    def list_documents(self, prefix: str = "") -> list[str]:
        names = []
        for path in self.root.rglob("*"):
            if not path.is_file():
                continue
            name = path.relative_to(self.root).as_posix()
            if name.startswith(prefix):
                names.append(name)
        return sorted(names)

    def read_text(self, name: str) -> str:
        path = self._path(name)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {name}")
        return path.read_text(encoding="utf-8")

    def url_for(self, name: str) -> str:
        if self.base_url:
            return f"{self.base_url}/{quote(name, safe=_URL_SAFE)}"
        return self._path(name).as_uri()
