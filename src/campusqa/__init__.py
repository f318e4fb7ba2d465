"""campus-qa - retrieval-augmented question answering over campus documents.

Documents are split into bounded, paragraph-aware chunks, embedded and
stored. A question is embedded, ranked against every stored chunk by cosine
similarity, and the best matches are packed into a citation-annotated prompt
for a generative model.

Quick Start (LiteLLM + Local Storage):
    from campusqa import CampusQA, LiteLLMProvider, LocalStorage, LocalDirectorySource

    qa = CampusQA(
        provider=LiteLLMProvider(
            llm="vertex_ai/gemini-1.5-pro",
            embedding="vertex_ai/text-embedding-004",
        ),
        storage=LocalStorage("./campusqa_data"),
    )

    # Ingest documents
    report = qa.ingest_source(LocalDirectorySource("./seed"))

    # Query
    answer = qa.answer_question("宿舍几点熄灯？")
    print(answer.answer)
    for source in answer.sources:
        print(source.title, source.source_url)
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("campus-qa")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, ValueError):
        __version__ = "unknown"

# Central configuration
from campusqa.campusqa import CampusQA

# Chunking
from campusqa.chunker import Chunker, ParagraphChunker, chunk_text

# Configuration objects
from campusqa.configuration import (
    LiteLLMProvider,
    LocalStorage,
    ProviderConfig,
    StorageConfig,
)
from campusqa.embedder import ClientEmbedder, Embedder
from campusqa.exceptions import CampusQAError, EmbeddingError
from campusqa.generator import FALLBACK_ANSWER, AnswerGenerator

# Pipelines
from campusqa.ingestor import Ingestor

# Models
from campusqa.models import (
    Answer,
    DocumentChunk,
    DocumentIngestFailure,
    DocumentIngestResult,
    IngestReport,
    ScoredChunk,
    Source,
)
from campusqa.prompt import build_prompt

# Provider ABCs
from campusqa.providers import EmbeddingClient, LLMClient
from campusqa.ranking import cosine_similarity, top_k
from campusqa.retriever import NO_DATA_ANSWER, Retriever

# Configuration
from campusqa.settings import Settings

# Document sources
from campusqa.sources import DocumentSource, LocalDirectorySource

# Storage
from campusqa.stores import ChunkStore, InMemoryChunkStore, SQLiteChunkStore

__all__ = [
    # Version
    "__version__",
    # Models
    "Answer",
    "DocumentChunk",
    "DocumentIngestFailure",
    "DocumentIngestResult",
    "IngestReport",
    "ScoredChunk",
    "Source",
    # Errors
    "CampusQAError",
    "EmbeddingError",
    # Config
    "Settings",
    # Configuration objects
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    # Storage
    "ChunkStore",
    "InMemoryChunkStore",
    "SQLiteChunkStore",
    # Document sources
    "DocumentSource",
    "LocalDirectorySource",
    # Core algorithms
    "Chunker",
    "ParagraphChunker",
    "chunk_text",
    "cosine_similarity",
    "top_k",
    "build_prompt",
    # Embedding and generation
    "Embedder",
    "ClientEmbedder",
    "AnswerGenerator",
    "FALLBACK_ANSWER",
    "NO_DATA_ANSWER",
    # Provider ABCs
    "LLMClient",
    "EmbeddingClient",
    # Pipelines
    "Ingestor",
    "Retriever",
    # Central configuration
    "CampusQA",
]
