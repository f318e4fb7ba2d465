"""Shared pytest fixtures."""

import os
import tempfile

# Use litellm's bundled model cost map instead of fetching it over the network
# at import time; the failed fetch deadlocks litellm's import under pytest.
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores and documents."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def mock_embedder():
    """Create a mock embedder with fixed vectors per text.

    Texts registered in ``vectors`` get that vector; anything else gets
    ``default``. Every call is recorded in ``calls``.
    """
    from campusqa.embedder import Embedder

    class MockEmbedder(Embedder):
        """Mock embedder that returns deterministic vectors."""

        def __init__(self) -> None:
            self.vectors: dict[str, list[float]] = {}
            self.default = [0.1] * 4
            self.calls: list[list[str]] = []

        def embed_text(self, text: str) -> list[float]:
            return self.embed_texts([text])[0]

        def embed_texts(self, texts: list[str]) -> list[list[float]]:
            self.calls.append(list(texts))
            return [self.vectors.get(t, self.default) for t in texts]

    return MockEmbedder()


@pytest.fixture
def mock_llm_client():
    """Create a mock LLM client returning configurable content parts."""
    from campusqa.providers import LLMClient

    class MockLLMClient(LLMClient):
        """Mock client that records messages and returns ``parts``."""

        def __init__(self) -> None:
            self.parts: list[str] = ["mock answer"]
            self.calls: list[tuple[list[dict], float | None]] = []

        def complete_parts(self, messages, temperature=None):
            self.calls.append((messages, temperature))
            return list(self.parts)

    return MockLLMClient()


@pytest.fixture
def mock_provider(mock_embedder, mock_llm_client):
    """Create a mock provider satisfying the ProviderConfig protocol."""
    from dataclasses import dataclass
    from typing import Any

    @dataclass(frozen=True)
    class MockProvider:
        """Mock provider that wraps mock components."""

        _embedder: Any
        _llm_client: Any

        def build_embedder(self, settings: Any) -> Any:
            return self._embedder

        def build_llm_client(self, settings: Any) -> Any:
            return self._llm_client

    return MockProvider(_embedder=mock_embedder, _llm_client=mock_llm_client)


@pytest.fixture
def make_chunk():
    """Factory for DocumentChunk instances with sensible defaults."""
    from campusqa.models import DocumentChunk

    def _make(chunk_id: str = "doc_0", **overrides):
        fields = {
            "id": chunk_id,
            "title": "handbook.txt",
            "chunk_text": "图书馆开放时间为早八点至晚十点。",
            "source_url": "https://example.edu/handbook.txt",
            "updated_at": "2024-09-01T08:00:00.000Z",
            "embedding": [1.0, 0.0],
        }
        fields.update(overrides)
        return DocumentChunk(**fields)

    return _make


# Variables that configuration code may read or that a .env file may set
CONFIG_ENV_VARS = [
    "CAMPUSQA_LLM_MODEL",
    "CAMPUSQA_EMBEDDING_MODEL",
    "CAMPUSQA_DATA_DIR",
    "CAMPUSQA_LLM_API_KEY",
    "CAMPUSQA_EMBEDDING_API_KEY",
    "CAMPUSQA_SOURCE_BASE_URL",
    "CAMPUSQA_MIN_CHARS",
    "CAMPUSQA_MAX_CHARS",
    "CAMPUSQA_TOP_K",
    "CAMPUSQA_MAX_CONTEXT_CHARS",
    "CAMPUSQA_EMBEDDING_BATCH_SIZE",
    "CAMPUSQA_MAX_CONCURRENT_INGEST",
    "CAMPUSQA_NUM_RETRIES",
    "CAMPUSQA_GENERATION_TEMPERATURE",
    "CAMPUSQA_PROMPT_HEADER",
]


@pytest.fixture
def isolated_env(temp_dir, monkeypatch):
    """Run in an empty working directory with no CAMPUSQA_* variables.

    Each variable is set and then deleted so monkeypatch restores its
    original state, even when a .env file loaded during the test sets it.
    """
    monkeypatch.chdir(temp_dir)
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return temp_dir
