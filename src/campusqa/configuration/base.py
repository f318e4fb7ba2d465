# src/campusqa/configuration/base.py
"""Protocol definitions for configuration objects.

Provider and storage configurations are plain frozen dataclasses that know
how to build their components. Any object with the right methods satisfies
these protocols without inheritance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from campusqa.embedder import Embedder
    from campusqa.providers import LLMClient
    from campusqa.settings import Settings
    from campusqa.stores import ChunkStore


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Provider configurations build the model-facing components:
    - Embedder: Creates vector embeddings for chunks and questions
    - LLMClient: Generates answers from assembled prompts
    """

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build an embedder for creating vector embeddings."""
        ...

    def build_llm_client(self, settings: Settings) -> LLMClient:
        """Build an LLM client for answer generation."""
        ...


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations."""

    def build_chunk_store(self) -> ChunkStore:
        """Build the chunk store."""
        ...
