# src/campusqa/configuration/providers/litellm.py
"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from campusqa.providers.litellm.models import ChatModels, EmbeddingModels

if TYPE_CHECKING:
    from campusqa.embedder import Embedder
    from campusqa.providers import LLMClient
    from campusqa.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for generation and embedding calls.

    Args:
        llm: LiteLLM model identifier for answer generation.
             Examples: "vertex_ai/gemini-1.5-pro", "openai/gpt-4o-mini"
        embedding: LiteLLM model identifier for embeddings.
                   Examples: "vertex_ai/text-embedding-004", "openai/text-embedding-3-small"
        llm_api_key: Optional API key for the generation model.
        embedding_api_key: Optional API key for the embedding model.

    Example:
        provider = LiteLLMProvider(
            llm="vertex_ai/gemini-1.5-pro",
            embedding="vertex_ai/text-embedding-004",
        )
    """

    llm: str = ChatModels.VERTEX_GEMINI_15_PRO
    embedding: str = EmbeddingModels.VERTEX_TEXT_EMBEDDING_004
    llm_api_key: str | None = None
    embedding_api_key: str | None = None

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build a ClientEmbedder using the LiteLLM embedding client.

        Args:
            settings: Settings containing num_retries for rate limit handling.
        """
        from campusqa.embedder import ClientEmbedder
        from campusqa.providers.litellm import LiteLLMEmbeddingClient

        embedding_client = LiteLLMEmbeddingClient(
            model=self.embedding,
            num_retries=settings.num_retries,
            api_key=self.embedding_api_key,
        )
        return ClientEmbedder(embedding_client=embedding_client)

    def build_llm_client(self, settings: Settings) -> LLMClient:
        """Build a LiteLLMClient for answer generation."""
        from campusqa.providers.litellm import LiteLLMClient

        return LiteLLMClient(
            model=self.llm,
            num_retries=settings.num_retries,
            api_key=self.llm_api_key,
        )
