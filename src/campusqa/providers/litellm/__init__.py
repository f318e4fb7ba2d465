# src/campusqa/providers/litellm/__init__.py
"""LiteLLM provider clients for campus-qa.

This module contains LiteLLM-based client implementations:
- LiteLLMClient: Answer generation using LiteLLM
- LiteLLMEmbeddingClient: Embeddings using LiteLLM
- ChatModels: Curated chat model constants
- EmbeddingModels: Curated embedding model constants

Usage:
    from campusqa.providers.litellm import LiteLLMClient, ChatModels
    from campusqa.generator import AnswerGenerator

    client = LiteLLMClient(model=ChatModels.VERTEX_GEMINI_15_PRO)
    generator = AnswerGenerator(llm_client=client)
"""

from campusqa.providers.litellm.client import LiteLLMClient, LiteLLMEmbeddingClient
from campusqa.providers.litellm.models import ChatModels, EmbeddingModels

__all__ = [
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # Clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
