# src/campusqa/providers/__init__.py
"""Provider implementations for campus-qa.

This module contains generation and embedding provider abstractions:
- LLMClient: Abstract base class for generative model providers
- EmbeddingClient: Abstract base class for embedding providers
- LiteLLM implementations

Usage:
    from campusqa.providers import LLMClient, EmbeddingClient
    from campusqa.providers.litellm import LiteLLMClient, ChatModels
"""

from campusqa.providers.base import EmbeddingClient, LLMClient
from campusqa.providers.litellm import (
    ChatModels,
    EmbeddingModels,
    LiteLLMClient,
    LiteLLMEmbeddingClient,
)

__all__ = [
    # ABCs
    "LLMClient",
    "EmbeddingClient",
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # LiteLLM clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
