# src/campusqa/providers/litellm/client.py
"""LiteLLM client implementations for generation and embedding APIs."""

from typing import Any

import litellm

from campusqa.providers.base import EmbeddingClient, LLMClient
from campusqa.providers.litellm.models import ChatModels, EmbeddingModels


def _text_parts(content: Any) -> list[str]:
    """Extract textual parts from a message content field.

    Content is either a plain string or a list of typed parts
    (``{"type": "text", "text": ...}``); non-text parts are ignored.
    """
    if content is None:
        return []
    if isinstance(content, str):
        return [content]

    parts = []
    for part in content:
        text = part.get("text") if isinstance(part, dict) else getattr(part, "text", None)
        if isinstance(text, str):
            parts.append(text)
    return parts


class LiteLLMClient(LLMClient):
    """LiteLLM-based client for answer generation.

    Supports any model available through LiteLLM (Vertex AI, Gemini, OpenAI,
    Anthropic, Bedrock, etc.).

    Example:
        from campusqa.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.VERTEX_GEMINI_15_PRO)
        parts = client.complete_parts([{"role": "user", "content": "Hello"}])
    """

    def __init__(
        self,
        model: str = ChatModels.VERTEX_GEMINI_15_PRO,
        num_retries: int = 3,
        api_key: str | None = None,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
                   Examples: "vertex_ai/gemini-1.5-pro", "openai/gpt-4o"
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically. Default: 3.
            api_key: Optional API key. If None, LiteLLM reads provider env vars.
        """
        self.model = model
        self.num_retries = num_retries
        self.api_key = api_key

    def complete_parts(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> list[str]:
        """Generate a completion using LiteLLM."""
        completion_kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if temperature is not None:
            completion_kwargs["temperature"] = temperature
        if self.api_key is not None:
            completion_kwargs["api_key"] = self.api_key

        response = litellm.completion(**completion_kwargs)

        if not response.choices:
            return []
        return _text_parts(response.choices[0].message.content)


class LiteLLMEmbeddingClient(EmbeddingClient):
    """LiteLLM-based embedding client.

    Supports any embedding model available through LiteLLM.

    Example:
        from campusqa.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

        client = LiteLLMEmbeddingClient(model=EmbeddingModels.VERTEX_TEXT_EMBEDDING_004)
        embeddings = client.embed(["食堂几点开？", "图书馆开放时间"])
    """

    def __init__(
        self,
        model: str = EmbeddingModels.VERTEX_TEXT_EMBEDDING_004,
        num_retries: int = 3,
        api_key: str | None = None,
    ) -> None:
        """Initialize the LiteLLM embedding client.

        Args:
            model: LiteLLM embedding model identifier.
                   Examples: "vertex_ai/text-embedding-004", "openai/text-embedding-3-small"
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically. Default: 3.
            api_key: Optional API key. If None, LiteLLM reads provider env vars.
        """
        self.model = model
        self.num_retries = num_retries
        self.api_key = api_key

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM."""
        if not texts:
            return []

        embedding_kwargs: dict[str, Any] = {
            "model": self.model,
            "input": texts,
            "num_retries": self.num_retries,
        }
        if self.api_key is not None:
            embedding_kwargs["api_key"] = self.api_key

        response = litellm.embedding(**embedding_kwargs)
        # Sort by index to maintain order
        sorted_data = sorted(response.data, key=lambda x: x["index"])
        return [item["embedding"] for item in sorted_data]
