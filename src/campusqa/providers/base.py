# src/campusqa/providers/base.py
"""Abstract base classes for generation and embedding providers."""

from abc import ABC, abstractmethod


class LLMClient(ABC):
    """Abstract base class for generative model providers.

    A completion is returned as zero or more textual content parts, so that
    callers can tell an empty response apart from an empty string.

    Example:
        class MyLLMClient(LLMClient):
            def complete_parts(self, messages, temperature=None):
                response = my_api.chat(messages, temp=temperature)
                return [part.text for part in response.parts]
    """

    @abstractmethod
    def complete_parts(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> list[str]:
        """Generate a completion for the given messages.

        Args:
            messages: List of message dicts with 'role' and 'content' keys.
                      Example: [{"role": "user", "content": "Hello"}]
            temperature: Optional temperature for generation (0.0-1.0).
                         If None, use provider default.

        Returns:
            Textual content parts of the first candidate, in order. Empty if
            the provider returned no usable content.
        """
        ...

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion and join its parts into one string."""
        return "\n".join(self.complete_parts(messages, temperature)).strip()


class EmbeddingClient(ABC):
    """Abstract base class for embedding providers.

    Implementations of this class generate vector embeddings for text.
    The interface supports batched embedding for efficiency.

    Example:
        class MyEmbeddingClient(EmbeddingClient):
            def embed(self, texts):
                return my_api.embed_batch(texts)
    """

    @abstractmethod
    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts in one call.

        Args:
            texts: List of texts to embed.

        Returns:
            List of embedding vectors, one per input text.
            Order is preserved (result[i] corresponds to texts[i]).
        """
        ...
