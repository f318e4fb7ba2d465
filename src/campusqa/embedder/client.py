# src/campusqa/embedder/client.py
"""Client-based embedder implementation."""

from campusqa.embedder.base import Embedder
from campusqa.exceptions import EmbeddingError
from campusqa.providers.base import EmbeddingClient


class ClientEmbedder(Embedder):
    """Embedder that uses an EmbeddingClient for generating embeddings.

    Example:
        from campusqa.providers.litellm import LiteLLMEmbeddingClient
        from campusqa.embedder import ClientEmbedder

        client = LiteLLMEmbeddingClient(model="vertex_ai/text-embedding-004")
        embedder = ClientEmbedder(embedding_client=client)
    """

    def __init__(self, embedding_client: EmbeddingClient) -> None:
        """Initialize the embedder.

        Args:
            embedding_client: Any EmbeddingClient implementation
        """
        self._client = embedding_client

    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text.

        Raises:
            EmbeddingError: If the service returned no vector for the text
        """
        result = self.embed_texts([text])
        if not result or not result[0]:
            raise EmbeddingError("Embedding service returned no vector", expected=1, received=0)
        return result[0]

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts (batched)."""
        if not texts:
            return []
        return self._client.embed(texts)
