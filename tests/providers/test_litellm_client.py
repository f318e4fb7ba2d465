# tests/providers/test_litellm_client.py
"""Tests for the LiteLLM provider clients."""

from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("litellm", reason="Tests require litellm package")

from campusqa.providers import EmbeddingClient, LLMClient
from campusqa.providers.litellm import (
    ChatModels,
    EmbeddingModels,
    LiteLLMClient,
    LiteLLMEmbeddingClient,
)


def mock_completion_response(content):
    """Create a mock LiteLLM completion response."""
    return MagicMock(choices=[MagicMock(message=MagicMock(content=content))])


def mock_embedding_response(embeddings: list[list[float]]):
    """Create a mock LiteLLM embedding response."""
    mock_response = MagicMock()
    mock_response.data = [{"index": i, "embedding": emb} for i, emb in enumerate(embeddings)]
    return mock_response


class TestLiteLLMClient:
    def test_is_llm_client(self):
        assert isinstance(LiteLLMClient(), LLMClient)

    def test_default_model(self):
        assert LiteLLMClient().model == ChatModels.VERTEX_GEMINI_15_PRO

    @patch("campusqa.providers.litellm.client.litellm.completion")
    def test_string_content(self, mock_completion):
        mock_completion.return_value = mock_completion_response("答案")
        client = LiteLLMClient(model="openai/gpt-4o-mini", num_retries=2)

        parts = client.complete_parts([{"role": "user", "content": "q"}])

        assert parts == ["答案"]
        mock_completion.assert_called_once_with(
            model="openai/gpt-4o-mini",
            messages=[{"role": "user", "content": "q"}],
            drop_params=True,
            num_retries=2,
        )

    @patch("campusqa.providers.litellm.client.litellm.completion")
    def test_temperature_and_api_key_forwarded(self, mock_completion):
        mock_completion.return_value = mock_completion_response("ok")
        client = LiteLLMClient(api_key="secret")

        client.complete_parts([{"role": "user", "content": "q"}], temperature=0.1)

        kwargs = mock_completion.call_args.kwargs
        assert kwargs["temperature"] == 0.1
        assert kwargs["api_key"] == "secret"

    @patch("campusqa.providers.litellm.client.litellm.completion")
    def test_typed_parts(self, mock_completion):
        mock_completion.return_value = mock_completion_response(
            [
                {"type": "text", "text": "第一段"},
                {"type": "image_url", "image_url": {"url": "x"}},
                {"type": "text", "text": "第二段"},
            ]
        )

        parts = LiteLLMClient().complete_parts([{"role": "user", "content": "q"}])

        assert parts == ["第一段", "第二段"]

    @patch("campusqa.providers.litellm.client.litellm.completion")
    def test_no_content(self, mock_completion):
        mock_completion.return_value = mock_completion_response(None)
        assert LiteLLMClient().complete_parts([{"role": "user", "content": "q"}]) == []

    @patch("campusqa.providers.litellm.client.litellm.completion")
    def test_no_choices(self, mock_completion):
        mock_completion.return_value = MagicMock(choices=[])
        assert LiteLLMClient().complete_parts([{"role": "user", "content": "q"}]) == []

    @patch("campusqa.providers.litellm.client.litellm.completion")
    def test_complete_joins_parts(self, mock_completion):
        mock_completion.return_value = mock_completion_response(
            [{"type": "text", "text": "a "}, {"type": "text", "text": "b"}]
        )
        assert LiteLLMClient().complete([{"role": "user", "content": "q"}]) == "a \nb"


class TestLiteLLMEmbeddingClient:
    def test_is_embedding_client(self):
        assert isinstance(LiteLLMEmbeddingClient(), EmbeddingClient)

    def test_default_model(self):
        assert LiteLLMEmbeddingClient().model == EmbeddingModels.VERTEX_TEXT_EMBEDDING_004

    @patch("campusqa.providers.litellm.client.litellm.embedding")
    def test_embed(self, mock_embedding):
        mock_embedding.return_value = mock_embedding_response([[1.0, 0.0], [0.0, 1.0]])
        client = LiteLLMEmbeddingClient(model="openai/text-embedding-3-small")

        result = client.embed(["a", "b"])

        assert result == [[1.0, 0.0], [0.0, 1.0]]
        mock_embedding.assert_called_once_with(
            model="openai/text-embedding-3-small",
            input=["a", "b"],
            num_retries=3,
        )

    @patch("campusqa.providers.litellm.client.litellm.embedding")
    def test_embed_empty(self, mock_embedding):
        assert LiteLLMEmbeddingClient().embed([]) == []
        mock_embedding.assert_not_called()

    @patch("campusqa.providers.litellm.client.litellm.embedding")
    def test_embed_preserves_order(self, mock_embedding):
        # Simulate out-of-order response (can happen with some APIs)
        mock_response = MagicMock()
        mock_response.data = [
            {"index": 1, "embedding": [0.0, 1.0]},
            {"index": 0, "embedding": [1.0, 0.0]},
        ]
        mock_embedding.return_value = mock_response

        result = LiteLLMEmbeddingClient().embed(["first", "second"])

        assert result == [[1.0, 0.0], [0.0, 1.0]]
