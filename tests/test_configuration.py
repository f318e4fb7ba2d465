# tests/test_configuration.py
"""Tests for the configuration objects."""

import dataclasses
import os

import pytest

from campusqa.configuration import LiteLLMProvider, LocalStorage, ProviderConfig, StorageConfig
from campusqa.embedder import ClientEmbedder
from campusqa.providers.litellm import LiteLLMClient, LiteLLMEmbeddingClient
from campusqa.settings import Settings
from campusqa.stores import SQLiteChunkStore


class TestLocalStorage:
    def test_build_chunk_store(self, temp_dir):
        store = LocalStorage(temp_dir).build_chunk_store()

        assert isinstance(store, SQLiteChunkStore)
        assert store.db_path == os.path.join(temp_dir, "chunks.db")

    def test_creates_directory(self, temp_dir):
        new_dir = os.path.join(temp_dir, "new_storage")
        LocalStorage(new_dir).build_chunk_store()

        assert os.path.isdir(new_dir)

    def test_is_frozen_dataclass(self, temp_dir):
        storage = LocalStorage(temp_dir)
        with pytest.raises(dataclasses.FrozenInstanceError):
            storage.data_dir = "elsewhere"

    def test_satisfies_protocol(self, temp_dir):
        assert isinstance(LocalStorage(temp_dir), StorageConfig)


class TestLiteLLMProvider:
    def test_defaults(self):
        provider = LiteLLMProvider()
        assert provider.llm == "vertex_ai/gemini-1.5-pro"
        assert provider.embedding == "vertex_ai/text-embedding-004"

    def test_satisfies_protocol(self):
        assert isinstance(LiteLLMProvider(), ProviderConfig)

    def test_build_embedder(self):
        provider = LiteLLMProvider(embedding="openai/text-embedding-3-small", embedding_api_key="k")

        embedder = provider.build_embedder(Settings(num_retries=7))

        assert isinstance(embedder, ClientEmbedder)
        client = embedder._client
        assert isinstance(client, LiteLLMEmbeddingClient)
        assert client.model == "openai/text-embedding-3-small"
        assert client.num_retries == 7
        assert client.api_key == "k"

    def test_build_llm_client(self):
        provider = LiteLLMProvider(llm="openai/gpt-4o-mini", llm_api_key="secret")

        client = provider.build_llm_client(Settings(num_retries=1))

        assert isinstance(client, LiteLLMClient)
        assert client.model == "openai/gpt-4o-mini"
        assert client.num_retries == 1
        assert client.api_key == "secret"
