# src/campusqa/configuration/__init__.py
"""Configuration objects for campus-qa.

Instead of factory methods, you pass configuration objects that know how to
build their components.

Provider configurations (build embedder and LLM client):
- LiteLLMProvider: Uses LiteLLM for generation and embedding calls

Storage configurations (build the chunk store):
- LocalStorage: SQLite in a local directory

Example:
    from campusqa import CampusQA, LiteLLMProvider, LocalStorage

    qa = CampusQA(
        provider=LiteLLMProvider(llm="vertex_ai/gemini-1.5-pro"),
        storage=LocalStorage("./data"),
    )
"""

from campusqa.configuration.base import ProviderConfig, StorageConfig
from campusqa.configuration.providers import LiteLLMProvider
from campusqa.configuration.storage import LocalStorage

__all__ = [
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
]
