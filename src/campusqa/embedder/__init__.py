# src/campusqa/embedder/__init__.py
"""Embedding generation for campus-qa."""

from campusqa.embedder.base import Embedder
from campusqa.embedder.client import ClientEmbedder

__all__ = ["Embedder", "ClientEmbedder"]
