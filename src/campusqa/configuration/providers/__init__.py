# src/campusqa/configuration/providers/__init__.py
"""Provider configurations for campus-qa."""

from campusqa.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
