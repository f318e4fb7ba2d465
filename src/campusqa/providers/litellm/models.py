# src/campusqa/providers/litellm/models.py
"""Curated model constants for the LiteLLM provider.

These are convenience constants for IDE autocomplete. Any valid LiteLLM
model string can be passed directly.

Example:
    from campusqa.providers.litellm import ChatModels, LiteLLMClient

    llm_client = LiteLLMClient(model=ChatModels.VERTEX_GEMINI_15_PRO)
    llm_client = LiteLLMClient(model="my-custom/model")
"""


class ChatModels:
    """Generative models for answer generation (via LiteLLMClient)."""

    # Google Vertex AI
    VERTEX_GEMINI_15_PRO = "vertex_ai/gemini-1.5-pro"
    VERTEX_GEMINI_15_FLASH = "vertex_ai/gemini-1.5-flash"

    # Google Gemini API
    GEMINI_15_PRO = "gemini/gemini-1.5-pro"
    GEMINI_15_FLASH = "gemini/gemini-1.5-flash"

    # OpenAI
    GPT_4O = "openai/gpt-4o"
    GPT_4O_MINI = "openai/gpt-4o-mini"


class EmbeddingModels:
    """Embedding models for LiteLLMEmbeddingClient / ClientEmbedder."""

    # Google Vertex AI
    VERTEX_TEXT_EMBEDDING_004 = "vertex_ai/text-embedding-004"

    # Google Gemini API
    GEMINI_004 = "gemini/text-embedding-004"

    # OpenAI
    TEXT_3_SMALL = "openai/text-embedding-3-small"
    TEXT_3_LARGE = "openai/text-embedding-3-large"
