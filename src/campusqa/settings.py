# src/campusqa/settings.py
"""Behavioral settings for campus-qa.

Settings are passed programmatically; the library never reads them from
environment variables. Applications that want env- or file-based
configuration use ``campusqa.config`` to build a Settings object and pass it
in explicitly.
"""

from pydantic import BaseModel, Field, model_validator

from campusqa.chunker.paragraph import DEFAULT_MAX_CHARS, DEFAULT_MIN_CHARS
from campusqa.prompt import DEFAULT_MAX_CONTEXT_CHARS


class Settings(BaseModel):
    """Behavioral settings for campus-qa.

    These settings control chunking, retrieval and generation, independent of
    which embedding or generation provider is used.

    Example:
        settings = Settings(top_k=8, max_context_chars=4000)
    """

    # Chunking
    min_chars: int = Field(default=DEFAULT_MIN_CHARS, ge=0)
    max_chars: int = Field(default=DEFAULT_MAX_CHARS, gt=0)

    # Retrieval
    top_k: int = Field(default=5, ge=0)
    max_context_chars: int = Field(default=DEFAULT_MAX_CONTEXT_CHARS, ge=0)
    prompt_header: str | None = None

    # Generation
    generation_temperature: float | None = None

    # Ingestion
    embedding_batch_size: int = Field(default=250, gt=0)
    max_concurrent_ingest: int = Field(default=4, gt=0)

    # Retry configuration (LiteLLM handles exponential backoff for RateLimitError)
    num_retries: int = Field(default=3, ge=0)

    @model_validator(mode="after")
    def _check_chunk_bounds(self) -> "Settings":
        if self.min_chars > self.max_chars:
            raise ValueError(
                f"min_chars ({self.min_chars}) must not exceed max_chars ({self.max_chars})"
            )
        return self
