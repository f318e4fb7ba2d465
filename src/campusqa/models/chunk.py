# src/campusqa/models/chunk.py
"""Document chunk data model."""

from pydantic import BaseModel, Field, field_validator


class DocumentChunk(BaseModel):
    """A bounded excerpt of one source document, the unit of retrieval."""

    id: str
    title: str
    chunk_text: str
    source_url: str
    updated_at: str
    embedding: list[float] = Field(default_factory=list)
    tags: set[str] = Field(default_factory=set)

    @field_validator("chunk_text")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("chunk_text must not be empty")
        return value
