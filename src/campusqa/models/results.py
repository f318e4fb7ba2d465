# src/campusqa/models/results.py
"""Result data models for queries and ingestion."""

from pydantic import BaseModel, Field

from campusqa.models.chunk import DocumentChunk


class ScoredChunk(DocumentChunk):
    """A chunk paired with its cosine similarity to a query vector."""

    score: float


class Source(BaseModel):
    """A cited source in an answer."""

    title: str
    source_url: str
    updated_at: str
    score: float

    @classmethod
    def from_scored(cls, chunk: ScoredChunk) -> "Source":
        return cls(
            title=chunk.title,
            source_url=chunk.source_url,
            updated_at=chunk.updated_at,
            score=chunk.score,
        )


class Answer(BaseModel):
    """Full response to a question. Sources keep retrieval order."""

    answer: str
    sources: list[Source] = Field(default_factory=list)


class DocumentIngestResult(BaseModel):
    """Statistics for one ingested document."""

    document_id: str
    title: str
    chunks: int


class DocumentIngestFailure(BaseModel):
    """A document whose ingestion failed."""

    document_id: str
    error: str


class IngestReport(BaseModel):
    """Outcome of ingesting several documents, with failures isolated."""

    processed: list[DocumentIngestResult] = Field(default_factory=list)
    failed: list[DocumentIngestFailure] = Field(default_factory=list)

    @property
    def total_chunks(self) -> int:
        return sum(result.chunks for result in self.processed)
