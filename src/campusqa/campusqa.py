# src/campusqa/campusqa.py
"""Central configuration class for campus-qa."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from campusqa.configuration import ProviderConfig, StorageConfig
    from campusqa.ingestor import Ingestor, ProgressCallback
    from campusqa.models import Answer, DocumentIngestResult, IngestReport
    from campusqa.providers import LLMClient
    from campusqa.retriever import Retriever
    from campusqa.sources import DocumentSource
    from campusqa.stores import ChunkStore

from campusqa.settings import Settings


class CampusQA:
    """Central configuration for the campus-qa store and components.

    CampusQA bundles the chunk store, the embedder and the LLM client so you
    can configure once and create Retrievers/Ingestors from it.

    With a storage configuration:

        from campusqa import CampusQA, LiteLLMProvider, LocalStorage

        qa = CampusQA(
            provider=LiteLLMProvider(
                llm="vertex_ai/gemini-1.5-pro",
                embedding="vertex_ai/text-embedding-004",
            ),
            storage=LocalStorage("./campusqa_data"),
        )
        answer = qa.answer_question("图书馆几点关门？")

    With an explicit store:

        from campusqa.stores import InMemoryChunkStore

        qa = CampusQA(provider=LiteLLMProvider(), chunk_store=InMemoryChunkStore())
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig,
        storage: StorageConfig | None = None,
        chunk_store: ChunkStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Create a CampusQA instance.

        Args:
            provider: Provider configuration (builds embedder and LLM client).
                      Example: LiteLLMProvider(llm="vertex_ai/gemini-1.5-pro")
            storage: Storage configuration. Mutually exclusive with chunk_store.
                     Example: LocalStorage("./data")
            chunk_store: Explicit chunk store.
            settings: Behavioral settings (chunk bounds, top_k, context budget, etc.)

        Raises:
            ValueError: If neither or both of storage and chunk_store are provided.
        """
        self._settings = settings if settings is not None else Settings()

        if storage is not None:
            if chunk_store is not None:
                raise ValueError("Cannot mix 'storage' with an explicit 'chunk_store'")
            self.chunk_store = storage.build_chunk_store()
        elif chunk_store is not None:
            self.chunk_store = chunk_store
        else:
            raise ValueError("Must provide either 'storage' or 'chunk_store'")

        self.embedder = provider.build_embedder(self._settings)
        self._llm_client = provider.build_llm_client(self._settings)

    @property
    def settings(self) -> Settings:
        return self._settings

    def retriever(
        self,
        *,
        llm_client: LLMClient | None = None,
        top_k: int | None = None,
    ) -> Retriever:
        """Create a Retriever using this instance's store.

        Args:
            llm_client: LLM client for generation. If None, uses the provider's client.
            top_k: Number of context chunks. If None, uses settings default.

        Returns:
            Configured Retriever instance.
        """
        from campusqa.generator import AnswerGenerator
        from campusqa.retriever import Retriever

        generator = AnswerGenerator(
            llm_client=llm_client or self._llm_client,
            temperature=self._settings.generation_temperature,
        )
        return Retriever(
            chunk_store=self.chunk_store,
            embedder=self.embedder,
            generator=generator,
            top_k=top_k if top_k is not None else self._settings.top_k,
            max_context_chars=self._settings.max_context_chars,
            prompt_header=self._settings.prompt_header,
        )

    def ingestor(self) -> Ingestor:
        """Create an Ingestor using this instance's store and chunk bounds."""
        from campusqa.chunker import ParagraphChunker
        from campusqa.ingestor import Ingestor

        return Ingestor(
            chunk_store=self.chunk_store,
            embedder=self.embedder,
            chunker=ParagraphChunker(
                min_chars=self._settings.min_chars,
                max_chars=self._settings.max_chars,
            ),
            embedding_batch_size=self._settings.embedding_batch_size,
        )

    def answer_question(self, question: str) -> Answer:
        """Answer a question from the stored corpus."""
        return self.retriever().answer_question(question)

    async def aanswer_question(self, question: str) -> Answer:
        """Answer a question, embedding it while the corpus is fetched."""
        return await self.retriever().aanswer_question(question)

    def ingest_document(
        self,
        raw_text: str,
        title: str,
        source_url: str,
        tags: Iterable[str] = (),
        document_id: str | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> DocumentIngestResult:
        """Chunk, embed and store one document."""
        return self.ingestor().ingest_document(
            raw_text,
            title=title,
            source_url=source_url,
            tags=tags,
            document_id=document_id,
            on_progress=on_progress,
        )

    def ingest_source(
        self,
        source: DocumentSource,
        prefix: str = "",
        tags: Iterable[str] = (),
        on_progress: ProgressCallback | None = None,
    ) -> IngestReport:
        """Ingest every document under a prefix of a document source."""
        return self.ingestor().ingest_source(
            source, prefix=prefix, tags=tags, on_progress=on_progress
        )

    async def aingest_source(
        self,
        source: DocumentSource,
        prefix: str = "",
        tags: Iterable[str] = (),
        on_progress: ProgressCallback | None = None,
    ) -> IngestReport:
        """Ingest a document source concurrently, bounded by settings.max_concurrent_ingest."""
        return await self.ingestor().aingest_source(
            source,
            prefix=prefix,
            tags=tags,
            on_progress=on_progress,
            max_concurrent=self._settings.max_concurrent_ingest,
        )
