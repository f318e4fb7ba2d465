# src/campusqa/retriever.py
"""Query pipeline: embed, rank, assemble a prompt and generate an answer."""

import asyncio
import logging

from campusqa.embedder import Embedder
from campusqa.generator import AnswerGenerator
from campusqa.models import Answer, DocumentChunk, ScoredChunk, Source
from campusqa.prompt import DEFAULT_MAX_CONTEXT_CHARS, build_prompt
from campusqa.ranking import top_k
from campusqa.stores import ChunkStore

logger = logging.getLogger(__name__)

NO_DATA_ANSWER = "当前还没有可用的资料，请联系管理员先导入文档。"


class Retriever:
    """Orchestrates the query pipeline.

    Pipeline:
    1. Embed the question and fetch every stored chunk
    2. Rank chunks by cosine similarity to the question
    3. Build a bounded prompt from the top-ranked chunks
    4. Generate an answer and cite the ranked chunks as sources
    """

    def __init__(
        self,
        chunk_store: ChunkStore,
        embedder: Embedder,
        generator: AnswerGenerator,
        top_k: int = 5,
        max_context_chars: int = DEFAULT_MAX_CONTEXT_CHARS,
        prompt_header: str | None = None,
    ) -> None:
        """Initialize the retriever.

        Args:
            chunk_store: Store holding the embedded corpus
            embedder: Embedder for question embedding
            generator: Answer generator over an LLM client
            top_k: Number of chunks used as context
            max_context_chars: Character budget for the reference section
            prompt_header: Custom prompt preamble (default: campus assistant header)
        """
        self.chunk_store = chunk_store
        self.embedder = embedder
        self.generator = generator
        self.top_k = top_k
        self.max_context_chars = max_context_chars
        self.prompt_header = prompt_header

    @staticmethod
    def _clean_question(question: str) -> str:
        cleaned = question.strip()
        if not cleaned:
            raise ValueError("question is required")
        return cleaned

    def get_context(self, question: str, k: int | None = None) -> list[ScoredChunk]:
        """Get the chunks most relevant to a question.

        Args:
            question: User's question
            k: Number of results to return (default: self.top_k)

        Returns:
            ScoredChunks ordered by descending similarity
        """
        k = self.top_k if k is None else k
        question_embedding = self.embedder.embed_text(self._clean_question(question))
        return top_k(question_embedding, self.chunk_store.get_all(), k)

    def answer_question(self, question: str) -> Answer:
        """Answer a question from the stored corpus.

        Raises:
            ValueError: If the question is blank
            EmbeddingError: If the question could not be embedded
        """
        question = self._clean_question(question)
        question_embedding = self.embedder.embed_text(question)
        chunks = self.chunk_store.get_all()
        return self._answer_from(question, question_embedding, chunks)

    async def aanswer_question(self, question: str) -> Answer:
        """Answer a question, embedding it while the corpus is fetched.

        Ranking starts only after both the embedding and the fetch complete.
        """
        question = self._clean_question(question)
        question_embedding, chunks = await asyncio.gather(
            asyncio.to_thread(self.embedder.embed_text, question),
            asyncio.to_thread(self.chunk_store.get_all),
        )
        return await asyncio.to_thread(self._answer_from, question, question_embedding, chunks)

    def _answer_from(
        self,
        question: str,
        question_embedding: list[float],
        chunks: list[DocumentChunk],
    ) -> Answer:
        if not chunks:
            logger.info("No chunks stored; returning no-data answer")
            return Answer(answer=NO_DATA_ANSWER, sources=[])

        ranked = top_k(question_embedding, chunks, self.top_k)
        prompt = build_prompt(
            question,
            ranked,
            max_context_chars=self.max_context_chars,
            header=self.prompt_header,
        )
        logger.debug(
            "Ranked %d of %d chunks; prompt is %d chars", len(ranked), len(chunks), len(prompt)
        )

        answer = self.generator.generate(prompt)
        return Answer(answer=answer, sources=[Source.from_scored(chunk) for chunk in ranked])
