# src/campusqa/prompt.py
"""Prompt assembly for grounded, citation-annotated answers."""

from collections.abc import Sequence

from campusqa.models import ScoredChunk

DEFAULT_MAX_CONTEXT_CHARS = 2500

PROMPT_HEADER = (
    "你是校园事务问答助手。结合提供的参考资料回答学生的问题。"
    "若无法从资料中得到答案，请说明需要联系线下部门确认。"
    "回复需使用中文，并在答案末尾列出引用的编号。"
)

ENTRY_TEMPLATE = "[{index}] 标题：{title}\n来源：{source_url}\n内容：{text}"

PROMPT_TEMPLATE = "{header}\n\n问题：{question}\n\n参考资料：\n{context}"


def format_entry(index: int, chunk: ScoredChunk) -> str:
    """Format one numbered context entry (1-indexed)."""
    return ENTRY_TEMPLATE.format(
        index=index,
        title=chunk.title,
        source_url=chunk.source_url,
        text=chunk.chunk_text.strip(),
    )


def select_entries(
    ranked_chunks: Sequence[ScoredChunk],
    max_context_chars: int,
) -> list[str]:
    """Pick formatted entries that fit the character budget, in rank order.

    An entry that does not fit the remaining budget is skipped, never
    truncated. Numbering follows rank, so skipped entries leave gaps.
    Selection stops once the budget is used up.
    """
    entries: list[str] = []
    remaining = max_context_chars
    for index, chunk in enumerate(ranked_chunks, 1):
        if remaining <= 0:
            break
        entry = format_entry(index, chunk)
        if len(entry) <= remaining:
            entries.append(entry)
            remaining -= len(entry)
    return entries


def build_prompt(
    question: str,
    ranked_chunks: Sequence[ScoredChunk],
    max_context_chars: int = DEFAULT_MAX_CONTEXT_CHARS,
    header: str | None = None,
) -> str:
    """Build the prompt handed to the answer generator.

    Args:
        question: The user's question
        ranked_chunks: Retrieved chunks, most similar first
        max_context_chars: Character budget for the context section
        header: Custom instructional preamble (default: PROMPT_HEADER)

    Returns:
        Preamble, question and context block as one string. With no chunks
        the context section is empty.
    """
    context = "\n\n".join(select_entries(ranked_chunks, max_context_chars))
    return PROMPT_TEMPLATE.format(
        header=header or PROMPT_HEADER,
        question=question,
        context=context,
    )
