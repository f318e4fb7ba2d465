# src/campusqa/commands/ask.py
"""Ask command - answer a question from the indexed documents.

This module provides the core ask logic that the CLI uses.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from campusqa.commands.base import AskResult, SourceHit
from campusqa.config import ConfigError, create_campusqa, get_campusqa_config

if TYPE_CHECKING:
    from campusqa.campusqa import CampusQA

logger = logging.getLogger(__name__)


def ask(
    question: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    k: int | None = None,
) -> AskResult:
    """Answer a question using configuration from campusqa.yaml and the environment.

    Args:
        question: The question to ask
        data_dir: Override data directory
        config_path: Override config file path
        k: Number of context chunks (None for settings default)

    Returns:
        AskResult with the answer and its sources
    """
    config = get_campusqa_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return AskResult(
            success=False,
            question=question,
            error=config.message,
            suggestion=config.suggestion,
        )

    if not os.path.exists(config.data_dir):
        return AskResult(
            success=False,
            question=question,
            error=f"Data directory not found: {config.data_dir}. Run 'campusqa ingest' first.",
        )

    try:
        qa = create_campusqa(config)
    except Exception as e:
        return AskResult(
            success=False,
            question=question,
            error=f"Failed to create CampusQA: {e}",
        )

    return ask_with_campusqa(qa, question, k=k)


def ask_with_campusqa(qa: CampusQA, question: str, k: int | None = None) -> AskResult:
    """Answer a question using an existing CampusQA instance."""
    if not question.strip():
        return AskResult(success=False, question=question, error="question is required")

    try:
        answer = qa.retriever(top_k=k).answer_question(question)
    except Exception as e:
        logger.exception("Question failed")
        return AskResult(success=False, question=question, error=f"Query failed: {e}")

    return AskResult(
        success=True,
        question=question,
        answer=answer.answer,
        sources=[
            SourceHit(
                title=s.title,
                source_url=s.source_url,
                updated_at=s.updated_at,
                score=s.score,
            )
            for s in answer.sources
        ],
    )
