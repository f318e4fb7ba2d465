# src/campusqa/commands/status.py
"""Status command - show store statistics."""

from __future__ import annotations

import os
from pathlib import Path

from campusqa.commands.base import SourceInfo, StatusResult
from campusqa.config import ConfigError, get_campusqa_config, get_chunk_store


def status(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> StatusResult:
    """Get store statistics.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        StatusResult with chunk and source counts
    """
    config = get_campusqa_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return StatusResult(success=False, error=config.message, suggestion=config.suggestion)

    effective_data_dir = config.data_dir
    if not os.path.exists(effective_data_dir):
        return StatusResult(success=True, data_dir=effective_data_dir)

    try:
        chunk_store = get_chunk_store(effective_data_dir)
        sources = chunk_store.list_sources()
        total_chunks = chunk_store.count_chunks()
    except Exception as e:
        return StatusResult(
            success=False,
            data_dir=effective_data_dir,
            error=f"Failed to access database: {e}",
        )

    return StatusResult(
        success=True,
        data_dir=effective_data_dir,
        total_sources=len(sources),
        total_chunks=total_chunks,
        sources=[
            SourceInfo(title=s.title, source_url=s.source_url, chunk_count=s.chunks)
            for s in sources
        ],
    )
