# src/campusqa/ranking.py
"""Cosine similarity ranking over stored chunk embeddings.

Ranking is a full scan: every candidate is scored against the query, which
is O(n * d + n log n) for n candidates of dimension d. An indexed
nearest-neighbour store can replace this behind the same ``top_k`` contract.
"""

from collections.abc import Sequence

import numpy as np

from campusqa.models import DocumentChunk, ScoredChunk

EPSILON = 1e-8


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Compute cosine similarity between two vectors.

    Returns 0.0 when the vectors differ in length or either is empty, since a
    chunk may not have an embedding yet. ``EPSILON`` keeps zero vectors from
    dividing by zero.
    """
    if len(a) != len(b) or len(a) == 0:
        return 0.0

    a_arr = np.asarray(a, dtype=np.float64)
    b_arr = np.asarray(b, dtype=np.float64)
    denom = np.linalg.norm(a_arr) * np.linalg.norm(b_arr) + EPSILON
    return float(np.dot(a_arr, b_arr) / denom)


def top_k(
    query: Sequence[float],
    candidates: Sequence[DocumentChunk],
    k: int,
) -> list[ScoredChunk]:
    """Return the ``k`` candidates most similar to ``query``.

    Args:
        query: Query embedding
        candidates: Chunks to score, in store order
        k: Maximum number of results

    Returns:
        ScoredChunks ordered by descending score. Ties keep candidate order.
    """
    if k <= 0:
        return []

    scored = [
        ScoredChunk.model_validate(
            {**chunk.model_dump(), "score": cosine_similarity(query, chunk.embedding)}
        )
        for chunk in candidates
    ]
    scored.sort(key=lambda c: c.score, reverse=True)
    return scored[:k]
