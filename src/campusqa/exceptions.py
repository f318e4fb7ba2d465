# src/campusqa/exceptions.py
"""Exceptions raised by campus-qa."""


class CampusQAError(Exception):
    """Base class for campus-qa errors."""


class EmbeddingError(CampusQAError):
    """Raised when the embedding service returns no vector for a required input.

    Attributes:
        expected: Number of vectors that were requested.
        received: Number of usable vectors the service returned.
    """

    def __init__(self, message: str, expected: int = 1, received: int = 0) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received
