"""
Error types raised by the vector store core.
"""


class VectorStoreError(Exception):
    """Base class for vector store errors."""


class InvalidEmbeddingError(VectorStoreError, ValueError):
    """Raised when an embedding is not a non-empty 1-D numeric sequence."""


class DimensionMismatchError(VectorStoreError, ValueError):
    """Raised when two vectors that must agree in dimension do not."""

    def __init__(self, expected: int, actual: int, context: str = "vector"):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{context} dimension {actual} does not match expected dimension {expected}"
        )
