"""
Cosine similarity between two embeddings.
"""

import numpy as np

from .errors import DimensionMismatchError, InvalidEmbeddingError
from .types import Embedding


def as_vector(values: Embedding) -> np.ndarray:
    """Convert an embedding to a 1-D float32 array, rejecting anything else."""
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise InvalidEmbeddingError(f"embedding is not numeric: {e}") from e

    # Strings and objects would otherwise be parsed by the float cast
    if raw.dtype.kind in ("U", "S", "O"):
        raise InvalidEmbeddingError(f"embedding is not numeric: dtype {raw.dtype}")
    vector = raw.astype(np.float32, copy=False)

    if vector.ndim != 1:
        raise InvalidEmbeddingError(f"embedding must be 1-D, got shape {vector.shape}")
    if vector.size == 0:
        raise InvalidEmbeddingError("embedding is empty")
    return vector


def cosine_similarity(a: Embedding, b: Embedding) -> float:
    """
    Compute the cosine similarity of two equal-length vectors.

    Returns 0.0 when either vector has zero magnitude instead of dividing
    by zero. Vectors of different lengths raise DimensionMismatchError.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Similarity in [-1.0, 1.0] as a float with float32 precision
    """
    vec_a = as_vector(a)
    vec_b = as_vector(b)

    if vec_a.shape[0] != vec_b.shape[0]:
        raise DimensionMismatchError(vec_a.shape[0], vec_b.shape[0])

    dot_product = np.dot(vec_a, vec_b)
    norm_a = np.sqrt(np.dot(vec_a, vec_a))
    norm_b = np.sqrt(np.dot(vec_b, vec_b))

    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    # Rounding can push parallel vectors just past 1.0
    score = np.clip(dot_product / (norm_a * norm_b), -1.0, 1.0)
    return float(np.float32(score))
