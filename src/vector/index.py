"""
In-memory vector store with exact top-k cosine similarity search.
"""

import uuid
from abc import ABC, abstractmethod
from functools import cmp_to_key
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from src.core.config import debug_enabled
from util.logging import logger

from .errors import DimensionMismatchError
from .similarity import as_vector, cosine_similarity
from .types import Embedding, QueryResult, VectorRecord


class IVectorStore(ABC):
    """Abstract interface for vector storage operations."""

    @abstractmethod
    def insert(self, record_id: uuid.UUID, embedding: Embedding) -> None:
        """Store an embedding under an id, replacing any previous one."""
        pass

    @abstractmethod
    def query_top_k(self, query: Embedding, k: int) -> List[QueryResult]:
        """Return the k stored vectors most similar to the query."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass


def _compare_scores(a: Tuple[uuid.UUID, float], b: Tuple[uuid.UUID, float]) -> int:
    # Descending by score; NaN compares false both ways and so counts as equal
    if a[1] > b[1]:
        return -1
    if a[1] < b[1]:
        return 1
    return 0


class InMemoryVectorStore(IVectorStore):
    """
    Dictionary-backed vector store scored by a full linear scan.

    The store owns its data: embeddings are copied to read-only float32
    arrays on insert, and get() hands back copies. Entries are never
    removed. Not thread-safe.
    """

    def __init__(self, dimension: Optional[int] = None):
        """
        Initialize an empty store.

        Args:
            dimension: Required embedding length. When None it is fixed by the first insert.
        """
        if dimension is not None and dimension < 1:
            raise ValueError("dimension must be >= 1")
        self._dimension = dimension
        self._vectors: Dict[uuid.UUID, np.ndarray] = {}
        self._debug = debug_enabled()

    @property
    def dimension(self) -> Optional[int]:
        return self._dimension

    def _check_dimension(self, vector: np.ndarray, operation: str) -> None:
        if self._dimension is not None and vector.shape[0] != self._dimension:
            logger.log_rejection(operation, "dimension_mismatch", {
                "expected": self._dimension,
                "actual": vector.shape[0]
            })
            raise DimensionMismatchError(self._dimension, vector.shape[0], context=operation)

    def insert(self, record_id: uuid.UUID, embedding: Embedding) -> None:
        """Store an embedding under record_id. Re-inserting an id overwrites it."""
        vector = np.array(as_vector(embedding), dtype=np.float32, copy=True)
        self._check_dimension(vector, "insert")

        if self._dimension is None:
            self._dimension = vector.shape[0]

        vector.setflags(write=False)
        replaced = record_id in self._vectors
        self._vectors[record_id] = vector

        if self._debug:
            logger.log_vector_operation("insert", record_id, {
                "dimension": vector.shape[0],
                "replaced": replaced
            })

    def batch_insert(self, records: Iterable[VectorRecord]) -> None:
        """Insert records in order; later records win on duplicate ids."""
        for record in records:
            self.insert(record.id, record.vector)

    def query_top_k(self, query: Embedding, k: int) -> List[QueryResult]:
        """
        Rank every stored vector against the query and return the best k.

        Args:
            query: Query embedding, same dimension as the stored ones
            k: Number of results wanted (>= 0)

        Returns:
            Up to min(k, len(self)) results ordered by descending score.
            Ties come back in no particular order. A NaN score counts as
            equal to every other score, so a NaN in the store or the query
            can leave finite scores around it out of order.
        """
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 0:
            logger.log_rejection("query_top_k", "invalid_k", {"k": k})
            raise ValueError(f"k must be a non-negative integer, got {k!r}")

        if k == 0 or not self._vectors:
            logger.log_query(k, 0, {"stored": len(self._vectors)})
            return []

        query_vector = as_vector(query)
        self._check_dimension(query_vector, "query")

        scored = [
            (record_id, cosine_similarity(query_vector, vector))
            for record_id, vector in self._vectors.items()
        ]
        scored.sort(key=cmp_to_key(_compare_scores))

        results = [QueryResult(id=record_id, score=score) for record_id, score in scored[:k]]
        logger.log_query(k, len(results), {"stored": len(self._vectors)})
        return results

    def get(self, record_id: uuid.UUID) -> Optional[np.ndarray]:
        """Return a writable copy of the stored embedding, or None."""
        vector = self._vectors.get(record_id)
        if vector is None:
            return None
        return vector.copy()

    def ids(self) -> List[uuid.UUID]:
        """Return the stored ids in no guaranteed order."""
        return list(self._vectors.keys())

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._vectors

    def __len__(self) -> int:
        return len(self._vectors)
