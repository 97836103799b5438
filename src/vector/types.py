"""
Vector store data types.
"""

import uuid
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

import numpy as np

# Anything numpy can turn into a 1-D float array
Embedding = Union[np.ndarray, Sequence[float]]


@dataclass
class VectorRecord:
    """An embedding paired with its identifier, used for batch inserts."""

    id: uuid.UUID
    """Caller-generated unique identifier"""

    vector: Embedding
    """The embedding to store"""


@dataclass(frozen=True)
class QueryResult:
    """One ranked hit from a top-k query."""

    id: uuid.UUID
    """Identifier of the matching record"""

    score: float
    """Cosine similarity between the query and the record (-1 to 1)"""

    def __iter__(self) -> Iterator:
        # Lets callers unpack a hit as (id, score)
        yield self.id
        yield self.score
