"""
Random embedding generation for demonstrations and tests.
Embeddings here carry no meaning; real ones come from a model outside this package.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class IEmbeddingGenerator(ABC):
    """Abstract interface for embedding producers."""

    @abstractmethod
    def generate(self) -> np.ndarray:
        """Produce one embedding vector."""
        pass

    @abstractmethod
    def get_dimension(self) -> int:
        """Get the dimension of the embedding vectors."""
        pass


class RandomEmbeddingGenerator(IEmbeddingGenerator):
    """Uniform random embeddings in [0, 1) drawn from an owned numpy Generator.

    Pass a seed (or a ready Generator) for reproducible sequences. No
    process-wide random state is touched.
    """

    def __init__(self, dimension: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        if dimension < 1:
            raise ValueError("dimension must be >= 1")
        self.dimension = dimension
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self) -> np.ndarray:
        """Generate a float32 vector of self.dimension values in [0, 1)."""
        return self.rng.random(self.dimension, dtype=np.float32)

    def get_dimension(self) -> int:
        """Get the dimension of the embedding vectors."""
        return self.dimension
