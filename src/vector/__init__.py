"""
In-memory vector store with exact cosine similarity search.
"""

# Package initialization for vector module
from .index import IVectorStore, InMemoryVectorStore
from .similarity import cosine_similarity
from .types import Embedding, VectorRecord, QueryResult
from .embeddings import IEmbeddingGenerator, RandomEmbeddingGenerator
from .errors import VectorStoreError, DimensionMismatchError, InvalidEmbeddingError

__all__ = [
    'IVectorStore',
    'InMemoryVectorStore',
    'cosine_similarity',
    'Embedding',
    'VectorRecord',
    'QueryResult',
    'IEmbeddingGenerator',
    'RandomEmbeddingGenerator',
    'VectorStoreError',
    'DimensionMismatchError',
    'InvalidEmbeddingError'
]
