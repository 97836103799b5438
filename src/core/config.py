"""
Vector store configuration.
Values are read from the environment on every call so they can be overridden at runtime.
"""

import os
from typing import List, Optional

DEFAULT_VECTOR_DIMENSION = 768
DEFAULT_TOP_K = 3
DEFAULT_PHRASE = "Ceci est un exemple de phrase"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "false").lower() == "true"


def get_log_level() -> str:
    """Get the logger level name; DEBUG mode lowers the default to DEBUG."""
    default = "DEBUG" if debug_enabled() else "INFO"
    level = os.getenv("LOG_LEVEL", default).upper()
    return level if level in VALID_LOG_LEVELS else default


def get_vector_dimension() -> int:
    """Get the embedding dimension used by the factories and the demo."""
    return int(os.getenv("VECTOR_DIMENSION", str(DEFAULT_VECTOR_DIMENSION)))


def get_default_top_k() -> int:
    """Get the default number of results for a top-k query."""
    return int(os.getenv("VECTOR_TOP_K", str(DEFAULT_TOP_K)))


def get_embed_seed() -> Optional[int]:
    """Get the optional seed for the demonstration embedding generator."""
    seed = os.getenv("EMBED_SEED")
    if seed is None or not seed.strip():
        return None
    return int(seed)


def get_vector_store():
    """Get a new, empty vector store sized to the configured dimension."""
    from src.vector.index import InMemoryVectorStore
    return InMemoryVectorStore(dimension=get_vector_dimension())


def get_embedding_generator(seed: Optional[int] = None):
    """Get a random embedding generator; falls back to EMBED_SEED when no seed is given."""
    from src.vector.embeddings import RandomEmbeddingGenerator
    if seed is None:
        seed = get_embed_seed()
    return RandomEmbeddingGenerator(dimension=get_vector_dimension(), seed=seed)


def validate_vector_config() -> List[str]:
    """Validate vector configuration and return any issues."""
    issues = []

    try:
        if get_vector_dimension() < 1:
            issues.append("VECTOR_DIMENSION must be >= 1")
    except ValueError:
        issues.append(f"Invalid VECTOR_DIMENSION: {os.getenv('VECTOR_DIMENSION')}")

    try:
        if get_default_top_k() < 0:
            issues.append("VECTOR_TOP_K must be >= 0")
    except ValueError:
        issues.append(f"Invalid VECTOR_TOP_K: {os.getenv('VECTOR_TOP_K')}")

    try:
        get_embed_seed()
    except ValueError:
        issues.append(f"Invalid EMBED_SEED: {os.getenv('EMBED_SEED')}")

    log_level = os.getenv("LOG_LEVEL")
    if log_level is not None and log_level.upper() not in VALID_LOG_LEVELS:
        issues.append(f"Invalid LOG_LEVEL: {log_level}")

    return issues
