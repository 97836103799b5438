#!/usr/bin/env python3
"""
Vector store demonstration.

Inserts one random embedding per word of a phrase, then prints the stored
vectors most similar to a random query.
"""

import argparse
import sys
import uuid
from pathlib import Path
from typing import List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core import config
from src.vector import InMemoryVectorStore, QueryResult, RandomEmbeddingGenerator, VectorStoreError
from util.logging import logger


def run_demo(phrase: str, dimension: int, top_k: int, seed: Optional[int] = None) -> List[QueryResult]:
    """Fill a fresh store from the phrase and query it with a random vector."""
    store = InMemoryVectorStore(dimension=dimension)
    generator = RandomEmbeddingGenerator(dimension=dimension, seed=seed)

    for _word in phrase.split():
        store.insert(uuid.uuid4(), generator.generate())

    logger.log_operation("demo.populate", "success", {"entries": len(store), "dimension": dimension})

    query_embedding = generator.generate()
    return store.query_top_k(query_embedding, top_k)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="In-memory vector store demonstration")
    parser.add_argument(
        "--dimension",
        type=int,
        default=None,
        help=f"Embedding dimension (default: VECTOR_DIMENSION or {config.DEFAULT_VECTOR_DIMENSION})"
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help=f"Number of results to show (default: VECTOR_TOP_K or {config.DEFAULT_TOP_K})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random embeddings (default: EMBED_SEED, else unseeded)"
    )
    parser.add_argument(
        "--phrase",
        default=config.DEFAULT_PHRASE,
        help="Phrase whose words each get an embedding"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    issues = config.validate_vector_config()
    if issues:
        for issue in issues:
            logger.error(f"Configuration error: {issue}")
        return 1

    dimension = args.dimension if args.dimension is not None else config.get_vector_dimension()
    top_k = args.top_k if args.top_k is not None else config.get_default_top_k()
    seed = args.seed if args.seed is not None else config.get_embed_seed()

    try:
        results = run_demo(args.phrase, dimension, top_k, seed)
    except (VectorStoreError, ValueError) as e:
        logger.error(f"Demo failed: {e}")
        return 1

    print(f"Top {len(results)} most similar vectors:")
    for record_id, similarity in results:
        print(f"UUID: {record_id}, Similarity: {similarity:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
