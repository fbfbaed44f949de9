"""
Vector database boundary layer.

Provides chunk stores for storage and similarity retrieval.
- PgVectorStore: Production PostgreSQL + pgvector store
- InMemoryVectorStore: Local development and test store

Dependencies: numpy, docsearch.boundary.db
System role: Vector store adapter for RAG retrieval
"""

from docsearch.boundary.vdb.base import VectorStore
from docsearch.boundary.vdb.memory_store import InMemoryVectorStore
from docsearch.boundary.vdb.vector_schemas import (
    ChunkRecord,
    SimilarityMatch,
    VectorQuery,
    compute_content_hash,
)
from docsearch.boundary.vdb.vector_store_factory import get_vector_store

__all__ = [
    "VectorStore",
    "InMemoryVectorStore",
    "ChunkRecord",
    "SimilarityMatch",
    "VectorQuery",
    "compute_content_hash",
    "get_vector_store",
]
