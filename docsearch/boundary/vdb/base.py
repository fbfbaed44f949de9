"""
Vector store interface.

Every chunk store (pgvector in production, in-memory for development and
tests) implements this contract, so the pipeline and retriever never depend
on a concrete backend.

Dependencies: docsearch.boundary.vdb.vector_schemas
System role: Abstract chunk store contract
"""

from abc import ABC, abstractmethod

from docsearch.boundary.vdb.vector_schemas import ChunkRecord, SimilarityMatch, VectorQuery


class VectorStore(ABC):
    """Abstract chunk store with append-only writes and cosine similarity search."""

    @abstractmethod
    async def add_chunk(self, record: ChunkRecord) -> bool:
        """
        Persist one chunk.

        Returns:
            bool: True if stored, False if an identical (path, content_hash) row existed

        Raises:
            VectorStoreError: If the write fails
        """

    @abstractmethod
    async def get_content_hashes(self, path: str) -> set[str]:
        """Return the content hashes already stored for a file path."""

    @abstractmethod
    async def match_documents(self, query: VectorQuery) -> list[SimilarityMatch]:
        """
        Return up to query.match_count chunks scoring strictly above
        query.match_threshold, most similar first.

        Raises:
            VectorStoreError: If the search fails
        """

    @abstractmethod
    async def ping(self) -> None:
        """Raise VectorStoreError if the store is unreachable."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored chunks."""
