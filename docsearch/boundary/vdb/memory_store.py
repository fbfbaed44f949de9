"""
In-memory vector store for local development and tests.

Keeps chunk embeddings in a numpy matrix and scores queries with cosine
similarity. Nothing is persisted across process restarts.

Dependencies: numpy, docsearch.boundary.vdb
System role: Local vector store for development RAG
"""

import asyncio
import logging

import numpy as np

from docsearch.boundary.vdb.base import VectorStore
from docsearch.boundary.vdb.vector_schemas import (
    ChunkRecord,
    SimilarityMatch,
    VectorQuery,
    compute_content_hash,
)
from docsearch.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class InMemoryVectorStore(VectorStore):
    """
    Process-local chunk store.

    Rows are append-only and keep insertion order, which is also the
    tie-break order for equal similarity scores.
    """

    def __init__(self, dimension: int = 1536) -> None:
        """
        Args:
            dimension: Required embedding length for stored chunks and queries
        """
        self._dimension = dimension
        self._records: list[ChunkRecord] = []
        self._vectors: list[np.ndarray] = []
        self._keys: set[tuple[str | None, str]] = set()
        self._lock = asyncio.Lock()

    def _as_vector(self, embedding: list[float], operation: str) -> np.ndarray:
        if len(embedding) != self._dimension:
            raise VectorStoreError(
                f"Embedding has {len(embedding)} dimensions, expected {self._dimension}",
                operation=operation,
            )
        return np.asarray(embedding, dtype=np.float64)

    async def add_chunk(self, record: ChunkRecord) -> bool:
        vector = self._as_vector(record.embedding, "insert")
        content_hash = record.content_hash or compute_content_hash(record.content)
        key = (record.path, content_hash)

        async with self._lock:
            if key in self._keys:
                logger.debug(
                    f"{__name__}:add_chunk - Duplicate chunk skipped",
                    extra={"path": record.path, "content_hash": content_hash},
                )
                return False
            self._keys.add(key)
            self._records.append(record.model_copy(update={"content_hash": content_hash}))
            self._vectors.append(vector)
        return True

    async def get_content_hashes(self, path: str) -> set[str]:
        return {content_hash for record_path, content_hash in self._keys if record_path == path}

    async def match_documents(self, query: VectorQuery) -> list[SimilarityMatch]:
        query_vector = self._as_vector(query.embedding, "match")
        if not self._vectors:
            return []

        matrix = np.vstack(self._vectors)
        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query_vector)
        with np.errstate(divide="ignore", invalid="ignore"):
            scores = np.where(norms > 0, matrix @ query_vector / norms, 0.0)

        # Stable sort keeps insertion order for ties.
        order = np.argsort(-scores, kind="stable")
        matches: list[SimilarityMatch] = []
        for index in order:
            score = float(scores[index])
            if score <= query.match_threshold:
                break
            record = self._records[index]
            matches.append(
                SimilarityMatch(
                    id=int(index) + 1,
                    content=record.content,
                    similarity=score,
                    title=record.title,
                    source=record.source,
                    path=record.path,
                )
            )
            if len(matches) >= query.match_count:
                break
        return matches

    async def ping(self) -> None:
        return None

    async def count(self) -> int:
        return len(self._records)
