"""
PostgreSQL + pgvector chunk store.

Wraps the chunk CRUD layer with one async session per operation and
translates database failures into VectorStoreError.

Dependencies: sqlalchemy, pgvector, docsearch.boundary.db
System role: Production vector store for RAG retrieval
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from docsearch.boundary.db.connection import get_async_session_factory
from docsearch.boundary.db.CRUD.chunk_crud import chunk_crud
from docsearch.boundary.vdb.base import VectorStore
from docsearch.boundary.vdb.vector_schemas import (
    ChunkRecord,
    SimilarityMatch,
    VectorQuery,
    compute_content_hash,
)
from docsearch.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class PgVectorStore(VectorStore):
    """
    Vector store backed by the document_chunks table.

    Inserts are committed one chunk at a time, so chunks written before a
    failure stay persisted.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker | None = None,
        dimension: int = 1536,
    ) -> None:
        """
        Args:
            session_factory: Async session factory (defaults to the shared engine)
            dimension: Required embedding length
        """
        self._session_factory = session_factory or get_async_session_factory()
        self._dimension = dimension

    def _check_dimension(self, embedding: list[float], operation: str) -> None:
        if len(embedding) != self._dimension:
            raise VectorStoreError(
                f"Embedding has {len(embedding)} dimensions, expected {self._dimension}",
                operation=operation,
            )

    async def add_chunk(self, record: ChunkRecord) -> bool:
        self._check_dimension(record.embedding, "insert")
        content_hash = record.content_hash or compute_content_hash(record.content)
        try:
            async with self._session_factory() as session:
                new_id = await chunk_crud.insert_chunk(
                    session,
                    content=record.content,
                    embedding=record.embedding,
                    title=record.title,
                    source=record.source,
                    path=record.path,
                    content_hash=content_hash,
                )
                await session.commit()
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                f"{__name__}:add_chunk - {type(e).__name__}: {e}",
                extra={"path": record.path},
            )
            raise VectorStoreError(
                f"Failed to insert chunk: {e}",
                operation="insert",
                details={"path": record.path},
            ) from e
        return new_id is not None

    async def get_content_hashes(self, path: str) -> set[str]:
        try:
            async with self._session_factory() as session:
                return await chunk_crud.get_content_hashes(session, path)
        except (SQLAlchemyError, OSError) as e:
            raise VectorStoreError(
                f"Failed to read content hashes: {e}",
                operation="hashes",
                details={"path": path},
            ) from e

    async def match_documents(self, query: VectorQuery) -> list[SimilarityMatch]:
        self._check_dimension(query.embedding, "match")
        try:
            async with self._session_factory() as session:
                rows = await chunk_crud.match_documents(
                    session,
                    query.embedding,
                    query.match_threshold,
                    query.match_count,
                )
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"{__name__}:match_documents - {type(e).__name__}: {e}")
            raise VectorStoreError(f"Similarity search failed: {e}", operation="match") from e

        return [
            SimilarityMatch(
                id=row.id,
                content=row.content,
                similarity=float(row.similarity),
                title=row.title,
                source=row.source,
                path=row.path,
            )
            for row in rows
        ]

    async def ping(self) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            raise VectorStoreError(f"Database unreachable: {e}", operation="ping") from e

    async def count(self) -> int:
        try:
            async with self._session_factory() as session:
                return await chunk_crud.count(session)
        except (SQLAlchemyError, OSError) as e:
            raise VectorStoreError(f"Failed to count chunks: {e}", operation="count") from e
