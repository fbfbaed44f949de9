"""
CRUD operations for DocumentChunkModel.

Provides idempotent chunk insertion, per-path hash lookup and cosine
similarity search.

Dependencies: sqlalchemy, pgvector, docsearch.boundary.db
System role: Chunk persistence and nearest-neighbour queries
"""

from collections.abc import Sequence

from sqlalchemy import Row, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from docsearch.boundary.db.CRUD.base_crud import BaseCRUD
from docsearch.boundary.db.models.chunk_model import DocumentChunkModel


class ChunkCRUD(BaseCRUD[DocumentChunkModel]):
    """CRUD operations for document chunks."""

    def __init__(self) -> None:
        """Initialize with DocumentChunkModel."""
        super().__init__(DocumentChunkModel)

    def build_insert(
        self,
        content: str,
        embedding: list[float],
        title: str | None = None,
        source: str | None = None,
        path: str | None = None,
        content_hash: str | None = None,
    ):
        """
        Build the INSERT ... ON CONFLICT DO NOTHING statement for one chunk.

        Returns:
            Insert: Statement returning the new id, or no row on conflict
        """
        return (
            pg_insert(self.model)
            .values(
                content=content,
                embedding=embedding,
                title=title,
                source=source,
                path=path,
                content_hash=content_hash,
            )
            .on_conflict_do_nothing(constraint="uq_document_chunks_path_hash")
            .returning(self.model.id)
        )

    async def insert_chunk(self, session: AsyncSession, **values) -> int | None:
        """
        Insert a chunk unless the same (path, content_hash) already exists.

        Args:
            session: Async database session
            **values: Column values accepted by build_insert

        Returns:
            int | None: New row id, None if the row already existed
        """
        result = await session.execute(self.build_insert(**values))
        return result.scalar_one_or_none()

    async def get_content_hashes(self, session: AsyncSession, path: str) -> set[str]:
        """
        Get the content hashes already stored for a file path.

        Args:
            session: Async database session
            path: Original file path

        Returns:
            set[str]: Stored content hashes for that path
        """
        stmt = select(self.model.content_hash).where(
            self.model.path == path,
            self.model.content_hash.is_not(None),
        )
        result = await session.execute(stmt)
        return set(result.scalars().all())

    def build_match_query(
        self,
        query_embedding: list[float],
        match_threshold: float,
        match_count: int,
    ):
        """
        Build the cosine similarity search statement.

        similarity = 1 - cosine_distance; rows must score strictly above the
        threshold and are ordered nearest first.
        """
        distance = self.model.embedding.cosine_distance(query_embedding)
        similarity = (1 - distance).label("similarity")
        return (
            select(
                self.model.id,
                self.model.content,
                self.model.title,
                self.model.source,
                self.model.path,
                similarity,
            )
            .where(1 - distance > match_threshold)
            .order_by(distance)
            .limit(match_count)
        )

    async def match_documents(
        self,
        session: AsyncSession,
        query_embedding: list[float],
        match_threshold: float,
        match_count: int,
    ) -> Sequence[Row]:
        """
        Find the chunks most similar to a query embedding.

        Args:
            session: Async database session
            query_embedding: Query vector
            match_threshold: Exclusive lower bound on similarity
            match_count: Maximum rows returned

        Returns:
            Sequence[Row]: (id, content, title, source, path, similarity) rows
        """
        stmt = self.build_match_query(query_embedding, match_threshold, match_count)
        result = await session.execute(stmt)
        return result.all()


chunk_crud = ChunkCRUD()
