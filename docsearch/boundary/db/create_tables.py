"""
Database schema creation script.

Enables the pgvector extension, creates the chunk table from ORM metadata,
builds the ivfflat cosine index and installs the match_documents SQL function
so the store can also be queried directly from psql.

Dependencies: sqlalchemy, pgvector, docsearch.configs
System role: Database schema initialization

Usage:
    python -m docsearch.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy import text

from docsearch.boundary.db.base import Base
from docsearch.boundary.db.connection import create_engine_from_settings
from docsearch.boundary.db.models.chunk_model import (  # noqa: F401
    EMBEDDING_DIMENSION,
    DocumentChunkModel,
)
from docsearch.configs import get_settings

logger = logging.getLogger(__name__)

CREATE_EXTENSION_SQL = "CREATE EXTENSION IF NOT EXISTS vector"

CREATE_INDEX_SQL = (
    "CREATE INDEX IF NOT EXISTS document_chunks_embedding_idx "
    "ON document_chunks USING ivfflat (embedding vector_cosine_ops) "
    "WITH (lists = {lists})"
)

MATCH_FUNCTION_SQL = f"""
CREATE OR REPLACE FUNCTION match_documents(
    query_embedding vector({EMBEDDING_DIMENSION}),
    match_threshold float,
    match_count int
)
RETURNS TABLE (
    id bigint,
    content text,
    title text,
    source text,
    path text,
    similarity float
)
LANGUAGE plpgsql
AS $$
BEGIN
    RETURN QUERY
    SELECT
        dc.id,
        dc.content,
        dc.title,
        dc.source,
        dc.path,
        1 - (dc.embedding <=> query_embedding) AS similarity
    FROM document_chunks dc
    WHERE 1 - (dc.embedding <=> query_embedding) > match_threshold
    ORDER BY dc.embedding <=> query_embedding
    LIMIT match_count;
END;
$$
"""


async def create_all_tables() -> None:
    """
    Create the extension, table, index and search function.

    Idempotent: every statement uses IF NOT EXISTS or OR REPLACE, so it is
    safe to run against an existing database. The engine is created without
    the pgvector codec because the extension may not exist yet.

    Raises:
        SQLAlchemyError: If the connection or any DDL statement fails
    """
    settings = get_settings()
    engine = create_engine_from_settings(register_pgvector=False)

    try:
        async with engine.begin() as conn:
            await conn.execute(text(CREATE_EXTENSION_SQL))
            await conn.run_sync(Base.metadata.create_all)
            await conn.execute(
                text(CREATE_INDEX_SQL.format(lists=int(settings.vector_store.ivfflat_lists)))
            )
            await conn.execute(text(MATCH_FUNCTION_SQL))
        logger.info(f"{__name__}:create_all_tables - Schema created successfully")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_all_tables())
