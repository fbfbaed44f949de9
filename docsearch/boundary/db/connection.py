"""
Database connection management.

Provides the async SQLAlchemy engine and session factory for the pgvector
chunk store.

Dependencies: sqlalchemy, pgvector, asyncpg, docsearch.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache

from pgvector.asyncpg import register_vector
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from docsearch.configs import get_settings


def create_engine_from_settings(register_pgvector: bool = True) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling.

    pool_pre_ping=True verifies connections before use to detect stale/broken
    connections early. When register_pgvector is set, every new asyncpg
    connection gets the pgvector codec, which requires the `vector` extension
    to exist already.

    Args:
        register_pgvector: Install the pgvector codec on each connection

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine
    """
    settings = get_settings()
    db_config = settings.database

    engine = create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )

    if register_pgvector:

        @event.listens_for(engine.sync_engine, "connect")
        def _register_vector(dbapi_connection, connection_record):
            dbapi_connection.run_async(register_vector)

    return engine


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Get the process-wide async engine (one connection pool per process).

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    return create_engine_from_settings()


def get_async_session_factory() -> async_sessionmaker:
    """
    Create async session factory for database operations.

    Returns async_sessionmaker bound to the shared engine with autoflush=False
    for explicit transaction control and predictable behavior.

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )
