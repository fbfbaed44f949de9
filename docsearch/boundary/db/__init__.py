"""
Database boundary layer: ORM model, CRUD operations, and connection management.

Exports:
  - Base, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - DocumentChunkModel: Persisted chunk entity
  - chunk_crud: CRUD operation singleton

Dependencies: sqlalchemy, pgvector, docsearch.configs
System role: Database adapter providing persistent chunk storage
"""

from docsearch.boundary.db.base import Base, CreatedAtMixin
from docsearch.boundary.db.connection import (
    create_engine_from_settings,
    get_async_engine,
    get_async_session_factory,
)
from docsearch.boundary.db.models.chunk_model import EMBEDDING_DIMENSION, DocumentChunkModel
from docsearch.boundary.db.CRUD import BaseCRUD, ChunkCRUD, chunk_crud

__all__ = [
    "Base",
    "CreatedAtMixin",
    "create_engine_from_settings",
    "get_async_engine",
    "get_async_session_factory",
    "DocumentChunkModel",
    "EMBEDDING_DIMENSION",
    "BaseCRUD",
    "ChunkCRUD",
    "chunk_crud",
]
