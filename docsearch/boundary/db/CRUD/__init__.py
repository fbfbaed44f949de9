"""
CRUD operations for database models.

Exports:
  - BaseCRUD: Generic base class
  - ChunkCRUD: Chunk insert, hash lookup and similarity search
  - chunk_crud: Singleton instance
"""

from docsearch.boundary.db.CRUD.base_crud import BaseCRUD
from docsearch.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud

__all__ = ["BaseCRUD", "ChunkCRUD", "chunk_crud"]
