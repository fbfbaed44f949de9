"""ORM models."""

from docsearch.boundary.db.models.chunk_model import EMBEDDING_DIMENSION, DocumentChunkModel

__all__ = ["DocumentChunkModel", "EMBEDDING_DIMENSION"]
