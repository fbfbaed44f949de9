"""
Vector store factory for selecting between in-memory (dev) and pgvector (prod).

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: docsearch.boundary.vdb, docsearch.configs
System role: Vector store instantiation and selection
"""

import logging

from docsearch.boundary.vdb.base import VectorStore
from docsearch.boundary.vdb.memory_store import InMemoryVectorStore
from docsearch.configs import Settings, get_settings
from docsearch.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def get_vector_store(settings: Settings | None = None) -> VectorStore:
    """
    Factory function to get vector store based on environment configuration.

    Args:
        settings: Application settings (defaults to the cached singleton)

    Returns:
        VectorStore: InMemoryVectorStore or PgVectorStore

    Raises:
        ConfigurationError: If the store type is not recognised
    """
    settings = settings or get_settings()
    store_type = settings.vector_store.store_type.lower()
    dimension = settings.vector_store.embedding_dimension

    if store_type == "memory":
        logger.info(f"{__name__}:get_vector_store - Creating in-memory vector store (local dev mode)")
        return InMemoryVectorStore(dimension=dimension)

    elif store_type == "pgvector":
        # Imported lazily so the memory store works without a database driver.
        from docsearch.boundary.vdb.pgvector_store import PgVectorStore

        logger.info(f"{__name__}:get_vector_store - Creating pgvector store (production mode)")
        return PgVectorStore(dimension=dimension)

    else:
        raise ConfigurationError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'memory' (dev) or 'pgvector' (production).",
            setting="VECTOR_STORE_STORE_TYPE",
        )
