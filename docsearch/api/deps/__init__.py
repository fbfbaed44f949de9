"""Dependency injection for API routes."""

from .dependencies import (
    get_ingestion_service,
    get_query_service,
    get_service_cache,
    get_vector_store_dependency,
)

__all__ = [
    "get_ingestion_service",
    "get_query_service",
    "get_service_cache",
    "get_vector_store_dependency",
]
