"""Service orchestrators."""

from .ingestion_service import IngestionService
from .query_service import QueryService

__all__ = [
    "IngestionService",
    "QueryService",
]
