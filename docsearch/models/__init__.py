"""API request and response schemas."""

from docsearch.models.common import ErrorResponse, MessageResponse
from docsearch.models.ingestion import IndexDocsResponse
from docsearch.models.query import QueryRequest, QueryResponse

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "IndexDocsResponse",
    "QueryRequest",
    "QueryResponse",
]
