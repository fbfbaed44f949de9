"""
Query request/response schemas.

Dependencies: pydantic
System role: Query API contract
"""

from typing import Any

from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    """
    Question asked against the indexed documents.

    query is left untyped so that a missing, blank or non-string value
    reaches the service and is reported as a 400, not a schema error.
    """

    query: Any = Field(default=None, description="Natural-language question")


class QueryResponse(BaseModel):
    """Generated answer."""

    answer: str
