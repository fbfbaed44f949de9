"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: docsearch.boundary.vdb
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from docsearch.api.deps import get_vector_store_dependency
from docsearch.api.error_handling import error_response
from docsearch.boundary.vdb import VectorStore
from docsearch.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=HealthResponse)
async def health_check_vector_store(
    vector_store: VectorStore = Depends(get_vector_store_dependency),
):
    """Vector store health check."""
    try:
        await vector_store.ping()
    except VectorStoreError as e:
        logger.warning(f"{__name__}:health_check_vector_store - {e}")
        return error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "Vector store unavailable",
            e.message,
        )
    return HealthResponse(status="healthy", message="Vector store accessible")
