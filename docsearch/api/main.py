"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, docsearch.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docsearch.api.deps.dependencies import get_service_cache
from docsearch.api.error_handling import register_exception_handlers
from docsearch.configs import get_settings
from docsearch.models.common import MessageResponse
from docsearch.observability import configure_logging
from docsearch.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import documents_router, health_router, query_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)
    logger.info(f"{__name__}:lifespan - Starting ({settings.environment})")

    yield

    # Shutdown
    get_service_cache().clear()
    logger.info(f"{__name__}:lifespan - Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="RAG Document Search API",
        description="Index local documents and answer questions from them",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (last added runs first)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    @app.get("/", response_model=MessageResponse, tags=["root"])
    async def root() -> MessageResponse:
        """Static acknowledgment."""
        return MessageResponse(message="RAG Document Search API is running")

    # Register all routers under the versioned prefix
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(documents_router, prefix=settings.api_prefix)
    app.include_router(query_router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    server_settings = get_settings()
    uvicorn.run(
        "docsearch.api.main:app",
        host=server_settings.host,
        port=server_settings.port,
    )
