"""
API error handling utilities.

Maps domain exceptions to the JSON error envelope
{"success": false, "error": ..., "detail": ...} used by every endpoint.

Dependencies: fastapi, docsearch.core.exceptions, docsearch.observability
System role: Uniform HTTP error responses
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from docsearch.configs import get_settings
from docsearch.core.exceptions import DocSearchException, ValidationError
from docsearch.models.common import ErrorResponse
from docsearch.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build the error envelope response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, detail=detail).model_dump(),
    )


def handle_api_errors(error_message: str, expose_detail: bool | None = None) -> Callable[[F], F]:
    """
    Decorator turning endpoint exceptions into the error envelope.

    ValidationError becomes a 400 carrying its own message. Anything else is
    logged and becomes a 500 with error_message.

    Args:
        error_message: `error` field for unexpected failures
        expose_detail: Put the exception text in `detail`; None follows DEBUG
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except ValidationError as e:
                logger.warning(
                    f"{func.__name__} - Invalid request",
                    extra={"field": e.details.get("field"), "error": e.message},
                )
                return error_response(status.HTTP_400_BAD_REQUEST, e.message)

            except Exception as e:
                log_exception_with_context(logger, f"{func.__name__} - {error_message}", e)
                show_detail = get_settings().debug if expose_detail is None else expose_detail
                return error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    error_message,
                    str(e) if show_detail else None,
                )

        return wrapper  # type: ignore[return-value]

    return decorator


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies get the same envelope as every other failure."""
    logger.warning(
        f"{request.method} {request.url.path} - Malformed request",
        extra={"errors": len(exc.errors())},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def domain_error_handler(request: Request, exc: DocSearchException) -> JSONResponse:
    """Domain errors raised while resolving dependencies, e.g. a missing API key."""
    log_exception_with_context(
        logger,
        f"{request.method} {request.url.path} - Unhandled domain error",
        exc,
        path=request.url.path,
    )
    detail = str(exc) if get_settings().debug else None
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", detail)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DocSearchException, domain_error_handler)
