"""
Structured log context for indexing, retrieval and failures.

Builds the `extra=` dicts the pipeline, retriever and API layers log with,
so the same field names (path, chunk_count, match_count, top_similarity,
correlation_id) appear wherever a document or query is reported.

Dependencies: logging (stdlib), docsearch.observability.correlation
System role: Log field conventions
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from docsearch.observability.correlation import get_correlation_id

if TYPE_CHECKING:
    from docsearch.boundary.vdb import SimilarityMatch
    from docsearch.core.document_processing.models import BatchIndexResult, DocumentIndexResult

SIMILARITY_DIGITS = 4


def document_log_context(result: DocumentIndexResult) -> dict[str, Any]:
    """Fields describing one document's indexing outcome."""
    context: dict[str, Any] = {
        "path": result.path,
        "title": result.title,
        "status": result.status.value,
        "chunk_count": result.chunk_count,
        "duplicate_count": result.duplicate_count,
    }
    if result.error:
        context["error"] = result.error
    return context


def batch_log_context(batch: BatchIndexResult) -> dict[str, Any]:
    """Totals of a folder run."""
    return {
        "folder": batch.folder,
        "indexed_count": batch.indexed_count,
        "skipped_count": batch.skipped_count,
        "failed_count": batch.failed_count,
        "chunk_count": batch.chunk_count,
        "processing_time_ms": round(batch.processing_time_ms, 2),
    }


def match_log_context(matches: list[SimilarityMatch]) -> dict[str, Any]:
    """
    Fields describing a retrieval result.

    Matches are expected most similar first; the chunk text itself is never
    logged, only the number of matches, the best score and the distinct
    source paths.
    """
    top = matches[0].similarity if matches else None
    return {
        "match_count": len(matches),
        "top_similarity": round(top, SIMILARITY_DIGITS) if top is not None else None,
        "match_paths": sorted({match.path for match in matches if match.path}),
    }


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log a failure with its type, message, domain details and correlation id.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being reported (traceback attached)
        **context: Extra fields, e.g. path
    """
    extra: dict[str, Any] = dict(context)
    extra.update(
        {
            "error_type": type(exc).__name__,
            "error_msg": getattr(exc, "message", str(exc)),
            "correlation_id": get_correlation_id() or None,
        }
    )
    details = getattr(exc, "details", None)
    if isinstance(details, dict):
        for key, value in details.items():
            extra.setdefault(key, value)
    logger.error(message, exc_info=exc, extra=extra)
