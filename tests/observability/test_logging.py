"""
Test suite for logging setup and correlation ids.

System role: Verification of observability helpers
"""

import logging

from docsearch.observability import (
    clear_correlation_id,
    configure_logging,
    get_correlation_id,
    set_correlation_id,
)
from docsearch.boundary.vdb import SimilarityMatch
from docsearch.core.document_processing import BatchIndexResult, DocumentIndexResult, IndexStatus
from docsearch.core.exceptions import VectorStoreError
from docsearch.observability.log_utils import (
    batch_log_context,
    document_log_context,
    log_exception_with_context,
    match_log_context,
)
from docsearch.observability.logger import CorrelationIdFilter


def test_set_and_clear_correlation_id() -> None:
    assert set_correlation_id("abc") == "abc"
    assert get_correlation_id() == "abc"
    clear_correlation_id()
    assert get_correlation_id() == ""


def test_generated_correlation_id() -> None:
    value = set_correlation_id()
    assert value
    assert get_correlation_id() == value
    clear_correlation_id()


def test_filter_attaches_correlation_id() -> None:
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    other = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    set_correlation_id("req-1")
    CorrelationIdFilter().filter(record)
    clear_correlation_id()
    CorrelationIdFilter().filter(other)

    assert record.correlation_id == "req-1"
    assert other.correlation_id == "-"


def test_configure_logging_quiets_third_party() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_match_context_reports_best_score_and_paths() -> None:
    matches = [
        SimilarityMatch(id=1, content="Leave is 25 days.", similarity=0.912345, path="/docs/leave.pdf"),
        SimilarityMatch(id=2, content="Leave carries over.", similarity=0.8, path="/docs/leave.pdf"),
        SimilarityMatch(id=3, content="Holiday calendar.", similarity=0.7, path="/docs/holidays.pdf"),
    ]

    context = match_log_context(matches)

    assert context == {
        "match_count": 3,
        "top_similarity": 0.9123,
        "match_paths": ["/docs/holidays.pdf", "/docs/leave.pdf"],
    }
    assert "content" not in context


def test_match_context_without_matches() -> None:
    assert match_log_context([]) == {"match_count": 0, "top_similarity": None, "match_paths": []}


def test_document_and_batch_context() -> None:
    failed = DocumentIndexResult(
        path="/docs/b.pdf", title="b", source="pdf", status=IndexStatus.FAILED, error="corrupt file"
    )
    indexed = DocumentIndexResult(
        path="/docs/a.pdf", title="a", source="pdf", status=IndexStatus.INDEXED, chunk_count=4, duplicate_count=1
    )
    batch = BatchIndexResult(folder="/docs", documents=[indexed, failed], processing_time_ms=10.456)

    assert document_log_context(indexed) == {
        "path": "/docs/a.pdf",
        "title": "a",
        "status": "indexed",
        "chunk_count": 4,
        "duplicate_count": 1,
    }
    assert document_log_context(failed)["error"] == "corrupt file"
    assert batch_log_context(batch) == {
        "folder": "/docs",
        "indexed_count": 1,
        "skipped_count": 0,
        "failed_count": 1,
        "chunk_count": 4,
        "processing_time_ms": 10.46,
    }


def test_exception_context_carries_details_and_correlation(caplog) -> None:
    logger = logging.getLogger("docsearch.tests.failures")
    error = VectorStoreError("Database unreachable", operation="match")

    set_correlation_id("req-7")
    try:
        with caplog.at_level(logging.ERROR, logger="docsearch.tests.failures"):
            log_exception_with_context(logger, "search failed", error, path="/docs/a.pdf")
    finally:
        clear_correlation_id()

    record = caplog.records[-1]
    assert record.error_type == "VectorStoreError"
    assert record.error_msg == "Database unreachable"
    assert record.operation == "match"
    assert record.collaborator == "vector_store"
    assert record.path == "/docs/a.pdf"
    assert record.correlation_id == "req-7"
    assert record.exc_info[1] is error
