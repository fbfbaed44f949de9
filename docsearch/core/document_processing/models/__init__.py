"""Pipeline result models."""

from .pipeline_result import BatchIndexResult, DocumentIndexResult, IndexStatus

__all__ = ["BatchIndexResult", "DocumentIndexResult", "IndexStatus"]
