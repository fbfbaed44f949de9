"""
Ingestion response schemas.

Dependencies: pydantic, docsearch.core.document_processing
System role: Index-docs API contract
"""

from pydantic import BaseModel, Field

from docsearch.core.document_processing import BatchIndexResult, DocumentIndexResult


class IndexDocsResponse(BaseModel):
    """Outcome of indexing the local documents folder."""

    message: str
    indexed_count: int = 0
    skipped_count: int = 0
    failed_count: int = 0
    chunk_count: int = 0
    documents: list[DocumentIndexResult] = Field(default_factory=list)

    @classmethod
    def from_batch(cls, batch: BatchIndexResult) -> "IndexDocsResponse":
        return cls(
            message="Local docs indexed successfully",
            indexed_count=batch.indexed_count,
            skipped_count=batch.skipped_count,
            failed_count=batch.failed_count,
            chunk_count=batch.chunk_count,
            documents=batch.documents,
        )
