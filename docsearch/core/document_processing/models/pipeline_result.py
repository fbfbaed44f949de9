"""
Pipeline result models for document processing.

Represents the outcome of indexing one document and a whole folder.

Dependencies: pydantic
System role: Return types for DocumentPipeline.index_document() / index_folder()
"""

import enum

from pydantic import BaseModel, Field, computed_field


class IndexStatus(str, enum.Enum):
    """
    Per-document indexing outcome.

    INDEXED: Text extracted, chunks embedded and stored
    SKIPPED: Extraction produced no text; nothing stored
    FAILED: Extraction, embedding or persistence raised; error field has details
    """

    INDEXED = "indexed"
    SKIPPED = "skipped"
    FAILED = "failed"


class DocumentIndexResult(BaseModel):
    """Result of indexing a single document."""

    path: str = Field(description="Absolute path of the source file")
    title: str = Field(description="Document title (file stem)")
    source: str = Field(description="Document type tag, e.g. 'pdf'")
    status: IndexStatus = Field(description="Indexing outcome")
    chunk_count: int = Field(default=0, description="Chunks newly stored")
    duplicate_count: int = Field(default=0, description="Chunks skipped as already stored")
    error: str | None = Field(default=None, description="Failure message when status is FAILED")


class BatchIndexResult(BaseModel):
    """Result of indexing every eligible document in a folder."""

    folder: str = Field(description="Folder that was scanned")
    documents: list[DocumentIndexResult] = Field(
        default_factory=list,
        description="Per-document results in listing order",
    )
    processing_time_ms: float = Field(default=0.0, description="Total processing time in milliseconds")

    @computed_field
    @property
    def indexed_count(self) -> int:
        return sum(1 for doc in self.documents if doc.status == IndexStatus.INDEXED)

    @computed_field
    @property
    def skipped_count(self) -> int:
        return sum(1 for doc in self.documents if doc.status == IndexStatus.SKIPPED)

    @computed_field
    @property
    def failed_count(self) -> int:
        return sum(1 for doc in self.documents if doc.status == IndexStatus.FAILED)

    @computed_field
    @property
    def chunk_count(self) -> int:
        return sum(doc.chunk_count for doc in self.documents)
