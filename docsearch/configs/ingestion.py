"""
Configuration settings for the document ingestion pipeline.

Provides environment-based configuration for folder scanning, chunking and
batch orchestration.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IngestionSettings(BaseSettings):
    """Settings for document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INGESTION_",
        case_sensitive=False,
        extra="ignore",
    )

    docs_dir: str = Field(
        default="MyDocs",
        description="Folder scanned (non-recursively) by the index operation",
    )
    allowed_extensions: list[str] = Field(
        default=[".pdf"],
        description="File suffixes picked up by the folder scan",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=1000,
        description="Maximum chunk size in characters",
        gt=0,
    )
    chunk_overlap: int = Field(
        default=200,
        description="Overlap between consecutive chunks",
        ge=0,
    )

    # Batch settings
    max_concurrent_documents: int = Field(
        default=4,
        description="Documents processed at the same time during a folder index",
        ge=1,
    )
    fail_fast: bool = Field(
        default=False,
        description="Abort the whole batch on the first document failure",
    )
    skip_duplicate_chunks: bool = Field(
        default=True,
        description="Skip chunks already stored for the same path and content hash",
    )

    @field_validator("allowed_extensions")
    @classmethod
    def normalize_extensions(cls, value: list[str]) -> list[str]:
        """Lower-case suffixes and make sure each starts with a dot."""
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value]

    @model_validator(mode="after")
    def check_overlap(self) -> "IngestionSettings":
        """Reject an overlap that would stop the chunk window from advancing."""
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than "
                f"chunk_size ({self.chunk_size})"
            )
        return self
