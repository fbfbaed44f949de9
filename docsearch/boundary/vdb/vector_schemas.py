"""
Vector database schemas.

Pydantic models for vector operations (records, queries, results).
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

import hashlib

from pydantic import BaseModel, Field


def compute_content_hash(content: str) -> str:
    """Return the SHA-256 hex digest used to deduplicate chunk text."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


class ChunkRecord(BaseModel):
    """One chunk ready to be persisted: text, embedding and source metadata."""

    content: str = Field(min_length=1, description="Chunk text")
    embedding: list[float] = Field(description="Chunk embedding vector")
    title: str | None = Field(default=None, description="Document title (file stem)")
    source: str | None = Field(default=None, description="Document type tag, e.g. 'pdf'")
    path: str | None = Field(default=None, description="Original file path")
    content_hash: str | None = Field(default=None, description="SHA-256 of content")


class VectorQuery(BaseModel):
    """Query parameters for vector search."""

    embedding: list[float] = Field(description="Query embedding vector")
    match_threshold: float = Field(
        default=0.5,
        description="Exclusive lower bound on cosine similarity",
        ge=-1.0,
        le=1.0,
    )
    match_count: int = Field(default=10, description="Maximum number of matches", ge=1)


class SimilarityMatch(BaseModel):
    """Single result from vector search."""

    id: int | str = Field(description="Chunk identifier")
    content: str = Field(description="Chunk text content")
    similarity: float = Field(description="Cosine similarity to the query")
    title: str | None = None
    source: str | None = None
    path: str | None = None
