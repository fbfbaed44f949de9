"""
Vector store configuration settings.

Manages the chunk store backend, embedding model and similarity search defaults.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (in-memory for dev, pgvector for prod)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="pgvector",
        description="Vector store type: 'memory' for local dev, 'pgvector' for production",
    )

    embedding_model: str = Field(
        default="text-embedding-3-small",
        description="OpenAI embedding model ID",
    )
    embedding_dimension: int = Field(
        default=1536,
        description="Embedding vector dimension (1536 for text-embedding-3-small)",
        gt=0,
    )

    match_threshold: float = Field(
        default=0.5,
        description="Matches must score strictly above this cosine similarity",
        ge=-1.0,
        le=1.0,
    )
    match_count: int = Field(
        default=10,
        description="Maximum number of matches returned per query",
        ge=1,
    )

    ivfflat_lists: int = Field(
        default=100,
        description="Number of lists for the ivfflat cosine index",
        ge=1,
    )
