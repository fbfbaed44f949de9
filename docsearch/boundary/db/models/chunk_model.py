"""
Document chunk ORM model.

One row per chunk: text, pgvector embedding and source metadata.
The ivfflat cosine index is created by create_tables, where its list count
is read from settings.

Dependencies: sqlalchemy, pgvector, docsearch.boundary.db.base
System role: Persisted chunk storage for similarity search
"""

from pgvector.sqlalchemy import Vector
from sqlalchemy import BigInteger, Identity, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from docsearch.boundary.db.base import Base, CreatedAtMixin

# Fixed by text-embedding-3-small; changing it requires a new table.
EMBEDDING_DIMENSION = 1536


class DocumentChunkModel(Base, CreatedAtMixin):
    """
    Chunk ORM model.

    Rows are inserted once during indexing and never updated. Re-indexing the
    same file is idempotent through the (path, content_hash) unique key.

    Attributes:
        id: Auto-incrementing primary key
        content: Chunk text (never blank)
        embedding: Vector of EMBEDDING_DIMENSION floats
        title: Document title (file stem)
        source: Document type tag, e.g. "pdf"
        path: Original file path
        content_hash: SHA-256 hex digest of content
        created_at: Insertion timestamp
    """

    __tablename__ = "document_chunks"

    id: Mapped[int] = mapped_column(BigInteger, Identity(), primary_key=True)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    embedding: Mapped[list[float]] = mapped_column(
        Vector(EMBEDDING_DIMENSION),
        nullable=False,
    )

    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    source: Mapped[str | None] = mapped_column(Text, nullable=True)
    path: Mapped[str | None] = mapped_column(Text, nullable=True)

    content_hash: Mapped[str | None] = mapped_column(String(64), nullable=True)

    __table_args__ = (
        UniqueConstraint("path", "content_hash", name="uq_document_chunks_path_hash"),
    )
