"""
Test suite for ChunkCRUD statement construction and PgVectorStore.

Statements are compiled with the PostgreSQL dialect; sessions are mocked.

System role: Verification of the pgvector persistence layer
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from docsearch.boundary.db.CRUD.chunk_crud import chunk_crud
from docsearch.boundary.vdb import ChunkRecord, VectorQuery
from docsearch.boundary.vdb.pgvector_store import PgVectorStore
from docsearch.configs.ingestion import IngestionSettings
from docsearch.core.document_processing import DocumentPipeline, IndexStatus
from docsearch.core.exceptions import RetrievalError, VectorStoreError
from docsearch.core.retriever import Retriever


def compile_sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


def make_session_factory(session: AsyncMock) -> MagicMock:
    """Session factory whose context manager yields the given session."""
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=session)
    context.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=context)


def make_unreachable_session_factory() -> MagicMock:
    """Session factory whose connection attempt is refused by the server."""
    context = MagicMock()
    context.__aenter__ = AsyncMock(side_effect=ConnectionRefusedError(111, "Connect call failed"))
    context.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=context)


class TestChunkCRUDStatements:
    """Test generated SQL."""

    def test_insert_ignores_conflicts(self) -> None:
        """Should insert with ON CONFLICT DO NOTHING on the path/hash key."""
        sql = compile_sql(chunk_crud.build_insert(content="a", embedding=[0.0] * 1536, path="/d.pdf", content_hash="h"))

        assert "INSERT INTO document_chunks" in sql
        assert "ON CONFLICT ON CONSTRAINT uq_document_chunks_path_hash DO NOTHING" in sql
        assert "RETURNING document_chunks.id" in sql

    def test_match_query_uses_cosine_distance(self) -> None:
        """Should filter strictly on 1 - distance, order by distance and limit."""
        sql = compile_sql(chunk_crud.build_match_query([0.0] * 1536, 0.5, 10))

        assert "<=>" in sql
        assert "AS similarity" in sql
        assert "ORDER BY document_chunks.embedding <=>" in sql
        assert "LIMIT" in sql
        assert " > " in sql


class TestPgVectorStore:
    """Test the store over a mocked session."""

    @pytest.mark.asyncio
    async def test_add_chunk_commits_and_reports_insert(self) -> None:
        session = AsyncMock()
        result = MagicMock()
        result.scalar_one_or_none.return_value = 42
        session.execute.return_value = result
        store = PgVectorStore(session_factory=make_session_factory(session), dimension=4)

        stored = await store.add_chunk(ChunkRecord(content="alpha", embedding=[1.0, 0.0, 0.0, 0.0], path="/d.pdf"))

        assert stored is True
        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_add_chunk_conflict_returns_false(self) -> None:
        session = AsyncMock()
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        session.execute.return_value = result
        store = PgVectorStore(session_factory=make_session_factory(session), dimension=4)

        assert await store.add_chunk(ChunkRecord(content="alpha", embedding=[1.0, 0.0, 0.0, 0.0])) is False

    @pytest.mark.asyncio
    async def test_database_error_wrapped(self) -> None:
        """Should wrap SQLAlchemy errors in VectorStoreError."""
        session = AsyncMock()
        session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
        store = PgVectorStore(session_factory=make_session_factory(session), dimension=4)

        with pytest.raises(VectorStoreError) as exc_info:
            await store.match_documents(VectorQuery(embedding=[1.0, 0.0, 0.0, 0.0]))

        assert exc_info.value.details["operation"] == "match"

    @pytest.mark.asyncio
    async def test_match_maps_rows(self) -> None:
        session = AsyncMock()
        row = MagicMock(id=1, content="alpha", title="doc", source="pdf", path="/d.pdf", similarity=0.93)
        result = MagicMock()
        result.all.return_value = [row]
        session.execute.return_value = result
        store = PgVectorStore(session_factory=make_session_factory(session), dimension=4)

        matches = await store.match_documents(VectorQuery(embedding=[1.0, 0.0, 0.0, 0.0]))

        assert matches[0].id == 1
        assert matches[0].similarity == pytest.approx(0.93)

    @pytest.mark.asyncio
    async def test_wrong_dimension_rejected_before_query(self) -> None:
        session = AsyncMock()
        store = PgVectorStore(session_factory=make_session_factory(session), dimension=1536)

        with pytest.raises(VectorStoreError):
            await store.add_chunk(ChunkRecord(content="alpha", embedding=[1.0]))

        session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ping_failure_raises(self) -> None:
        session = AsyncMock()
        session.execute.side_effect = OSError("connection refused")
        store = PgVectorStore(session_factory=make_session_factory(session), dimension=4)

        with pytest.raises(VectorStoreError):
            await store.ping()


class TestPgVectorStoreUnreachable:
    """Test the store when the database refuses connections."""

    @pytest.mark.asyncio
    async def test_every_operation_raises_vector_store_error(self) -> None:
        """Should wrap a refused connection in VectorStoreError for each operation."""
        store = PgVectorStore(session_factory=make_unreachable_session_factory(), dimension=4)

        with pytest.raises(VectorStoreError) as insert_info:
            await store.add_chunk(ChunkRecord(content="alpha", embedding=[1.0, 0.0, 0.0, 0.0], path="/d.txt"))
        with pytest.raises(VectorStoreError) as hashes_info:
            await store.get_content_hashes("/d.txt")
        with pytest.raises(VectorStoreError) as match_info:
            await store.match_documents(VectorQuery(embedding=[1.0, 0.0, 0.0, 0.0]))
        with pytest.raises(VectorStoreError) as count_info:
            await store.count()

        assert insert_info.value.details["operation"] == "insert"
        assert hashes_info.value.details["operation"] == "hashes"
        assert match_info.value.details["operation"] == "match"
        assert count_info.value.details["operation"] == "count"
        assert isinstance(match_info.value.__cause__, ConnectionRefusedError)

    @pytest.mark.asyncio
    async def test_batch_reports_each_document_failed(self, embedding_task, temp_dir: Path) -> None:
        """Should mark every document FAILED instead of aborting the batch."""
        (temp_dir / "a_leave.txt").write_text("Employees accrue 2 days of leave per month.")
        (temp_dir / "b_salary.txt").write_text("Salary is paid on the last working day.")
        settings = IngestionSettings(
            docs_dir=str(temp_dir),
            allowed_extensions=[".txt"],
            chunk_size=200,
            chunk_overlap=50,
        )
        store = PgVectorStore(session_factory=make_unreachable_session_factory())
        pipeline = DocumentPipeline(embedding_task, store, settings=settings)

        batch = await pipeline.index_folder()

        assert batch.failed_count == 2
        assert [doc.status for doc in batch.documents] == [IndexStatus.FAILED, IndexStatus.FAILED]
        assert all(doc.error for doc in batch.documents)

    @pytest.mark.asyncio
    async def test_retrieve_raises_retrieval_error(self, embedding_task) -> None:
        """Should surface a refused connection as RetrievalError."""
        store = PgVectorStore(session_factory=make_unreachable_session_factory())
        retriever = Retriever(embedding_task, store)

        with pytest.raises(RetrievalError):
            await retriever.retrieve("What is the leave policy?")
