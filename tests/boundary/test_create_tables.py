"""
Test suite for schema creation.

System role: Verification of database provisioning statements
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from docsearch.boundary.db import create_tables


def test_match_function_uses_strict_cosine_threshold() -> None:
    sql = create_tables.MATCH_FUNCTION_SQL

    assert "CREATE OR REPLACE FUNCTION match_documents" in sql
    assert "vector(1536)" in sql
    assert "1 - (dc.embedding <=> query_embedding) > match_threshold" in sql
    assert "LIMIT match_count" in sql


@pytest.mark.asyncio
async def test_create_all_tables_runs_ddl_in_order() -> None:
    """Should create the extension first, then tables, index and function."""
    conn = AsyncMock()
    begin_context = MagicMock()
    begin_context.__aenter__ = AsyncMock(return_value=conn)
    begin_context.__aexit__ = AsyncMock(return_value=False)
    engine = MagicMock()
    engine.begin.return_value = begin_context
    engine.dispose = AsyncMock()

    with patch.object(create_tables, "create_engine_from_settings", return_value=engine) as mock_factory:
        await create_tables.create_all_tables()

    mock_factory.assert_called_once_with(register_pgvector=False)
    statements = [str(call.args[0]) for call in conn.execute.await_args_list]
    assert statements[0] == "CREATE EXTENSION IF NOT EXISTS vector"
    assert "USING ivfflat (embedding vector_cosine_ops) WITH (lists = 100)" in statements[1]
    assert "match_documents" in statements[2]
    conn.run_sync.assert_awaited_once()
    engine.dispose.assert_awaited_once()
