"""
Test suite for IngestionService.

System role: Verification of ingestion orchestration
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from docsearch.application.services import IngestionService
from docsearch.core.document_processing import BatchIndexResult, DocumentIndexResult, IndexStatus
from docsearch.core.exceptions import ConfigurationError


@pytest.fixture
def mock_pipeline() -> MagicMock:
    pipeline = MagicMock()
    pipeline.index_folder = AsyncMock(
        return_value=BatchIndexResult(
            folder="/docs",
            documents=[
                DocumentIndexResult(
                    path="/docs/a.pdf", title="a", source="pdf", status=IndexStatus.INDEXED, chunk_count=3
                ),
                DocumentIndexResult(path="/docs/b.pdf", title="b", source="pdf", status=IndexStatus.SKIPPED),
            ],
            processing_time_ms=12.5,
        )
    )
    return pipeline


class TestIngestionService:
    """Test local document indexing."""

    @pytest.mark.asyncio
    async def test_indexes_configured_folder(self, mock_pipeline: MagicMock) -> None:
        """Should run the pipeline over the configured folder."""
        service = IngestionService(mock_pipeline, docs_dir="/docs")

        result = await service.index_local_documents()

        mock_pipeline.index_folder.assert_awaited_once_with("/docs")
        assert result.indexed_count == 1
        assert result.skipped_count == 1
        assert result.chunk_count == 3

    @pytest.mark.asyncio
    async def test_missing_folder_propagates(self, mock_pipeline: MagicMock) -> None:
        mock_pipeline.index_folder.side_effect = ConfigurationError("Documents folder not found: MyDocs")
        service = IngestionService(mock_pipeline, docs_dir="MyDocs")

        with pytest.raises(ConfigurationError):
            await service.index_local_documents()

    @pytest.mark.asyncio
    async def test_pipeline_built_on_first_use(self, mock_pipeline: MagicMock) -> None:
        """Should defer building the pipeline until documents are indexed."""
        provider = MagicMock(return_value=mock_pipeline)
        service = IngestionService(docs_dir="/docs", pipeline_provider=provider)

        provider.assert_not_called()
        await service.index_local_documents()
        await service.index_local_documents()

        provider.assert_called_once_with()
        assert mock_pipeline.index_folder.await_count == 2

    @pytest.mark.asyncio
    async def test_pipeline_setup_error_raised_from_indexing(self) -> None:
        """Should raise pipeline construction errors when indexing, not when built."""
        provider = MagicMock(side_effect=ConfigurationError("OpenAI API key is not configured", setting="OPENAI_API_KEY"))
        service = IngestionService(docs_dir="/docs", pipeline_provider=provider)

        with pytest.raises(ConfigurationError) as exc_info:
            await service.index_local_documents()

        assert exc_info.value.details["setting"] == "OPENAI_API_KEY"

    def test_requires_pipeline_or_provider(self) -> None:
        with pytest.raises(ValueError):
            IngestionService(docs_dir="/docs")
