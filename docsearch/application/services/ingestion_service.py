"""
Ingestion service orchestrator.

Runs the document pipeline over the configured local documents folder.

Dependencies: docsearch.core.document_processing
System role: Document ingestion orchestration
"""

import logging
from typing import Callable

from docsearch.core.document_processing import BatchIndexResult, DocumentPipeline
from docsearch.observability.log_utils import batch_log_context

logger = logging.getLogger(__name__)


class IngestionService:
    """Index local documents into the chunk store."""

    def __init__(
        self,
        pipeline: DocumentPipeline | None = None,
        docs_dir: str | None = None,
        pipeline_provider: Callable[[], DocumentPipeline] | None = None,
    ) -> None:
        """
        Initialize ingestion service.

        Args:
            pipeline: Document pipeline doing the per-document work
            docs_dir: Folder to index (pipeline default if None)
            pipeline_provider: Builds the pipeline on first use when no
                pipeline is given; its errors surface from index_local_documents
        """
        if pipeline is None and pipeline_provider is None:
            raise ValueError("IngestionService needs a pipeline or a pipeline_provider")
        self._pipeline = pipeline
        self._pipeline_provider = pipeline_provider
        self._docs_dir = docs_dir

    @property
    def pipeline(self) -> DocumentPipeline:
        """Lazy-load the document pipeline."""
        if self._pipeline is None:
            self._pipeline = self._pipeline_provider()
        return self._pipeline

    async def index_local_documents(self) -> BatchIndexResult:
        """
        Index every eligible document in the documents folder.

        Returns:
            BatchIndexResult: Per-document outcomes and totals

        Raises:
            ConfigurationError: If the documents folder is missing or the
                pipeline cannot be built (e.g. no embedding API key)
            DocSearchException: First document failure when fail-fast is enabled
        """
        logger.info(f"{__name__}:index_local_documents - START", extra={"docs_dir": self._docs_dir})
        result = await self.pipeline.index_folder(self._docs_dir)
        logger.info(f"{__name__}:index_local_documents - SUCCESS", extra=batch_log_context(result))
        return result
