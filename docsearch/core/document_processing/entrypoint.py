"""
Document pipeline orchestrator.

Coordinates parsing, chunking, embedding and chunk persistence for every
eligible file in a local folder.

Dependencies: All task modules, docsearch.boundary.vdb, docsearch.configs
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time
from pathlib import Path

from docsearch.boundary.vdb import ChunkRecord, VectorStore, compute_content_hash
from docsearch.configs import get_settings
from docsearch.configs.ingestion import IngestionSettings
from docsearch.core.exceptions import ConfigurationError, DocSearchException
from docsearch.observability.log_utils import (
    batch_log_context,
    document_log_context,
    log_exception_with_context,
)

from .models import BatchIndexResult, DocumentIndexResult, IndexStatus
from .tasks import ChunkingTask, EmbeddingTask, ParsingTask

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: parse -> chunk -> embed + store."""

    def __init__(
        self,
        embedding_task: EmbeddingTask,
        vector_store: VectorStore,
        settings: IngestionSettings | None = None,
        parsing_task: ParsingTask | None = None,
        chunking_task: ChunkingTask | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            embedding_task: Gateway used to embed chunk text
            vector_store: Store the chunks are written to
            settings: Ingestion settings (uses application settings if None)
            parsing_task: Text extractor (default ParsingTask)
            chunking_task: Chunker (built from settings if None)
        """
        self._settings = settings or get_settings().ingestion
        self._embedding_task = embedding_task
        self._vector_store = vector_store
        self._parsing_task = parsing_task or ParsingTask()
        self._chunking_task = chunking_task or ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )

    def list_documents(self, folder: str | Path) -> list[Path]:
        """
        List the files of a folder that should be indexed.

        Non-recursive, sorted by file name, filtered by allowed extension
        (case-insensitive).

        Args:
            folder: Folder to scan

        Returns:
            list[Path]: Absolute paths in indexing order

        Raises:
            ConfigurationError: If the folder does not exist
        """
        folder_path = Path(folder).resolve()
        if not folder_path.is_dir():
            raise ConfigurationError(
                f"Documents folder not found: {folder_path}",
                setting="INGESTION_DOCS_DIR",
            )

        allowed = set(self._settings.allowed_extensions)
        return sorted(
            (
                entry
                for entry in folder_path.iterdir()
                if entry.is_file() and entry.suffix.lower() in allowed
            ),
            key=lambda entry: entry.name,
        )

    async def index_document(self, file_path: str | Path) -> DocumentIndexResult:
        """
        Extract, chunk, embed and store one document.

        Chunks are embedded and stored concurrently. The first chunk failure
        cancels the remaining chunk work and is re-raised; chunks already
        stored stay stored.

        Args:
            file_path: Document to index

        Returns:
            DocumentIndexResult: INDEXED, or SKIPPED when no text was extracted

        Raises:
            ParsingError: Text extraction failed
            EmbeddingError: A chunk could not be embedded
            VectorStoreError: A chunk could not be stored
        """
        path = Path(file_path).resolve()
        path_str = str(path)
        title = path.stem
        source = path.suffix.lower().lstrip(".")

        text = await self._parsing_task.aparse(path_str)
        if not text.strip():
            skipped = DocumentIndexResult(
                path=path_str,
                title=title,
                source=source,
                status=IndexStatus.SKIPPED,
            )
            logger.warning(
                f"{__name__}:index_document - No text extracted, skipping",
                extra=document_log_context(skipped),
            )
            return skipped

        chunks = [(chunk, compute_content_hash(chunk)) for chunk in self._chunking_task.iter_chunks(text)]

        duplicate_count = 0
        if self._settings.skip_duplicate_chunks:
            stored_hashes = await self._vector_store.get_content_hashes(path_str)
            fresh: list[tuple[str, str]] = []
            seen: set[str] = set()
            for chunk, content_hash in chunks:
                if content_hash in stored_hashes or content_hash in seen:
                    duplicate_count += 1
                    continue
                seen.add(content_hash)
                fresh.append((chunk, content_hash))
            chunks = fresh

        async def store_chunk(chunk: str, content_hash: str) -> bool:
            embedding = await self._embedding_task.embed_text(chunk)
            return await self._vector_store.add_chunk(
                ChunkRecord(
                    content=chunk,
                    embedding=embedding,
                    title=title,
                    source=source,
                    path=path_str,
                    content_hash=content_hash,
                )
            )

        tasks = [asyncio.create_task(store_chunk(chunk, content_hash)) for chunk, content_hash in chunks]
        try:
            stored = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        chunk_count = sum(1 for was_stored in stored if was_stored)
        duplicate_count += len(stored) - chunk_count

        result = DocumentIndexResult(
            path=path_str,
            title=title,
            source=source,
            status=IndexStatus.INDEXED,
            chunk_count=chunk_count,
            duplicate_count=duplicate_count,
        )
        logger.info(f"{__name__}:index_document - Indexed {title}", extra=document_log_context(result))
        return result

    async def index_folder(self, folder: str | Path | None = None) -> BatchIndexResult:
        """
        Index every eligible document in a folder.

        Documents run concurrently, at most max_concurrent_documents at a
        time, and are reported in listing order. A failed document is
        reported with status FAILED unless fail_fast is set, in which case
        the first failure cancels the batch and propagates.

        Args:
            folder: Folder to scan (defaults to the configured docs_dir)

        Returns:
            BatchIndexResult: Per-document results and totals

        Raises:
            ConfigurationError: If the folder does not exist
            DocSearchException: First document failure when fail_fast is set
        """
        start_time = time.perf_counter()
        folder_path = Path(folder or self._settings.docs_dir).resolve()
        documents = self.list_documents(folder_path)

        logger.info(
            f"{__name__}:index_folder - Indexing {len(documents)} documents",
            extra={"folder": str(folder_path)},
        )

        semaphore = asyncio.Semaphore(self._settings.max_concurrent_documents)

        async def run_one(path: Path) -> DocumentIndexResult:
            async with semaphore:
                try:
                    return await self.index_document(path)
                except DocSearchException as e:
                    if self._settings.fail_fast:
                        raise
                    log_exception_with_context(
                        logger,
                        f"{__name__}:index_folder - Failed to index {path.name}",
                        e,
                        path=str(path),
                    )
                    return DocumentIndexResult(
                        path=str(path),
                        title=path.stem,
                        source=path.suffix.lower().lstrip("."),
                        status=IndexStatus.FAILED,
                        error=str(e),
                    )

        tasks = [asyncio.create_task(run_one(path)) for path in documents]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        batch = BatchIndexResult(
            folder=str(folder_path),
            documents=list(results),
            processing_time_ms=elapsed_ms,
        )
        logger.info(f"{__name__}:index_folder - Completed", extra=batch_log_context(batch))
        return batch
