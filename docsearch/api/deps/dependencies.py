"""
Dependency injection container.

Factory functions for FastAPI dependencies. Collaborators are built lazily on
first use and shared for the life of the process.

Dependencies: docsearch.configs, docsearch.application, docsearch.core, docsearch.boundary
System role: DI container for service injection
"""

from docsearch.application.services import IngestionService, QueryService
from docsearch.boundary.vdb import VectorStore
from docsearch.configs import get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._embedding_task = None
        self._vector_store = None
        self._pipeline = None
        self._retriever = None
        self._assembler = None
        self._generator = None

    @property
    def embedding_task(self):
        """Get cached embedding gateway."""
        if self._embedding_task is None:
            from docsearch.core.document_processing.tasks import EmbeddingTask

            settings = get_settings()
            api_key = settings.llm.openai_api_key
            self._embedding_task = EmbeddingTask(
                model_id=settings.vector_store.embedding_model,
                dimension=settings.vector_store.embedding_dimension,
                api_key=api_key.get_secret_value() if api_key else None,
            )
        return self._embedding_task

    @property
    def vector_store(self) -> VectorStore:
        """Get cached vector store."""
        if self._vector_store is None:
            from docsearch.boundary.vdb.vector_store_factory import get_vector_store

            self._vector_store = get_vector_store()
        return self._vector_store

    @property
    def pipeline(self):
        """Get cached document pipeline."""
        if self._pipeline is None:
            from docsearch.core.document_processing import DocumentPipeline

            self._pipeline = DocumentPipeline(
                embedding_task=self.embedding_task,
                vector_store=self.vector_store,
                settings=get_settings().ingestion,
            )
        return self._pipeline

    @property
    def retriever(self):
        """Get cached retriever."""
        if self._retriever is None:
            from docsearch.core.retriever import Retriever

            settings = get_settings()
            self._retriever = Retriever(
                embedding_task=self.embedding_task,
                vector_store=self.vector_store,
                match_threshold=settings.vector_store.match_threshold,
                match_count=settings.vector_store.match_count,
            )
        return self._retriever

    @property
    def assembler(self):
        """Get cached context assembler."""
        if self._assembler is None:
            from docsearch.core.context_builder import ContextAssembler

            self._assembler = ContextAssembler(max_chars=get_settings().llm.max_context_chars)
        return self._assembler

    @property
    def generator(self):
        """Get cached answer generator."""
        if self._generator is None:
            from docsearch.core.rag_query import AnswerGenerator

            llm = get_settings().llm
            self._generator = AnswerGenerator(
                model_id=llm.model,
                temperature=llm.temperature,
                max_tokens=llm.max_tokens,
                api_key=llm.openai_api_key.get_secret_value() if llm.openai_api_key else None,
            )
        return self._generator

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedding_task = None
        self._vector_store = None
        self._pipeline = None
        self._retriever = None
        self._assembler = None
        self._generator = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_ingestion_service() -> IngestionService:
    """
    Get ingestion service instance.

    The pipeline is resolved on first use, inside the endpoint, so setup
    failures such as a missing API key get the endpoint's error envelope.

    Returns:
        IngestionService: Service indexing the configured documents folder
    """
    return IngestionService(
        docs_dir=get_settings().ingestion.docs_dir,
        pipeline_provider=lambda: get_service_cache().pipeline,
    )


def get_query_service() -> QueryService:
    """
    Get query service instance.

    Returns:
        QueryService: Service answering questions from indexed chunks
    """
    cache = get_service_cache()
    return QueryService(
        retriever=cache.retriever,
        assembler=cache.assembler,
        generator=cache.generator,
    )


def get_vector_store_dependency() -> VectorStore:
    """Get the shared vector store."""
    return get_service_cache().vector_store
