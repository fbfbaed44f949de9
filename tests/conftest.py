"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic embeddings, in-memory vector store, ingestion settings, temp dirs
Dependencies: pytest, langchain_core, numpy
System role: Test infrastructure and fixture management
"""

import shutil
import tempfile
from pathlib import Path

import pytest
from langchain_core.embeddings import Embeddings

from docsearch.boundary.vdb import InMemoryVectorStore
from docsearch.configs import get_settings
from docsearch.configs.ingestion import IngestionSettings
from docsearch.core.document_processing.tasks import EmbeddingTask

DIMENSION = 1536

# One embedding dimension per keyword; texts without any keyword embed to the
# zero vector and match nothing.
TOPICS = ("leave", "salary", "security", "travel", "holiday", "laptop")


class TopicEmbeddings(Embeddings):
    """
    Deterministic keyword embeddings.

    Texts mentioning the same single topic have cosine similarity 1.0;
    texts with disjoint topics score 0.0.
    """

    def _vector(self, text: str) -> list[float]:
        lowered = text.lower()
        vector = [0.0] * DIMENSION
        for position, topic in enumerate(TOPICS):
            if topic in lowered:
                vector[position] = 1.0
        return vector

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._vector(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._vector(text)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Re-read settings for every test so env overrides do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def topic_embeddings() -> TopicEmbeddings:
    return TopicEmbeddings()


@pytest.fixture
def embedding_task(topic_embeddings: TopicEmbeddings) -> EmbeddingTask:
    """Embedding gateway over the keyword embeddings."""
    return EmbeddingTask(embeddings=topic_embeddings, dimension=DIMENSION)


@pytest.fixture
def memory_store() -> InMemoryVectorStore:
    return InMemoryVectorStore(dimension=DIMENSION)


@pytest.fixture
def temp_dir():
    """
    Create a temporary directory for test files.

    Yields:
        Path: Path to temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="docsearch_test_"))
    yield temp_path

    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def ingestion_settings(temp_dir: Path) -> IngestionSettings:
    """Small chunk window over the temp folder, text files allowed."""
    return IngestionSettings(
        docs_dir=str(temp_dir),
        allowed_extensions=[".pdf", ".txt"],
        chunk_size=200,
        chunk_overlap=50,
        max_concurrent_documents=2,
    )
