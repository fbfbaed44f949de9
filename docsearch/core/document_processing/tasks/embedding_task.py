"""
Embedding generation task using OpenAI embeddings via LangChain.

Generates fixed-dimension vectors for chunks and queries (1536 dimensions for
text-embedding-3-small).

Dependencies: langchain_openai, langchain_core
System role: Embedder gateway shared by ingestion and retrieval
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_openai import OpenAIEmbeddings

from docsearch.core.exceptions import ConfigurationError, EmbeddingError

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate embeddings through a LangChain embeddings client."""

    def __init__(
        self,
        embeddings: Embeddings | None = None,
        model_id: str = "text-embedding-3-small",
        dimension: int = 1536,
        api_key: str | None = None,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            embeddings: Pre-built embeddings client (an OpenAIEmbeddings is created if None)
            model_id: OpenAI embedding model ID
            dimension: Expected vector length for every embedding
            api_key: OpenAI API key, required when embeddings is None

        Raises:
            ValueError: When model_id is empty or dimension is not positive
            ConfigurationError: When no client is given and no API key is configured
        """
        if not model_id:
            raise ValueError("model_id cannot be empty")
        if dimension <= 0:
            raise ValueError(f"dimension must be positive, got {dimension}")

        if embeddings is None:
            if not api_key:
                raise ConfigurationError(
                    "OpenAI API key is not configured",
                    setting="OPENAI_API_KEY",
                )
            embeddings = OpenAIEmbeddings(model=model_id, api_key=api_key)

        self._embeddings = embeddings
        self.model_id = model_id
        self.dimension = dimension

    async def embed_text(self, text: str) -> list[float]:
        """
        Embed one chunk of document text.

        Args:
            text: Chunk content

        Returns:
            list[float]: Embedding of exactly `dimension` floats

        Raises:
            EmbeddingError: When the service fails or returns a wrong-sized vector
        """
        try:
            vector = await self._embeddings.aembed_query(text)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate embedding: {e}",
                details={"model": self.model_id, "text_length": len(text)},
            ) from e

        return self._check_dimension(vector)

    async def embed_query(self, query: str) -> list[float]:
        """Embed a search query (same model and checks as document text)."""
        return await self.embed_text(query)

    async def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """
        Embed several texts in one batched request.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One embedding per text, in input order

        Raises:
            EmbeddingError: When the service fails or any vector is wrong-sized
        """
        if not texts:
            return []

        try:
            vectors = await self._embeddings.aembed_documents(texts)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate embeddings: {e}",
                details={"model": self.model_id, "batch_size": len(texts)},
            ) from e

        if len(vectors) != len(texts):
            raise EmbeddingError(
                "Embedding service returned a different number of vectors than requested",
                details={"expected": len(texts), "received": len(vectors)},
            )
        return [self._check_dimension(vector) for vector in vectors]

    def _check_dimension(self, vector: list[float]) -> list[float]:
        if len(vector) != self.dimension:
            raise EmbeddingError(
                f"Embedding has {len(vector)} dimensions, expected {self.dimension}",
                details={"model": self.model_id},
            )
        return list(vector)
