"""
Similarity retrieval over the chunk store.

Embeds a query once, searches the vector store and returns the chunks that
score strictly above the match threshold, most similar first.

Dependencies: docsearch.boundary.vdb, docsearch.core.document_processing.tasks
System role: RAG retrieval business logic
"""

import logging

from docsearch.boundary.vdb import SimilarityMatch, VectorQuery, VectorStore
from docsearch.core.document_processing.tasks import EmbeddingTask
from docsearch.core.exceptions import RetrievalError, VectorStoreError
from docsearch.observability.log_utils import log_exception_with_context, match_log_context

logger = logging.getLogger(__name__)


class Retriever:
    """Retrieval business logic."""

    def __init__(
        self,
        embedding_task: EmbeddingTask,
        vector_store: VectorStore,
        match_threshold: float = 0.5,
        match_count: int = 10,
    ) -> None:
        """
        Initialize retriever.

        Args:
            embedding_task: Gateway used to embed the query
            vector_store: Chunk store to search
            match_threshold: Exclusive lower bound on cosine similarity
            match_count: Maximum number of matches returned
        """
        if match_count < 1:
            raise ValueError(f"match_count must be at least 1, got {match_count}")

        self._embedding_task = embedding_task
        self._vector_store = vector_store
        self.match_threshold = match_threshold
        self.match_count = match_count

    async def retrieve(self, query: str) -> list[SimilarityMatch]:
        """
        Retrieve the chunks most similar to a query.

        Args:
            query: Natural-language question (already validated as non-blank)

        Returns:
            list[SimilarityMatch]: At most match_count matches, descending
            similarity; empty when nothing scores above the threshold

        Raises:
            EmbeddingError: If the query cannot be embedded
            RetrievalError: If the similarity search fails
        """
        search_text = query.replace("\n", " ")
        embedding = await self._embedding_task.embed_query(search_text)

        try:
            matches = await self._vector_store.match_documents(
                VectorQuery(
                    embedding=embedding,
                    match_threshold=self.match_threshold,
                    match_count=self.match_count,
                )
            )
        except VectorStoreError as e:
            log_exception_with_context(logger, f"{__name__}:retrieve - Similarity search failed", e)
            raise RetrievalError(
                "Similarity search failed",
                details={"cause": e.message, **e.details},
            ) from e

        ranked = self.rank_results(matches)
        logger.info(f"{__name__}:retrieve - Retrieved {len(ranked)} matches", extra=match_log_context(ranked))
        return ranked

    def rank_results(self, matches: list[SimilarityMatch]) -> list[SimilarityMatch]:
        """
        Apply the threshold, order and cap to store results.

        sorted() is stable, so equal scores keep the store's order.
        """
        kept = [match for match in matches if match.similarity > self.match_threshold]
        kept = sorted(kept, key=lambda match: match.similarity, reverse=True)
        return kept[: self.match_count]
