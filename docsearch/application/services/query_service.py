"""
Query service orchestrator.

Answers a question: validate, retrieve, assemble context, generate.
The steps run strictly in sequence.

Dependencies: docsearch.core.retriever, docsearch.core.context_builder, docsearch.core.rag_query
System role: Question answering orchestration
"""

import logging

from docsearch.core.context_builder import ContextAssembler
from docsearch.core.exceptions import ValidationError
from docsearch.core.rag_query import AnswerGenerator
from docsearch.core.retriever import Retriever
from docsearch.observability.log_utils import match_log_context

logger = logging.getLogger(__name__)


class QueryService:
    """
    Question answering over indexed documents.

    Holds no per-request state; one instance serves every request.
    """

    def __init__(
        self,
        retriever: Retriever,
        assembler: ContextAssembler,
        generator: AnswerGenerator,
    ) -> None:
        self._retriever = retriever
        self._assembler = assembler
        self._generator = generator

    @staticmethod
    def validate_query(query: object) -> str:
        """
        Check the query before any collaborator is called.

        Raises:
            ValidationError: If the query is not a string or is blank
        """
        if not isinstance(query, str) or not query.strip():
            raise ValidationError("Query is required", field="query")
        return query

    async def answer(self, query: object) -> str:
        """
        Answer a natural-language question from the indexed documents.

        Args:
            query: User question; passed to the model untrimmed

        Returns:
            str: Model answer

        Raises:
            ValidationError: Blank or non-string query
            EmbeddingError: Query embedding failed
            RetrievalError: Similarity search failed
            GenerationError: Model call failed
        """
        question = self.validate_query(query)

        matches = await self._retriever.retrieve(question)
        context = self._assembler.build(matches)

        logger.info(
            f"{__name__}:answer - Context assembled",
            extra={**match_log_context(matches), "context_length": len(context)},
        )

        return await self._generator.generate(question, context)
