"""
Answer generation with an OpenAI chat model via LangChain.

Fills the RAG prompt with the assembled context and the user's question and
returns the model's reply verbatim.

Dependencies: langchain_openai, langchain_core
System role: Language model gateway for the query path
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from docsearch.core.exceptions import ConfigurationError, GenerationError
from docsearch.core.rag_query.rag_prompt import get_rag_prompt

logger = logging.getLogger(__name__)


class AnswerGenerator:
    """Generate an answer from context and question with one chat completion."""

    def __init__(
        self,
        chat_model: BaseChatModel | None = None,
        model_id: str = "gpt-4.1-mini",
        temperature: float = 0.5,
        max_tokens: int = 500,
        api_key: str | None = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            chat_model: Pre-built chat model (a ChatOpenAI is created if None)
            model_id: OpenAI chat model name
            temperature: Sampling temperature
            max_tokens: Completion length limit
            api_key: OpenAI API key, required when chat_model is None

        Raises:
            ConfigurationError: When no model is given and no API key is configured
        """
        if chat_model is None:
            if not api_key:
                raise ConfigurationError(
                    "OpenAI API key is not configured",
                    setting="OPENAI_API_KEY",
                )
            chat_model = ChatOpenAI(
                model=model_id,
                temperature=temperature,
                max_tokens=max_tokens,
                api_key=api_key,
            )

        self._model = chat_model
        self._prompt = get_rag_prompt()
        self.model_id = model_id

    async def generate(self, question: str, context: str) -> str:
        """
        Ask the chat model to answer the question from the context.

        Args:
            question: Original user query, untrimmed
            context: Assembled context block or the no-context sentinel

        Returns:
            str: The completion text, unmodified

        Raises:
            GenerationError: If the model call fails
        """
        messages = self._prompt.format_messages(context=context, question=question)

        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:generate - {type(e).__name__}: {e}")
            raise GenerationError(
                f"Failed to generate answer: {e}",
                details={"model": self.model_id},
            ) from e

        content = response.content
        if not isinstance(content, str):
            # Content-block responses: join the text parts.
            content = "".join(
                block.get("text", "") if isinstance(block, dict) else str(block)
                for block in content
            )
        return content
