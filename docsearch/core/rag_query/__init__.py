"""RAG query business logic.

Includes the answer prompt and the answer generator.
"""

from .answer_generator import AnswerGenerator
from .rag_prompt import RAG_PROMPT, SYSTEM_PROMPT, get_rag_prompt

__all__ = ["AnswerGenerator", "RAG_PROMPT", "SYSTEM_PROMPT", "get_rag_prompt"]
