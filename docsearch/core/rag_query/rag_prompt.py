"""
RAG answer prompt.

Defines the two-message prompt used to answer a question from retrieved
context.

Dependencies: langchain_core.prompts
System role: Prompt template for answer generation
"""

from langchain_core.prompts import ChatPromptTemplate

SYSTEM_PROMPT = (
    "You are a representative that is very helpful, "
    "Only ever answer truthfully and be as helpful as you can!"
)

RAG_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Context:
{context}

Question: {question}

Answer clearly and concisely."""),
])


def get_rag_prompt() -> ChatPromptTemplate:
    """
    Get the RAG answer prompt template.

    Returns:
        ChatPromptTemplate: Prompt with `context` and `question` variables
    """
    return RAG_PROMPT
