"""
Document parsing task using LangChain document loaders.

Extracts raw text from PDF (PyPDFLoader) and plain-text files (TextLoader).

Dependencies: langchain_community.document_loaders
System role: First stage of document ingestion pipeline
"""

import asyncio
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader, TextLoader
from langchain_core.documents import Document

from docsearch.core.exceptions import ParsingError


class ParsingTask:
    """Extract the text of a local document."""

    SUPPORTED_SUFFIXES = (".pdf", ".txt", ".md")

    def parse(self, file_path: str) -> str:
        """
        Extract document text.

        Pages are joined with newlines; whitespace is left untouched for the
        chunker to normalize.

        Args:
            file_path: Path to the document

        Returns:
            str: Extracted text (possibly empty)

        Raises:
            ParsingError: When the file is missing, unsupported or unreadable
        """
        path = Path(file_path)
        suffix = path.suffix.lower()

        if not path.exists():
            raise ParsingError(f"File not found: {file_path}", document_path=file_path)

        if suffix not in self.SUPPORTED_SUFFIXES:
            raise ParsingError(
                f"Unsupported file format: {path.suffix}",
                document_path=file_path,
                file_type=suffix.lstrip("."),
            )

        try:
            documents = self._load(path, suffix)
        except Exception as e:
            raise ParsingError(
                f"Failed to extract text: {e}",
                document_path=file_path,
                file_type=suffix.lstrip("."),
            ) from e

        return "\n".join(doc.page_content for doc in documents)

    async def aparse(self, file_path: str) -> str:
        """Async version of parse; loaders are blocking so run them in a worker thread."""
        return await asyncio.to_thread(self.parse, file_path)

    def _load(self, path: Path, suffix: str) -> list[Document]:
        if suffix == ".pdf":
            return PyPDFLoader(str(path)).load()
        return TextLoader(str(path), encoding="utf-8").load()
