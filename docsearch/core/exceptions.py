"""
Exception hierarchy for the document search application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocSearchException(Exception):
    """Base exception for all document search application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(DocSearchException):
    """Raised when a required external resource (folder, credential) is missing."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the setting or resource that is missing
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class ValidationError(DocSearchException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentProcessingError(DocSearchException):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        document_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_path: Path of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_path:
            details["document_path"] = document_path
        super().__init__(message, details)


class ParsingError(DocumentProcessingError):
    """Raised when text extraction from a document fails."""

    def __init__(
        self,
        message: str,
        document_path: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            document_path: Path of the document
            file_type: Type of file that failed parsing
            details: Additional context
        """
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, document_path, details)


class CollaboratorError(DocSearchException):
    """Raised when an external service (embedding, vector store, LLM) call fails."""

    collaborator: str = "unknown"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details.setdefault("collaborator", self.collaborator)
        super().__init__(message, details)


class EmbeddingError(CollaboratorError):
    """Raised when embedding generation fails."""

    collaborator = "embedding"


class VectorStoreError(CollaboratorError):
    """Raised when vector store operations fail."""

    collaborator = "vector_store"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (insert, match, hashes, ping)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class GenerationError(CollaboratorError):
    """Raised when the language model call fails."""

    collaborator = "generation"


class RetrievalError(DocSearchException):
    """Raised when similarity search fails during retrieval."""

    pass
