"""
Text chunking task using a fixed-size sliding window.

Splits normalized document text into overlapping fragments for independent
embedding.

Dependencies: re (stdlib)
System role: Second stage of document ingestion pipeline
"""

import re
from collections.abc import Iterator

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


class ChunkingTask:
    """Split text into overlapping fixed-size character windows."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize chunking task with window configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValueError: When the window would not advance
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if chunk_overlap < 0:
            raise ValueError(f"chunk_overlap cannot be negative, got {chunk_overlap}")
        if chunk_overlap >= chunk_size:
            raise ValueError(
                f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})"
            )

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    @property
    def stride(self) -> int:
        return self.chunk_size - self.chunk_overlap

    def iter_chunks(self, text: str) -> Iterator[str]:
        """
        Lazily yield chunks of the normalized text.

        The window starts at offset 0 and advances by chunk_size - chunk_overlap.
        Iteration ends with the first window that reaches the end of the text,
        so the last chunk may be shorter than chunk_size and no chunk is ever
        contained in the one before it.

        Args:
            text: Raw document text

        Yields:
            str: Non-blank chunk of at most chunk_size characters
        """
        clean_text = normalize_text(text)
        length = len(clean_text)

        offset = 0
        while offset < length:
            end = offset + self.chunk_size
            chunk = clean_text[offset:end]
            if chunk.strip():
                yield chunk
            if end >= length:
                break
            offset += self.stride

    def chunk(self, text: str) -> list[str]:
        """
        Split text into chunks.

        Args:
            text: Raw document text

        Returns:
            list[str]: Chunks in document order (empty for blank text)
        """
        return list(self.iter_chunks(text))
