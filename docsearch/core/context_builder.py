"""
Context assembly for answer generation.

Turns ranked matches into the numbered text block handed to the language
model.

Dependencies: docsearch.boundary.vdb
System role: Prompt context formatting
"""

from docsearch.boundary.vdb import SimilarityMatch

NO_CONTEXT_SENTINEL = "No relevant context found."


class ContextAssembler:
    """
    Build the context string from similarity matches.

    Each match becomes "Chunk {i}:\\n{content}\\n\\n" in rank order. With a
    character budget, whole sections are appended while they fit; only a
    first section longer than the budget is truncated.
    """

    def __init__(self, max_chars: int | None = None) -> None:
        """
        Args:
            max_chars: Total character budget; None or 0 disables the cap
        """
        if max_chars is not None and max_chars < 0:
            raise ValueError(f"max_chars cannot be negative, got {max_chars}")
        self.max_chars = max_chars or None

    @staticmethod
    def format_section(position: int, match: SimilarityMatch) -> str:
        return f"Chunk {position}:\n{match.content.strip()}\n\n"

    def build(self, matches: list[SimilarityMatch]) -> str:
        if not matches:
            return NO_CONTEXT_SENTINEL

        sections: list[str] = []
        used = 0
        for position, match in enumerate(matches, start=1):
            section = self.format_section(position, match)
            if self.max_chars is not None and used + len(section) > self.max_chars:
                if not sections:
                    sections.append(section[: self.max_chars])
                break
            sections.append(section)
            used += len(section)

        return "".join(sections)
