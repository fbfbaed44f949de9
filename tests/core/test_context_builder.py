"""
Test suite for ContextAssembler.

System role: Verification of prompt context formatting
"""

import pytest

from docsearch.boundary.vdb import SimilarityMatch
from docsearch.core.context_builder import NO_CONTEXT_SENTINEL, ContextAssembler


def make_match(index: int, content: str) -> SimilarityMatch:
    return SimilarityMatch(id=index, content=content, similarity=0.9)


class TestContextAssembler:
    """Test context assembly."""

    def test_empty_matches_give_sentinel(self) -> None:
        """Should return the literal no-context sentinel."""
        assert ContextAssembler().build([]) == "No relevant context found."
        assert NO_CONTEXT_SENTINEL == "No relevant context found."

    def test_numbers_sections_in_rank_order(self) -> None:
        """Should number chunks from 1 and trim their content."""
        context = ContextAssembler().build([
            make_match(10, "  First chunk \n"),
            make_match(4, "Second chunk"),
        ])

        assert context == "Chunk 1:\nFirst chunk\n\nChunk 2:\nSecond chunk\n\n"

    def test_budget_keeps_whole_sections(self) -> None:
        """Should stop before a section that does not fit."""
        section = "Chunk 1:\naaaa\n\n"
        assembler = ContextAssembler(max_chars=len(section) + 5)

        context = assembler.build([make_match(1, "aaaa"), make_match(2, "bbbb")])

        assert context == section

    def test_budget_truncates_oversized_first_section(self) -> None:
        """Should cut a first section longer than the whole budget."""
        assembler = ContextAssembler(max_chars=20)

        context = assembler.build([make_match(1, "x" * 100)])

        assert len(context) == 20
        assert context.startswith("Chunk 1:\nxxx")

    def test_zero_budget_disables_cap(self) -> None:
        """Should treat 0 as no limit."""
        matches = [make_match(i, "y" * 50) for i in range(1, 6)]

        assert ContextAssembler(max_chars=0).build(matches) == ContextAssembler().build(matches)

    def test_negative_budget_rejected(self) -> None:
        with pytest.raises(ValueError):
            ContextAssembler(max_chars=-1)
