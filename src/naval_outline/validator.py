"""Outline-completeness check: no lone "a." without a "b.".

Paragraphs are grouped by scope key (their ancestor chain's citation
paths plus their own level). A group holding a single paragraph at level
2 or deeper is a violation. Validation is advisory; callers show the
messages and decide whether to proceed.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

from naval_outline.citation import (
    ancestor_indices,
    citation_for,
    citation_path,
    strip_citation,
)
from naval_outline.outline_types import MAX_LEVEL, MIN_LEVEL, ParagraphNode

SIBLING_MESSAGE = (
    "Paragraph {citation} requires at least one sibling paragraph at the same level."
)


def scope_key(
    paragraphs: Sequence[ParagraphNode],
    index: int,
    *,
    four_digit: bool = False,
    chapter_number: int = 1,
) -> str:
    """Grouping key shared by exactly the siblings of ``paragraphs[index]``.

    Each ancestor part carries its level: with skipped levels, "(a)" under
    "1." and "a." under "1." both strip to "1a".
    """
    parts = [
        f"{paragraphs[i].level}:" + strip_citation(citation_path(
            paragraphs, i, four_digit=four_digit, chapter_number=chapter_number,
        ))
        for i in ancestor_indices(paragraphs, index)
    ]
    return "/".join(parts) + f"_level{paragraphs[index].level}"


def find_singletons(
    paragraphs: Sequence[ParagraphNode],
    *,
    four_digit: bool = False,
    chapter_number: int = 1,
) -> list[int]:
    """Indices of sub-level paragraphs that have no sibling in their scope."""
    groups: dict[str, list[int]] = defaultdict(list)
    for i in range(len(paragraphs)):
        key = scope_key(
            paragraphs, i, four_digit=four_digit, chapter_number=chapter_number,
        )
        groups[key].append(i)

    singletons = [
        members[0]
        for members in groups.values()
        if len(members) == 1 and MIN_LEVEL < paragraphs[members[0]].level <= MAX_LEVEL
    ]
    singletons.sort()
    return singletons


def validate_numbering(
    paragraphs: Sequence[ParagraphNode],
    *,
    four_digit: bool = False,
    chapter_number: int = 1,
) -> list[str]:
    """Human-readable violation messages in document order (empty = valid)."""
    return [
        SIBLING_MESSAGE.format(citation=citation_for(
            paragraphs, i, four_digit=four_digit, chapter_number=chapter_number,
        ))
        for i in find_singletons(
            paragraphs, four_digit=four_digit, chapter_number=chapter_number,
        )
    ]


def is_well_formed(paragraphs: Sequence[ParagraphNode]) -> bool:
    return not find_singletons(paragraphs)
