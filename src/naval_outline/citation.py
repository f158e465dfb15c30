"""Citation labels for SECNAV M-5216.5 outline paragraphs.

Every consumer (UI badge, validator, DOCX/PDF layout) numbers paragraphs
through this module, so there is exactly one counting rule.

Label styles cycle every four levels:
  level 1, 5: numeral + period        1.   2.   3.
  level 2, 6: letter + period         a.   b.   c.
  level 3, 7: parenthesized numeral   (1)  (2)  (3)
  level 4, 8: parenthesized letter    (a)  (b)  (c)

Levels 5-8 reuse the text of levels 1-4; the numeral/letter is underlined
at render time (see ``is_underlined_level``).

Four-digit chapter numbering (MCO 5215.1K para 34) turns level 1 into
``{chapter}{count:03d}.`` (1001., 1002.) and shifts levels 2-8 one style
position, so level 2 reads "1.", level 3 "a.", level 4 "(1)", and so on.

Counting rule: a paragraph's count is the number of same-level paragraphs
from the start of its scope (just after the nearest preceding shallower
paragraph) up to and including itself. Blank paragraphs count like any
other; callers that omit blank paragraphs from output drop them before
numbering.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from naval_outline.outline_types import MAX_LEVEL, MIN_LEVEL, ParagraphNode

# ---------------------------------------------------------------------------
# Label styles
# ---------------------------------------------------------------------------

STYLE_NUMERIC_PERIOD = "numeric_period"
STYLE_ALPHA_PERIOD = "alpha_period"
STYLE_NUMERIC_PAREN = "numeric_paren"
STYLE_ALPHA_PAREN = "alpha_paren"
STYLE_CHAPTER = "chapter"

_STYLE_CYCLE: tuple[str, ...] = (
    STYLE_NUMERIC_PERIOD,
    STYLE_ALPHA_PERIOD,
    STYLE_NUMERIC_PAREN,
    STYLE_ALPHA_PAREN,
)

# First style position drawn with an underlined numeral/letter
_UNDERLINE_FROM = 5

_CITATION_PUNCT_RE = re.compile(r"[.()]")


def is_valid_level(level: int) -> bool:
    return MIN_LEVEL <= level <= MAX_LEVEL


def style_position(level: int, *, four_digit: bool = False) -> int:
    """Position of ``level`` in the 8-step style cycle (0 = chapter form).

    Standard numbering maps level L to position L. Four-digit numbering
    gives level 1 the chapter form (0) and level L >= 2 position L - 1.
    Returns -1 for an out-of-range level.
    """
    if not is_valid_level(level):
        return -1
    if four_digit:
        return level - 1
    return level


def style_for_level(level: int, *, four_digit: bool = False) -> str | None:
    pos = style_position(level, four_digit=four_digit)
    if pos < 0:
        return None
    if pos == 0:
        return STYLE_CHAPTER
    return _STYLE_CYCLE[(pos - 1) % len(_STYLE_CYCLE)]


def is_underlined_level(level: int, *, four_digit: bool = False) -> bool:
    """True when the level's numeral/letter is drawn underlined."""
    return style_position(level, four_digit=four_digit) >= _UNDERLINE_FROM


# ---------------------------------------------------------------------------
# Ordinal utilities
# ---------------------------------------------------------------------------

def number_to_letter(n: int) -> str:
    """Excel-style lowercase letters: 1=a, 26=z, 27=aa, 28=ab, 703=aaa.

    Returns "" for n < 1.
    """
    letters: list[str] = []
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters.append(chr(ord("a") + rem))
    return "".join(reversed(letters))


def letter_to_number(label: str) -> int:
    """Inverse of ``number_to_letter``; -1 for anything that is not a-z."""
    label = label.strip().lower()
    if not label or not all("a" <= ch <= "z" for ch in label):
        return -1
    n = 0
    for ch in label:
        n = n * 26 + (ord(ch) - ord("a") + 1)
    return n


def format_label(style: str, count: int, *, chapter_number: int = 1) -> str:
    """Render ``count`` in the given style ("" for an unknown style)."""
    count = max(count, 1)
    if style == STYLE_NUMERIC_PERIOD:
        return f"{count}."
    if style == STYLE_ALPHA_PERIOD:
        return f"{number_to_letter(count)}."
    if style == STYLE_NUMERIC_PAREN:
        return f"({count})"
    if style == STYLE_ALPHA_PAREN:
        return f"({number_to_letter(count)})"
    if style == STYLE_CHAPTER:
        return f"{chapter_number}{count:03d}."
    return ""


def label_for(
    level: int,
    count: int,
    *,
    four_digit: bool = False,
    chapter_number: int = 1,
) -> str:
    """Label text for the ``count``-th paragraph at ``level``."""
    style = style_for_level(level, four_digit=four_digit)
    if style is None:
        return ""
    return format_label(style, count, chapter_number=chapter_number)


def strip_citation(citation: str) -> str:
    """Drop ``.``, ``(`` and ``)``: "(1)" -> "1", "1001." -> "1001"."""
    return _CITATION_PUNCT_RE.sub("", citation)


def spacing_after(citation: str) -> str:
    """Two spaces after a period form, one after a parenthetical form."""
    if citation.endswith("."):
        return "  "
    if citation.endswith(")"):
        return " "
    return ""


# ---------------------------------------------------------------------------
# Scope / sibling counting
# ---------------------------------------------------------------------------

def _in_range(paragraphs: Sequence[ParagraphNode], index: int) -> bool:
    return 0 <= index < len(paragraphs)


def scope_start(paragraphs: Sequence[ParagraphNode], index: int) -> int:
    """First position of the sibling scope containing ``paragraphs[index]``."""
    level = paragraphs[index].level
    for i in range(index - 1, -1, -1):
        if paragraphs[i].level < level:
            return i + 1
    return 0


def parent_index(paragraphs: Sequence[ParagraphNode], index: int) -> int | None:
    """Nearest preceding paragraph with a shallower level, or None."""
    start = scope_start(paragraphs, index)
    return start - 1 if start > 0 else None


def ancestor_indices(paragraphs: Sequence[ParagraphNode], index: int) -> list[int]:
    """Ancestor chain of ``paragraphs[index]``, outermost first.

    Each ancestor is the nearest preceding paragraph shallower than the
    previous link of the chain, so skipped levels simply do not appear.
    """
    chain: list[int] = []
    floor = paragraphs[index].level
    for i in range(index - 1, -1, -1):
        lvl = paragraphs[i].level
        if lvl < floor:
            chain.append(i)
            floor = lvl
            if floor <= MIN_LEVEL:
                break
    chain.reverse()
    return chain


def sibling_count(paragraphs: Sequence[ParagraphNode], index: int) -> int:
    """1-based position of ``paragraphs[index]`` among its siblings."""
    level = paragraphs[index].level
    start = scope_start(paragraphs, index)
    count = sum(1 for i in range(start, index + 1) if paragraphs[i].level == level)
    return count if count > 0 else 1


# ---------------------------------------------------------------------------
# Citations
# ---------------------------------------------------------------------------

def citation_for(
    paragraphs: Sequence[ParagraphNode],
    index: int,
    *,
    four_digit: bool = False,
    chapter_number: int = 1,
) -> str:
    """Single-level citation ("1.", "a.", "(1)", "(a)", "1001.").

    Never raises: an out-of-range index or level yields "".
    """
    if not _in_range(paragraphs, index):
        return ""
    level = paragraphs[index].level
    if not is_valid_level(level):
        return ""
    return label_for(
        level,
        sibling_count(paragraphs, index),
        four_digit=four_digit,
        chapter_number=chapter_number,
    )


def citation_path(
    paragraphs: Sequence[ParagraphNode],
    index: int,
    *,
    four_digit: bool = False,
    chapter_number: int = 1,
) -> str:
    """Full address of a paragraph for display, e.g. "1a(1)" or "3b.".

    Ancestor segments lose their punctuation; the paragraph's own label is
    kept whole. In four-digit mode the chapter segment is joined to the
    rest with a period ("1001.1a.").
    """
    own = citation_for(
        paragraphs, index, four_digit=four_digit, chapter_number=chapter_number,
    )
    if not own or paragraphs[index].level == MIN_LEVEL:
        return own

    segments: list[str] = []
    chapter_segment = ""
    for i in ancestor_indices(paragraphs, index):
        seg = strip_citation(citation_for(
            paragraphs, i, four_digit=four_digit, chapter_number=chapter_number,
        ))
        if four_digit and paragraphs[i].level == MIN_LEVEL:
            chapter_segment = seg
        else:
            segments.append(seg)
    segments.append(own)

    path = "".join(segments)
    if chapter_segment:
        return f"{chapter_segment}.{path}"
    return path


def all_citations(
    paragraphs: Sequence[ParagraphNode],
    *,
    four_digit: bool = False,
    chapter_number: int = 1,
) -> list[str]:
    """Citations for every paragraph in one left-to-right pass.

    Same result as calling ``citation_for`` per index: a paragraph at level
    M restarts the counters of every level deeper than M.
    """
    counts = [0] * (MAX_LEVEL + 1)
    out: list[str] = []
    for p in paragraphs:
        lvl = p.level
        for k in range(max(lvl + 1, 0), MAX_LEVEL + 1):
            counts[k] = 0
        if is_valid_level(lvl):
            counts[lvl] += 1
            out.append(label_for(
                lvl, counts[lvl], four_digit=four_digit, chapter_number=chapter_number,
            ))
        else:
            out.append("")
    return out


def ui_badge(
    paragraphs: Sequence[ParagraphNode],
    index: int,
    *,
    four_digit: bool = False,
    chapter_number: int = 1,
) -> str:
    """Editor badge text: "Level 2 • a."."""
    if not _in_range(paragraphs, index):
        return ""
    citation = citation_for(
        paragraphs, index, four_digit=four_digit, chapter_number=chapter_number,
    )
    return f"Level {paragraphs[index].level} • {citation}"
