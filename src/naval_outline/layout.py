"""Tab-stop geometry and the two layout regimes for outline paragraphs.

1 inch = 1440 twips. Each level indents 0.25" (360 twips) further:

  level | citation at | text at
  ------+-------------+--------
    1   |     0       |   360
    2   |   360       |   720
    3   |   720       |  1080
    4   |  1080       |  1440
    5   |  1440       |  1800
    6   |  1800       |  2160
    7   |  2160       |  2520
    8   |  2520       |  2880

Proportional fonts (Times New Roman) align with document tab stops.
Monospaced fonts (Courier New) cannot rely on tab geometry, so the indent
and the gap after the citation are written as literal spaces.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from naval_outline.citation import spacing_after
from naval_outline.outline_types import MAX_LEVEL, MIN_LEVEL, StyledRun

TWIPS_PER_INCH = 1440
INDENT_STEP = 360  # 0.25"
COURIER_SPACES_PER_LEVEL = 4

_PERIOD_FORM_RE = re.compile(r"^(\d+|[a-z]+)(\.)$")
_PAREN_FORM_RE = re.compile(r"^\((\d+|[a-z]+)\)$")


def _clamp_level(level: int) -> int:
    # Out-of-range levels lay out like level 1.
    return level if MIN_LEVEL <= level <= MAX_LEVEL else MIN_LEVEL


def citation_tab(level: int) -> int:
    """Tab position (twips) where the citation starts."""
    return (_clamp_level(level) - 1) * INDENT_STEP


def text_tab(level: int) -> int:
    """Tab position (twips) where the paragraph text starts."""
    return _clamp_level(level) * INDENT_STEP


NAVAL_TAB_STOPS: dict[int, tuple[int, int]] = {
    lvl: (citation_tab(lvl), text_tab(lvl))
    for lvl in range(MIN_LEVEL, MAX_LEVEL + 1)
}


def citation_runs(citation: str, underline: bool) -> list[StyledRun]:
    """Citation as runs; when underlined only the numeral/letter is.

    "1." -> [1 (u), "."]; "(a)" -> ["(", a (u), ")"]. A citation in
    neither form is underlined whole.
    """
    if not citation:
        return []
    if not underline:
        return [StyledRun(citation)]
    if m := _PERIOD_FORM_RE.match(citation):
        return [StyledRun(m.group(1), underline=True), StyledRun(m.group(2))]
    if m := _PAREN_FORM_RE.match(citation):
        return [
            StyledRun("("),
            StyledRun(m.group(1), underline=True),
            StyledRun(")"),
        ]
    return [StyledRun(citation, underline=True)]


# ---------------------------------------------------------------------------
# Layout strategies
# ---------------------------------------------------------------------------

class LayoutStrategy(ABC):
    """How a paragraph's citation is positioned relative to its text."""

    name: str = ""

    @abstractmethod
    def compute_runs(
        self,
        level: int,
        citation: str,
        underline: bool,
        body: list[StyledRun],
    ) -> list[StyledRun]:
        """Full run sequence: indentation, citation, separator, body."""

    @abstractmethod
    def compute_tab_stops(self, level: int) -> tuple[int, ...]:
        """Left tab stops (twips) the runs rely on."""


class TabStopLayout(LayoutStrategy):
    """Proportional fonts: hanging indent built from two tab stops.

    Level 1 starts flush left and has a single stop at the text position;
    deeper levels tab to the citation position first.
    """

    name = "tab_stop"

    def compute_runs(
        self,
        level: int,
        citation: str,
        underline: bool,
        body: list[StyledRun],
    ) -> list[StyledRun]:
        runs: list[StyledRun] = []
        if _clamp_level(level) > MIN_LEVEL:
            runs.append(StyledRun("\t"))
        runs.extend(citation_runs(citation, underline))
        runs.append(StyledRun("\t"))
        runs.extend(body)
        return runs

    def compute_tab_stops(self, level: int) -> tuple[int, ...]:
        if _clamp_level(level) == MIN_LEVEL:
            return (text_tab(level),)
        return (citation_tab(level), text_tab(level))


class FixedIndentLayout(LayoutStrategy):
    """Monospaced fonts: four spaces per level, spacing baked into the citation."""

    name = "fixed_indent"

    def compute_runs(
        self,
        level: int,
        citation: str,
        underline: bool,
        body: list[StyledRun],
    ) -> list[StyledRun]:
        runs: list[StyledRun] = []
        indent = " " * ((_clamp_level(level) - 1) * COURIER_SPACES_PER_LEVEL)
        if indent:
            runs.append(StyledRun(indent))

        cite = citation_runs(citation, underline)
        gap = spacing_after(citation)
        if cite and gap:
            last = cite[-1]
            if last.underline:
                cite.append(StyledRun(gap))
            else:
                cite[-1] = StyledRun(last.text + gap)
        runs.extend(cite)
        runs.extend(body)
        return runs

    def compute_tab_stops(self, level: int) -> tuple[int, ...]:
        return ()


TAB_STOP_LAYOUT = TabStopLayout()
FIXED_INDENT_LAYOUT = FixedIndentLayout()


def strategy_for(font: str) -> LayoutStrategy:
    """Pick the layout regime for a font key ("times"/"courier") or typeface name."""
    if font.strip().lower().startswith("courier"):
        return FIXED_INDENT_LAYOUT
    return TAB_STOP_LAYOUT
