"""Paragraph rendering: citation + title + body -> styled runs and tab stops.

``render_paragraph`` handles one paragraph given its citation;
``render_document`` numbers and renders a whole outline in one pass, which
is what the DOCX/PDF assemblers consume.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from naval_outline.citation import all_citations, is_underlined_level
from naval_outline.layout import LayoutStrategy, strategy_for
from naval_outline.markup import parse_inline_markup
from naval_outline.outline_types import ParagraphNode, RenderedParagraph, StyledRun
from naval_outline.settings import DocumentSettings

# Separator between a section title (or an empty paragraph) and its body
TITLE_SEPARATOR = ".  "


@dataclass(frozen=True, slots=True)
class RenderedEntry:
    """One rendered paragraph of a document, keyed back to its node."""
    paragraph_id: int
    level: int
    citation: str
    rendered: RenderedParagraph

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.paragraph_id,
            "level": self.level,
            "citation": self.citation,
            **self.rendered.to_dict(),
        }


def body_runs(node: ParagraphNode) -> list[StyledRun]:
    """Title (bold + underlined, then ".  ") followed by the parsed content."""
    runs: list[StyledRun] = []
    if node.title:
        runs.append(StyledRun(node.title, bold=True, underline=True))
        runs.append(StyledRun(TITLE_SEPARATOR))
    elif node.is_blank:
        runs.append(StyledRun(TITLE_SEPARATOR))
    if not node.is_blank:
        runs.extend(parse_inline_markup(node.content))
    return runs


def render_paragraph(
    node: ParagraphNode,
    citation: str,
    font: str = "times",
    *,
    underline_citation: bool | None = None,
    strategy: LayoutStrategy | None = None,
) -> RenderedParagraph:
    """Layout instructions for one paragraph.

    ``underline_citation`` defaults to the standard rule (levels 5-8);
    four-digit documents pass the shifted rule explicitly.
    """
    if underline_citation is None:
        underline_citation = is_underlined_level(node.level)
    layout = strategy or strategy_for(font)
    runs = layout.compute_runs(node.level, citation, underline_citation, body_runs(node))
    return RenderedParagraph(
        runs=tuple(runs),
        tab_stops=layout.compute_tab_stops(node.level),
    )


def render_document(
    paragraphs: Sequence[ParagraphNode],
    settings: DocumentSettings | None = None,
    *,
    skip_empty: bool = False,
) -> list[RenderedEntry]:
    """Number and render every paragraph, top to bottom.

    With ``skip_empty`` paragraphs lacking both content and title are
    dropped before numbering, so printed citations stay sequential.
    """
    settings = settings or DocumentSettings()
    if skip_empty:
        paragraphs = [p for p in paragraphs if not p.is_blank or p.title]

    layout = strategy_for(settings.font)
    four_digit = settings.four_digit_numbering
    citations = all_citations(
        paragraphs, four_digit=four_digit, chapter_number=settings.chapter_number,
    )
    return [
        RenderedEntry(
            paragraph_id=p.id,
            level=p.level,
            citation=citation,
            rendered=render_paragraph(
                p,
                citation,
                underline_citation=is_underlined_level(p.level, four_digit=four_digit),
                strategy=layout,
            ),
        )
        for p, citation in zip(paragraphs, citations, strict=True)
    ]


def plain_text(rendered: RenderedParagraph) -> str:
    """Run text joined, tabs kept; used for previews and the CLI."""
    return rendered.text
