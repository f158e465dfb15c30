"""Tests for naval_outline.renderer: paragraph and document rendering."""
from __future__ import annotations

from naval_outline.outline_types import ParagraphNode, StyledRun
from naval_outline.renderer import (
    RenderedEntry,
    body_runs,
    plain_text,
    render_document,
    render_paragraph,
)
from naval_outline.settings import DocumentSettings


def p(id: int, level: int, content: str = "text", title: str | None = None) -> ParagraphNode:
    return ParagraphNode(id=id, level=level, content=content, title=title)


class TestBodyRuns:
    def test_content_only(self) -> None:
        assert body_runs(p(1, 1, "Hello.")) == [StyledRun("Hello.")]

    def test_title_then_content(self) -> None:
        assert body_runs(p(1, 1, "Seize the objective.", title="Mission")) == [
            StyledRun("Mission", bold=True, underline=True),
            StyledRun(".  "),
            StyledRun("Seize the objective."),
        ]

    def test_title_without_content(self) -> None:
        assert body_runs(p(1, 1, "", title="Situation")) == [
            StyledRun("Situation", bold=True, underline=True),
            StyledRun(".  "),
        ]

    def test_nothing_at_all(self) -> None:
        assert body_runs(p(1, 1, "   ")) == [StyledRun(".  ")]


class TestRenderParagraph:
    def test_times_level_one(self) -> None:
        out = render_paragraph(p(1, 1, "Hello."), "1.", "times")
        assert out.runs == (StyledRun("1."), StyledRun("\t"), StyledRun("Hello."))
        assert out.tab_stops == (360,)

    def test_times_level_three(self) -> None:
        out = render_paragraph(p(3, 3, "Deep."), "(2)", "times")
        assert plain_text(out) == "\t(2)\tDeep."
        assert out.tab_stops == (720, 1080)

    def test_level_six_underlines_letter_only(self) -> None:
        out = render_paragraph(p(6, 6, "x"), "b.", "times")
        assert out.runs[1] == StyledRun("b", underline=True)
        assert out.runs[2] == StyledRun(".")

    def test_underline_override(self) -> None:
        out = render_paragraph(p(5, 5, "x"), "(a)", "times", underline_citation=False)
        assert out.runs[1] == StyledRun("(a)")

    def test_courier(self) -> None:
        out = render_paragraph(p(2, 2, "Sub."), "a.", "courier")
        assert out.tab_stops == ()
        assert plain_text(out) == "    a.  Sub."

    def test_inline_markup_in_body(self) -> None:
        out = render_paragraph(p(1, 1, "Read <u>this</u>."), "1.", "times")
        assert out.runs[2:] == (
            StyledRun("Read "),
            StyledRun("this", underline=True),
            StyledRun("."),
        )

    def test_to_dict(self) -> None:
        out = render_paragraph(p(1, 5, "x"), "1.", "times")
        d = out.to_dict()
        assert d["tabStops"] == [1440, 1800]
        assert d["runs"][1] == {"text": "1", "underline": True}


class TestRenderDocument:
    def test_smeac_citations(self) -> None:
        levels = [1, 2, 2, 1, 1, 2, 3, 3, 2, 1, 1]
        paragraphs = [p(i + 1, lvl) for i, lvl in enumerate(levels)]
        entries = render_document(paragraphs)
        assert [e.citation for e in entries] == [
            "1.", "a.", "b.", "2.", "3.", "a.", "(1)", "(2)", "b.", "4.", "5.",
        ]
        assert all(isinstance(e, RenderedEntry) for e in entries)

    def test_skip_empty_renumbers(self) -> None:
        paragraphs = [p(1, 1, "One"), p(2, 1, ""), p(3, 1, "Three"), p(4, 1, "", title="Mission")]
        kept = render_document(paragraphs, skip_empty=True)
        assert [(e.paragraph_id, e.citation) for e in kept] == [(1, "1."), (3, "2."), (4, "3.")]

        everything = render_document(paragraphs)
        assert [e.citation for e in everything] == ["1.", "2.", "3.", "4."]

    def test_courier_document_has_no_tab_stops(self) -> None:
        paragraphs = [p(1, 1), p(2, 2), p(3, 2)]
        entries = render_document(paragraphs, DocumentSettings(font="courier"))
        assert all(e.rendered.tab_stops == () for e in entries)

    def test_four_digit_document(self) -> None:
        paragraphs = [p(i + 1, lvl) for i, lvl in enumerate([1, 2, 3, 4, 5, 6])]
        settings = DocumentSettings(four_digit_numbering=True, chapter_number=4)
        entries = render_document(paragraphs, settings)
        assert [e.citation for e in entries] == ["4001.", "1.", "a.", "(1)", "(a)", "1."]
        # level 5 carries the level-4 style: not underlined
        assert entries[4].rendered.runs[1] == StyledRun("(a)")
        # level 6 carries the level-5 style: numeral underlined
        assert entries[5].rendered.runs[1] == StyledRun("1", underline=True)

    def test_entry_to_dict(self) -> None:
        entries = render_document([p(7, 1, "Only")])
        assert entries[0].to_dict() == {
            "id": 7,
            "level": 1,
            "citation": "1.",
            "runs": [{"text": "1."}, {"text": "\t"}, {"text": "Only"}],
            "tabStops": [360],
        }
