"""Tests for naval_outline.markup: inline bold/italic/underline parsing."""
from __future__ import annotations

from naval_outline.markup import parse_inline_markup, strip_inline_markup
from naval_outline.outline_types import StyledRun


class TestParseInlineMarkup:
    def test_plain_text(self) -> None:
        assert parse_inline_markup("Plain words.") == [StyledRun("Plain words.")]

    def test_empty(self) -> None:
        assert parse_inline_markup("") == []

    def test_underline(self) -> None:
        assert parse_inline_markup("See <u>reference (a)</u> now.") == [
            StyledRun("See "),
            StyledRun("reference (a)", underline=True),
            StyledRun(" now."),
        ]

    def test_bold_and_italic(self) -> None:
        assert parse_inline_markup("**Bold** and *slanted*") == [
            StyledRun("Bold", bold=True),
            StyledRun(" and "),
            StyledRun("slanted", italic=True),
        ]

    def test_multiple_underlines(self) -> None:
        runs = parse_inline_markup("<u>1</u> then <u>a</u>")
        assert [r.text for r in runs] == ["1", " then ", "a"]
        assert [r.underline for r in runs] == [True, False, True]

    def test_unmatched_tag_is_literal(self) -> None:
        assert parse_inline_markup("open <u>never closed") == [
            StyledRun("open <u>never closed"),
        ]
        assert parse_inline_markup("stray </u> close") == [StyledRun("stray </u> close")]

    def test_empty_markers_are_literal(self) -> None:
        assert parse_inline_markup("a ** b") == [StyledRun("a ** b")]
        assert parse_inline_markup("<u></u>") == [StyledRun("<u></u>")]

    def test_spaced_asterisks_are_literal(self) -> None:
        assert parse_inline_markup("5 * 3 * 2") == [StyledRun("5 * 3 * 2")]
        assert parse_inline_markup("a * b *c*") == [
            StyledRun("a * b "),
            StyledRun("c", italic=True),
        ]


class TestStripInlineMarkup:
    def test_strip(self) -> None:
        assert strip_inline_markup("**Mission**: <u>seize</u> *objective*") == (
            "Mission: seize objective"
        )
