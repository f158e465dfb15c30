#!/usr/bin/env python3
"""Number, check, and lay out an outline document from the command line.

Commands:
  citations: single-level citation, citation path, and badge per paragraph
  validate : outline-completeness warnings (exit 1 when any are found)
  render   : runs and tab stops per paragraph, as the DOCX/PDF builders get them

Usage:
    python3 scripts/outline_tool.py citations letter.json
    python3 scripts/outline_tool.py validate letter.json
    python3 scripts/outline_tool.py render letter.json --font courier --skip-empty
    python3 scripts/outline_tool.py render orders.json --four-digit --chapter 2

Structured JSON output goes to stdout; human messages go to stderr.
"""
from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import Any

import orjson

from naval_outline.citation import citation_for, citation_path, ui_badge
from naval_outline.io_utils import DocumentFormatError, load_document, rendered_to_dict
from naval_outline.outline_types import ParagraphNode
from naval_outline.renderer import plain_text, render_document
from naval_outline.settings import FONTS, DocumentSettings, SettingsError
from naval_outline.validator import validate_numbering


def dump_json(obj: Any) -> None:
    sys.stdout.buffer.write(orjson.dumps(obj, option=orjson.OPT_INDENT_2))
    sys.stdout.buffer.write(b"\n")
    sys.stdout.flush()


def log(msg: str) -> None:
    print(msg, file=sys.stderr, flush=True)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def citations_report(
    paragraphs: Sequence[ParagraphNode],
    settings: DocumentSettings,
) -> list[dict[str, Any]]:
    kw = {
        "four_digit": settings.four_digit_numbering,
        "chapter_number": settings.chapter_number,
    }
    return [
        {
            "id": p.id,
            "level": p.level,
            "citation": citation_for(paragraphs, i, **kw),
            "path": citation_path(paragraphs, i, **kw),
            "badge": ui_badge(paragraphs, i, **kw),
        }
        for i, p in enumerate(paragraphs)
    ]


def validate_report(
    paragraphs: Sequence[ParagraphNode],
    settings: DocumentSettings,
) -> dict[str, Any]:
    violations = validate_numbering(
        paragraphs,
        four_digit=settings.four_digit_numbering,
        chapter_number=settings.chapter_number,
    )
    return {
        "paragraph_count": len(paragraphs),
        "valid": not violations,
        "violations": violations,
    }


def apply_overrides(settings: DocumentSettings, args: argparse.Namespace) -> DocumentSettings:
    changes: dict[str, Any] = {}
    if args.font:
        changes["font"] = args.font
    if args.four_digit:
        changes["four_digit_numbering"] = True
    if args.chapter is not None:
        changes["chapter_number"] = args.chapter
    return replace(settings, **changes) if changes else settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Number, check, and lay out a Naval correspondence outline."
    )
    parser.add_argument(
        "command", choices=("citations", "validate", "render"),
        help="What to compute",
    )
    parser.add_argument(
        "document", type=Path,
        help="JSON document: a paragraph list or {paragraphs, settings}",
    )
    parser.add_argument(
        "--font", choices=FONTS, default=None,
        help="Override the document's body font",
    )
    parser.add_argument(
        "--four-digit", action="store_true",
        help="Use four-digit chapter numbering (1001., 1002., ...)",
    )
    parser.add_argument(
        "--chapter", type=int, default=None,
        help="Chapter prefix for four-digit numbering (1-9)",
    )
    parser.add_argument(
        "--skip-empty", action="store_true",
        help="render: drop paragraphs with neither content nor title",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if not args.document.exists():
        log(f"ERROR: document not found at {args.document}")
        return 2

    try:
        paragraphs, settings = load_document(args.document)
        settings = apply_overrides(settings, args)
    except (DocumentFormatError, SettingsError) as exc:
        log(f"ERROR: {exc}")
        return 2

    log(f"Loaded {len(paragraphs)} paragraphs ({settings.body_font})")

    if args.command == "citations":
        dump_json(citations_report(paragraphs, settings))
        return 0

    if args.command == "validate":
        report = validate_report(paragraphs, settings)
        for msg in report["violations"]:
            log(f"  WARNING: {msg}")
        dump_json(report)
        return 0 if report["valid"] else 1

    entries = render_document(paragraphs, settings, skip_empty=args.skip_empty)
    for e in entries:
        log(plain_text(e.rendered).replace("\t", "<TAB>"))
    dump_json(rendered_to_dict(entries))
    return 0


if __name__ == "__main__":
    sys.exit(main())
