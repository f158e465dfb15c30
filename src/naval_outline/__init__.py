"""Paragraph citation and layout engine for Naval correspondence.

  citation.py    : labels, citation paths, four-digit chapter numbering
  validator.py   : outline-completeness warnings
  layout.py      : tab-stop geometry and layout strategies (Times/Courier)
  markup.py      : inline **bold** / *italic* / <u>underline</u> runs
  renderer.py    : paragraph and document rendering
  mutations.py   : add / remove / move / update on the flat paragraph list
  outline_types.py: shared dataclasses and the Ok/Err result type
"""

from naval_outline.citation import all_citations, citation_for, citation_path, ui_badge
from naval_outline.mutations import (
    add_paragraph,
    move_down,
    move_up,
    new_document,
    remove_paragraph,
    update_content,
)
from naval_outline.outline_types import (
    Err,
    Ok,
    ParagraphNode,
    Refusal,
    RenderedParagraph,
    StyledRun,
)
from naval_outline.renderer import render_document, render_paragraph
from naval_outline.settings import DocumentSettings
from naval_outline.validator import validate_numbering

__all__ = [
    "DocumentSettings",
    "Err",
    "Ok",
    "ParagraphNode",
    "Refusal",
    "RenderedParagraph",
    "StyledRun",
    "add_paragraph",
    "all_citations",
    "citation_for",
    "citation_path",
    "move_down",
    "move_up",
    "new_document",
    "remove_paragraph",
    "render_document",
    "render_paragraph",
    "ui_badge",
    "update_content",
    "validate_numbering",
]

__version__ = "0.1.0"
