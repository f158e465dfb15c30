"""Inline markup in paragraph content.

Supported markers (not nested):
  **bold**
  *italic*
  <u>underline</u>

A marker only counts when it is closed on the same line with non-empty
text between; anything else ("**", a lone "<u>", "</u>") stays literal.
An italic "*" must touch its text on the inside, so "5 * 3 * 2" is literal.
"""

from __future__ import annotations

import re

from naval_outline.outline_types import StyledRun

_MARKUP_RE = re.compile(r"(\*\*.+?\*\*|\*(?=\S)[^*]+?(?<=\S)\*|<u>.+?</u>)")
_UNDERLINE_RE = re.compile(r"<u>(.+?)</u>")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*((?=\S)[^*]+?(?<=\S))\*")


def parse_inline_markup(text: str) -> list[StyledRun]:
    """Split ``text`` into styled runs. Never raises; "" gives []."""
    runs: list[StyledRun] = []
    for part in _MARKUP_RE.split(text):
        if not part:
            continue
        if m := _BOLD_RE.fullmatch(part):
            runs.append(StyledRun(m.group(1), bold=True))
        elif m := _UNDERLINE_RE.fullmatch(part):
            runs.append(StyledRun(m.group(1), underline=True))
        elif m := _ITALIC_RE.fullmatch(part):
            runs.append(StyledRun(m.group(1), italic=True))
        else:
            runs.append(StyledRun(part))
    return runs


def strip_inline_markup(text: str) -> str:
    """Plain text with the markers removed (for previews and counts)."""
    return "".join(r.text for r in parse_inline_markup(text))
