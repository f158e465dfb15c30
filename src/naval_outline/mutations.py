"""Structural edits on an outline document.

Every operation is pure: it takes a sequence of ParagraphNode and returns
a new tuple (or a Result wrapping one). Nothing here raises on well-typed
input; refusals come back as ``Err(Refusal(...))`` and leave the document
unchanged.

Nesting is positional, so these are the only operations allowed to change
structure:
  add_paragraph   : insert right after an anchor, level chosen by kind
  remove_paragraph: mandatory / last-paragraph protection + numbering check
  move_up/down    : adjacent swaps only
  update_content  : single-line content normalization
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import replace
from typing import Literal, TypeAlias

from naval_outline.citation import citation_for
from naval_outline.outline_types import (
    MAX_LEVEL,
    MIN_LEVEL,
    Err,
    Ok,
    ParagraphNode,
    Refusal,
    Result,
)
from naval_outline.validator import SIBLING_MESSAGE, find_singletons

log = logging.getLogger(__name__)

AddKind = Literal["main", "sub", "same", "up"]
ADD_KINDS: tuple[AddKind, ...] = ("main", "sub", "same", "up")

Document: TypeAlias = tuple[ParagraphNode, ...]

MANDATORY_MESSAGE = (
    "This paragraph is mandatory for the selected document type and cannot be removed."
)
CONFIRM_MESSAGE = "Removing this paragraph may create numbering issues."
MOVE_UP_MESSAGE = "A paragraph cannot move above a shallower paragraph it belongs to."
MOVE_EDGE_MESSAGE = "The paragraph is already at the edge of the document."

# NBSP, figure space, narrow NBSP, CR, LF -> plain space
_SPACE_LIKE_RE = re.compile("[\u00a0\u2007\u202f\r\n]")


def new_document() -> Document:
    """A fresh document: one empty level-1 paragraph with id 1."""
    return (ParagraphNode(id=1, level=1, content=""),)


def _index_of(paragraphs: Sequence[ParagraphNode], paragraph_id: int) -> int:
    for i, p in enumerate(paragraphs):
        if p.id == paragraph_id:
            return i
    return -1


def next_id(paragraphs: Sequence[ParagraphNode]) -> int:
    return max((p.id for p in paragraphs), default=0) + 1


def level_for_kind(kind: AddKind, anchor_level: int) -> int:
    if kind == "same":
        return anchor_level
    if kind == "sub":
        return min(anchor_level + 1, MAX_LEVEL)
    if kind == "up":
        return max(anchor_level - 1, MIN_LEVEL)
    return MIN_LEVEL


def add_paragraph(
    paragraphs: Sequence[ParagraphNode],
    kind: AddKind,
    anchor_id: int,
) -> Document:
    """Insert an empty paragraph immediately after ``anchor_id``.

    Later paragraphs are not re-parented; insertion is purely positional.
    An unknown anchor returns the document unchanged.
    """
    idx = _index_of(paragraphs, anchor_id)
    if idx < 0:
        log.debug("add_paragraph: anchor %d not found", anchor_id)
        return tuple(paragraphs)

    node = ParagraphNode(
        id=next_id(paragraphs),
        level=level_for_kind(kind, paragraphs[idx].level),
        content="",
    )
    return (*paragraphs[: idx + 1], node, *paragraphs[idx + 1 :])


def remove_paragraph(
    paragraphs: Sequence[ParagraphNode],
    paragraph_id: int,
    *,
    confirmed: bool = False,
    allow_mandatory: bool = False,
) -> Result[Document, Refusal]:
    """Remove a paragraph, subject to protection and numbering checks.

    - mandatory paragraphs are refused unless ``allow_mandatory``
      (e.g. a Cancellation section the user may drop)
    - the sole remaining paragraph is cleared instead of removed
    - a removal that introduces new numbering violations is refused with
      ``needs_confirmation`` until retried with ``confirmed=True``
    """
    idx = _index_of(paragraphs, paragraph_id)
    if idx < 0:
        return Ok(tuple(paragraphs))

    target = paragraphs[idx]
    if target.is_mandatory and not allow_mandatory:
        log.info("Refused removal of mandatory paragraph %d", paragraph_id)
        return Err(Refusal(
            kind="mandatory",
            paragraph_id=paragraph_id,
            message=MANDATORY_MESSAGE,
        ))

    if len(paragraphs) == 1:
        return Ok((replace(target, content=""),))

    remaining = (*paragraphs[:idx], *paragraphs[idx + 1 :])
    if not confirmed:
        flagged_before = {paragraphs[i].id for i in find_singletons(paragraphs)}
        introduced = tuple(
            SIBLING_MESSAGE.format(citation=citation_for(remaining, i))
            for i in find_singletons(remaining)
            if remaining[i].id not in flagged_before
        )
        if introduced:
            log.info(
                "Removal of paragraph %d needs confirmation (%d numbering issues)",
                paragraph_id, len(introduced),
            )
            return Err(Refusal(
                kind="needs_confirmation",
                paragraph_id=paragraph_id,
                message=CONFIRM_MESSAGE,
                messages=introduced,
            ))
    return Ok(remaining)


def move_up(
    paragraphs: Sequence[ParagraphNode],
    paragraph_id: int,
) -> Result[Document, Refusal]:
    """Swap with the paragraph above.

    Refused at the top of the document, and when the paragraph is deeper
    than the one above it (it would land before its own parent). This only
    checks the adjacent pair, not the whole outline.
    """
    idx = _index_of(paragraphs, paragraph_id)
    if idx < 0:
        return Ok(tuple(paragraphs))
    if idx == 0:
        return Err(Refusal("invalid_move", paragraph_id, MOVE_EDGE_MESSAGE))
    if paragraphs[idx].level > paragraphs[idx - 1].level:
        return Err(Refusal("invalid_move", paragraph_id, MOVE_UP_MESSAGE))

    out = list(paragraphs)
    out[idx - 1], out[idx] = out[idx], out[idx - 1]
    return Ok(tuple(out))


def move_down(
    paragraphs: Sequence[ParagraphNode],
    paragraph_id: int,
) -> Result[Document, Refusal]:
    """Swap with the paragraph below; refused at the end of the document."""
    idx = _index_of(paragraphs, paragraph_id)
    if idx < 0:
        return Ok(tuple(paragraphs))
    if idx >= len(paragraphs) - 1:
        return Err(Refusal("invalid_move", paragraph_id, MOVE_EDGE_MESSAGE))

    out = list(paragraphs)
    out[idx], out[idx + 1] = out[idx + 1], out[idx]
    return Ok(tuple(out))


def normalize_content(text: str) -> str:
    """Content is always one paragraph: fold special spaces and newlines."""
    return _SPACE_LIKE_RE.sub(" ", text)


def update_content(
    paragraphs: Sequence[ParagraphNode],
    paragraph_id: int,
    text: str,
) -> Document:
    cleaned = normalize_content(text)
    return tuple(
        replace(p, content=cleaned) if p.id == paragraph_id else p
        for p in paragraphs
    )
