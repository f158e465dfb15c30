"""Core types shared by every layer of the outline engine.

All dataclasses are frozen and use slots=True. A document is an ordered
sequence of ParagraphNode; nesting is never stored, it is derived from
position and level.

Type hierarchy:
  Ok[T] / Err[E]    : Strict algebraic Result type
  ParagraphNode     : One outline paragraph (id, level, content, title)
  Refusal           : Typed reason a structural mutation was not applied
  StyledRun         : A run of text with bold/italic/underline flags
  RenderedParagraph : Runs plus tab-stop positions (twips) for one paragraph
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")

MIN_LEVEL = 1
MAX_LEVEL = 8


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success case of Result[T, E].

    Usage::

        match remove_paragraph(doc, 4):
            case Ok(value=new_doc): ...
            case Err(error=refusal): print(refusal.message)
    """
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure case of Result[T, E].

    Carries the typed reason so the UI can decide between an alert and a
    confirm-to-proceed prompt.
    """
    error: E


Result: TypeAlias = "Ok[T] | Err[E]"


# ---------------------------------------------------------------------------
# ParagraphNode
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParagraphNode:
    """A single outline paragraph.

    Invariants:
        - id is unique within a document and never reused
        - level is in [1, 8] for well-formed input (the engine tolerates
          other values and yields an empty citation for them)
    """
    id: int
    level: int
    content: str = ""
    title: str | None = None
    is_mandatory: bool = False

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "level": self.level,
            "content": self.content,
        }
        if self.title is not None:
            d["title"] = self.title
        if self.is_mandatory:
            d["isMandatory"] = True
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ParagraphNode:
        """Build from a wire record (camelCase ``isMandatory`` accepted)."""
        mandatory = d.get("isMandatory", d.get("is_mandatory", False))
        if mandatory is None:
            mandatory = False
        if not isinstance(mandatory, bool):
            raise TypeError(f"isMandatory must be true or false, got {mandatory!r}")
        title = d.get("title")
        if title is not None and not isinstance(title, str):
            raise TypeError(f"title must be a string, got {type(title).__name__}")
        return cls(
            id=int(d["id"]),
            level=int(d["level"]),
            content=str(d.get("content") or ""),
            title=title or None,
            is_mandatory=mandatory,
        )


# ---------------------------------------------------------------------------
# Refusals
# ---------------------------------------------------------------------------

RefusalKind = Literal["mandatory", "needs_confirmation", "invalid_move"]


@dataclass(frozen=True, slots=True)
class Refusal:
    """Advisory, user-facing reason a mutation became a no-op.

    ``needs_confirmation`` refusals carry the validator messages that the
    caller should show before retrying with ``confirmed=True``.
    """
    kind: RefusalKind
    paragraph_id: int
    message: str
    messages: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Rendering output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StyledRun:
    """A contiguous run of text sharing one set of style flags."""
    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"text": self.text}
        if self.bold:
            d["bold"] = True
        if self.italic:
            d["italic"] = True
        if self.underline:
            d["underline"] = True
        return d


@dataclass(frozen=True, slots=True)
class RenderedParagraph:
    """Layout instructions for one paragraph.

    Tab stops are left-aligned positions in twips (1440 per inch). An empty
    tuple means the layout relies on literal spaces instead.
    """
    runs: tuple[StyledRun, ...]
    tab_stops: tuple[int, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        return "".join(r.text for r in self.runs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "runs": [r.to_dict() for r in self.runs],
            "tabStops": list(self.tab_stops),
        }
