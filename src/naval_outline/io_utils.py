"""JSON / JSONL I/O for outline documents and render output.

Documents on disk are either a bare list of paragraph records or an object
``{"paragraphs": [...], "settings": {...}}``, using the UI's camelCase keys.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import orjson

from naval_outline.outline_types import ParagraphNode
from naval_outline.renderer import RenderedEntry
from naval_outline.settings import DocumentSettings

log = logging.getLogger(__name__)


class DocumentFormatError(ValueError):
    """Raised when a JSON document does not describe an outline."""


def load_json(path: Path) -> Any:
    return orjson.loads(path.read_bytes())


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON with sorted keys (2-space indent when pretty)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    opts = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS if pretty else orjson.OPT_SORT_KEYS
    path.write_bytes(orjson.dumps(obj, option=opts))


def load_jsonl(path: Path) -> list[dict[str, Any]]:
    """Load a JSON Lines file (one JSON object per line). Blank lines skipped."""
    records: list[dict[str, Any]] = []
    for line in path.read_bytes().split(b"\n"):
        line = line.strip()
        if line:
            records.append(orjson.loads(line))
    return records


def save_jsonl(records: list[dict[str, Any]], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [orjson.dumps(r, option=orjson.OPT_SORT_KEYS) for r in records]
    path.write_bytes(b"\n".join(lines) + b"\n" if lines else b"")


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

def paragraphs_from_records(records: Any) -> tuple[ParagraphNode, ...]:
    """Build ParagraphNodes from wire records, checking ids are unique."""
    if not isinstance(records, list):
        raise DocumentFormatError(
            f"paragraphs must be a list, got {type(records).__name__}"
        )
    nodes: list[ParagraphNode] = []
    seen: set[int] = set()
    for pos, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise DocumentFormatError(f"paragraph #{pos} is not an object")
        try:
            node = ParagraphNode.from_dict(rec)
        except (KeyError, TypeError, ValueError) as exc:
            raise DocumentFormatError(f"paragraph #{pos} is malformed: {exc}") from exc
        if node.id in seen:
            raise DocumentFormatError(f"duplicate paragraph id {node.id}")
        seen.add(node.id)
        nodes.append(node)
    return tuple(nodes)


def document_from_obj(obj: Any) -> tuple[tuple[ParagraphNode, ...], DocumentSettings]:
    if isinstance(obj, list):
        return paragraphs_from_records(obj), DocumentSettings()
    if isinstance(obj, dict) and "paragraphs" in obj:
        settings = DocumentSettings.from_dict(obj.get("settings"))
        return paragraphs_from_records(obj["paragraphs"]), settings
    raise DocumentFormatError(
        "expected a list of paragraphs or an object with a 'paragraphs' key"
    )


def load_document(path: Path) -> tuple[tuple[ParagraphNode, ...], DocumentSettings]:
    """Read paragraphs and settings from a JSON document file."""
    try:
        obj = load_json(path)
    except orjson.JSONDecodeError as exc:
        raise DocumentFormatError(f"{path}: invalid JSON: {exc}") from exc
    paragraphs, settings = document_from_obj(obj)
    log.debug("Loaded %d paragraphs from %s", len(paragraphs), path)
    return paragraphs, settings


def save_document(
    paragraphs: Sequence[ParagraphNode],
    path: Path,
    settings: DocumentSettings | None = None,
) -> None:
    obj: dict[str, Any] = {"paragraphs": [p.to_dict() for p in paragraphs]}
    if settings is not None:
        obj["settings"] = settings.to_dict()
    save_json(obj, path)


def rendered_to_dict(entries: Sequence[RenderedEntry]) -> list[dict[str, Any]]:
    return [e.to_dict() for e in entries]
