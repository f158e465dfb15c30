"""Tests for naval_outline.io_utils: JSON documents and render output."""
from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from naval_outline.io_utils import (
    DocumentFormatError,
    document_from_obj,
    load_document,
    load_json,
    load_jsonl,
    paragraphs_from_records,
    rendered_to_dict,
    save_document,
    save_json,
    save_jsonl,
)
from naval_outline.outline_types import ParagraphNode
from naval_outline.renderer import render_document
from naval_outline.settings import DocumentSettings, SettingsError


class TestJsonHelpers:
    def test_save_and_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "out.json"
        save_json({"b": 1, "a": [1, 2]}, path)
        assert load_json(path) == {"a": [1, 2], "b": 1}
        assert path.read_bytes().startswith(b'{\n  "a"')

    def test_jsonl(self, tmp_path: Path) -> None:
        path = tmp_path / "rows.jsonl"
        save_jsonl([{"id": 1}, {"id": 2}], path)
        path.write_bytes(path.read_bytes() + b"\n\n")
        assert load_jsonl(path) == [{"id": 1}, {"id": 2}]


class TestParagraphRecords:
    def test_camel_case_keys(self) -> None:
        nodes = paragraphs_from_records([
            {"id": 1, "level": 1, "content": "Situation.", "title": "Situation", "isMandatory": True},
            {"id": 2, "level": 2, "content": None},
        ])
        assert nodes[0] == ParagraphNode(
            id=1, level=1, content="Situation.", title="Situation", is_mandatory=True,
        )
        assert nodes[1].content == ""
        assert nodes[1].title is None

    def test_node_to_dict(self) -> None:
        node = ParagraphNode(id=4, level=2, content="x", title="T", is_mandatory=True)
        assert node.to_dict() == {
            "id": 4, "level": 2, "content": "x", "title": "T", "isMandatory": True,
        }
        assert ParagraphNode.from_dict(node.to_dict()) == node

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(DocumentFormatError, match="duplicate"):
            paragraphs_from_records([{"id": 1, "level": 1}, {"id": 1, "level": 2}])

    def test_missing_level_rejected(self) -> None:
        with pytest.raises(DocumentFormatError, match="#0"):
            paragraphs_from_records([{"id": 1}])

    def test_not_a_list(self) -> None:
        with pytest.raises(DocumentFormatError):
            paragraphs_from_records({"id": 1})

    def test_document_shapes(self) -> None:
        paragraphs, settings = document_from_obj([{"id": 1, "level": 1}])
        assert len(paragraphs) == 1
        assert settings == DocumentSettings()

        paragraphs, settings = document_from_obj({
            "paragraphs": [{"id": 1, "level": 1}],
            "settings": {"font": "courier"},
        })
        assert settings.font == "courier"

        with pytest.raises(DocumentFormatError):
            document_from_obj({"items": []})

    def test_bad_settings_propagate(self) -> None:
        with pytest.raises(SettingsError):
            document_from_obj({"paragraphs": [], "settings": {"chapterNumber": 12}})

    @pytest.mark.parametrize("settings", [["x"], {"fourDigitNumbering": "false"}])
    def test_mistyped_settings(self, settings: object) -> None:
        with pytest.raises(SettingsError):
            document_from_obj({"paragraphs": [], "settings": settings})

    def test_non_string_title_rejected(self) -> None:
        with pytest.raises(DocumentFormatError, match="#0"):
            paragraphs_from_records([{"id": 1, "level": 1, "title": 5}])

    def test_string_mandatory_flag_rejected(self) -> None:
        with pytest.raises(DocumentFormatError, match="isMandatory"):
            paragraphs_from_records([{"id": 1, "level": 1, "isMandatory": "false"}])


class TestDocumentFiles:
    def test_round_trip(self, tmp_path: Path) -> None:
        paragraphs = (
            ParagraphNode(id=1, level=1, content="One", title="Mission", is_mandatory=True),
            ParagraphNode(id=2, level=2, content="Sub"),
        )
        settings = DocumentSettings(four_digit_numbering=True, chapter_number=2)
        path = tmp_path / "doc.json"
        save_document(paragraphs, path, settings)
        assert load_document(path) == (paragraphs, settings)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(DocumentFormatError, match="invalid JSON"):
            load_document(path)

    def test_rendered_to_dict_serializes(self) -> None:
        entries = render_document([ParagraphNode(id=1, level=1, content="x")])
        data = rendered_to_dict(entries)
        assert orjson.loads(orjson.dumps(data)) == data
        assert data[0]["citation"] == "1."
