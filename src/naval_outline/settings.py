"""Per-document rendering configuration.

The UI layer hands the engine a small settings object alongside the
paragraph list. Wire input uses the UI's camelCase keys
(``fourDigitNumbering``, ``chapterNumber``); ``from_dict`` accepts both
those and the snake_case field names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

Font = Literal["times", "courier"]

FONT_TIMES: Font = "times"
FONT_COURIER: Font = "courier"
FONTS: tuple[Font, ...] = (FONT_TIMES, FONT_COURIER)

# Chapter prefix for four-digit numbering: 1 -> 1001., 9 -> 9001.
MIN_CHAPTER = 1
MAX_CHAPTER = 9

_BODY_FONT_NAMES: dict[str, str] = {
    FONT_TIMES: "Times New Roman",
    FONT_COURIER: "Courier New",
}


class SettingsError(ValueError):
    """Raised when a settings record cannot be turned into DocumentSettings."""


def body_font_name(font: str) -> str:
    """Full typeface name the document builders expect for a font key."""
    return _BODY_FONT_NAMES.get(font, _BODY_FONT_NAMES[FONT_TIMES])


@dataclass(frozen=True, slots=True)
class DocumentSettings:
    """Rendering options for one document.

    Invariants (enforced in __post_init__):
        - font is "times" or "courier"
        - 1 <= chapter_number <= 9
    """
    font: Font = FONT_TIMES
    four_digit_numbering: bool = False
    chapter_number: int = 1

    def __post_init__(self) -> None:
        if self.font not in FONTS:
            raise SettingsError(
                f"font must be one of {FONTS}, got {self.font!r}"
            )
        if not MIN_CHAPTER <= self.chapter_number <= MAX_CHAPTER:
            raise SettingsError(
                f"chapter_number must be in [{MIN_CHAPTER}, {MAX_CHAPTER}], "
                f"got {self.chapter_number}"
            )

    @property
    def body_font(self) -> str:
        return body_font_name(self.font)

    @classmethod
    def from_dict(cls, d: dict[str, Any] | None) -> DocumentSettings:
        if d is None:
            return cls()
        if not isinstance(d, dict):
            raise SettingsError(f"settings must be an object, got {type(d).__name__}")
        font = d.get("font", d.get("bodyFont", FONT_TIMES))
        four_digit = d.get("fourDigitNumbering", d.get("four_digit_numbering", False))
        if four_digit is None:
            four_digit = False
        if not isinstance(four_digit, bool):
            raise SettingsError(
                f"four_digit_numbering must be true or false, got {four_digit!r}"
            )
        chapter = d.get("chapterNumber", d.get("chapter_number", 1))
        try:
            chapter_number = int(chapter) if chapter is not None else 1
        except (TypeError, ValueError) as exc:
            raise SettingsError(f"chapter_number is not an integer: {chapter!r}") from exc
        return cls(
            font=font,
            four_digit_numbering=four_digit,
            chapter_number=chapter_number,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "font": self.font,
            "fourDigitNumbering": self.four_digit_numbering,
            "chapterNumber": self.chapter_number,
        }
