"""Lazy text layout over a BMFont.

Three iterators are stacked on top of each other: ``TextLines`` splits the
text into lines, ``TextLine`` resolves the characters of one line to glyph
records, and ``CharPositions`` walks the pen across the lines and turns
each glyph into atlas and screen rectangles. Nothing is computed before
the consumer asks for the next item.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Union

from .errors import CharError, MissingCharacter, UnsupportedCharacter
from .records import Char, OrdinateOrientation, Rect

if TYPE_CHECKING:
    from .font import BMFont

# Largest code point that fits in a single UTF-16 code unit.
_MAX_SINGLE_UNIT = 0xFFFF


@dataclass(frozen=True)
class CharPosition:
    page_rect: Rect
    screen_rect: Rect
    page_index: int


LayoutItem = Union[CharPosition, CharError]


class TextLines:
    """Iterates over the lines of ``text`` without splitting it up front.

    Lines are separated by ``\\n``; a ``\\r`` before the separator is dropped
    and a final separator does not open an empty trailing line.
    """

    def __init__(self, text: str, font: "BMFont") -> None:
        self._text = text
        self._font = font
        self._offset = 0

    def __iter__(self) -> "TextLines":
        return self

    def __next__(self) -> "TextLine":
        text = self._text
        if self._offset >= len(text):
            raise StopIteration
        end = text.find("\n", self._offset)
        if end == -1:
            end = len(text)
        line = text[self._offset:end]
        self._offset = end + 1
        if line.endswith("\r"):
            line = line[:-1]
        return TextLine(line, self._font)


class TextLine:
    """Resolves each character of a single line to its glyph record."""

    def __init__(self, line: str, font: "BMFont") -> None:
        self.text = line
        self._chars = iter(line)
        self._font = font

    def __iter__(self) -> "TextLine":
        return self

    def __next__(self) -> Union[Char, CharError]:
        character = next(self._chars)
        code_point = ord(character)
        if code_point > _MAX_SINGLE_UNIT:
            return UnsupportedCharacter(character)
        found = self._font.find_char(code_point)
        if found is None:
            return MissingCharacter(character)
        return found


class CharPositions:
    """Single-pass iterator of CharPosition / CharError items for one text.

    Errors are yielded in place of the offending character and do not stop
    the iteration; they also leave the pen where it was.
    """

    def __init__(self, text: str, font: "BMFont") -> None:
        self._font = font
        self._text_lines = TextLines(text, font)
        self._text_line = next(self._text_lines, None)
        self._x = 0
        self._y = 0
        self._prev_char_id = 0

    def __iter__(self) -> "CharPositions":
        return self

    def __next__(self) -> LayoutItem:
        resolved = self._next_char()
        if isinstance(resolved, CharError):
            return resolved
        return self._place(resolved)

    def _next_char(self) -> Union[Char, CharError]:
        while self._text_line is not None:
            resolved = next(self._text_line, None)
            if resolved is not None:
                return resolved
            self._text_line = next(self._text_lines, None)
            if self._text_line is None:
                break
            self._new_line()
        raise StopIteration

    def _new_line(self) -> None:
        self._x = 0
        if self._font.ordinate_orientation is OrdinateOrientation.TOP_TO_BOTTOM:
            self._y += self._font.line_height
        else:
            self._y -= self._font.line_height

    def _place(self, char: Char) -> CharPosition:
        font = self._font
        kerning = font.kerning_amount(self._prev_char_id, char.id)

        screen_x = self._x + char.xoffset + kerning
        if font.ordinate_orientation is OrdinateOrientation.BOTTOM_TO_TOP:
            screen_y = self._y + font.base_height - char.yoffset - char.height
        else:
            screen_y = self._y + char.yoffset

        self._x += char.xadvance + kerning
        self._prev_char_id = char.id

        return CharPosition(
            page_rect=char.page_rect,
            screen_rect=Rect(x=screen_x, y=screen_y, width=char.width, height=char.height),
            page_index=char.page_index,
        )


def iter_positions(items: Iterator[LayoutItem]) -> Iterator[CharPosition]:
    """Drop the error items of a layout, keeping the resolved positions."""
    for item in items:
        if isinstance(item, CharPosition):
            yield item
