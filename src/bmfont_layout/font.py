from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

from .layout import CharPositions
from .records import Char, KerningValue, OrdinateOrientation, Page
from .sections import ByteSource, Sections
from .sources import open_font_source
from .tokens import U32, extract_component_value


class BMFont:
    """A parsed BMFont text description.

    Construction either succeeds completely or raises a BMFontError; the
    font is never modified afterwards and can be queried from many
    threads at once.
    """

    def __init__(self, source: ByteSource, ordinate_orientation: OrdinateOrientation) -> None:
        sections = Sections.from_source(source)

        # lineHeight and base are read by position, not by key.
        components = sections.common_section.split()
        line_height = extract_component_value(_nth(components, 1), "common", "lineHeight", U32)
        base_height = extract_component_value(_nth(components, 2), "common", "base", U32)

        pages = tuple(Page.parse(line) for line in sections.page_sections)
        characters = tuple(Char.parse(line) for line in sections.char_sections)
        kerning_values = tuple(KerningValue.parse(line) for line in sections.kerning_sections)
        logging.debug(
            "loaded font: %d pages, %d chars, %d kerning pairs",
            len(pages),
            len(characters),
            len(kerning_values),
        )

        self._base_height = base_height
        self._line_height = line_height
        self._characters = characters
        self._kerning_values = kerning_values
        self._pages = pages
        self._ordinate_orientation = OrdinateOrientation(ordinate_orientation)

    @classmethod
    def from_bytes(cls, data: bytes, ordinate_orientation: OrdinateOrientation) -> "BMFont":
        return cls(data, ordinate_orientation)

    @classmethod
    def from_path(cls, path: Path | str, ordinate_orientation: OrdinateOrientation) -> "BMFont":
        return cls.from_location(str(path), ordinate_orientation)

    @classmethod
    def from_location(
        cls,
        location: str,
        ordinate_orientation: OrdinateOrientation,
        timeout: float | None = None,
    ) -> "BMFont":
        """Load a font from a local path or an http(s) URL."""
        with open_font_source(location, timeout=timeout) as source:
            return cls(source, ordinate_orientation)

    @property
    def base_height(self) -> int:
        """Distance in pixels from the top of a line to the baseline."""
        return self._base_height

    @property
    def line_height(self) -> int:
        return self._line_height

    @property
    def pages(self) -> Tuple[Page, ...]:
        return self._pages

    @property
    def characters(self) -> Tuple[Char, ...]:
        return self._characters

    @property
    def kerning_values(self) -> Tuple[KerningValue, ...]:
        return self._kerning_values

    @property
    def ordinate_orientation(self) -> OrdinateOrientation:
        return self._ordinate_orientation

    def find_char(self, char_id: int) -> Char | None:
        # first match wins for duplicate ids
        for char in self._characters:
            if char.id == char_id:
                return char
        return None

    def find_kerning_values(self, first_char_id: int) -> List[KerningValue]:
        return [k for k in self._kerning_values if k.first_char_id == first_char_id]

    def kerning_amount(self, first_char_id: int, second_char_id: int) -> int:
        for kerning in self._kerning_values:
            if kerning.first_char_id == first_char_id and kerning.second_char_id == second_char_id:
                return kerning.value
        return 0

    def char_positions(self, text: str) -> CharPositions:
        """Lay out ``text``, yielding a CharPosition or a CharError per character."""
        return CharPositions(text, self)

    def _key(self) -> tuple:
        return (
            self._base_height,
            self._line_height,
            self._characters,
            self._kerning_values,
            self._pages,
            self._ordinate_orientation,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BMFont):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"BMFont(line_height={self._line_height}, base_height={self._base_height}, "
            f"pages={len(self._pages)}, characters={len(self._characters)}, "
            f"kerning_values={len(self._kerning_values)}, "
            f"ordinate_orientation={self._ordinate_orientation.name})"
        )


def _nth(components: List[str], index: int) -> str | None:
    return components[index] if index < len(components) else None
