from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .tokens import I32, STR, U32, extract_component_value, key_value_components


class OrdinateOrientation(Enum):
    BOTTOM_TO_TOP = "bottom-to-top"
    TOP_TO_BOTTOM = "top-to-bottom"


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class Page:
    id: int
    filename: str

    @classmethod
    def parse(cls, line: str) -> "Page":
        components = key_value_components(line)
        return cls(
            id=extract_component_value(components.get("id"), "page", "id", U32),
            filename=extract_component_value(components.get("file"), "page", "file", STR),
        )


@dataclass(frozen=True)
class Char:
    id: int
    x: int
    y: int
    width: int
    height: int
    xoffset: int
    yoffset: int
    xadvance: int
    page_index: int

    @classmethod
    def parse(cls, line: str) -> "Char":
        components = key_value_components(line)

        def field(name: str, kind=U32) -> int:
            return extract_component_value(components.get(name), "char", name, kind)

        return cls(
            id=field("id"),
            x=field("x"),
            y=field("y"),
            width=field("width"),
            height=field("height"),
            xoffset=field("xoffset", I32),
            yoffset=field("yoffset", I32),
            xadvance=field("xadvance", I32),
            page_index=field("page"),
        )

    @property
    def page_rect(self) -> Rect:
        return Rect(x=self.x, y=self.y, width=self.width, height=self.height)


@dataclass(frozen=True)
class KerningValue:
    first_char_id: int
    second_char_id: int
    value: int

    @classmethod
    def parse(cls, line: str) -> "KerningValue":
        components = key_value_components(line)
        return cls(
            first_char_id=extract_component_value(components.get("first"), "kerning", "first", U32),
            second_char_id=extract_component_value(components.get("second"), "kerning", "second", U32),
            value=extract_component_value(components.get("amount"), "kerning", "amount", I32),
        )
