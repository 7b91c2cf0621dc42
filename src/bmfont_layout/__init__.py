"""Parse BMFont text descriptions and lay out strings as textured quads."""

from .errors import (
    BMFontError,
    CharError,
    ConfigParseError,
    MissingCharacter,
    MissingSectionError,
    SourceError,
    UnsupportedCharacter,
)
from .font import BMFont
from .layout import CharPosition, CharPositions
from .records import Char, KerningValue, OrdinateOrientation, Page, Rect

__all__ = [
    "BMFont",
    "BMFontError",
    "Char",
    "CharError",
    "CharPosition",
    "CharPositions",
    "ConfigParseError",
    "KerningValue",
    "MissingCharacter",
    "MissingSectionError",
    "OrdinateOrientation",
    "Page",
    "Rect",
    "SourceError",
    "UnsupportedCharacter",
]
