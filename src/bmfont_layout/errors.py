"""Error types raised while loading a font and yielded while laying out text."""

from __future__ import annotations


class BMFontError(Exception):
    """Base class for every error raised while building a font."""


class SourceError(BMFontError):
    """The font description could not be read or decoded."""


class ConfigParseError(BMFontError):
    def __init__(self, section: str, field: str | None = None, message: str | None = None) -> None:
        self.section = section
        self.field = field
        if message is None:
            if field is None:
                message = f"malformed '{section}' section"
            else:
                message = f"missing or invalid field '{field}' in '{section}' section"
        super().__init__(message)


class MissingSectionError(ConfigParseError):
    def __init__(self, section: str) -> None:
        super().__init__(section, message=f"mandatory '{section}' section not found")


class CharError(Exception):
    """A character of the input text that could not be laid out."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"{type(self).__name__}: {character!r} (U+{self.code_point:04X})")

    @property
    def code_point(self) -> int:
        return ord(self.character)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.character == other.character

    def __hash__(self) -> int:
        return hash((type(self), self.character))


class UnsupportedCharacter(CharError):
    """The character lies outside the Basic Multilingual Plane."""


class MissingCharacter(CharError):
    """The font has no glyph for the character."""
