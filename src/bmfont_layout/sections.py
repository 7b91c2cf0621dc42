from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, List, Tuple, Union

from .errors import MissingSectionError, SourceError

ByteSource = Union[bytes, bytearray, BinaryIO]


@dataclass(frozen=True)
class Sections:
    """Raw lines of a font description, grouped by section tag."""

    common_section: str
    page_sections: Tuple[str, ...]
    char_sections: Tuple[str, ...]
    kerning_sections: Tuple[str, ...]

    @classmethod
    def from_source(cls, source: ByteSource) -> "Sections":
        return cls.from_text(read_text(source))

    @classmethod
    def from_text(cls, text: str) -> "Sections":
        common_section: str | None = None
        page_sections: List[str] = []
        char_sections: List[str] = []
        kerning_sections: List[str] = []

        for line_number, line in enumerate(text.split("\n"), start=1):
            if line.endswith("\r"):
                line = line[:-1]
            words = line.split(None, 1)
            if not words:
                continue
            tag = words[0]
            if tag == "common":
                if common_section is not None:
                    logging.warning("duplicate 'common' section on line %d; using the last one", line_number)
                common_section = line
            elif tag == "page":
                page_sections.append(line)
            elif tag == "char":
                char_sections.append(line)
            elif tag == "kerning":
                kerning_sections.append(line)
            else:
                logging.debug("ignoring '%s' section on line %d", tag, line_number)

        if common_section is None:
            raise MissingSectionError("common")

        return cls(
            common_section=common_section,
            page_sections=tuple(page_sections),
            char_sections=tuple(char_sections),
            kerning_sections=tuple(kerning_sections),
        )


def read_text(source: ByteSource) -> str:
    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        try:
            data = source.read()
        except OSError as exc:
            raise SourceError(f"unable to read font description: {exc}") from exc
        if isinstance(data, str):
            return data
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise SourceError(f"font description is not valid UTF-8: {exc}") from exc
