from __future__ import annotations

import re
from enum import Enum
from typing import Dict

from .errors import ConfigParseError


class ValueKind(Enum):
    U32 = "u32"
    I32 = "i32"
    STR = "str"


U32 = ValueKind.U32
I32 = ValueKind.I32
STR = ValueKind.STR

_UNSIGNED_RE = re.compile(r"\+?[0-9]+", re.ASCII)
_SIGNED_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)

# key=value pairs; a quoted value must close right before whitespace or the end
# of the line, anything else is read up to the next whitespace.
_COMPONENT_RE = re.compile(r'(?<!\S)([^\s=]+)=("[^"]*"(?=\s|$)|\S*)')

_RANGES = {
    ValueKind.U32: (0, 2**32 - 1),
    ValueKind.I32: (-(2**31), 2**31 - 1),
}


def extract_component_value(
    component: str | None,
    section: str,
    field: str,
    kind: ValueKind = U32,
) -> int | str:
    """Convert one raw ``key=value`` token (or bare value) to ``kind``.

    Raises ConfigParseError naming ``section`` and ``field`` when the token is
    absent, not a number, or out of range for the target width.
    """
    if component is None:
        raise ConfigParseError(section, field)
    _, sep, value = component.partition("=")
    if not sep:
        value = component

    if kind is ValueKind.STR:
        if value.startswith('"'):
            if len(value) < 2 or not value.endswith('"'):
                raise ConfigParseError(section, field)
            value = value[1:-1]
        return value

    pattern = _UNSIGNED_RE if kind is ValueKind.U32 else _SIGNED_RE
    if pattern.fullmatch(value) is None:
        raise ConfigParseError(section, field)
    number = int(value)
    low, high = _RANGES[kind]
    if not low <= number <= high:
        raise ConfigParseError(section, field)
    return number


def key_value_components(line: str) -> Dict[str, str]:
    """Map each ``key=value`` token after the section tag to its raw token.

    Tokens that are not ``key=value`` pairs are skipped. Quotes are kept in
    the raw token; only the fields actually read interpret them.
    """
    components: Dict[str, str] = {}
    for match in _COMPONENT_RE.finditer(line):
        components.setdefault(match.group(1), match.group(0))
    return components
