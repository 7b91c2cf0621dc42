"""Settings read from the environment (and a ``.env`` file, if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .records import OrdinateOrientation
from .sources import DEFAULT_TIMEOUT

ORIENTATION_VAR = "BMFONT_ORIENTATION"
TIMEOUT_VAR = "BMFONT_HTTP_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    orientation: OrdinateOrientation = OrdinateOrientation.TOP_TO_BOTTOM
    http_timeout: float = DEFAULT_TIMEOUT


def parse_orientation(value: str) -> OrdinateOrientation:
    normalized = value.strip().lower().replace("_", "-")
    try:
        return OrdinateOrientation(normalized)
    except ValueError:
        choices = ", ".join(o.value for o in OrdinateOrientation)
        raise ValueError(f"Unknown orientation {value!r} (expected one of: {choices})") from None


def load_settings(use_dotenv: bool = True) -> Settings:
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    settings = Settings()
    orientation = settings.orientation
    raw_orientation = os.environ.get(ORIENTATION_VAR)
    if raw_orientation:
        orientation = parse_orientation(raw_orientation)

    http_timeout = settings.http_timeout
    raw_timeout = os.environ.get(TIMEOUT_VAR)
    if raw_timeout:
        try:
            http_timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"{TIMEOUT_VAR} must be a number, got {raw_timeout!r}") from None
        if http_timeout <= 0:
            raise ValueError(f"{TIMEOUT_VAR} must be positive, got {raw_timeout!r}")

    return Settings(orientation=orientation, http_timeout=http_timeout)
