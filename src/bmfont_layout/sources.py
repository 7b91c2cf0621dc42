from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO

import requests

from .errors import SourceError

DEFAULT_TIMEOUT = 10.0


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def fetch_font_bytes(url: str, timeout: float | None = None) -> bytes:
    """Download a font description over HTTP(S)."""
    try:
        response = requests.get(url, timeout=timeout or DEFAULT_TIMEOUT)
    except requests.RequestException as exc:
        raise SourceError(f"unable to download {url}: {exc}") from exc
    if not 200 <= response.status_code < 300:
        raise SourceError(f"unable to download {url}: HTTP {response.status_code}")
    return response.content


def open_font_source(location: str, timeout: float | None = None) -> BinaryIO:
    """Open a local path or an http(s) URL as a binary stream."""
    if is_url(location):
        return io.BytesIO(fetch_font_bytes(location, timeout=timeout))
    path = Path(location).expanduser()
    try:
        return open(path, "rb")
    except OSError as exc:
        raise SourceError(f"unable to open {path}: {exc}") from exc
