import pytest
import requests

from bmfont_layout import BMFont, OrdinateOrientation, SourceError
from bmfont_layout import sources


class FakeResponse:
    def __init__(self, status_code, content=b""):
        self.status_code = status_code
        self.content = content


def test_is_url():
    assert sources.is_url("https://example.com/font.fnt")
    assert sources.is_url("http://example.com/font.fnt")
    assert not sources.is_url("fonts/font.fnt")


def test_local_path(font_path, sample_bytes):
    with sources.open_font_source(str(font_path)) as source:
        assert source.read() == sample_bytes


def test_missing_local_path(tmp_path):
    with pytest.raises(SourceError):
        sources.open_font_source(str(tmp_path / "missing.fnt"))


def test_download(monkeypatch, sample_bytes):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(200, sample_bytes)

    monkeypatch.setattr(sources.requests, "get", fake_get)
    font = BMFont.from_location("https://fonts.example/sample.fnt", OrdinateOrientation.TOP_TO_BOTTOM, timeout=3)
    assert font.line_height == 12
    assert calls == [("https://fonts.example/sample.fnt", 3)]


def test_download_uses_default_timeout(monkeypatch, sample_bytes):
    seen = {}

    def fake_get(url, timeout):
        seen["timeout"] = timeout
        return FakeResponse(200, sample_bytes)

    monkeypatch.setattr(sources.requests, "get", fake_get)
    sources.fetch_font_bytes("http://fonts.example/sample.fnt")
    assert seen["timeout"] == sources.DEFAULT_TIMEOUT


def test_download_http_error(monkeypatch):
    monkeypatch.setattr(sources.requests, "get", lambda url, timeout: FakeResponse(404))
    with pytest.raises(SourceError) as excinfo:
        sources.fetch_font_bytes("https://fonts.example/missing.fnt")
    assert "404" in str(excinfo.value)


def test_download_transport_error(monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(sources.requests, "get", fake_get)
    with pytest.raises(SourceError) as excinfo:
        sources.fetch_font_bytes("https://fonts.example/sample.fnt")
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_download_accepts_any_2xx(monkeypatch, sample_bytes):
    monkeypatch.setattr(sources.requests, "get", lambda url, timeout: FakeResponse(203, sample_bytes))
    assert sources.fetch_font_bytes("https://fonts.example/sample.fnt") == sample_bytes


@pytest.mark.parametrize("status", [199, 304, 500])
def test_download_rejects_non_2xx(monkeypatch, status):
    monkeypatch.setattr(sources.requests, "get", lambda url, timeout: FakeResponse(status))
    with pytest.raises(SourceError) as excinfo:
        sources.fetch_font_bytes("https://fonts.example/sample.fnt")
    assert str(status) in str(excinfo.value)
