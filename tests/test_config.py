import os

import pytest

from bmfont_layout import OrdinateOrientation
from bmfont_layout.config import ORIENTATION_VAR, TIMEOUT_VAR, Settings, load_settings, parse_orientation
from bmfont_layout.sources import DEFAULT_TIMEOUT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ORIENTATION_VAR, raising=False)
    monkeypatch.delenv(TIMEOUT_VAR, raising=False)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("top-to-bottom", OrdinateOrientation.TOP_TO_BOTTOM),
        ("BOTTOM_TO_TOP", OrdinateOrientation.BOTTOM_TO_TOP),
        (" Bottom-To-Top ", OrdinateOrientation.BOTTOM_TO_TOP),
    ],
)
def test_parse_orientation(value, expected):
    assert parse_orientation(value) is expected


def test_parse_orientation_rejects_unknown():
    with pytest.raises(ValueError, match="sideways"):
        parse_orientation("sideways")


def test_defaults():
    assert load_settings(use_dotenv=False) == Settings(
        orientation=OrdinateOrientation.TOP_TO_BOTTOM,
        http_timeout=DEFAULT_TIMEOUT,
    )


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv(ORIENTATION_VAR, "bottom-to-top")
    monkeypatch.setenv(TIMEOUT_VAR, "2.5")
    settings = load_settings(use_dotenv=False)
    assert settings.orientation is OrdinateOrientation.BOTTOM_TO_TOP
    assert settings.http_timeout == 2.5


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_bad_timeout(monkeypatch, value):
    monkeypatch.setenv(TIMEOUT_VAR, value)
    with pytest.raises(ValueError, match=TIMEOUT_VAR):
        load_settings(use_dotenv=False)


def test_dotenv_file_is_read(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text(f"{ORIENTATION_VAR}=bottom-to-top\n")
    monkeypatch.chdir(tmp_path)
    try:
        assert load_settings().orientation is OrdinateOrientation.BOTTOM_TO_TOP
    finally:
        os.environ.pop(ORIENTATION_VAR, None)
