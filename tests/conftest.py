from __future__ import annotations

import pytest

from bmfont_layout import BMFont, OrdinateOrientation

SAMPLE_FNT = """\
info face="Sample Sans" size=12 bold=0 italic=0 charset="" unicode=1 stretchH=100 smooth=1 aa=1 padding=0,0,0,0 spacing=1,1
common lineHeight=12 base=10 scaleW=256 scaleH=256 pages=1 packed=0
page id=0 file="sample_0.png"
chars count=3
char id=65   x=0     y=0     width=8     height=8     xoffset=0     yoffset=0     xadvance=10    page=0  chnl=15
char id=66   x=8     y=0     width=6     height=7     xoffset=1     yoffset=2     xadvance=7     page=0  chnl=15
char id=32   x=0     y=0     width=0     height=0     xoffset=0     yoffset=0     xadvance=4     page=0  chnl=15
kernings count=1
kerning first=65  second=65  amount=-2
"""


def without_kerning(text: str) -> str:
    return "\n".join(line for line in text.splitlines() if not line.startswith("kerning")) + "\n"


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_FNT


@pytest.fixture
def make_font():
    def build(text: str, orientation: OrdinateOrientation = OrdinateOrientation.TOP_TO_BOTTOM) -> BMFont:
        return BMFont(text.encode("utf-8"), orientation)

    return build


@pytest.fixture
def sample_bytes() -> bytes:
    return SAMPLE_FNT.encode("utf-8")


@pytest.fixture
def top_down_font(sample_bytes) -> BMFont:
    return BMFont(sample_bytes, OrdinateOrientation.TOP_TO_BOTTOM)


@pytest.fixture
def bottom_up_font(sample_bytes) -> BMFont:
    return BMFont(sample_bytes, OrdinateOrientation.BOTTOM_TO_TOP)


@pytest.fixture
def unkerned_font() -> BMFont:
    return BMFont(without_kerning(SAMPLE_FNT).encode("utf-8"), OrdinateOrientation.TOP_TO_BOTTOM)


@pytest.fixture
def font_path(tmp_path, sample_bytes):
    path = tmp_path / "sample.fnt"
    path.write_bytes(sample_bytes)
    return path
