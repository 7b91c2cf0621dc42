from __future__ import annotations

import io
from pathlib import Path
from typing import List

from PIL import Image

from .font import BMFont
from .layout import CharPosition, iter_positions
from .records import OrdinateOrientation, Rect


def _svg_boxes(font: BMFont, positions: List[CharPosition]) -> List[Rect]:
    boxes = []
    for position in positions:
        rect = position.screen_rect
        if font.ordinate_orientation is OrdinateOrientation.BOTTOM_TO_TOP:
            # SVG y grows downwards
            rect = Rect(x=rect.x, y=-rect.bottom, width=rect.width, height=rect.height)
        boxes.append(rect)
    return boxes


def layout_to_svg(font: BMFont, text: str, margin: int = 4) -> str:
    """Outline every laid out glyph of ``text`` as an SVG rectangle."""
    positions = list(iter_positions(font.char_positions(text)))
    boxes = _svg_boxes(font, positions)

    if boxes:
        min_x = min(box.x for box in boxes)
        min_y = min(box.y for box in boxes)
        max_x = max(box.right for box in boxes)
        max_y = max(box.bottom for box in boxes)
    else:
        min_x = min_y = 0
        max_x = max_y = 0

    canvas_width = max(max_x - min_x + 2 * margin, 1)
    canvas_height = max(max_y - min_y + 2 * margin, 1)
    translate_x = margin - min_x
    translate_y = margin - min_y

    rects = "".join(
        f'<rect x="{box.x}" y="{box.y}" width="{box.width}" height="{box.height}" '
        f'data-page="{position.page_index}" fill="none" stroke="#000000" stroke-width="1" />'
        for box, position in zip(boxes, positions)
    )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{canvas_width}" height="{canvas_height}" '
        f'viewBox="0 0 {canvas_width} {canvas_height}">'
        f'<rect width="100%" height="100%" fill="#ffffff" />'
        f'<g transform="translate({translate_x},{translate_y})">'
        f"{rects}"
        "</g></svg>"
    )


def render_png(font: BMFont, text: str, output_path: Path, scale: float = 1.0, margin: int = 4) -> Path:
    """Rasterize the layout outline of ``text`` to a grayscale PNG."""
    # cairosvg needs the native cairo library, only load it when rendering
    from cairosvg import svg2png

    svg = layout_to_svg(font, text, margin=margin)
    png_bytes = svg2png(bytestring=svg.encode("utf-8"), scale=scale)
    image = Image.open(io.BytesIO(png_bytes)).convert("L")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(output_path)
    return output_path


def write_svg(font: BMFont, text: str, output_path: Path, margin: int = 4) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(layout_to_svg(font, text, margin=margin), encoding="utf-8")
    return output_path
