"""Command line entry point: lay out a string with a BMFont and print the result as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .config import Settings, load_settings, parse_orientation
from .errors import BMFontError, CharError
from .font import BMFont
from .layout import CharPosition
from .preview import render_png, write_svg
from .records import OrdinateOrientation


def parse_args(argv: Sequence[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    settings = settings or Settings()
    parser = argparse.ArgumentParser(description="Compute glyph rectangles for a string using a BMFont description.")
    parser.add_argument(
        "font",
        help="Path or http(s) URL of a BMFont text description (.fnt).",
    )
    parser.add_argument(
        "text",
        help="Text to lay out. Use a literal newline to start a new line.",
    )
    parser.add_argument(
        "--orientation",
        type=parse_orientation,
        default=settings.orientation,
        help=(
            "Direction of the y axis: "
            + " or ".join(o.value for o in OrdinateOrientation)
            + f" (default: {settings.orientation.value})."
        ),
    )
    parser.add_argument(
        "--svg",
        type=Path,
        default=None,
        help="Write an SVG outline of the layout to this path.",
    )
    parser.add_argument(
        "--png",
        type=Path,
        default=None,
        help="Write a PNG outline of the layout to this path.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any character could not be laid out.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser details to stderr.",
    )
    return parser.parse_args(argv)


def describe_item(index: int, item: CharPosition | CharError) -> Dict[str, Any]:
    if isinstance(item, CharError):
        return {
            "index": index,
            "error": type(item).__name__,
            "character": item.character,
            "code_point": item.code_point,
        }
    return {
        "index": index,
        "page_index": item.page_index,
        "page_rect": asdict(item.page_rect),
        "screen_rect": asdict(item.screen_rect),
    }


def build_summary(font: BMFont, text: str) -> Dict[str, Any]:
    positions: List[Dict[str, Any]] = []
    errors: List[Dict[str, Any]] = []
    for index, item in enumerate(font.char_positions(text)):
        entry = describe_item(index, item)
        if isinstance(item, CharError):
            errors.append(entry)
        else:
            positions.append(entry)

    return {
        "line_height": font.line_height,
        "base_height": font.base_height,
        "orientation": font.ordinate_orientation.value,
        "pages": [asdict(page) for page in font.pages],
        "positions": positions,
        "errors": errors,
    }


def main(argv: Sequence[str] | None = None) -> int:
    """Run the layout from command line arguments."""
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    args = parse_args(argv, settings)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    try:
        font = BMFont.from_location(args.font, args.orientation, timeout=settings.http_timeout)
    except BMFontError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    summary = build_summary(font, args.text)

    if args.svg is not None:
        summary["svg_path"] = str(write_svg(font, args.text, args.svg))
    if args.png is not None:
        summary["png_path"] = str(render_png(font, args.text, args.png))

    print(json.dumps(summary))

    if args.strict and summary["errors"]:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
