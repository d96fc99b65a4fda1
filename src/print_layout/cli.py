# SPDX-License-Identifier: Apache-2.0
"""
Print Layout - CLI Tool

Fits a line of text into the garment print area and prints the resulting
layout (or the print provider export payload) as JSON.

Usage:
    fit-text <text> [options]

Examples:
    fit-text "HELLO WORLD"                          # Horizontal, Helvetica
    fit-text "こんにちは" -o vertical -f NotoSansJP.ttf
    fit-text "HELLO WORLD" --export                 # Inches/points payload
    fit-text "HELLO WORLD" --glyphs                 # Per-character coordinates
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

from print_layout.core.config import LayoutConfig
from print_layout.core.helpers import is_font_file
from print_layout.core.measurer import PdfiumTextMeasurer, PillowTextMeasurer, TextMeasurer
from print_layout.core.models import Orientation
from print_layout.core.text_layout import TextLayoutEngine
from print_layout.errors import PrintLayoutError
from print_layout.output.printful_export import export_for_printful, export_glyph_coordinates

logger = logging.getLogger(__name__)

DEFAULT_FONT = "Helvetica"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="fit-text",
        description="Fit text into the print area and print the layout as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "HELLO WORLD"                     # Horizontal layout
  %(prog)s "HELLO" -o vertical               # Vertical column
  %(prog)s "HELLO" -f ./fonts/Bold.ttf       # TrueType font via Pillow
  %(prog)s "HELLO" --config layout.json      # Override configuration
  %(prog)s "HELLO" --export                  # Print provider payload
""",
    )

    parser.add_argument(
        "text",
        help="Text to fit",
    )

    parser.add_argument(
        "-o",
        "--orientation",
        default=Orientation.HORIZONTAL.value,
        choices=[o.value for o in Orientation],
        help="Text orientation (default: horizontal)",
    )

    parser.add_argument(
        "-f",
        "--font",
        default=DEFAULT_FONT,
        help=(
            "Standard PDF font name, or a .ttf/.otf/.ttc path "
            f"(default: {DEFAULT_FONT})"
        ),
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="JSON file with layout configuration overrides",
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--export",
        action="store_true",
        help="Print the print provider export payload instead of the layout",
    )
    output_group.add_argument(
        "--glyphs",
        action="store_true",
        help="Print per-character coordinates relative to the print area",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug log output",
    )

    return parser.parse_args(argv)


def create_measurer(font: str) -> TextMeasurer:
    """Pick a measurer for the font: Pillow for font files, PDFium otherwise."""
    if is_font_file(font):
        return PillowTextMeasurer()
    return PdfiumTextMeasurer()


def run(args: argparse.Namespace) -> int:
    """Run the layout and print the result.

    Returns:
        Exit code.
    """
    try:
        config = LayoutConfig.from_json_file(args.config) if args.config else LayoutConfig()
    except (FileNotFoundError, PrintLayoutError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = TextLayoutEngine(config)
    measurer = create_measurer(args.font)
    try:
        layout = engine.fit_text(args.text, args.orientation, args.font, measurer)
        result: Any
        if args.export:
            result = export_for_printful(layout, config)
        elif args.glyphs:
            result = export_glyph_coordinates(layout, measurer)
        else:
            result = layout.to_dict()
    except PrintLayoutError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if isinstance(measurer, PdfiumTextMeasurer):
            measurer.close()

    logger.info("Fitted %r at %spx", args.text, layout.font_size)
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    sys.exit(run(args))


if __name__ == "__main__":
    main()
