# SPDX-License-Identifier: Apache-2.0
"""Export layouts in physical units for the print provider."""

from __future__ import annotations

from typing import Any

from ..core.config import LayoutConfig
from ..core.measurer import TextMeasurer
from ..core.models import Layout
from ..core.positions import expand_glyphs
from ..core.units import pixels_to_inches, pixels_to_points

DEFAULT_FONT_FAMILY = "Arial"


def export_for_printful(layout: Layout, config: LayoutConfig) -> dict[str, Any] | None:
    """Convert a layout into the print provider's text element payload.

    Coordinates are made relative to the area mapping stored on the layout
    and converted to inches; the font size is converted to points.

    Args:
        layout: Layout produced by TextLayoutEngine.fit_text.
        config: Configuration supplying the physical print area and canvas width.

    Returns:
        Export payload, or None for the empty layout.
    """
    if layout.is_empty:
        return None

    orientation = layout.orientation
    mapping = layout.area_mapping
    print_area = config.print_area

    def to_inches(pixels: float) -> float:
        return pixels_to_inches(pixels, print_area.width_inches, config.canvas_width)

    text_elements = [
        {
            "text": position.content,
            "x": to_inches(position.x - mapping.x),
            "y": to_inches(position.y - mapping.y),
            "font_size": pixels_to_points(layout.font_size),
            "font_family": layout.font_family or DEFAULT_FONT_FAMILY,
            "width": to_inches(position.width),
            "height": to_inches(position.height),
        }
        for position in layout.positions
    ]

    return {
        "print_area": {
            "width": print_area.width_inches,
            "height": print_area.height_inches,
            "dpi": print_area.dpi,
        },
        "text_elements": text_elements,
        "metadata": {
            "exact_coordinates": mapping.to_dict(),
            "total_lines": len(layout.lines),
            "font_size": layout.font_size,
            "base_font_size": layout.metadata.base_font_size,
            "orientation": orientation.value,
        },
    }


def export_glyph_coordinates(layout: Layout, measurer: TextMeasurer) -> list[dict[str, Any]]:
    """Per-character coordinates relative to the area mapping, in whole pixels.

    Args:
        layout: Layout produced by TextLayoutEngine.fit_text.
        measurer: Measurer the layout was computed with.

    Returns:
        One entry per drawn glyph; empty for the empty layout.
    """
    if layout.is_empty:
        return []

    mapping = layout.area_mapping
    return [
        {
            "char": glyph.char,
            "x": round(glyph.x - mapping.x),
            "y": round(glyph.y - mapping.y),
            "font_size": glyph.font_size,
            "line_index": glyph.line_index,
        }
        for glyph in expand_glyphs(layout, measurer)
    ]
