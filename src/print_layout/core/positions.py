# SPDX-License-Identifier: Apache-2.0
"""Turn laid-out lines into drawing positions.

Horizontal lines are centered and stacked from the top of the text area.
Vertical text is a single column of characters placed right of center.
"""

from __future__ import annotations

from ..errors import UnsupportedOrientationError
from .measurer import TextMeasurer
from .models import GlyphPosition, Layout, Orientation, Position, TextArea

# First horizontal baseline sits this many font sizes below the area top
HORIZONTAL_BASELINE_FACTOR = 1.6
# Per-character advance correction for reduced-spacing lines
LETTER_SPACING_REDUCTION_FACTOR = 0.10
GLYPH_EXTRA_SPACING_FACTOR = 0.12

VERTICAL_BASELINE_FACTOR = 0.85
# Column is placed this far right of the area center
VERTICAL_COLUMN_OFFSET = 45.0


def calculate_horizontal_positions(
    lines: list[str],
    font_family: str,
    font_size: float,
    line_height: float,
    text_area: TextArea,
    measurer: TextMeasurer,
) -> list[Position]:
    """Center each line and stack lines one line height apart."""
    start_y = text_area.y + font_size * HORIZONTAL_BASELINE_FACTOR
    positions: list[Position] = []

    for index, line in enumerate(lines):
        line_width = measurer.measure(line, font_family, font_size)
        positions.append(
            Position(
                x=text_area.x + (text_area.width - line_width) / 2,
                y=start_y + index * line_height,
                content=line,
                width=line_width,
                height=font_size,
                use_reduced_spacing=True,
                letter_spacing_reduction=font_size * LETTER_SPACING_REDUCTION_FACTOR,
            )
        )

    return positions


def calculate_vertical_positions(
    lines: list[str],
    font_family: str,
    font_size: float,
    line_height: float,
    text_area: TextArea,
    measurer: TextMeasurer,
    char_spacing_multiplier: float,
) -> list[Position]:
    """Place one Position per character of the column, top to bottom."""
    start_y = text_area.y + font_size * VERTICAL_BASELINE_FACTOR
    column_x = text_area.x + (text_area.width / 2 + VERTICAL_COLUMN_OFFSET)
    char_spacing = line_height * char_spacing_multiplier
    column = lines[0] if lines else ""

    return [
        Position(
            x=column_x,
            y=start_y + index * char_spacing,
            content=char,
            width=measurer.measure(char, font_family, font_size),
            height=font_size,
        )
        for index, char in enumerate(column)
    ]


def calculate_positions(
    lines: list[str],
    orientation: Orientation,
    font_family: str,
    font_size: float,
    line_height: float,
    text_area: TextArea,
    measurer: TextMeasurer,
    char_spacing_multiplier: float,
) -> list[Position]:
    """Calculate drawing positions for the given orientation.

    Raises:
        UnsupportedOrientationError: If orientation is unknown.
    """
    if orientation is Orientation.HORIZONTAL:
        return calculate_horizontal_positions(
            lines, font_family, font_size, line_height, text_area, measurer
        )
    if orientation is Orientation.VERTICAL:
        return calculate_vertical_positions(
            lines,
            font_family,
            font_size,
            line_height,
            text_area,
            measurer,
            char_spacing_multiplier,
        )
    raise UnsupportedOrientationError(orientation)


def glyph_advance(char_width: float, font_size: float, reduction: float) -> float:
    """Horizontal advance after drawing one character of a reduced-spacing line."""
    return char_width - reduction + font_size * GLYPH_EXTRA_SPACING_FACTOR


def expand_glyphs(layout: Layout, measurer: TextMeasurer) -> list[GlyphPosition]:
    """Expand layout positions into individually drawn characters.

    Reduced-spacing positions with more than one character are walked left to
    right using glyph_advance. Every other position becomes a single glyph.

    Args:
        layout: Layout to expand.
        measurer: Text measurer (same one used to build the layout).

    Returns:
        Glyph positions in drawing order.
    """
    glyphs: list[GlyphPosition] = []

    for index, position in enumerate(layout.positions):
        if position.use_reduced_spacing and len(position.content) > 1:
            x = position.x
            for char in position.content:
                glyphs.append(
                    GlyphPosition(
                        char=char,
                        x=x,
                        y=position.y,
                        font_size=layout.font_size,
                        line_index=index,
                    )
                )
                char_width = measurer.measure(char, layout.font_family, layout.font_size)
                x += glyph_advance(
                    char_width, layout.font_size, position.letter_spacing_reduction
                )
        else:
            glyphs.append(
                GlyphPosition(
                    char=position.content,
                    x=position.x,
                    y=position.y,
                    font_size=layout.font_size,
                    line_index=index,
                )
            )

    return glyphs
