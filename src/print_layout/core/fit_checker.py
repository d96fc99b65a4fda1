# SPDX-License-Identifier: Apache-2.0
"""Fit predicates: does a candidate layout fit its text area?"""

from __future__ import annotations

from ..errors import UnsupportedOrientationError
from .measurer import TextMeasurer
from .models import Layout, Orientation


def vertical_fits(layout: Layout, char_spacing_multiplier: float) -> bool:
    """Check a vertical column against the text area height.

    Width is not checked; a centered single column is assumed to fit.
    """
    column = layout.lines[0] if layout.lines else ""
    char_height = layout.line_height * char_spacing_multiplier
    return len(column) * char_height <= layout.text_area.height


def horizontal_fits(layout: Layout, measurer: TextMeasurer) -> bool:
    """Check stacked lines against the text area height and every line's width."""
    text_area = layout.text_area
    if len(layout.lines) * layout.line_height > text_area.height:
        return False
    return all(
        measurer.measure(line, layout.font_family, layout.font_size) <= text_area.width
        for line in layout.lines
    )


def layout_fits(
    layout: Layout,
    measurer: TextMeasurer,
    char_spacing_multiplier: float,
) -> bool:
    """Dispatch to the orientation's fit predicate.

    Raises:
        UnsupportedOrientationError: If the layout orientation is unknown.
    """
    orientation = layout.orientation
    if orientation is Orientation.VERTICAL:
        return vertical_fits(layout, char_spacing_multiplier)
    if orientation is Orientation.HORIZONTAL:
        return horizontal_fits(layout, measurer)
    raise UnsupportedOrientationError(orientation)
