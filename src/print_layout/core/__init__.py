# SPDX-License-Identifier: Apache-2.0
"""Core text layout modules."""

from .config import LayoutConfig, Margins, PrintArea, VerticalSpacing
from .measurer import CachingMeasurer, PdfiumTextMeasurer, PillowTextMeasurer, TextMeasurer
from .models import (
    GlyphPosition,
    Layout,
    LayoutMetadata,
    Orientation,
    Position,
    PrintAreaBounds,
    Rect,
    TextArea,
)
from .text_layout import TextLayoutEngine

__all__ = [
    "CachingMeasurer",
    "GlyphPosition",
    "Layout",
    "LayoutConfig",
    "LayoutMetadata",
    "Margins",
    "Orientation",
    "PdfiumTextMeasurer",
    "PillowTextMeasurer",
    "Position",
    "PrintArea",
    "PrintAreaBounds",
    "Rect",
    "TextArea",
    "TextLayoutEngine",
    "TextMeasurer",
    "VerticalSpacing",
]
