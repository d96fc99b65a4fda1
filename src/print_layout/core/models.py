# SPDX-License-Identifier: Apache-2.0
"""Data models for text layout results.

This module defines the geometry and result types shared by the layout
engine, the position calculator and the exporters. All coordinates are in
pixels of the reference preview canvas (origin at top-left, y grows down).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import UnsupportedOrientationError


class Orientation(str, Enum):
    """Text orientation within the print area."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, value: Orientation | str) -> Orientation:
        """Convert a string or Orientation into an Orientation.

        Raises:
            UnsupportedOrientationError: If value is not a known orientation.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedOrientationError(value) from None


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle (area mapping on the preview canvas).

    Attributes:
        x: Left edge
        y: Top edge
        width: Width
        height: Height
    """

    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Rect:
        """Create from dictionary."""
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )


@dataclass(frozen=True)
class TextArea:
    """Area mapping shrunk by margins; the region text is fitted into."""

    x: float
    y: float
    width: float
    height: float
    orientation: Orientation

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "orientation": self.orientation.value,
        }


@dataclass(frozen=True)
class Position:
    """One rendering unit: a whole line (horizontal) or a character (vertical).

    Attributes:
        x: Left edge of the unit
        y: Baseline of the unit
        content: Line text or single character
        width: Measured width at the layout font size
        height: Font size used as the unit height
        use_reduced_spacing: Draw characters individually with adjusted advance
        letter_spacing_reduction: Amount subtracted from each character advance
    """

    x: float
    y: float
    content: str
    width: float
    height: float
    use_reduced_spacing: bool = False
    letter_spacing_reduction: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "x": self.x,
            "y": self.y,
            "content": self.content,
            "width": self.width,
            "height": self.height,
            "use_reduced_spacing": self.use_reduced_spacing,
            "letter_spacing_reduction": self.letter_spacing_reduction,
        }


@dataclass(frozen=True)
class GlyphPosition:
    """Placement of a single drawn character."""

    char: str
    x: float
    y: float
    font_size: float
    line_index: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "char": self.char,
            "x": self.x,
            "y": self.y,
            "font_size": self.font_size,
            "line_index": self.line_index,
        }


@dataclass
class LayoutMetadata:
    """Bookkeeping attached to a layout.

    Attributes:
        orientation: Orientation the layout was built for
        lines_count: Number of lines (1 for a vertical column)
        was_truncated: Whether text was dropped (the engine never drops text)
        empty: True only for the empty layout
        base_font_size: Requested starting size (set on the final layout)
        final_font_size: Size actually used (set on the final layout)
        scaling_attempts: Candidate sizes tried (set on the final layout)
        fits: Fit checker verdict for the final layout
    """

    orientation: Orientation
    lines_count: int = 0
    was_truncated: bool = False
    empty: bool = False
    base_font_size: float | None = None
    final_font_size: float | None = None
    scaling_attempts: int | None = None
    fits: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "orientation": self.orientation.value,
            "lines_count": self.lines_count,
            "was_truncated": self.was_truncated,
            "empty": self.empty,
            "base_font_size": self.base_font_size,
            "final_font_size": self.final_font_size,
            "scaling_attempts": self.scaling_attempts,
            "fits": self.fits,
        }


@dataclass
class Layout:
    """Result of fitting text into a text area."""

    lines: list[str]
    positions: list[Position]
    font_size: float
    line_height: float
    total_height: float
    text_area: TextArea
    area_mapping: Rect
    metadata: LayoutMetadata
    font_family: str = ""

    @property
    def orientation(self) -> Orientation:
        """Orientation of the layout."""
        return self.metadata.orientation

    @property
    def is_empty(self) -> bool:
        """Whether this is the empty layout."""
        return self.metadata.empty

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "lines": list(self.lines),
            "positions": [p.to_dict() for p in self.positions],
            "font_size": self.font_size,
            "font_family": self.font_family,
            "line_height": self.line_height,
            "total_height": self.total_height,
            "text_area": self.text_area.to_dict(),
            "area_mapping": self.area_mapping.to_dict(),
            "metadata": self.metadata.to_dict(),
        }


@dataclass(frozen=True)
class PrintAreaBounds:
    """Outer/inner rectangles used to draw print-area guides."""

    outer: Rect
    inner: TextArea
    width_inches: float
    height_inches: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "outer": self.outer.to_dict(),
            "inner": self.inner.to_dict(),
            "print_dimensions": {
                "width_inches": self.width_inches,
                "height_inches": self.height_inches,
            },
        }
