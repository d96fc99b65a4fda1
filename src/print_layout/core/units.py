# SPDX-License-Identifier: Apache-2.0
"""Pixel to physical unit conversion for print export."""

from __future__ import annotations

CSS_DPI = 96.0
POINTS_PER_INCH = 72.0


def pixels_to_inches(pixels: float, print_width_inches: float, reference_width_px: float) -> float:
    """Convert preview-canvas pixels to print inches.

    Args:
        pixels: Length in pixels of the reference canvas.
        print_width_inches: Physical width the canvas width maps to.
        reference_width_px: Width in pixels of the canvas the layout was computed on.
    """
    return pixels * (print_width_inches / reference_width_px)


def pixels_to_points(pixels: float) -> float:
    """Convert CSS pixels (96 dpi) to typographic points."""
    return pixels * (POINTS_PER_INCH / CSS_DPI)
