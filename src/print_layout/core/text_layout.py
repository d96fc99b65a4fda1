# SPDX-License-Identifier: Apache-2.0
"""Adaptive text layout engine for the garment print area.

This module fits a string into the orientation's text area by:
- Starting at the configured base font size and stepping down
- Breaking horizontal text into at most two balanced lines
- Normalising vertical text into a single character column
- Falling back to the largest attempted size when nothing fits
"""

from __future__ import annotations

import logging
import math

from .config import LayoutConfig
from .fit_checker import layout_fits
from .line_breaker import break_horizontal_lines, should_force_two_lines
from .measurer import CachingMeasurer, TextMeasurer
from .models import Layout, LayoutMetadata, Orientation, PrintAreaBounds, TextArea
from .positions import calculate_positions
from .vertical import normalize_vertical_text

logger = logging.getLogger(__name__)


class TextLayoutEngine:
    """Engine for fitting text into the print area.

    The engine holds only read-only configuration; every call to fit_text is
    independent and may run concurrently with others.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """Initialize TextLayoutEngine.

        Args:
            config: Layout configuration. Defaults to LayoutConfig().
        """
        self._config = config or LayoutConfig()

    @property
    def config(self) -> LayoutConfig:
        """Layout configuration."""
        return self._config

    def max_attempts(self) -> int:
        """Upper bound on candidate sizes tried by one fit_text call."""
        config = self._config
        return math.ceil((config.base_font_size - config.min_font_size) / config.scale_step) + 5

    def get_text_area(self, orientation: Orientation | str) -> TextArea:
        """Get the text area for an orientation."""
        return self._config.get_text_area(orientation)

    def get_print_area_bounds(self, orientation: Orientation | str) -> PrintAreaBounds:
        """Get outer/inner rectangles for drawing print area guides."""
        return self._config.get_print_area_bounds(orientation)

    def fit_text(
        self,
        text: str,
        orientation: Orientation | str,
        font_family: str,
        measurer: TextMeasurer,
    ) -> Layout:
        """Fit text into the text area, shrinking the font as needed.

        Args:
            text: Text to lay out.
            orientation: Horizontal or vertical.
            font_family: Font family passed through to the measurer.
            measurer: Text width measurer.

        Returns:
            The first layout that fits, or the best-effort layout at the
            largest attempted size. Empty or whitespace-only text returns the
            empty layout.

        Raises:
            UnsupportedOrientationError: If orientation is unknown.
        """
        orientation = Orientation.parse(orientation)
        if not text or not text.strip():
            return self.create_empty_layout(orientation)

        config = self._config
        text_area = config.get_text_area(orientation)
        cached = CachingMeasurer(measurer)
        max_attempts = self.max_attempts()

        force_two_lines = should_force_two_lines(
            text, orientation, font_family, config.base_font_size, text_area, cached
        )

        font_size = config.base_font_size
        best_layout: Layout | None = None
        best_fits = False
        attempts = 0

        while font_size >= config.min_font_size and attempts < max_attempts:
            attempts += 1
            layout = self.create_layout_at_size(
                text, font_size, font_family, orientation, text_area, cached, force_two_lines
            )
            fits = self.check_layout_fits(layout, cached)
            logger.debug(
                "Attempt %d: %spx, %d line(s), fits=%s",
                attempts,
                font_size,
                len(layout.lines),
                fits,
            )

            if fits:
                best_layout = layout
                best_fits = True
                break

            if best_layout is None or font_size > best_layout.font_size:
                best_layout = layout

            font_size -= config.scale_step

        if best_layout is None:
            best_layout = self.create_layout_at_size(
                text, config.min_font_size, font_family, orientation, text_area, cached
            )
            best_fits = self.check_layout_fits(best_layout, cached)

        metadata = best_layout.metadata
        metadata.base_font_size = config.base_font_size
        metadata.final_font_size = best_layout.font_size
        metadata.scaling_attempts = attempts
        metadata.orientation = orientation
        metadata.fits = best_fits

        logger.debug(
            "Final layout: %spx, %d line(s), orientation=%s, fits=%s",
            best_layout.font_size,
            len(best_layout.lines),
            orientation.value,
            best_fits,
        )
        return best_layout

    def create_layout_at_size(
        self,
        text: str,
        font_size: float,
        font_family: str,
        orientation: Orientation,
        text_area: TextArea,
        measurer: TextMeasurer,
        force_two_lines: bool = False,
    ) -> Layout:
        """Build a candidate layout at one font size.

        Args:
            text: Text to lay out.
            font_size: Candidate font size in pixels.
            font_family: Font family.
            orientation: Layout orientation.
            text_area: Area to lay out in.
            measurer: Text measurer.
            force_two_lines: Horizontal only; see should_force_two_lines.

        Returns:
            Candidate layout (not checked for fit).
        """
        config = self._config
        line_height = font_size * config.line_spacing

        if orientation is Orientation.VERTICAL:
            lines = [normalize_vertical_text(text)]
        else:
            lines = break_horizontal_lines(
                text, font_family, font_size, text_area, measurer, force_two_lines
            )

        positions = calculate_positions(
            lines,
            orientation,
            font_family,
            font_size,
            line_height,
            text_area,
            measurer,
            config.vertical_spacing.char_spacing_multiplier,
        )

        return Layout(
            lines=lines,
            positions=positions,
            font_size=font_size,
            line_height=line_height,
            total_height=len(lines) * line_height,
            text_area=text_area,
            area_mapping=config.get_area_mapping(orientation),
            font_family=font_family,
            metadata=LayoutMetadata(
                orientation=orientation,
                lines_count=len(lines),
                was_truncated=False,
            ),
        )

    def check_layout_fits(self, layout: Layout, measurer: TextMeasurer) -> bool:
        """Check whether a layout fits its text area."""
        return layout_fits(
            layout, measurer, self._config.vertical_spacing.char_spacing_multiplier
        )

    def create_empty_layout(self, orientation: Orientation | str) -> Layout:
        """Create the layout returned for empty text.

        It has no lines or positions but still carries the text area so that
        callers can draw area guides.
        """
        orientation = Orientation.parse(orientation)
        return Layout(
            lines=[],
            positions=[],
            font_size=0,
            line_height=0,
            total_height=0,
            text_area=self._config.get_text_area(orientation),
            area_mapping=self._config.get_area_mapping(orientation),
            metadata=LayoutMetadata(orientation=orientation, empty=True, fits=True),
        )
