# SPDX-License-Identifier: Apache-2.0
"""Layout configuration and area mapping."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Union

from ..errors import ConfigurationError, PrintLayoutError
from .models import Orientation, PrintAreaBounds, Rect, TextArea

# Measured from the product mockup; identical for both orientations
DEFAULT_AREA_MAPPING = Rect(x=200, y=78, width=200, height=270)


@dataclass(frozen=True)
class PrintArea:
    """Physical print area of the garment.

    Attributes:
        width_inches: Printable width in inches
        height_inches: Printable height in inches
        dpi: Print resolution
    """

    width_inches: float = 12.0
    height_inches: float = 16.0
    dpi: int = 300

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "width_inches": self.width_inches,
            "height_inches": self.height_inches,
            "dpi": self.dpi,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PrintArea:
        """Create from dictionary."""
        return cls(
            width_inches=float(data.get("width_inches", 12.0)),
            height_inches=float(data.get("height_inches", 16.0)),
            dpi=int(data.get("dpi", 300)),
        )


@dataclass(frozen=True)
class Margins:
    """Inset applied to an area mapping on each side."""

    top: float = 3.0
    bottom: float = 3.0
    left: float = 3.0
    right: float = 3.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"top": self.top, "bottom": self.bottom, "left": self.left, "right": self.right}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Margins:
        """Create from dictionary."""
        return cls(
            top=float(data.get("top", 3.0)),
            bottom=float(data.get("bottom", 3.0)),
            left=float(data.get("left", 3.0)),
            right=float(data.get("right", 3.0)),
        )


@dataclass(frozen=True)
class VerticalSpacing:
    """Spacing factors for single-column vertical text."""

    char_spacing_multiplier: float = 0.85
    column_margin_factor: float = 0.3

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "char_spacing_multiplier": self.char_spacing_multiplier,
            "column_margin_factor": self.column_margin_factor,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VerticalSpacing:
        """Create from dictionary."""
        return cls(
            char_spacing_multiplier=float(data.get("char_spacing_multiplier", 0.85)),
            column_margin_factor=float(data.get("column_margin_factor", 0.3)),
        )


def _default_area_mappings() -> dict[Orientation, Rect]:
    return {
        Orientation.HORIZONTAL: DEFAULT_AREA_MAPPING,
        Orientation.VERTICAL: DEFAULT_AREA_MAPPING,
    }


@dataclass(frozen=True)
class LayoutConfig:
    """Layout engine configuration.

    Constructed once and passed to the engine; never mutated afterwards.

    Attributes:
        print_area: Physical print area dimensions
        canvas_width: Width in pixels of the preview canvas the geometry is defined in
        canvas_height: Height in pixels of the preview canvas
        area_mappings: Pixel rectangle per orientation, before margins
        margins: Inset applied to every area mapping
        base_font_size: Starting font size in pixels
        min_font_size: Smallest font size tried in pixels
        scale_step: Font size decrement per attempt in pixels
        line_spacing: Line height as a multiple of the font size
        vertical_spacing: Vertical column spacing factors
    """

    print_area: PrintArea = field(default_factory=PrintArea)
    canvas_width: float = 600.0
    canvas_height: float = 600.0
    area_mappings: Mapping[Orientation, Rect] = field(
        default_factory=_default_area_mappings, hash=False
    )
    margins: Margins = field(default_factory=Margins)
    base_font_size: int = 40
    min_font_size: int = 12
    scale_step: int = 2
    line_spacing: float = 1.1
    vertical_spacing: VerticalSpacing = field(default_factory=VerticalSpacing)

    def __post_init__(self) -> None:
        # Read-only view so the frozen config cannot be changed through the mapping
        object.__setattr__(self, "area_mappings", MappingProxyType(dict(self.area_mappings)))

        if self.min_font_size <= 0:
            raise ConfigurationError(f"min_font_size must be positive, got {self.min_font_size}")
        if self.min_font_size > self.base_font_size:
            raise ConfigurationError(
                f"min_font_size ({self.min_font_size}) must not exceed "
                f"base_font_size ({self.base_font_size})"
            )
        if self.scale_step <= 0:
            raise ConfigurationError(f"scale_step must be positive, got {self.scale_step}")
        if self.line_spacing <= 0:
            raise ConfigurationError(f"line_spacing must be positive, got {self.line_spacing}")
        if self.canvas_width <= 0:
            raise ConfigurationError(f"canvas_width must be positive, got {self.canvas_width}")
        missing = [o.value for o in Orientation if o not in self.area_mappings]
        if missing:
            raise ConfigurationError(f"Missing area mapping for: {', '.join(missing)}")

    def get_area_mapping(self, orientation: Orientation | str) -> Rect:
        """Return the raw area mapping rectangle for an orientation."""
        return self.area_mappings[Orientation.parse(orientation)]

    def get_text_area(self, orientation: Orientation | str) -> TextArea:
        """Derive the usable text rectangle for an orientation.

        Args:
            orientation: Text orientation.

        Returns:
            Area mapping shrunk by the margins on every side.

        Raises:
            UnsupportedOrientationError: If orientation is not recognized.
        """
        orientation = Orientation.parse(orientation)
        mapping = self.area_mappings[orientation]
        return TextArea(
            x=mapping.x + self.margins.left,
            y=mapping.y + self.margins.top,
            width=mapping.width - self.margins.left - self.margins.right,
            height=mapping.height - self.margins.top - self.margins.bottom,
            orientation=orientation,
        )

    def get_print_area_bounds(self, orientation: Orientation | str) -> PrintAreaBounds:
        """Get the outer and inner rectangles for drawing area guides."""
        orientation = Orientation.parse(orientation)
        return PrintAreaBounds(
            outer=self.area_mappings[orientation],
            inner=self.get_text_area(orientation),
            width_inches=self.print_area.width_inches,
            height_inches=self.print_area.height_inches,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "print_area": self.print_area.to_dict(),
            "canvas_width": self.canvas_width,
            "canvas_height": self.canvas_height,
            "area_mappings": {o.value: r.to_dict() for o, r in self.area_mappings.items()},
            "margins": self.margins.to_dict(),
            "base_font_size": self.base_font_size,
            "min_font_size": self.min_font_size,
            "scale_step": self.scale_step,
            "line_spacing": self.line_spacing,
            "vertical_spacing": self.vertical_spacing.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LayoutConfig:
        """Create from dictionary, falling back to defaults for missing keys.

        Raises:
            ConfigurationError: If a value has the wrong type, a rectangle is
                incomplete, or the resulting configuration is invalid.
            UnsupportedOrientationError: If an area mapping key is unknown.
        """
        try:
            return cls._from_dict(data)
        except PrintLayoutError:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid layout configuration: {e!r}") from e

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> LayoutConfig:
        defaults = cls()
        area_mappings = dict(defaults.area_mappings)
        for key, rect in data.get("area_mappings", {}).items():
            area_mappings[Orientation.parse(key)] = Rect.from_dict(rect)

        return cls(
            print_area=PrintArea.from_dict(data.get("print_area", {})),
            canvas_width=float(data.get("canvas_width", defaults.canvas_width)),
            canvas_height=float(data.get("canvas_height", defaults.canvas_height)),
            area_mappings=area_mappings,
            margins=Margins.from_dict(data.get("margins", {})),
            base_font_size=int(data.get("base_font_size", defaults.base_font_size)),
            min_font_size=int(data.get("min_font_size", defaults.min_font_size)),
            scale_step=int(data.get("scale_step", defaults.scale_step)),
            line_spacing=float(data.get("line_spacing", defaults.line_spacing)),
            vertical_spacing=VerticalSpacing.from_dict(data.get("vertical_spacing", {})),
        )

    @classmethod
    def from_json_file(cls, path: Union[Path, str]) -> LayoutConfig:
        """Load configuration overrides from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the file is not a JSON object or is invalid.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a JSON object: {path}")
        return cls.from_dict(data)
