# SPDX-License-Identifier: Apache-2.0
"""Tests for print export and unit conversion."""

from __future__ import annotations

import pytest

from print_layout.core.config import LayoutConfig
from print_layout.core.models import Orientation, Rect
from print_layout.core.text_layout import TextLayoutEngine
from print_layout.core.units import pixels_to_inches, pixels_to_points
from print_layout.output.printful_export import export_for_printful, export_glyph_coordinates


class TestUnits:
    """Tests for unit conversion."""

    def test_pixels_to_inches(self) -> None:
        # 600px canvas maps to 12in
        assert pixels_to_inches(600, 12, 600) == pytest.approx(12)
        assert pixels_to_inches(50, 12, 600) == pytest.approx(1)

    def test_pixels_to_points(self) -> None:
        assert pixels_to_points(96) == pytest.approx(72)
        assert pixels_to_points(40) == pytest.approx(30)

    def test_zero(self) -> None:
        assert pixels_to_inches(0, 12, 600) == 0
        assert pixels_to_points(0) == 0


class TestExportForPrintful:
    """Tests for export_for_printful."""

    def test_empty_layout(self, advance_measurer) -> None:
        config = LayoutConfig()
        layout = TextLayoutEngine(config).fit_text("   ", "horizontal", "Sans", advance_measurer(0.5))
        assert export_for_printful(layout, config) is None

    def test_horizontal_export(self, advance_measurer) -> None:
        config = LayoutConfig()
        layout = TextLayoutEngine(config).fit_text("HI", "horizontal", "Sans", advance_measurer(0.5))
        payload = export_for_printful(layout, config)

        assert payload is not None
        assert payload["print_area"] == {"width": 12.0, "height": 16.0, "dpi": 300}
        (element,) = payload["text_elements"]
        # Line is at x=280, y=145 on the canvas; mapping origin is (200, 78)
        assert element["text"] == "HI"
        assert element["x"] == pytest.approx(80 * 12 / 600)
        assert element["y"] == pytest.approx(67 * 12 / 600)
        assert element["font_size"] == pytest.approx(30)
        assert element["font_family"] == "Sans"
        assert element["width"] == pytest.approx(0.8)
        assert element["height"] == pytest.approx(0.8)

        metadata = payload["metadata"]
        assert metadata["exact_coordinates"] == {"x": 200, "y": 78, "width": 200, "height": 270}
        assert metadata["total_lines"] == 1
        assert metadata["font_size"] == 40
        assert metadata["base_font_size"] == 40
        assert metadata["orientation"] == "horizontal"

    def test_vertical_export(self, advance_measurer) -> None:
        config = LayoutConfig()
        layout = TextLayoutEngine(config).fit_text("ABC", "vertical", "Sans", advance_measurer(0.5))
        payload = export_for_printful(layout, config)
        assert payload is not None
        assert [e["text"] for e in payload["text_elements"]] == ["A", "B", "C"]
        assert payload["metadata"]["orientation"] == "vertical"
        assert payload["metadata"]["total_lines"] == 1

    def test_default_font_family(self, advance_measurer) -> None:
        config = LayoutConfig()
        layout = TextLayoutEngine(config).fit_text("HI", "horizontal", "", advance_measurer(0.5))
        payload = export_for_printful(layout, config)
        assert payload is not None
        assert payload["text_elements"][0]["font_family"] == "Arial"


class TestExportGlyphCoordinates:
    """Tests for export_glyph_coordinates."""

    def test_empty_layout(self, advance_measurer) -> None:
        measurer = advance_measurer(0.5)
        layout = TextLayoutEngine().fit_text("", "horizontal", "Sans", measurer)
        assert export_glyph_coordinates(layout, measurer) == []

    def test_relative_rounded(self, advance_measurer) -> None:
        measurer = advance_measurer(0.5)
        layout = TextLayoutEngine().fit_text("HI", "horizontal", "Sans", measurer)
        glyphs = export_glyph_coordinates(layout, measurer)
        assert glyphs == [
            {"char": "H", "x": 80, "y": 67, "font_size": 40, "line_index": 0},
            {"char": "I", "x": 101, "y": 67, "font_size": 40, "line_index": 0},
        ]


class TestExportAreaMappingSource:
    """Both exporters measure from the area mapping stored on the layout."""

    def test_config_mapping_does_not_shift_export(self, advance_measurer) -> None:
        measurer = advance_measurer(0.5)
        layout = TextLayoutEngine().fit_text("HI", "horizontal", "Sans", measurer)
        shifted = Rect(x=0, y=0, width=200, height=270)
        other_config = LayoutConfig(
            area_mappings={Orientation.HORIZONTAL: shifted, Orientation.VERTICAL: shifted}
        )

        payload = export_for_printful(layout, other_config)
        glyphs = export_glyph_coordinates(layout, measurer)

        assert payload is not None
        element = payload["text_elements"][0]
        assert element["x"] == pytest.approx(80 * 12 / 600)
        assert element["y"] == pytest.approx(67 * 12 / 600)
        assert payload["metadata"]["exact_coordinates"] == layout.area_mapping.to_dict()
        # Same origin as the glyph export
        assert element["x"] * 600 / 12 == pytest.approx(glyphs[0]["x"])
        assert element["y"] * 600 / 12 == pytest.approx(glyphs[0]["y"])
