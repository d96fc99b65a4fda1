# SPDX-License-Identifier: Apache-2.0
"""Tests for LayoutConfig and area mapping."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from print_layout.core.config import LayoutConfig, Margins, PrintArea
from print_layout.core.models import Orientation, Rect
from print_layout.errors import ConfigurationError, UnsupportedOrientationError


class TestTextArea:
    """Tests for get_text_area."""

    def test_default_text_area(self) -> None:
        """Default mapping shrinks by 3px on every side."""
        area = LayoutConfig().get_text_area(Orientation.HORIZONTAL)
        assert area.x == 203
        assert area.y == 81
        assert area.width == 194
        assert area.height == 264
        assert area.orientation is Orientation.HORIZONTAL

    def test_string_orientation(self) -> None:
        """String values are accepted and converted."""
        area = LayoutConfig().get_text_area("vertical")
        assert area.orientation is Orientation.VERTICAL

    def test_per_orientation_mapping(self) -> None:
        """Each orientation uses its own mapping."""
        config = LayoutConfig(
            area_mappings={
                Orientation.HORIZONTAL: Rect(0, 0, 100, 50),
                Orientation.VERTICAL: Rect(10, 20, 60, 300),
            },
            margins=Margins(top=1, bottom=2, left=3, right=4),
        )
        vertical = config.get_text_area(Orientation.VERTICAL)
        assert (vertical.x, vertical.y, vertical.width, vertical.height) == (13, 21, 53, 297)
        horizontal = config.get_text_area(Orientation.HORIZONTAL)
        assert (horizontal.width, horizontal.height) == (93, 47)

    def test_unsupported_orientation(self) -> None:
        """Unknown orientation fails loudly."""
        with pytest.raises(UnsupportedOrientationError):
            LayoutConfig().get_text_area("diagonal")

    def test_unsupported_orientation_is_value_error(self) -> None:
        """UnsupportedOrientationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            LayoutConfig().get_text_area("sideways")

    def test_print_area_bounds(self) -> None:
        """Bounds carry outer mapping, inner text area and physical size."""
        bounds = LayoutConfig().get_print_area_bounds("horizontal")
        assert bounds.outer == Rect(200, 78, 200, 270)
        assert bounds.inner.width == 194
        assert bounds.width_inches == 12.0
        assert bounds.height_inches == 16.0
        assert bounds.to_dict()["print_dimensions"] == {"width_inches": 12.0, "height_inches": 16.0}


class TestValidation:
    """Tests for configuration validation."""

    def test_min_above_base(self) -> None:
        with pytest.raises(ConfigurationError):
            LayoutConfig(base_font_size=10, min_font_size=12)

    def test_min_equal_base_allowed(self) -> None:
        config = LayoutConfig(base_font_size=12, min_font_size=12)
        assert config.base_font_size == 12

    @pytest.mark.parametrize("step", [0, -2])
    def test_non_positive_step(self, step: int) -> None:
        with pytest.raises(ConfigurationError):
            LayoutConfig(scale_step=step)

    def test_missing_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="vertical"):
            LayoutConfig(area_mappings={Orientation.HORIZONTAL: Rect(0, 0, 10, 10)})

    @pytest.mark.parametrize(
        "overrides",
        [
            {"min_font_size": 0, "base_font_size": 40},
            {"min_font_size": -4, "base_font_size": 0},
            {"canvas_width": 0.0},
            {"canvas_width": -600.0},
            {"line_spacing": 0.0},
            {"line_spacing": -1.1},
        ],
    )
    def test_non_positive_sizes(self, overrides: dict) -> None:
        field_name = next(k for k in overrides if k != "base_font_size")
        with pytest.raises(ConfigurationError, match=field_name):
            LayoutConfig(**overrides)


class TestImmutability:
    """The configuration cannot change after construction."""

    def test_area_mappings_read_only(self) -> None:
        config = LayoutConfig()
        with pytest.raises(TypeError):
            config.area_mappings[Orientation.HORIZONTAL] = Rect(0, 0, 1, 1)  # type: ignore[index]
        assert config.get_area_mapping("horizontal") == Rect(200, 78, 200, 270)

    def test_source_dict_is_copied(self) -> None:
        rect = Rect(0, 0, 10, 10)
        mappings = {Orientation.HORIZONTAL: rect, Orientation.VERTICAL: rect}
        config = LayoutConfig(area_mappings=mappings)
        mappings[Orientation.HORIZONTAL] = Rect(5, 5, 5, 5)
        assert config.get_area_mapping("horizontal") == Rect(0, 0, 10, 10)

    def test_hashable(self) -> None:
        assert hash(LayoutConfig()) == hash(LayoutConfig())
        assert len({LayoutConfig(), LayoutConfig()}) == 1

    def test_equality_compares_mappings(self) -> None:
        other = Rect(0, 0, 10, 10)
        changed = LayoutConfig(
            area_mappings={Orientation.HORIZONTAL: other, Orientation.VERTICAL: other}
        )
        assert LayoutConfig() == LayoutConfig()
        assert changed != LayoutConfig()


class TestLoading:
    """Tests for from_dict / from_json_file."""

    def test_from_dict_defaults(self) -> None:
        """An empty dict yields the default configuration."""
        assert LayoutConfig.from_dict({}) == LayoutConfig()

    def test_from_dict_overrides(self) -> None:
        config = LayoutConfig.from_dict(
            {
                "base_font_size": 30,
                "min_font_size": 10,
                "scale_step": 1,
                "print_area": {"width_inches": 10, "dpi": 150},
                "area_mappings": {"vertical": {"x": 1, "y": 2, "width": 3, "height": 4}},
            }
        )
        assert config.base_font_size == 30
        assert config.min_font_size == 10
        assert config.scale_step == 1
        assert config.print_area == PrintArea(width_inches=10.0, height_inches=16.0, dpi=150)
        assert config.area_mappings[Orientation.VERTICAL] == Rect(1, 2, 3, 4)
        assert config.area_mappings[Orientation.HORIZONTAL] == Rect(200, 78, 200, 270)

    def test_from_dict_unknown_orientation(self) -> None:
        with pytest.raises(UnsupportedOrientationError):
            LayoutConfig.from_dict(
                {"area_mappings": {"diagonal": {"x": 0, "y": 0, "width": 1, "height": 1}}}
            )

    def test_round_trip_dict(self) -> None:
        config = LayoutConfig(base_font_size=36, line_spacing=1.25)
        assert LayoutConfig.from_dict(config.to_dict()) == config

    def test_from_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"base_font_size": 48, "scale_step": 4}), encoding="utf-8")
        config = LayoutConfig.from_json_file(path)
        assert config.base_font_size == 48
        assert config.scale_step == 4

    def test_from_json_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            LayoutConfig.from_json_file(tmp_path / "missing.json")

    def test_from_json_file_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            LayoutConfig.from_json_file(path)

    def test_from_json_file_not_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="JSON object"):
            LayoutConfig.from_json_file(path)

    def test_invalid_values_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"base_font_size": 8}), encoding="utf-8")
        with pytest.raises(ConfigurationError):
            LayoutConfig.from_json_file(path)

    @pytest.mark.parametrize(
        "data",
        [
            {"scale_step": "two"},
            {"line_spacing": None},
            {"area_mappings": {"horizontal": {"x": 1}}},
            {"area_mappings": {"horizontal": {"x": "left", "y": 0, "width": 1, "height": 1}}},
            {"area_mappings": ["horizontal"]},
            {"margins": "wide"},
        ],
    )
    def test_from_dict_malformed_values(self, data: dict) -> None:
        """Wrong types and incomplete rectangles surface as ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid layout configuration"):
            LayoutConfig.from_dict(data)

    def test_from_dict_malformed_keeps_cause(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            LayoutConfig.from_dict({"area_mappings": {"vertical": {"y": 1}}})
        assert isinstance(exc_info.value.__cause__, KeyError)
