# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: deterministic text measurers."""

from __future__ import annotations

from collections.abc import Callable

import pytest


class FixedAdvanceMeasurer:
    """Every character is ratio × font_size wide; records each call."""

    def __init__(self, ratio: float) -> None:
        self.ratio = ratio
        self.calls: list[tuple[str, str, float]] = []

    def measure(self, text: str, font_family: str, font_size: float) -> float:
        self.calls.append((text, font_family, font_size))
        return len(text) * font_size * self.ratio


class TableMeasurer:
    """Widths looked up from a table; unknown strings are very wide."""

    def __init__(self, widths: dict[str, float], default: float = 10_000.0) -> None:
        self.widths = widths
        self.default = default

    def measure(self, text: str, font_family: str, font_size: float) -> float:
        return self.widths.get(text, self.default)


@pytest.fixture
def advance_measurer() -> Callable[[float], FixedAdvanceMeasurer]:
    """Factory for FixedAdvanceMeasurer."""
    return FixedAdvanceMeasurer


@pytest.fixture
def table_measurer() -> Callable[..., TableMeasurer]:
    """Factory for TableMeasurer."""
    return TableMeasurer
