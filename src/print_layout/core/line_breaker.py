# SPDX-License-Identifier: Apache-2.0
"""Horizontal line breaking.

Text is laid out on at most two lines and only broken at whitespace. When
two lines are needed, the split that makes both lines closest in width wins.
Overflow is not handled here: if nothing fits, the whole text is returned as
a single line and the caller keeps shrinking the font.
"""

from __future__ import annotations

import re

from .measurer import TextMeasurer
from .models import Orientation, TextArea

_WHITESPACE_RE = re.compile(r"\s+")


def split_words(text: str) -> list[str]:
    """Split text on whitespace runs, dropping empty tokens."""
    return [word for word in _WHITESPACE_RE.split(text) if word]


def should_force_two_lines(
    text: str,
    orientation: Orientation,
    font_family: str,
    base_font_size: float,
    text_area: TextArea,
    measurer: TextMeasurer,
) -> bool:
    """Decide whether a horizontal layout must use two lines.

    True when the text contains whitespace and its single-line width at the
    base font size is wider than the text area. The decision is made once
    per fit and kept for every smaller candidate size.
    """
    if orientation is not Orientation.HORIZONTAL:
        return False
    if not _WHITESPACE_RE.search(text):
        return False
    base_width = measurer.measure(text.strip(), font_family, base_font_size)
    return base_width > text_area.width


def find_balanced_split(
    words: list[str],
    font_family: str,
    font_size: float,
    max_width: float,
    measurer: TextMeasurer,
) -> int:
    """Find the split index giving the two most equal-width lines.

    Args:
        words: Words to split (at least two for a split to exist).
        font_family: Font family.
        font_size: Font size in pixels.
        max_width: Maximum width of either line.
        measurer: Text measurer.

    Returns:
        Index i such that words[:i] / words[i:] is the best split, or -1 if
        no split keeps both lines within max_width. Ties keep the lowest index.
    """
    best_index = -1
    best_score = float("inf")

    for i in range(1, len(words)):
        left_width = measurer.measure(" ".join(words[:i]), font_family, font_size)
        right_width = measurer.measure(" ".join(words[i:]), font_family, font_size)
        if left_width <= max_width and right_width <= max_width:
            score = abs(left_width - right_width)
            if score < best_score:
                best_score = score
                best_index = i

    return best_index


def break_horizontal_lines(
    text: str,
    font_family: str,
    font_size: float,
    text_area: TextArea,
    measurer: TextMeasurer,
    force_two_lines: bool = False,
) -> list[str]:
    """Break text into one or two lines that fit the text area width.

    Args:
        text: Text to lay out.
        font_family: Font family.
        font_size: Candidate font size in pixels.
        text_area: Area the lines must fit in.
        measurer: Text measurer.
        force_two_lines: Never return a single line when a split fits.

    Returns:
        One or two lines. A single line may be wider than the area.
    """
    trimmed = (text or "").strip()
    max_width = text_area.width

    if not force_two_lines and measurer.measure(trimmed, font_family, font_size) <= max_width:
        return [trimmed]

    words = split_words(trimmed)

    # Forced: prefer the first word on its own line
    if force_two_lines and len(words) >= 2:
        left = words[0]
        right = " ".join(words[1:])
        if (
            measurer.measure(left, font_family, font_size) <= max_width
            and measurer.measure(right, font_family, font_size) <= max_width
        ):
            return [left, right]

    if len(words) > 1:
        split = find_balanced_split(words, font_family, font_size, max_width, measurer)
        if split > 0:
            return [" ".join(words[:split]), " ".join(words[split:])]

    return [trimmed]
