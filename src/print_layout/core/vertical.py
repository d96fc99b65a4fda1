# SPDX-License-Identifier: Apache-2.0
"""Text normalisation for single-column vertical layout."""

from __future__ import annotations

import re

# Full-width vertical line; stands in for every dash in a top-to-bottom column
VERTICAL_SEPARATOR = "｜"

# Hyphen-like characters replaced by VERTICAL_SEPARATOR
DASH_CHARACTERS: frozenset[str] = frozenset(
    {
        "ー",  # prolonged sound mark
        "-",
        "‐",  # hyphen
        "‑",  # non-breaking hyphen
        "‒",  # figure dash
        "–",  # en dash
        "—",  # em dash
        "−",  # minus sign
        "﹘",  # small em dash
        "﹣",  # small hyphen-minus
        "－",  # full-width hyphen-minus
    }
)

_WHITESPACE_RE = re.compile(r"\s+")
_DASH_RE = re.compile("[" + re.escape("".join(sorted(DASH_CHARACTERS))) + "]")


def normalize_vertical_text(text: str) -> str:
    """Prepare text for a top-to-bottom column.

    Removes all whitespace and maps every dash variant to VERTICAL_SEPARATOR.

    Args:
        text: Raw input text.

    Returns:
        Normalised column text.
    """
    collapsed = _WHITESPACE_RE.sub("", text or "")
    return _DASH_RE.sub(VERTICAL_SEPARATOR, collapsed).strip()
