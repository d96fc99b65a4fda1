# SPDX-License-Identifier: Apache-2.0
"""Layout export modules."""

from .printful_export import export_for_printful, export_glyph_coordinates

__all__ = [
    "export_for_printful",
    "export_glyph_coordinates",
]
