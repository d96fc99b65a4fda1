# SPDX-License-Identifier: Apache-2.0
"""ctypes conversion helpers for pypdfium2's raw API."""

import ctypes

FONT_FILE_SUFFIXES = (".ttf", ".otf", ".ttc")


def to_byte_array(data: bytes) -> ctypes.Array:
    """Copy bytes into a ctypes c_ubyte array that PDFium can read from.

    The returned array must be kept alive for as long as PDFium uses it
    (e.g. the lifetime of a font loaded with FPDFText_LoadFont).
    """
    return (ctypes.c_ubyte * len(data)).from_buffer_copy(data)


def is_font_file(font_family: str) -> bool:
    """Whether a font family name refers to a font file on disk."""
    return font_family.lower().endswith(FONT_FILE_SUFFIXES)
