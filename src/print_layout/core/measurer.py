# SPDX-License-Identifier: Apache-2.0
"""Text width measurement backends.

The layout engine only ever asks one question: how wide is this string at
this font? This module defines that capability and provides:
- PdfiumTextMeasurer: glyph widths from PDFium (standard PDF fonts or TTF files)
- PillowTextMeasurer: advance widths from FreeType via Pillow
- CachingMeasurer: memoising wrapper used for the duration of one fit
"""

from __future__ import annotations

import ctypes
import logging
from pathlib import Path
from typing import Any, Optional, Protocol, runtime_checkable

import pypdfium2 as pdfium  # type: ignore[import-untyped]
from PIL import ImageFont

from ..errors import FontLoadError
from .helpers import is_font_file, to_byte_array

logger = logging.getLogger(__name__)


@runtime_checkable
class TextMeasurer(Protocol):
    """Protocol for text width measurement.

    Implementations must be deterministic: the same text and font always
    yield the same width.
    """

    def measure(self, text: str, font_family: str, font_size: float) -> float:
        """Measure the rendered width of text.

        Args:
            text: Text to measure.
            font_family: Font family name or font file path.
            font_size: Font size in pixels.

        Returns:
            Width in the same unit as the layout area (pixels).
        """
        ...


class CachingMeasurer:
    """Memoise another measurer per (text, font_family, font_size)."""

    def __init__(self, measurer: TextMeasurer) -> None:
        self._measurer = measurer
        self._cache: dict[tuple[str, str, float], float] = {}

    def measure(self, text: str, font_family: str, font_size: float) -> float:
        key = (text, font_family, font_size)
        width = self._cache.get(key)
        if width is None:
            width = float(self._measurer.measure(text, font_family, font_size))
            self._cache[key] = width
        return width

    @property
    def cache_size(self) -> int:
        """Number of distinct measurements made."""
        return len(self._cache)


class PdfiumTextMeasurer:
    """Measure text with PDFium font metrics.

    Font families ending in .ttf/.otf/.ttc are loaded from disk as CID
    TrueType fonts; anything else is treated as one of the 14 standard PDF
    fonts (e.g. "Helvetica", "Times-Roman").

    Example:
        >>> with PdfiumTextMeasurer() as measurer:
        ...     width = measurer.measure("Hello", "Helvetica", 40)
    """

    def __init__(self) -> None:
        self._pdf: Optional[pdfium.PdfDocument] = pdfium.PdfDocument.new()
        self._loaded_fonts: dict[str, Any] = {}
        self._loaded_font_buffers: dict[str, ctypes.Array[Any]] = {}

    def __enter__(self) -> PdfiumTextMeasurer:
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Any,
    ) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the scratch document and release loaded fonts."""
        self._loaded_fonts.clear()
        self._loaded_font_buffers.clear()
        if self._pdf is not None:
            self._pdf.close()
            self._pdf = None

    def _ensure_open(self) -> pdfium.PdfDocument:
        if self._pdf is None:
            raise RuntimeError("PdfiumTextMeasurer is closed")
        return self._pdf

    def _load_font(self, font_family: str) -> Any:
        """Load (or fetch from cache) a PDFium font handle.

        Raises:
            FontLoadError: If the font cannot be loaded.
        """
        if font_family in self._loaded_fonts:
            return self._loaded_fonts[font_family]

        pdf = self._ensure_open()
        if is_font_file(font_family):
            path = Path(font_family)
            if not path.exists():
                raise FontLoadError(f"Font file not found: {path}")
            font_data = path.read_bytes()
            font_arr = to_byte_array(font_data)
            # Keep the buffer alive for the lifetime of the font
            self._loaded_font_buffers[font_family] = font_arr
            font_handle = pdfium.raw.FPDFText_LoadFont(
                pdf.raw,
                font_arr,
                ctypes.c_uint(len(font_data)),
                ctypes.c_int(pdfium.raw.FPDF_FONT_TRUETYPE),
                ctypes.c_int(1),
            )
        else:
            font_handle = pdfium.raw.FPDFText_LoadStandardFont(
                pdf.raw, font_family.encode("utf-8")
            )

        if not font_handle:
            self._loaded_font_buffers.pop(font_family, None)
            raise FontLoadError(f"PDFium could not load font: {font_family}")

        logger.debug("Loaded PDFium font %s", font_family)
        self._loaded_fonts[font_family] = font_handle
        return font_handle

    def measure(self, text: str, font_family: str, font_size: float) -> float:
        """Sum the glyph widths of text at the given size."""
        if not text:
            return 0.0

        font_handle = self._load_font(font_family)
        total_width = 0.0
        width_out = ctypes.c_float()

        for char in text:
            result = pdfium.raw.FPDFFont_GetGlyphWidth(
                font_handle,
                ord(char),
                ctypes.c_float(font_size),
                ctypes.byref(width_out),
            )
            if result:
                total_width += width_out.value

        return total_width


class PillowTextMeasurer:
    """Measure text with FreeType advance widths via Pillow.

    font_family must be a path (or a name FreeType can resolve) of a
    TrueType/OpenType font.
    """

    def __init__(self) -> None:
        self._font_cache: dict[tuple[str, float], ImageFont.FreeTypeFont] = {}

    def _get_font(self, font_family: str, font_size: float) -> ImageFont.FreeTypeFont:
        cache_key = (font_family, font_size)
        if cache_key not in self._font_cache:
            try:
                self._font_cache[cache_key] = ImageFont.truetype(font_family, font_size)
            except OSError as e:
                raise FontLoadError(f"Pillow could not load font {font_family}: {e}") from e
        return self._font_cache[cache_key]

    def measure(self, text: str, font_family: str, font_size: float) -> float:
        """Return the advance width of text at the given size."""
        if not text:
            return 0.0
        return float(self._get_font(font_family, font_size).getlength(text))
