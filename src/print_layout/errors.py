# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for print_layout."""


class PrintLayoutError(Exception):
    """Base exception for print_layout."""

    pass


class UnsupportedOrientationError(PrintLayoutError, ValueError):
    """Orientation is not one of the supported variants.

    This is a programming error - the set of orientations is closed.
    """

    def __init__(self, orientation: object) -> None:
        super().__init__(f"Unsupported orientation: {orientation!r}")
        self.orientation = orientation


class ConfigurationError(PrintLayoutError):
    """Invalid layout configuration (font size bounds, missing mapping, etc.)."""

    pass


class FontLoadError(PrintLayoutError):
    """A text measurer could not load the requested font."""

    pass
