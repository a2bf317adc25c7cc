"""Error taxonomy for the render and crop pipeline.

Every failure a request can hit maps to exactly one of these classes. The HTTP
layer translates ``code`` into a status; the CLI prints the message.
"""

from __future__ import annotations

from typing import Optional


class SvgCropError(Exception):
    """Base class for all pipeline failures."""

    code: str = "svgcrop_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingInputError(SvgCropError):
    """A required file or numeric field was not supplied."""

    code = "missing_input"


class InvalidCropBoxError(SvgCropError):
    """Crop coordinates are non-finite or collapse to an empty rectangle."""

    code = "invalid_crop_box"


class OutOfRangeError(SvgCropError):
    """Requested page number is outside ``[1, page_count]``."""

    code = "page_out_of_range"


class UnknownPageSizeError(SvgCropError):
    """Selected page has no usable ``viewBox``."""

    code = "unknown_page_size"


class MalformedSvgError(SvgCropError):
    """Page text does not contain a root ``<svg>`` element."""

    code = "malformed_svg"


class RenderError(SvgCropError):
    """The page renderer failed, timed out or produced no pages."""

    code = "render_failed"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
