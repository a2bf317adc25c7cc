"""svgcrop - crop rendered PDF pages at the SVG level."""

from .cropper import crop_svg
from .errors import (
    InvalidCropBoxError,
    MalformedSvgError,
    MissingInputError,
    OutOfRangeError,
    RenderError,
    SvgCropError,
    UnknownPageSizeError,
)
from .geometry import CropRect, MappedRect, ViewBox, map_to_svg_units
from .pages import select_page
from .pipeline import CropResult, crop_page_svg, crop_pdf_page, extract_svg_pages
from .svg_document import extract_inner_svg, parse_view_box

__all__ = [
    "crop_svg",
    "crop_page_svg",
    "crop_pdf_page",
    "extract_svg_pages",
    "extract_inner_svg",
    "parse_view_box",
    "map_to_svg_units",
    "select_page",
    "CropRect",
    "CropResult",
    "MappedRect",
    "ViewBox",
    "SvgCropError",
    "MissingInputError",
    "InvalidCropBoxError",
    "OutOfRangeError",
    "UnknownPageSizeError",
    "MalformedSvgError",
    "RenderError",
]
