"""Crop a rendered SVG page down to one rectangle.

The output is a new standalone SVG whose viewBox is the crop size. The page's
original content is moved, unmodified, into a single ``<g>`` translated so the
crop corner lands on the origin.

Content outside the rectangle is not removed and no clip-path is added: it is
only pushed outside the visible window. Exporters that ignore the viewBox as a
clip region may show it.
"""

from __future__ import annotations

import logging
from typing import Optional

from lxml import etree

from svgcrop.errors import InvalidCropBoxError, UnknownPageSizeError
from svgcrop.geometry import MappedRect, ViewBox
from svgcrop.svg_document import (
    SVG_NS,
    XLINK_NS,
    XML_NS,
    namespace_declarations,
    parse_svg_root,
    view_box_from_element,
    xml_attributes,
)

logger = logging.getLogger(__name__)

PRESERVE_ASPECT_RATIO = "xMidYMid meet"
_XML_SPACE = f"{{{XML_NS}}}space"


def format_number(value: float) -> str:
    """Shortest fixed-point text for ``value`` (``40`` not ``40.0``)."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def crop_svg(page_svg: str, rect: MappedRect, view_box: Optional[ViewBox] = None) -> str:
    """Return a standalone SVG showing only ``rect`` of ``page_svg``.

    Args:
        page_svg: Full page SVG document.
        rect: Crop box in the page's viewBox units, relative to its origin.
        view_box: Page view box; parsed from ``page_svg`` when omitted.

    Raises:
        MalformedSvgError: ``page_svg`` has no root ``<svg>`` element.
        InvalidCropBoxError: ``rect`` has no area.
        UnknownPageSizeError: no view box given and none on the page.
    """
    root = parse_svg_root(page_svg)

    width, height = rect.width, rect.height
    if not (width > 0 and height > 0):
        raise InvalidCropBoxError(f"Crop box has no area (width={width}, height={height})")
    # Sizes are written with six decimals; anything smaller would serialize as 0.
    if format_number(width) == "0" or format_number(height) == "0":
        raise InvalidCropBoxError(
            f"Crop box is too small to represent (width={width}, height={height})"
        )

    if view_box is None:
        view_box = view_box_from_element(root)
        if view_box is None:
            raise UnknownPageSizeError("SVG page has no readable viewBox")

    dx = -(view_box.min_x + rect.x1)
    dy = -(view_box.min_y + rect.y1)

    nsmap = namespace_declarations(root)
    nsmap.setdefault(None, SVG_NS)
    nsmap.setdefault("xlink", XLINK_NS)

    namespace = etree.QName(root).namespace or SVG_NS
    cropped = etree.Element(f"{{{namespace}}}svg", nsmap=nsmap)
    for name, value in xml_attributes(root):
        cropped.set(name, value)
    if cropped.get(_XML_SPACE) is None:
        cropped.set(_XML_SPACE, "preserve")
    cropped.set("viewBox", f"0 0 {format_number(width)} {format_number(height)}")
    cropped.set("preserveAspectRatio", PRESERVE_ASPECT_RATIO)

    group = etree.SubElement(cropped, f"{{{namespace}}}g")
    group.set("transform", f"translate({format_number(dx)},{format_number(dy)})")
    group.text = root.text
    for child in list(root):
        group.append(child)

    logger.debug(
        f"Cropped page to {format_number(width)}x{format_number(height)} "
        f"at translate({format_number(dx)},{format_number(dy)})"
    )
    return etree.tostring(cropped, encoding="unicode")
