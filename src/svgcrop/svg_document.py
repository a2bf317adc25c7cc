"""SVG document helpers built on lxml.

Pages come back from the renderer as full SVG documents. These helpers parse
them into an element tree and expose the pieces the cropper needs: the root
``viewBox``, the root namespace/``xml:*`` declarations, and the inner content.
"""

from __future__ import annotations

import math
import re
from typing import Dict, List, Optional, Tuple

from lxml import etree

from svgcrop.errors import MalformedSvgError
from svgcrop.geometry import ViewBox

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

_XML_DECLARATION = re.compile(r"^\s*<\?xml\b[^>]*\?>", re.IGNORECASE)
_VIEWBOX_SEPARATOR = re.compile(r"[\s,]+")

# Renderer output may embed multi-megabyte base64 images.
_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    huge_tree=True,
    remove_blank_text=False,
)


def strip_xml_declaration(svg: str) -> str:
    """Remove a leading BOM and ``<?xml ...?>`` prologue."""
    return _XML_DECLARATION.sub("", svg.lstrip("\ufeff"), count=1).lstrip()


def parse_svg_root(svg: str) -> etree._Element:
    """Parse ``svg`` and return its root ``<svg>`` element.

    Raises:
        MalformedSvgError: the text is not XML or its root is not ``<svg>``.
    """
    if not isinstance(svg, str) or not svg.strip():
        raise MalformedSvgError("SVG page is empty")
    try:
        root = etree.fromstring(strip_xml_declaration(svg), _PARSER)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise MalformedSvgError(f"SVG page could not be parsed: {exc}") from exc
    if not isinstance(root.tag, str) or etree.QName(root).localname != "svg":
        raise MalformedSvgError("SVG page has no root <svg> element")
    return root


def view_box_from_element(root: etree._Element) -> Optional[ViewBox]:
    raw = root.get("viewBox")
    if raw is None:
        return None
    tokens = [t for t in _VIEWBOX_SEPARATOR.split(raw.strip()) if t]
    if len(tokens) != 4:
        return None
    try:
        values = [float(t) for t in tokens]
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in values):
        return None
    return ViewBox(*values)


def parse_view_box(svg: str) -> Optional[ViewBox]:
    """Return the root element's view box, or None when it cannot be read.

    Only the outermost ``<svg>`` counts; nested ``<svg>`` elements are ignored.
    """
    try:
        root = parse_svg_root(svg)
    except MalformedSvgError:
        return None
    return view_box_from_element(root)


def namespace_declarations(root: etree._Element) -> Dict[Optional[str], str]:
    """Namespace prefixes declared on the root (``None`` is the default)."""
    # The root has no parent, so nsmap holds only its own declarations.
    return dict(root.nsmap)


def xml_attributes(root: etree._Element) -> List[Tuple[str, str]]:
    """``xml:*`` attributes of the root as ``(clark_name, value)`` pairs."""
    prefix = f"{{{XML_NS}}}"
    return [(name, value) for name, value in root.attrib.items() if name.startswith(prefix)]


def serialize_node(node: etree._Element) -> str:
    """Serialize one node including its tail text."""
    return etree.tostring(node, encoding="unicode", with_tail=True)


def extract_inner_svg(svg: str) -> str:
    """Return everything between the root ``<svg>`` start and end tags.

    Each top-level child is serialized on its own, so it carries any namespace
    declarations it needs to stand alone.
    """
    root = parse_svg_root(svg)
    return (root.text or "") + "".join(serialize_node(child) for child in root)
