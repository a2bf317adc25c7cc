"""Render → select → map → crop orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from starlette.concurrency import run_in_threadpool

from svgcrop.cropper import crop_svg
from svgcrop.errors import MissingInputError, RenderError, UnknownPageSizeError
from svgcrop.geometry import CropRect, MappedRect, ViewBox, map_to_svg_units
from svgcrop.pages import select_page
from svgcrop.renderers import PageRenderer
from svgcrop.svg_document import parse_svg_root, view_box_from_element

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CropResult:
    svg: str
    page: int
    coords_in: CropRect
    view_box: ViewBox
    coords_svg: MappedRect


async def extract_svg_pages(pdf_bytes: bytes, renderer: PageRenderer) -> List[str]:
    """Render every page of ``pdf_bytes`` to an SVG document."""
    if not pdf_bytes:
        raise MissingInputError("No PDF data supplied")
    pages = await renderer.render_pages(pdf_bytes)
    if not pages:
        raise RenderError("Renderer returned no pages")
    return list(pages)


def crop_page_svg(page_svg: str, rect: CropRect) -> Tuple[str, ViewBox, MappedRect]:
    """Crop one rendered page; returns ``(svg, view_box, mapped_rect)``."""
    root = parse_svg_root(page_svg)
    view_box = view_box_from_element(root)
    if view_box is None or not view_box.is_usable:
        raise UnknownPageSizeError("Could not determine page size: SVG has no usable viewBox")
    mapped = map_to_svg_units(rect, view_box)
    return crop_svg(page_svg, mapped, view_box), view_box, mapped


async def crop_pdf_page(
    pdf_bytes: bytes,
    rect: CropRect,
    renderer: PageRenderer,
    page: int = 1,
) -> CropResult:
    pages = await extract_svg_pages(pdf_bytes, renderer)
    page_svg = select_page(pages, page)
    svg, view_box, mapped = await run_in_threadpool(crop_page_svg, page_svg, rect)
    logger.info(
        f"Cropped page {page}/{len(pages)} ({rect.origin} origin) "
        f"to {mapped.width:.2f}x{mapped.height:.2f} SVG units"
    )
    return CropResult(
        svg=svg,
        page=page,
        coords_in=rect,
        view_box=view_box,
        coords_svg=mapped,
    )
