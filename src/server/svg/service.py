"""SVG extraction and crop orchestration for the API."""

from __future__ import annotations

import logging
from typing import List

from server.svg.dependencies import CropForm
from server.svg.schemas import CoordsIn, CoordsSvg, CropResponse, SvgViewBox
from svgcrop.pipeline import CropResult, crop_pdf_page, extract_svg_pages
from svgcrop.renderers import PageRenderer

logger = logging.getLogger(__name__)


async def extract_pages(pdf_bytes: bytes, renderer: PageRenderer) -> List[str]:
    pages = await extract_svg_pages(pdf_bytes, renderer)
    logger.info(f"Extracted {len(pages)} SVG page(s) with {renderer.name}")
    return pages


async def crop_page(pdf_bytes: bytes, form: CropForm, renderer: PageRenderer) -> CropResult:
    return await crop_pdf_page(pdf_bytes, form.rect, renderer, page=form.page)


def to_crop_response(result: CropResult) -> CropResponse:
    return CropResponse(
        svg=result.svg,
        page=result.page,
        coordsIn=CoordsIn(**result.coords_in.to_dict()),
        svgViewBox=SvgViewBox(**result.view_box.to_dict()),
        coordsSvg=CoordsSvg(**result.coords_svg.to_dict()),
    )
