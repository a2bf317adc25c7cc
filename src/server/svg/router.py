"""SVG extraction and crop API routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from server.stats import record_crop, record_extraction
from server.svg.constants import DEFAULT_SVG_NAME, SVG_MEDIA_TYPE
from server.svg.dependencies import (
    CropForm,
    enforce_rate_limit,
    get_renderer,
    parse_crop_form,
    read_pdf_upload,
)
from server.svg.schemas import CropResponse, ErrorResponse, ExtractResponse
from server.svg.service import crop_page, extract_pages, to_crop_response
from svgcrop.renderers import PageRenderer


router = APIRouter(tags=["svg"])

ERROR_RESPONSES = {
    status: {"model": ErrorResponse} for status in (400, 413, 422, 429, 502)
}


# The limiter runs first so rejected uploads still count against the cooldown.
@router.post("/extract-svg", response_model=ExtractResponse, responses=ERROR_RESPONSES)
async def extract_svg(
    _: None = Depends(enforce_rate_limit),
    pdf_bytes: bytes = Depends(read_pdf_upload),
    renderer: PageRenderer = Depends(get_renderer),
):
    pages = await extract_pages(pdf_bytes, renderer)
    record_extraction()
    return ExtractResponse(svgPages=pages)


@router.post("/crop-svg", response_model=CropResponse, responses=ERROR_RESPONSES)
async def crop_svg_json(
    _: None = Depends(enforce_rate_limit),
    pdf_bytes: bytes = Depends(read_pdf_upload),
    form: CropForm = Depends(parse_crop_form),
    renderer: PageRenderer = Depends(get_renderer),
):
    result = await crop_page(pdf_bytes, form, renderer)
    record_crop()
    return to_crop_response(result)


@router.post(
    "/crop-svg/file",
    response_class=Response,
    responses={200: {"content": {SVG_MEDIA_TYPE: {}}}, **ERROR_RESPONSES},
)
async def crop_svg_file(
    _: None = Depends(enforce_rate_limit),
    pdf_bytes: bytes = Depends(read_pdf_upload),
    form: CropForm = Depends(parse_crop_form),
    renderer: PageRenderer = Depends(get_renderer),
):
    result = await crop_page(pdf_bytes, form, renderer)
    record_crop()
    filename = DEFAULT_SVG_NAME.format(page=result.page)
    return Response(
        content=result.svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
