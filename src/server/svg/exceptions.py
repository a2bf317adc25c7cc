"""HTTP status mapping for pipeline errors."""

from svgcrop.errors import SvgCropError

STATUS_BY_CODE = {
    "missing_input": 400,
    "invalid_crop_box": 400,
    "page_out_of_range": 400,
    "unknown_page_size": 422,
    "malformed_svg": 422,
    "render_failed": 502,
}


def status_for(exc: SvgCropError) -> int:
    return STATUS_BY_CODE.get(exc.code, 500)
