"""Request parsing and dependency helpers for the SVG endpoints."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from fastapi import File, Form, Request, UploadFile

from server.config import settings
from server.exceptions import PayloadTooLargeError
from server.rate_limit import check_rate_limit
from server.svg.constants import DEFAULT_ORIGIN, DEFAULT_PAGE, UPLOAD_FIELD
from svgcrop.errors import InvalidCropBoxError, MissingInputError, OutOfRangeError
from svgcrop.geometry import ORIGINS, CropRect
from svgcrop.renderers import PageRenderer


@dataclass(frozen=True)
class CropForm:
    page: int
    rect: CropRect


def _blank(raw: Optional[str]) -> bool:
    return raw is None or not raw.strip()


def _parse_float(name: str, raw: Optional[str], required: bool) -> Optional[float]:
    if _blank(raw):
        if required:
            raise MissingInputError(f"Missing required field '{name}'")
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidCropBoxError(f"Field '{name}' must be a number, got {raw!r}") from exc
    if not math.isfinite(value):
        raise InvalidCropBoxError(f"Field '{name}' must be finite, got {raw!r}")
    return value


def _parse_page(raw: Optional[str]) -> int:
    if _blank(raw):
        return DEFAULT_PAGE
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise OutOfRangeError(f"Page must be an integer, got {raw!r}") from exc


def _parse_origin(raw: Optional[str]) -> str:
    if _blank(raw):
        return DEFAULT_ORIGIN
    origin = raw.strip().lower()
    if origin not in ORIGINS:
        raise InvalidCropBoxError(
            f"coordsOrigin must be one of {', '.join(ORIGINS)}, got {raw!r}"
        )
    return origin


def _parse_raster(name: str, raw: Optional[str]) -> Optional[float]:
    value = _parse_float(name, raw, required=False)
    if value is not None and value <= 0:
        raise InvalidCropBoxError(f"Field '{name}' must be positive, got {raw!r}")
    return value


async def parse_crop_form(
    page: Optional[str] = Form(default=None),
    x1: Optional[str] = Form(default=None),
    y1: Optional[str] = Form(default=None),
    x2: Optional[str] = Form(default=None),
    y2: Optional[str] = Form(default=None),
    coordsOrigin: Optional[str] = Form(default=None),
    rasterPageWidth: Optional[str] = Form(default=None),
    rasterPageHeight: Optional[str] = Form(default=None),
) -> CropForm:
    rect = CropRect(
        x1=_parse_float("x1", x1, required=True),
        y1=_parse_float("y1", y1, required=True),
        x2=_parse_float("x2", x2, required=True),
        y2=_parse_float("y2", y2, required=True),
        origin=_parse_origin(coordsOrigin),
        raster_width=_parse_raster("rasterPageWidth", rasterPageWidth),
        raster_height=_parse_raster("rasterPageHeight", rasterPageHeight),
    )
    return CropForm(page=_parse_page(page), rect=rect)


async def read_pdf_upload(data: Optional[UploadFile] = File(default=None)) -> bytes:
    if data is None:
        raise MissingInputError(f"No PDF uploaded in field '{UPLOAD_FIELD}'")
    limit = settings.max_upload_bytes
    pdf_bytes = await data.read(limit + 1)
    if not pdf_bytes:
        raise MissingInputError("Uploaded PDF is empty")
    if len(pdf_bytes) > limit:
        raise PayloadTooLargeError(f"Uploaded PDF exceeds the {limit} byte limit")
    return pdf_bytes


def get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer


async def enforce_rate_limit(request: Request) -> None:
    check_rate_limit(request)
