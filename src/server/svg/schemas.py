"""Pydantic models for SVG extraction and crop responses."""

from typing import List, Literal, Optional

from pydantic import BaseModel


class ExtractResponse(BaseModel):
    svgPages: List[str]


class CoordsIn(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float
    origin: Literal["pdf", "topleft"] = "pdf"
    rasterPageWidth: Optional[float] = None
    rasterPageHeight: Optional[float] = None


class SvgViewBox(BaseModel):
    minX: float
    minY: float
    width: float
    height: float


class CoordsSvg(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    height: float


class CropResponse(BaseModel):
    svg: str
    page: int
    coordsIn: CoordsIn
    svgViewBox: SvgViewBox
    coordsSvg: CoordsSvg


class ErrorResponse(BaseModel):
    error: str
    message: str
