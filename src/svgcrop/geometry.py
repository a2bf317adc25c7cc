"""Crop rectangle geometry and coordinate mapping.

Callers describe a crop box in whatever space they measured it in: SVG units,
or pixels of a raster image of the page, with the Y axis growing either down
from the top ("topleft") or in the renderer's own sense ("pdf"). Everything
here converts that box into offsets inside the page's ``viewBox``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Literal, Optional

from svgcrop.errors import InvalidCropBoxError, UnknownPageSizeError

Origin = Literal["pdf", "topleft"]
ORIGINS = ("pdf", "topleft")


@dataclass(frozen=True)
class ViewBox:
    """The ``minX minY width height`` window of an SVG page."""

    min_x: float
    min_y: float
    width: float
    height: float

    @property
    def is_usable(self) -> bool:
        values = (self.min_x, self.min_y, self.width, self.height)
        return all(math.isfinite(v) for v in values) and self.width > 0 and self.height > 0

    def to_dict(self) -> Dict[str, float]:
        return {
            "minX": self.min_x,
            "minY": self.min_y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class CropRect:
    """A crop box as supplied by the caller."""

    x1: Optional[float]
    y1: Optional[float]
    x2: Optional[float]
    y2: Optional[float]
    origin: Origin = "pdf"
    raster_width: Optional[float] = None  # source raster size, pixels
    raster_height: Optional[float] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "origin": self.origin,
            "rasterPageWidth": self.raster_width,
            "rasterPageHeight": self.raster_height,
        }


@dataclass(frozen=True)
class MappedRect:
    """A crop box in viewBox units, relative to the viewBox origin."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    def to_dict(self) -> Dict[str, float]:
        return {
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "width": self.width,
            "height": self.height,
        }


def _require_finite(name: str, value: Optional[float]) -> float:
    if value is None:
        raise InvalidCropBoxError(f"Crop coordinate {name} is missing")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidCropBoxError(f"Crop coordinate {name} is not a number: {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidCropBoxError(f"Crop coordinate {name} must be finite, got {value!r}")
    return number


def _positive(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def raster_scale(rect: CropRect, view_box: ViewBox) -> tuple[float, float]:
    """Return ``(sx, sy)`` taking raster pixels to viewBox units.

    Scaling applies only when both raster dimensions are given and positive;
    otherwise the coordinates are already in SVG units.
    """
    if _positive(rect.raster_width) and _positive(rect.raster_height):
        return view_box.width / rect.raster_width, view_box.height / rect.raster_height
    return 1.0, 1.0


def map_to_svg_units(rect: CropRect, view_box: ViewBox) -> MappedRect:
    """Map a caller crop box onto the page's viewBox.

    Steps: raster scaling, reordering of reversed corners, then the Y flip for
    ``topleft`` input. ``pdf`` input is used as-is, on the assumption that the
    renderer's SVG already runs Y in the caller's direction.

    Raises:
        InvalidCropBoxError: missing/non-finite coordinates, unknown origin,
            or an empty rectangle after mapping.
        UnknownPageSizeError: the view box has no positive size.
    """
    if not view_box.is_usable:
        raise UnknownPageSizeError(
            f"Page viewBox {view_box.width} x {view_box.height} has no usable size"
        )
    if rect.origin not in ORIGINS:
        raise InvalidCropBoxError(
            f"Unsupported coordinate origin {rect.origin!r}; expected one of {', '.join(ORIGINS)}"
        )

    x1 = _require_finite("x1", rect.x1)
    y1 = _require_finite("y1", rect.y1)
    x2 = _require_finite("x2", rect.x2)
    y2 = _require_finite("y2", rect.y2)

    sx, sy = raster_scale(rect, view_box)
    x1, x2 = x1 * sx, x2 * sx
    y1, y2 = y1 * sy, y2 * sy

    if x2 < x1:
        x1, x2 = x2, x1
    if y2 < y1:
        y1, y2 = y2, y1

    if rect.origin == "topleft":
        y1, y2 = view_box.height - y2, view_box.height - y1

    mapped = MappedRect(x1=x1, y1=y1, x2=x2, y2=y2)
    if mapped.width <= 0 or mapped.height <= 0:
        raise InvalidCropBoxError(
            f"Crop box has no area after mapping (width={mapped.width}, height={mapped.height})"
        )
    return mapped
