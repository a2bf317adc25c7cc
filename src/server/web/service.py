"""Web UI service helpers."""

from __future__ import annotations

from pathlib import Path

from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape

from server.config import settings
from server.stats import get_stats

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
INDEX_TEMPLATE = "index.html"

_ENV = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)


def render_homepage(renderer_name: str) -> HTMLResponse:
    stats = get_stats()
    html = _ENV.get_template(INDEX_TEMPLATE).render(
        app_name=settings.app_name,
        api_prefix=settings.api_prefix,
        renderer_name=renderer_name,
        visitor_count=stats["visitor_count"],
        extraction_count=stats["extraction_count"],
        crop_count=stats["crop_count"],
    )
    return HTMLResponse(content=html)
