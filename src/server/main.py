"""FastAPI entrypoint."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from server.config import settings
from server.exceptions import AppError
from server.svg.exceptions import status_for
from server.svg.router import router as svg_router
from server.web.router import router as web_router
from svgcrop.errors import SvgCropError
from svgcrop.renderers import PageRenderer, create_renderer

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def build_renderer() -> PageRenderer:
    return create_renderer(
        settings.renderer_backend,
        convertapi_secret=settings.convertapi_secret,
        convertapi_base_url=settings.convertapi_base_url,
        timeout_seconds=settings.render_timeout_seconds,
        temp_dir_prefix=settings.temp_dir_prefix,
        text_as_path=settings.pymupdf_text_as_path,
    )


def create_app(renderer: Optional[PageRenderer] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.renderer = renderer or build_renderer()
        logger.info(f"{settings.app_name} started with {app.state.renderer.name} renderer")
        try:
            yield
        finally:
            await app.state.renderer.aclose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.warning(f"{request.url.path} rejected: [{exc.code}] {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.code, "message": exc.message},
            headers=exc.headers,
        )

    @app.exception_handler(SvgCropError)
    async def pipeline_error_handler(request: Request, exc: SvgCropError):
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(f"{request.url.path} failed: [{exc.code}] {exc.message}")
        else:
            logger.warning(f"{request.url.path} rejected: [{exc.code}] {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.code, "message": exc.message},
        )

    @app.get("/health")
    async def health_check(request: Request):
        return {
            "status": "ok",
            "environment": settings.environment,
            "renderer": request.app.state.renderer.name,
        }

    app.include_router(web_router)
    app.include_router(svg_router, prefix=settings.api_prefix)
    return app


app = create_app()
