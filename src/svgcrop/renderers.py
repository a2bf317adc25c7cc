"""PDF to SVG page renderers.

Two backends produce the ordered list of per-page SVG documents:

- ``ConvertApiRenderer`` posts the PDF to the ConvertAPI ``pdf/to/svg``
  converter over HTTP.
- ``PyMuPdfRenderer`` renders locally with PyMuPDF.

Every failure surfaces as ``RenderError``.
"""

from __future__ import annotations

import base64
import logging
from typing import List, Optional, Protocol

import fitz  # PyMuPDF
import httpx
from starlette.concurrency import run_in_threadpool

from svgcrop.errors import RenderError
from svgcrop.workspace import temporary_workspace, write_bytes

logger = logging.getLogger(__name__)

DEFAULT_CONVERTAPI_URL = "https://v2.convertapi.com"
CONVERT_PATH = "/convert/pdf/to/svg"
RENDERER_BACKENDS = ("convertapi", "pymupdf")


class PageRenderer(Protocol):
    name: str

    async def render_pages(self, pdf_bytes: bytes) -> List[str]:
        ...

    async def aclose(self) -> None:
        ...


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(payload, dict) and payload.get("Message"):
        return str(payload["Message"])
    return response.text[:200]


class ConvertApiRenderer:
    """Client for the ConvertAPI PDF to SVG conversion endpoint."""

    name = "convertapi"

    def __init__(
        self,
        secret: Optional[str],
        base_url: str = DEFAULT_CONVERTAPI_URL,
        timeout_seconds: float = 120.0,
        temp_dir_prefix: str = "svgcrop-",
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._secret = secret
        self._temp_dir_prefix = temp_dir_prefix
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout_seconds)

    async def render_pages(self, pdf_bytes: bytes) -> List[str]:
        if not self._secret:
            raise RenderError("Conversion API secret is not configured")

        # The upload is staged on disk and streamed from there.
        with temporary_workspace(self._temp_dir_prefix) as work_dir:
            pdf_path = work_dir / "input.pdf"
            write_bytes(pdf_path, pdf_bytes)
            logger.info(f"Requesting SVG conversion for {len(pdf_bytes)} byte PDF")
            with pdf_path.open("rb") as fh:
                try:
                    response = await self._client.post(
                        CONVERT_PATH,
                        headers={"Authorization": f"Bearer {self._secret}"},
                        files={"File": (pdf_path.name, fh, "application/pdf")},
                        data={"StoreFile": "false"},
                    )
                    response.raise_for_status()
                except httpx.TimeoutException as exc:
                    logger.error("Conversion API request timed out")
                    raise RenderError("Conversion API request timed out", cause=exc) from exc
                except httpx.HTTPStatusError as exc:
                    status = exc.response.status_code
                    detail = _error_detail(exc.response)
                    logger.error(f"Conversion API returned HTTP {status}: {detail}")
                    raise RenderError(
                        f"Conversion API returned HTTP {status}: {detail}", cause=exc
                    ) from exc
                except httpx.RequestError as exc:
                    logger.error(f"Conversion API request failed: {exc}")
                    raise RenderError(f"Conversion API request failed: {exc}", cause=exc) from exc

        pages = self._decode_pages(response)
        logger.info(f"Conversion API returned {len(pages)} page(s)")
        return pages

    @staticmethod
    def _decode_pages(response: httpx.Response) -> List[str]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise RenderError("Conversion API returned invalid JSON", cause=exc) from exc

        files = payload.get("Files") if isinstance(payload, dict) else None
        if not isinstance(files, list) or not files:
            raise RenderError("Conversion API returned no pages")

        pages: List[str] = []
        for index, entry in enumerate(files, start=1):
            data = entry.get("FileData") if isinstance(entry, dict) else None
            try:
                pages.append(base64.b64decode(data, validate=True).decode("utf-8"))
            except (TypeError, ValueError) as exc:
                raise RenderError(
                    f"Conversion API returned unreadable data for page {index}", cause=exc
                ) from exc
        return pages

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


class PyMuPdfRenderer:
    """Local renderer using ``Page.get_svg_image``."""

    name = "pymupdf"

    def __init__(self, text_as_path: bool = True) -> None:
        self.text_as_path = text_as_path

    def render_pages_sync(self, pdf_bytes: bytes) -> List[str]:
        try:
            doc = fitz.open(stream=pdf_bytes, filetype="pdf")
        except (RuntimeError, ValueError) as exc:
            logger.error(f"PyMuPDF could not open document: {exc}")
            raise RenderError(f"PDF could not be opened: {exc}", cause=exc) from exc

        try:
            pages = [page.get_svg_image(text_as_path=self.text_as_path) for page in doc]
        except (RuntimeError, ValueError) as exc:
            logger.error(f"PyMuPDF failed to render page: {exc}")
            raise RenderError(f"PDF page could not be rendered: {exc}", cause=exc) from exc
        finally:
            doc.close()

        if not pages:
            raise RenderError("PDF has no pages")
        logger.info(f"Rendered {len(pages)} page(s) locally")
        return pages

    async def render_pages(self, pdf_bytes: bytes) -> List[str]:
        return await run_in_threadpool(self.render_pages_sync, pdf_bytes)

    async def aclose(self) -> None:
        return None


def create_renderer(
    backend: str,
    *,
    convertapi_secret: Optional[str] = None,
    convertapi_base_url: str = DEFAULT_CONVERTAPI_URL,
    timeout_seconds: float = 120.0,
    temp_dir_prefix: str = "svgcrop-",
    text_as_path: bool = True,
) -> PageRenderer:
    if backend == "convertapi":
        return ConvertApiRenderer(
            secret=convertapi_secret,
            base_url=convertapi_base_url,
            timeout_seconds=timeout_seconds,
            temp_dir_prefix=temp_dir_prefix,
        )
    if backend == "pymupdf":
        return PyMuPdfRenderer(text_as_path=text_as_path)
    raise ValueError(
        f"Unknown renderer backend {backend!r}; expected one of {', '.join(RENDERER_BACKENDS)}"
    )
