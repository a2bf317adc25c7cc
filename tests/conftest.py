"""Shared fixtures: sample SVG pages, a fake renderer and a real PDF."""

from typing import List, Optional

import fitz  # PyMuPDF
import pytest

from svgcrop.errors import RenderError

SVG_NS = "http://www.w3.org/2000/svg"

PAGE_ONE = (
    '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
    'width="100pt" height="200pt" viewBox="0 0 100 200">\n'
    '<rect x="10" y="10" width="40" height="50" fill="red"/>\n'
    '<image xlink:href="data:image/png;base64,iVBORw0KGgo=" x="60" y="60" width="5" height="5"/>\n'
    "</svg>"
)

PAGE_TWO = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="-20 -30 100 200">'
    '<text x="0" y="0">second page</text>'
    "</svg>"
)


class FakeRenderer:
    """Renderer double returning canned pages or raising."""

    name = "fake"

    def __init__(self, pages: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.pages = pages if pages is not None else [PAGE_ONE, PAGE_TWO]
        self.error = error
        self.calls: List[bytes] = []
        self.closed = False

    async def render_pages(self, pdf_bytes: bytes) -> List[str]:
        self.calls.append(pdf_bytes)
        if self.error is not None:
            raise self.error
        return list(self.pages)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def page_one():
    return PAGE_ONE


@pytest.fixture
def page_two():
    return PAGE_TWO


@pytest.fixture
def fake_renderer():
    return FakeRenderer()


@pytest.fixture
def failing_renderer():
    return FakeRenderer(error=RenderError("Conversion API request timed out"))


@pytest.fixture
def sample_pdf_bytes():
    """Two 200x100 pt pages with a line of text each."""
    doc = fitz.open()
    for number in (1, 2):
        page = doc.new_page(width=200, height=100)
        page.insert_text((20, 50), f"Page {number}")
    data = doc.tobytes()
    doc.close()
    return data
