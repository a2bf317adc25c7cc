"""Page selection over rendered page lists."""

from __future__ import annotations

from typing import Sequence

from svgcrop.errors import OutOfRangeError


def select_page(pages: Sequence[str], page_number: int = 1) -> str:
    """Return the 1-based ``page_number`` entry of ``pages``."""
    count = len(pages)
    if isinstance(page_number, bool) or not isinstance(page_number, int):
        raise OutOfRangeError(f"Page number must be an integer, got {page_number!r}")
    if page_number < 1 or page_number > count:
        noun = "page" if count == 1 else "pages"
        raise OutOfRangeError(
            f"Page {page_number} is out of range: document has {count} {noun}"
        )
    return pages[page_number - 1]
