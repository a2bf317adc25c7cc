"""SVG endpoint constants."""

UPLOAD_FIELD = "data"

DEFAULT_PAGE = 1
DEFAULT_ORIGIN = "pdf"

SVG_MEDIA_TYPE = "image/svg+xml"
DEFAULT_SVG_NAME = "page-{page}-crop.svg"
