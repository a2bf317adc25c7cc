"""Application settings for the PDF to SVG API."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "pdf-svg-cropper"
    api_prefix: str = ""
    environment: str = "local"
    log_level: str = "INFO"

    renderer_backend: Literal["convertapi", "pymupdf"] = "convertapi"
    convertapi_base_url: str = "https://v2.convertapi.com"
    convertapi_secret: str | None = None
    render_timeout_seconds: float = 120.0
    pymupdf_text_as_path: bool = True

    temp_dir_prefix: str = "pdfsvg-"
    max_upload_bytes: int = 50 * 1024 * 1024
    rate_limit_enabled: bool = False
    rate_limit_cooldown_seconds: int = 10
    rate_limit_trust_forwarded: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
