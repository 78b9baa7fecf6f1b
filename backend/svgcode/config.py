"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from svgcode.engine.state import DEFAULT_COLOR, DEFAULT_HEIGHT, DEFAULT_WIDTH


class Settings(BaseSettings):
    svgcode_env: str = "development"
    svgcode_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Editor defaults
    default_width: int = DEFAULT_WIDTH
    default_height: int = DEFAULT_HEIGHT
    default_color: str = DEFAULT_COLOR

    # Upload / download
    download_filename: str = "downloaded_image.svg"
    max_upload_bytes: int = 1024 * 1024

    # Oldest sessions are evicted past this count
    max_sessions: int = 1000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
