"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    afisviz_env: str = "development"
    afisviz_log_level: str = "info"

    # Raster encoding
    jpeg_quality: int = 90

    # Canvas layout
    split_gutter: float = 20.0
    default_padding: float = 1.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
