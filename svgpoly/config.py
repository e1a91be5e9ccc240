"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgpoly_log_level: str = "info"

    # Defaults for PipelineConfig
    svgpoly_samples: int = 10
    svgpoly_tolerance: float = 1e-5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
