"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    funnel_env: str = "development"
    funnel_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Container size used when a request does not carry one
    default_width: float = 600.0
    default_height: float = 300.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
