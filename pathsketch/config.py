"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Path data parsing
    signed_continuation: bool = True

    # Output
    flatten_samples: int = 16
    d_precision: int = 4

    model_config = {"env_prefix": "PATHSKETCH_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
