"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathmin_env: str = "development"
    pathmin_log_level: str = "info"

    # Optimizer defaults for requests that leave them out
    default_max_decimal_places: int = 2
    default_devmode: bool = False

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
