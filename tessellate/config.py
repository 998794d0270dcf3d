"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    tessellate_env: str = "development"
    tessellate_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Tessellation defaults (the plugin's original constants)
    default_across: int = 8
    default_down: int = 12
    default_size: float = 125.0
    default_scale: float = 0.90
    default_palette: list[str] = ["A09080", "8090A0", "9080A0"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
