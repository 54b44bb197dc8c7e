from __future__ import annotations

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="TIERWISE_")

    app_name: str = "tierwise"
    log_level: str = "INFO"

    # Title shown in the OpenAPI docs for the HTTP surface.
    api_title: str = "Tierwise API"
    # Bind address for scripts/serve_api.py.
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    # Upper bound on applications accepted by a single analysis request.
    max_selected_apps: int = 500
    # Emit one DEBUG line per evaluated decision; noisy for large portfolios.
    analysis_log_decisions: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
