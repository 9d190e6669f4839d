"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pagesight_env: str = "development"
    pagesight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Headless browser. Empty path = Playwright's bundled Chromium.
    browser_executable_path: str = ""
    render_timeout_ms: int = 60_000
    browser_memory_limit_mb: int = 4096

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
