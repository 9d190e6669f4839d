"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from pagesight.browser.renderer import PageRenderer
from pagesight.config import Settings, settings
from pagesight.services.render_service import RenderService


def get_settings() -> Settings:
    return settings


def get_page_renderer(cfg: Settings = Depends(get_settings)) -> PageRenderer:
    return PageRenderer(
        executable_path=cfg.browser_executable_path or None,
        timeout_ms=cfg.render_timeout_ms,
        memory_limit_mb=cfg.browser_memory_limit_mb,
    )


def get_render_service(
    renderer: PageRenderer = Depends(get_page_renderer),
) -> RenderService:
    return RenderService(renderer)
