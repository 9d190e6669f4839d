"""Page renderer — full-page screenshots from a throwaway headless Chromium.

Every capture launches its own browser process and tears it down before
returning or raising. Nothing is pooled or shared between requests.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

from playwright.async_api import Browser
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from pagesight.errors import RenderError
from pagesight.imaging.raster import RasterImage, decode_png

logger = logging.getLogger(__name__)

# Launch, navigation and screenshot all share this ceiling.
DEFAULT_TIMEOUT_MS = 60_000

DEFAULT_MEMORY_LIMIT_MB = 4096

# The host container is the isolation boundary, so Chromium's own sandbox is
# off. GPU paths are unreliable headless.
_BASE_LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--disable-gpu",
    "--no-first-run",
    "--no-zygote",
    "--disable-background-timer-throttling",
    "--disable-backgrounding-occluded-windows",
    "--disable-renderer-backgrounding",
    "--disable-ipc-flooding-protection",
    "--memory-pressure-off",
    "--disable-features=VizDisplayCompositor",
]


class PageRenderer:
    """Drives one isolated browser per ``capture`` call."""

    def __init__(
        self,
        executable_path: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        memory_limit_mb: int = DEFAULT_MEMORY_LIMIT_MB,
        playwright_factory: Callable[[], Any] = async_playwright,
    ) -> None:
        self.executable_path = executable_path
        self.timeout_ms = timeout_ms
        self.memory_limit_mb = memory_limit_mb
        self._playwright_factory = playwright_factory

    def launch_args(self) -> list[str]:
        return [*_BASE_LAUNCH_ARGS, f"--js-flags=--max-old-space-size={self.memory_limit_mb}"]

    @asynccontextmanager
    async def _launched_browser(self) -> AsyncIterator[Browser]:
        """Launch Chromium and guarantee it is closed on every exit path."""
        async with self._playwright_factory() as pw:
            try:
                browser = await pw.chromium.launch(
                    headless=True,
                    args=self.launch_args(),
                    executable_path=self.executable_path,
                    timeout=self.timeout_ms,
                )
            except PlaywrightError as e:
                raise RenderError("browser launch failed") from e

            logger.debug("Browser launched (executable=%s)", self.executable_path or "bundled")
            try:
                yield browser
            finally:
                try:
                    await browser.close()
                except PlaywrightError as e:
                    logger.warning("Browser close failed: %s", e)
                logger.debug("Browser closed")

    async def capture(self, url: str, width: int, height_hint: int = 0) -> RasterImage:
        """Navigate to ``url`` and return a full-page screenshot.

        Args:
            url: Page to load.
            width: Viewport width in CSS pixels.
            height_hint: Initial viewport height. The capture covers the full
                scrollable page regardless; 0 means no hint.

        Raises:
            RenderError: launch failure, navigation timeout, or any other
                capture failure. The browser is already closed by then.
        """
        viewport = {"width": width, "height": max(height_hint, 1)}
        start = time.perf_counter()

        try:
            async with self._launched_browser() as browser:
                page = await browser.new_page(viewport=viewport)
                page.set_default_timeout(self.timeout_ms)
                page.set_default_navigation_timeout(self.timeout_ms)

                await page.goto(url, wait_until="networkidle", timeout=self.timeout_ms)
                png = await page.screenshot(full_page=True, type="png", timeout=self.timeout_ms)
            image = decode_png(png)
        except RenderError as e:
            logger.debug("Render of %s failed: %s", url, e.reason)
            raise
        except PlaywrightTimeoutError as e:
            logger.debug("Render of %s timed out after %dms: %s", url, self.timeout_ms, e)
            raise RenderError("navigation timed out") from e
        except Exception as e:
            logger.debug("Render of %s failed: %s", url, e)
            raise RenderError("page capture failed") from e

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Captured %s at %d×%d in %.0fms",
            url,
            image.width,
            image.height,
            elapsed,
        )
        return image
