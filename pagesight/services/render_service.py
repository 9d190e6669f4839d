"""Render service — screenshot, optional heat overlay, composite, encode."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from pagesight.errors import InternalError, RenderError
from pagesight.imaging.colormap import colorize
from pagesight.imaging.compositor import composite
from pagesight.imaging.density import accumulate
from pagesight.imaging.raster import Point, RasterImage, encode_png_base64

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    async def capture(self, url: str, width: int, height_hint: int = 0) -> RasterImage: ...


@dataclass
class RenderJob:
    """A validated render request, decoupled from the HTTP model."""

    url: str
    width: int
    height: int = 0
    points: Sequence[Point] = field(default_factory=list)


@dataclass
class RenderResult:
    image: RasterImage

    def png_base64(self) -> str:
        return encode_png_base64(self.image)


def build_heatmap(base: RasterImage, points: Sequence[Point]) -> RasterImage:
    """Accumulate, colorize and composite. Pure and CPU-bound."""
    if not points:
        return composite(base, None)
    overlay = colorize(accumulate(points, base.width, base.height))
    return composite(base, overlay)


class RenderService:
    """Orchestrates one request: Render → Accumulate → Colorize → Composite."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer

    async def render(self, job: RenderJob) -> RenderResult:
        start = time.perf_counter()
        try:
            base = await self.renderer.capture(job.url, job.width, job.height)
            t_capture = time.perf_counter()

            # Keep the event loop free while numpy does the pixel work
            loop = asyncio.get_running_loop()
            final = await loop.run_in_executor(None, build_heatmap, base, list(job.points))
        except RenderError:
            raise
        except Exception as e:
            logger.debug("Render pipeline failed for %s: %s", job.url, e)
            raise InternalError("render pipeline failed") from e

        end = time.perf_counter()
        logger.info(
            "Rendered %s: capture %.0fms, heatmap %.0fms (%d points)",
            job.url,
            (t_capture - start) * 1000,
            (end - t_capture) * 1000,
            len(job.points),
        )
        return RenderResult(final)
