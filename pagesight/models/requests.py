"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pagesight.gaze.buffer import GazeSampleBuffer
from pagesight.services.render_service import RenderJob


class GazePoint(BaseModel):
    x: float = Field(..., allow_inf_nan=False, description="Page x coordinate (CSS px)")
    y: float = Field(..., allow_inf_nan=False, description="Page y coordinate (CSS px)")


class RenderWebPageRequest(BaseModel):
    url: str = Field(..., min_length=1, description="Page to capture")
    width: int = Field(..., gt=0, description="Viewport width")
    height: int = Field(..., ge=0, description="Viewport height hint; capture is full-page")
    points: list[GazePoint] | None = Field(
        default=None,
        description="Gaze samples to render as a heatmap; absent or empty = no overlay",
    )

    def to_job(self) -> RenderJob:
        buffer = GazeSampleBuffer()
        buffer.extend(p.model_dump() for p in self.points or [])
        buffer.close()
        return RenderJob(
            url=self.url,
            width=self.width,
            height=self.height,
            points=buffer.snapshot(),
        )
