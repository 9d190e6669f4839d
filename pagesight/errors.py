"""Error taxonomy for the render pipeline.

Request validation errors are raised by FastAPI/pydantic before any of this code
runs, so they have no class here.
"""

from __future__ import annotations


class PageSightError(Exception):
    """Base class for failures the service reports as a generic 500."""

    kind = "internal"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class RenderError(PageSightError):
    """Browser launch, navigation timeout or page capture failure."""

    kind = "render"


class InternalError(PageSightError):
    """Any other unexpected failure inside the pipeline."""

    kind = "internal"
