"""Append-only buffer for gaze samples from an external tracker.

The tracker fires continuously and may hand over null or garbage samples.
The buffer keeps only valid finite points, in arrival order; the render
pipeline gets a finite snapshot once tracking has ended.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from pagesight.imaging.raster import Point

logger = logging.getLogger(__name__)


def _to_point(sample: Any) -> Point | None:
    if sample is None:
        return None
    try:
        if isinstance(sample, Mapping):
            x, y = sample["x"], sample["y"]
        elif isinstance(sample, (tuple, list)):
            x, y = sample
        else:
            x, y = sample.x, sample.y
        x, y = float(x), float(y)
    except (KeyError, AttributeError, TypeError, ValueError):
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return Point(x, y)


class GazeSampleBuffer:
    def __init__(self) -> None:
        self._points: list[Point] = []
        self._dropped = 0
        self._closed = False

    def append(self, sample: Any) -> bool:
        """Record one sample. Returns False if it was dropped as invalid."""
        if self._closed:
            raise RuntimeError("Gaze buffer is closed")
        point = _to_point(sample)
        if point is None:
            self._dropped += 1
            return False
        self._points.append(point)
        return True

    def extend(self, samples: Any) -> int:
        """Append many samples; returns how many were kept."""
        return sum(1 for s in samples if self.append(s))

    def close(self) -> None:
        if not self._closed:
            logger.debug("Gaze buffer closed: %d kept, %d dropped", len(self._points), self._dropped)
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def dropped(self) -> int:
        return self._dropped

    def snapshot(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)
