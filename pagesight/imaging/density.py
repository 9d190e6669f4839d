"""Density accumulator — gaze points to a per-pixel intensity raster.

Each point splats a linear radial falloff (cone) of radius RADIUS; overlapping
cones add up and the running value at every pixel saturates at MAX_ACCUM.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Protocol, Union

import numpy as np

from pagesight.imaging.raster import IntensityMap

logger = logging.getLogger(__name__)

# ── Named constants ──

# Influence radius in pixels. Contribution is exactly 0 at d >= RADIUS.
RADIUS = 30

# Contribution of a point at its own centre (d = 0).
PEAK_CONTRIBUTION = 0.4

# Saturation cap: 12.5 stacked peaks. Display clamps at 1.0 later, this only
# bounds heavy overlap.
MAX_ACCUM = 5.0


class _HasXY(Protocol):
    x: float
    y: float


PointLike = Union[_HasXY, tuple[float, float]]


def _coords(point: PointLike) -> tuple[float, float]:
    if isinstance(point, (tuple, list)):
        return float(point[0]), float(point[1])
    return float(point.x), float(point.y)


def _clip_span(center: float, radius: float, limit: int) -> tuple[int, int]:
    """Integer pixel span [lo, hi) covering [center - r, center + r], clipped to [0, limit)."""
    lo = max(0, math.floor(center - radius))
    hi = min(limit, math.floor(center + radius) + 1)
    return lo, hi


def splat(values: np.ndarray, px: float, py: float, radius: float = RADIUS) -> None:
    """Add one point's falloff into ``values`` in place, clamping at MAX_ACCUM."""
    height, width = values.shape
    x0, x1 = _clip_span(px, radius, width)
    y0, y1 = _clip_span(py, radius, height)
    if x0 >= x1 or y0 >= y1:
        return

    xs = np.arange(x0, x1, dtype=np.float64) - px
    ys = np.arange(y0, y1, dtype=np.float64)[:, np.newaxis] - py
    dist = np.sqrt(xs * xs + ys * ys)

    contrib = np.where(dist < radius, (1.0 - dist / radius) * PEAK_CONTRIBUTION, 0.0)
    window = values[y0:y1, x0:x1]
    values[y0:y1, x0:x1] = np.minimum(window + contrib, MAX_ACCUM)


def accumulate(
    points: Iterable[PointLike],
    width: int,
    height: int,
    radius: float = RADIUS,
) -> IntensityMap:
    """Accumulate points into an intensity map of size width×height.

    Args:
        points: Point objects, anything with ``x``/``y``, or (x, y) pairs.
            Coordinates outside the raster are fine; only the part of the
            influence box that overlaps the raster is written.
        width: Raster width in pixels (> 0).
        height: Raster height in pixels (> 0).
        radius: Falloff radius in pixels.

    Returns:
        IntensityMap with every value in [0, MAX_ACCUM].
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Raster size must be positive, got {width}×{height}")

    intensity = IntensityMap.zeros(width, height)
    n = 0
    for point in points:
        px, py = _coords(point)
        splat(intensity.values, px, py, radius)
        n += 1

    logger.debug("Accumulated %d points onto %d×%d raster", n, width, height)
    return intensity
