"""Color mapper — intensity map to a semi-transparent RGBA heat overlay.

Low intensity maps to blue (hue 240°), full intensity to red (hue 0°). Alpha
scales with intensity up to MAX_ALPHA so the page underneath stays visible.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pagesight.imaging.raster import IntensityMap, RasterImage

# Hue of zero heat: 240° = blue, as a fraction of the colour wheel.
COLD_HUE = 240.0 / 360.0

SATURATION = 1.0
LIGHTNESS = 0.5

# 180/255 ≈ 70% opacity at full intensity.
MAX_ALPHA = 180


def _round_half_up(values: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.floor(values + 0.5)


def hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """HSL (all in [0, 1]) → 8-bit RGB."""
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_channel(p, q, h + 1 / 3)
        g = hue_to_channel(p, q, h)
        b = hue_to_channel(p, q, h - 1 / 3)
    return (
        int(_round_half_up(np.float64(r * 255))),
        int(_round_half_up(np.float64(g * 255))),
        int(_round_half_up(np.float64(b * 255))),
    )


def _hue_to_channel_array(p: float, q: float, t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Vectorised hue_to_channel over an array of t."""
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, np.full_like(t, q), p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def colorize(intensity: IntensityMap) -> RasterImage:
    """Map intensities to an RGBA overlay of the same size.

    Values are clamped to 1.0 for display only; pixels with zero intensity
    stay fully transparent (0, 0, 0, 0).
    """
    hot = intensity.values > 0

    out = np.zeros((intensity.height, intensity.width, 4), dtype=np.uint8)
    if not hot.any():
        return RasterImage(out)

    # Upcast only the covered pixels, never the whole frame
    level = np.minimum(intensity.values[hot].astype(np.float64), 1.0)
    hue = (1.0 - level) * COLD_HUE

    l, s = LIGHTNESS, SATURATION
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    rgb = np.stack(
        [
            _hue_to_channel_array(p, q, hue + 1 / 3),
            _hue_to_channel_array(p, q, hue),
            _hue_to_channel_array(p, q, hue - 1 / 3),
        ],
        axis=-1,
    )

    out[hot, :3] = np.clip(_round_half_up(rgb * 255), 0, 255).astype(np.uint8)
    out[hot, 3] = np.clip(_round_half_up(level * MAX_ALPHA), 0, MAX_ALPHA).astype(np.uint8)
    return RasterImage(out)
