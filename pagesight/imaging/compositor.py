"""Compositor — flatten a heat overlay onto the page screenshot."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from pagesight.imaging.raster import RasterImage

logger = logging.getLogger(__name__)


def align_overlay(overlay: RasterImage, width: int, height: int) -> RasterImage:
    """Resize ``overlay`` to exactly width×height if it differs."""
    if overlay.size == (width, height):
        return overlay
    logger.warning(
        "Overlay %d×%d does not match base %d×%d, resizing",
        overlay.width,
        overlay.height,
        width,
        height,
    )
    resized = overlay.to_pil().resize((width, height), Image.Resampling.BILINEAR)
    return RasterImage.from_pil(resized)


def composite(base: RasterImage, overlay: RasterImage | None = None) -> RasterImage:
    """Porter-Duff "over" of ``overlay`` onto ``base``, output fully opaque.

    With no overlay the base is returned as is.
    """
    if overlay is None:
        return base

    overlay = align_overlay(overlay, base.width, base.height)

    out = base.pixels.copy()
    out[..., 3] = 255

    # Full-page captures can be tens of thousands of rows; only blend the
    # pixels the overlay actually covers.
    mask = overlay.pixels[..., 3] > 0
    if not mask.any():
        return RasterImage(out)

    fg = overlay.pixels[mask].astype(np.float32)
    bg = base.pixels[mask][:, :3].astype(np.float32)
    alpha = fg[:, 3:4] / np.float32(255.0)

    rgb = np.floor(fg[:, :3] * alpha + bg * (np.float32(1.0) - alpha) + np.float32(0.5))
    out[mask, :3] = np.clip(rgb, 0, 255).astype(np.uint8)
    return RasterImage(out)
