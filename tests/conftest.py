"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from pagesight.imaging.raster import RasterImage


def solid_raster(width: int, height: int, rgba: tuple[int, int, int, int] = (255, 255, 255, 255)) -> RasterImage:
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[...] = rgba
    return RasterImage(pixels)


def gradient_raster(width: int, height: int) -> RasterImage:
    """Opaque raster where every pixel is distinct enough to catch misalignment."""
    ys, xs = np.mgrid[0:height, 0:width]
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[..., 0] = xs % 256
    pixels[..., 1] = ys % 256
    pixels[..., 2] = (xs + ys) % 256
    pixels[..., 3] = 255
    return RasterImage(pixels)


@pytest.fixture
def white_page() -> RasterImage:
    return solid_raster(200, 300)


@pytest.fixture
def gradient_page() -> RasterImage:
    return gradient_raster(120, 80)
