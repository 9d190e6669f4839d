"""Peak memory of the heatmap stages on a tall full-page raster."""

from __future__ import annotations

import tracemalloc

from pagesight.imaging.colormap import colorize
from pagesight.imaging.compositor import composite
from pagesight.imaging.density import accumulate
from pagesight.imaging.raster import Point
from tests.conftest import solid_raster


def test_single_point_on_tall_page_stays_near_frame_size():
    base = solid_raster(1000, 10_000)

    tracemalloc.start()
    try:
        overlay = colorize(accumulate([Point(100, 100)], base.width, base.height))
        out = composite(base, overlay)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()

    assert out.size == base.size
    # float32 map + uint8 overlay + uint8 output + bool masks
    assert peak < 5 * base.pixels.nbytes
