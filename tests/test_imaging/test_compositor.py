"""Tests for overlay compositing."""

from __future__ import annotations

import numpy as np

from pagesight.imaging.colormap import colorize
from pagesight.imaging.compositor import align_overlay, composite
from pagesight.imaging.density import accumulate
from pagesight.imaging.raster import Point, RasterImage
from tests.conftest import solid_raster


class TestComposite:
    def test_no_overlay_leaves_base_untouched(self, gradient_page):
        before = gradient_page.pixels.copy()
        out = composite(gradient_page, None)
        np.testing.assert_array_equal(out.pixels, before)

    def test_transparent_overlay_keeps_rgb(self, gradient_page):
        overlay = RasterImage.blank(gradient_page.width, gradient_page.height)
        out = composite(gradient_page, overlay)
        np.testing.assert_array_equal(out.pixels[..., :3], gradient_page.pixels[..., :3])
        assert (out.pixels[..., 3] == 255).all()

    def test_over_blend(self):
        base = solid_raster(2, 2, (255, 255, 255, 255))
        overlay = solid_raster(2, 2, (255, 0, 0, 180))
        out = composite(base, overlay)
        # 255·(1 - 180/255) = 75
        assert tuple(out.pixels[0, 0]) == (255, 75, 75, 255)

    def test_output_is_opaque_even_over_transparent_base(self):
        base = solid_raster(3, 3, (0, 0, 0, 0))
        overlay = solid_raster(3, 3, (0, 0, 255, 90))
        out = composite(base, overlay)
        assert (out.pixels[..., 3] == 255).all()

    def test_dimensions_follow_base(self, white_page):
        overlay = colorize(accumulate([Point(50, 60)], white_page.width, white_page.height))
        out = composite(white_page, overlay)
        assert out.size == white_page.size
        # hot spot tinted, far corner untouched
        assert tuple(out.pixels[60, 50, :3]) != (255, 255, 255)
        assert tuple(out.pixels[299, 199]) == (255, 255, 255, 255)


class TestAlignOverlay:
    def test_same_size_is_identity(self):
        overlay = RasterImage.blank(10, 10)
        assert align_overlay(overlay, 10, 10) is overlay

    def test_mismatched_overlay_is_resized(self):
        base = solid_raster(40, 30)
        overlay = solid_raster(20, 15, (255, 0, 0, 180))
        out = composite(base, overlay)
        assert out.size == (40, 30)
        assert tuple(out.pixels[15, 20]) == (255, 75, 75, 255)
