"""Tests for the intensity → RGBA color mapper."""

from __future__ import annotations

import numpy as np

from pagesight.imaging.colormap import COLD_HUE, MAX_ALPHA, colorize, hsl_to_rgb
from pagesight.imaging.density import accumulate
from pagesight.imaging.raster import IntensityMap, Point


def _map_of(values) -> IntensityMap:
    return IntensityMap(np.asarray(values, dtype=np.float32))


class TestHslToRgb:
    def test_primaries(self):
        assert hsl_to_rgb(0.0, 1.0, 0.5) == (255, 0, 0)
        assert hsl_to_rgb(1 / 3, 1.0, 0.5) == (0, 255, 0)
        assert hsl_to_rgb(2 / 3, 1.0, 0.5) == (0, 0, 255)

    def test_grey_when_unsaturated(self):
        assert hsl_to_rgb(0.4, 0.0, 0.25) == (64, 64, 64)

    def test_dark_lightness(self):
        assert hsl_to_rgb(0.0, 1.0, 0.25) == (128, 0, 0)


class TestColorize:
    def test_zero_intensity_is_transparent(self):
        out = colorize(_map_of(np.zeros((4, 5))))
        assert out.size == (5, 4)
        assert not out.pixels.any()

    def test_full_intensity_is_red(self):
        out = colorize(_map_of([[1.0]]))
        assert tuple(out.pixels[0, 0]) == (255, 0, 0, MAX_ALPHA)

    def test_above_one_clamped_for_display(self):
        out = colorize(_map_of([[4.2, 1.0]]))
        assert tuple(out.pixels[0, 0]) == tuple(out.pixels[0, 1])

    def test_half_intensity_is_green(self):
        out = colorize(_map_of([[0.5]]))
        assert tuple(out.pixels[0, 0]) == (0, 255, 0, 90)

    def test_low_intensity_tends_to_blue(self):
        r, g, b, a = colorize(_map_of([[0.01]])).pixels[0, 0]
        assert b == 255
        assert r == 0
        assert a == 2

    def test_alpha_bounded(self):
        m = accumulate([Point(20, 20)] * 30, 40, 40)
        out = colorize(m)
        assert out.pixels[..., 3].max() == MAX_ALPHA

    def test_matches_scalar_conversion(self):
        levels = np.linspace(0.01, 1.0, 50, dtype=np.float32)
        out = colorize(_map_of(levels[np.newaxis, :]))
        for k, i in enumerate(levels):
            i = float(i)
            expected = hsl_to_rgb((1.0 - i) * COLD_HUE, 1.0, 0.5)
            assert tuple(int(c) for c in out.pixels[0, k, :3]) == expected
            assert out.pixels[0, k, 3] == int(np.floor(i * MAX_ALPHA + 0.5))

    def test_transparent_wherever_map_is_zero(self):
        m = accumulate([Point(10, 10)], 60, 60)
        out = colorize(m)
        assert not out.pixels[m.values == 0].any()
        assert out.pixels[m.values >= 0.1, 3].min() > 0
