"""Heatmap image pipeline: accumulate → colorize → composite."""

from pagesight.imaging.colormap import colorize, hsl_to_rgb
from pagesight.imaging.compositor import composite
from pagesight.imaging.density import MAX_ACCUM, RADIUS, accumulate
from pagesight.imaging.raster import IntensityMap, Point, RasterImage

__all__ = [
    "accumulate",
    "colorize",
    "composite",
    "hsl_to_rgb",
    "IntensityMap",
    "Point",
    "RasterImage",
    "MAX_ACCUM",
    "RADIUS",
]
