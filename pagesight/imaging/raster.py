"""Raster containers shared by the pipeline stages, plus PNG/base64 codecs.

Pixel buffers are numpy arrays, row-major with a top-left origin:

    RasterImage.pixels   uint8   (height, width, 4)   RGBA8
    IntensityMap.values  float32 (height, width)
"""

from __future__ import annotations

import base64
import io
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from PIL import Image


@dataclass(frozen=True)
class Point:
    """A sample in raster space. May lie outside the raster."""

    x: float
    y: float


@dataclass
class RasterImage:
    pixels: NDArray[np.uint8]

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"Expected (H, W, 4) RGBA pixels, got shape {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {self.pixels.dtype}")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @classmethod
    def blank(cls, width: int, height: int) -> RasterImage:
        """Fully transparent raster."""
        return cls(np.zeros((height, width, 4), dtype=np.uint8))

    @classmethod
    def from_pil(cls, image: Image.Image) -> RasterImage:
        return cls(np.array(image.convert("RGBA"), dtype=np.uint8))

    def to_pil(self) -> Image.Image:
        # (H, W, 4) uint8 is inferred as RGBA
        return Image.fromarray(self.pixels)


@dataclass
class IntensityMap:
    values: NDArray[np.float32]

    @property
    def width(self) -> int:
        return int(self.values.shape[1])

    @property
    def height(self) -> int:
        return int(self.values.shape[0])

    @classmethod
    def zeros(cls, width: int, height: int) -> IntensityMap:
        return cls(np.zeros((height, width), dtype=np.float32))


def decode_png(data: bytes) -> RasterImage:
    """Decode PNG (or any Pillow-readable) bytes into an RGBA raster."""
    with Image.open(io.BytesIO(data)) as img:
        return RasterImage.from_pil(img)


def encode_png(image: RasterImage) -> bytes:
    buf = io.BytesIO()
    image.to_pil().save(buf, format="PNG")
    return buf.getvalue()


def encode_png_base64(image: RasterImage) -> str:
    return base64.b64encode(encode_png(image)).decode("ascii")
