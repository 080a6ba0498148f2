"""ARGB pixel buffer owned by a single render call."""

from __future__ import annotations

import io

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from afisviz.config import settings


class Pixmap:
    """Mutable ``width`` x ``height`` grid of packed 32-bit ARGB colors.

    Pixels start out transparent black. Accessors are not bounds-checked.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._pixels: NDArray[np.uint32] = np.zeros((height, width), dtype=np.uint32)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def get(self, x: int, y: int) -> int:
        return int(self._pixels[y, x])

    def set(self, x: int, y: int, color: int) -> Pixmap:
        self._pixels[y, x] = color
        return self

    def fill(self, color: int) -> Pixmap:
        self._pixels.fill(color)
        return self

    def paint(self, mask: NDArray[np.bool_], color: int | NDArray[np.uint32]) -> Pixmap:
        """Set every pixel where ``mask`` is true, to one color or one color per masked pixel."""
        self._pixels[mask] = color
        return self

    @classmethod
    def from_colors(cls, colors: NDArray[np.uint32]) -> Pixmap:
        """Pixmap holding a copy of a ``[y, x]`` array of ARGB colors."""
        pixmap = cls(colors.shape[1], colors.shape[0])
        pixmap._pixels[:] = colors
        return pixmap

    def pixels(self) -> NDArray[np.uint32]:
        """Copy of the buffer, ``[y, x]`` indexed."""
        return self._pixels.copy()

    def _channels(self) -> NDArray[np.uint8]:
        p = self._pixels
        return np.stack(
            [(p >> 16) & 0xFF, (p >> 8) & 0xFF, p & 0xFF, (p >> 24) & 0xFF],
            axis=-1,
        ).astype(np.uint8)

    def png(self) -> bytes:
        buffer = io.BytesIO()
        Image.fromarray(self._channels()).save(buffer, format="PNG")
        return buffer.getvalue()

    def jpeg(self, quality: int | None = None) -> bytes:
        """Lossy encoding, alpha is discarded."""
        buffer = io.BytesIO()
        rgb = np.ascontiguousarray(self._channels()[..., :3])
        Image.fromarray(rgb).save(
            buffer,
            format="JPEG",
            quality=quality if quality is not None else settings.jpeg_quality,
        )
        return buffer.getvalue()

    @classmethod
    def from_png(cls, data: bytes) -> Pixmap:
        with Image.open(io.BytesIO(data)) as image:
            rgba = np.asarray(image.convert("RGBA"), dtype=np.uint32)
        pixmap = cls(rgba.shape[1], rgba.shape[0])
        pixmap._pixels = (rgba[..., 3] << 24) | (rgba[..., 0] << 16) | (rgba[..., 1] << 8) | rgba[..., 2]
        return pixmap

    def __repr__(self) -> str:
        return f"Pixmap({self.width}x{self.height})"


def gray(brightness: int) -> int:
    """Opaque gray with the given 0-255 brightness."""
    return 0xFF000000 | (brightness << 16) | (brightness << 8) | brightness
