"""Raster buffers and image codec glue."""

from afisviz.raster.codec import ImageFormat, detect_format, to_jpeg, to_png
from afisviz.raster.pixmap import Pixmap, gray

__all__ = ["ImageFormat", "Pixmap", "detect_format", "gray", "to_jpeg", "to_png"]
