"""Re-encoding of externally supplied images (the raw fingerprint scan).

The scan may come in any format the capture pipeline accepts. Backgrounds are
always embedded as PNG or JPEG, so everything else is decoded and re-encoded
here. SVG input is rasterized through cairosvg.
"""

from __future__ import annotations

import enum
import io
import logging

from PIL import Image

from afisviz.config import settings
from afisviz.errors import UnsupportedFormatError

logger = logging.getLogger(__name__)

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_JPEG_SIGNATURE = b"\xff\xd8\xff"
_TIFF_SIGNATURES = (b"II*\x00", b"MM\x00*")
# SVG has no magic number, look for the root tag near the start.
_SVG_SNIFF_BYTES = 1024
_UTF8_BOM = b"\xef\xbb\xbf"
# Modes the PNG encoder writes as-is.
_PNG_MODES = ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA")


class ImageFormat(enum.Enum):
    PNG = "png"
    JPEG = "jpeg"
    TIFF = "tiff"
    SVG = "svg"

    @property
    def mime(self) -> str:
        return "image/svg+xml" if self is ImageFormat.SVG else f"image/{self.value}"


def detect_format(data: bytes) -> ImageFormat:
    if data.startswith(_PNG_SIGNATURE):
        return ImageFormat.PNG
    if data.startswith(_JPEG_SIGNATURE):
        return ImageFormat.JPEG
    if data.startswith(_TIFF_SIGNATURES):
        return ImageFormat.TIFF
    head = data[:_SVG_SNIFF_BYTES].lstrip().removeprefix(_UTF8_BOM).lstrip()
    if head.startswith(b"<") and b"<svg" in head:
        return ImageFormat.SVG
    raise UnsupportedFormatError(f"Unrecognized image signature: {data[:8]!r}")


def _decode(data: bytes, fmt: ImageFormat) -> Image.Image:
    if fmt is ImageFormat.SVG:
        import cairosvg

        data = cairosvg.svg2png(bytestring=data)
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


def dimensions(data: bytes) -> tuple[int, int]:
    """(width, height) of an encoded image in pixels."""
    return _decode(data, detect_format(data)).size


def to_png(data: bytes) -> bytes:
    fmt = detect_format(data)
    logger.debug("Transcoding %s image to PNG", fmt.value)
    if fmt is ImageFormat.PNG:
        return data
    image = _decode(data, fmt)
    if image.mode not in _PNG_MODES:
        # CMYK, YCbCr, LAB and friends have no PNG equivalent.
        image = image.convert("RGBA" if "A" in image.getbands() else "RGB")
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def to_jpeg(data: bytes, quality: int | None = None) -> bytes:
    fmt = detect_format(data)
    logger.debug("Transcoding %s image to JPEG", fmt.value)
    if fmt is ImageFormat.JPEG:
        return data
    image = _decode(data, fmt)
    if image.mode in ("RGBA", "LA", "P"):
        # JPEG has no alpha; composite over white like a viewer would.
        rgba = image.convert("RGBA")
        flattened = Image.new("RGB", rgba.size, (255, 255, 255))
        flattened.paste(rgba, mask=rgba.getchannel("A"))
        image = flattened
    elif image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    buffer = io.BytesIO()
    image.save(
        buffer,
        format="JPEG",
        quality=quality if quality is not None else settings.jpeg_quality,
    )
    return buffer.getvalue()
