"""Reusable layers: embedded rasters and block grids."""

from __future__ import annotations

import base64

from afisviz.models.blocks import BlockGrid, BlockMap
from afisviz.raster import codec
from afisviz.raster.pixmap import Pixmap
from afisviz.rendering import colors
from afisviz.svg.document import SvgElement
from afisviz.svg.primitives import image, line


def _data_uri(mime: str, data: bytes) -> str:
    return f"data:{mime};base64," + base64.b64encode(data).decode("ascii")


def embed_png(pixmap: Pixmap) -> SvgElement:
    return image(pixmap.width, pixmap.height, _data_uri("image/png", pixmap.png()))


def embed_jpeg(pixmap: Pixmap) -> SvgElement:
    return image(pixmap.width, pixmap.height, _data_uri("image/jpeg", pixmap.jpeg()))


def embed_image(width: int, height: int, data: bytes | None) -> SvgElement | None:
    """Embed an external image (e.g. the raw scan) as JPEG, stretched to ``width`` x ``height``.

    Returns None when there is no image, so callers can pass the result straight
    to ``VectorBuffer.add``.
    """
    if data is None:
        return None
    return image(width, height, _data_uri("image/jpeg", codec.to_jpeg(data)))


def embed_lossless(width: int, height: int, data: bytes | None) -> SvgElement | None:
    """Like ``embed_image`` but keeps exact pixels by re-encoding to PNG."""
    if data is None:
        return None
    return image(width, height, _data_uri("image/png", codec.to_png(data)))


def block_grid_lines(grid: BlockGrid, **style) -> list[SvgElement]:
    """Every column and row boundary of the grid, spanning the grid's extent."""
    left, right = grid.x[0], grid.x[-1]
    top, bottom = grid.y[0], grid.y[-1]
    lines = [line(x, top, x, bottom, **style) for x in grid.x]
    lines.extend(line(left, y, right, y, **style) for y in grid.y)
    return lines


def double_block_grid(blocks: BlockMap, color: str = colors.GRID_STROKE) -> list[SvgElement]:
    """Secondary tiling thin and faded underneath, primary tiling on top."""
    lines = block_grid_lines(
        blocks.secondary,
        stroke=color,
        stroke_width=colors.GRID_SECONDARY_WIDTH,
        stroke_opacity=colors.GRID_SECONDARY_OPACITY,
    )
    lines.extend(block_grid_lines(blocks.primary, stroke=color, stroke_width=colors.GRID_PRIMARY_WIDTH))
    return lines
