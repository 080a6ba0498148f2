"""Renderers for image-analysis fields: weights, masks, orientations, histograms.

Naming follows what the output is good for:

- ``mark_*``    discrete vector markers with lots of transparency around them
- ``paint_*``   opaque pixmap, only useful as a base layer
- ``overlay_*`` semi-transparent pixmap to lay over the fingerprint image

The first argument is the artifact being rendered; the rest is context from
earlier stages, in pipeline order.
"""

from __future__ import annotations

import math

import numpy as np

from afisviz.models.blocks import BlockMap, IntRect
from afisviz.models.fields import BooleanMatrix, DoubleMatrix, DoublePointMatrix, HistogramCube
from afisviz.raster.pixmap import Pixmap
from afisviz.rendering import colors
from afisviz.svg.document import SvgElement
from afisviz.svg.primitives import circle, line, polygon

# Histograms have one bin per gray level; this many are drawn per block.
HISTOGRAM_DISPLAY_BINS = 16


def mark_rect_weight(weight: float, rect: IntRect) -> SvgElement:
    cx, cy = rect.center
    return circle(
        cx,
        cy,
        colors.weight_radius(weight, rect.radius),
        stroke=colors.WEIGHT_STROKE,
        stroke_width=colors.WEIGHT_STROKE_WIDTH,
        fill=colors.WEIGHT_FILL,
        fill_opacity=colors.WEIGHT_FILL_OPACITY,
    )


def mark_block_weight(matrix: DoubleMatrix, blocks: BlockMap) -> list[SvgElement]:
    """One circle per block, area proportional to the block's normalized value."""
    weights = colors.normalize(matrix.cells)
    return [
        mark_rect_weight(float(weights[by, bx]), blocks.primary.block(bx, by))
        for bx, by in blocks.primary.positions()
    ]


def paint_double_matrix(matrix: DoubleMatrix) -> Pixmap:
    """Grayscale, darkest at the field's minimum and white at its maximum."""
    return Pixmap.from_colors(colors.grayscale(colors.normalize(matrix.cells)))


def paint_boolean_matrix(
    matrix: BooleanMatrix,
    foreground: int = colors.PAINT_FOREGROUND,
    background: int = colors.PAINT_BACKGROUND,
) -> Pixmap:
    pixmap = Pixmap(matrix.width, matrix.height)
    pixmap.fill(background)
    pixmap.paint(matrix.cells, foreground)
    return pixmap


def overlay_boolean_matrix(matrix: BooleanMatrix) -> Pixmap:
    return paint_boolean_matrix(matrix, colors.BINARY_OVERLAY, colors.TRANSPARENT)


def overlay_mask(mask: BooleanMatrix, blocks: BlockMap | None = None) -> Pixmap:
    """Tint masked-in pixels yellow and masked-out pixels cyan.

    Block-level masks are expanded to pixels through ``blocks`` first.
    """
    if blocks is not None:
        mask = mask.expand(blocks)
    return paint_boolean_matrix(mask, colors.MASK_FOREGROUND, colors.MASK_BACKGROUND)


def _paint_orientation(orientations: DoublePointMatrix, opacity: int) -> Pixmap:
    pixmap = Pixmap(orientations.width, orientations.height)
    pixmap.fill(colors.TRANSPARENT_WHITE)
    lengths = orientations.lengths()
    strengths = colors.vector_strengths(lengths)
    painted = colors.orientation_colors(orientations.orientations(), strengths, opacity)
    present = lengths > 0
    return pixmap.paint(present, painted[present])


def paint_pixelwise_orientation(orientations: DoublePointMatrix) -> Pixmap:
    return _paint_orientation(orientations, colors.PAINT_OPACITY)


def overlay_pixelwise_orientation(orientations: DoublePointMatrix) -> Pixmap:
    return _paint_orientation(orientations, colors.OVERLAY_OPACITY)


def mark_rect_orientation(orientation: float, rect: IntRect) -> SvgElement:
    """Line through the block center along the orientation, as long as the block is narrow."""
    cx, cy = rect.center
    arm = 0.5 * min(rect.width, rect.height)
    dx = arm * math.cos(orientation)
    dy = arm * math.sin(orientation)
    return line(cx + dx, cy + dy, cx - dx, cy - dy, stroke=colors.ORIENTATION_STROKE)


def mark_block_orientation(
    orientations: DoublePointMatrix,
    blocks: BlockMap,
    mask: BooleanMatrix | None = None,
) -> list[SvgElement]:
    angles = orientations.orientations()
    return [
        mark_rect_orientation(float(angles[by, bx]), blocks.primary.block(bx, by))
        for bx, by in blocks.primary.positions()
        if mask is None or mask.get(bx, by)
    ]


def resample_histogram(counts: np.ndarray, bins: int = HISTOGRAM_DISPLAY_BINS) -> np.ndarray:
    """Sum adjacent bins down to at most ``bins`` display bins."""
    bins = min(bins, len(counts))
    edges = np.linspace(0, len(counts), bins + 1).astype(np.intp)
    return np.add.reduceat(counts, edges[:-1])


def mark_rect_histogram(counts: np.ndarray, rect: IntRect) -> SvgElement | None:
    """Step silhouette rising from the block's bottom edge. Empty histograms draw nothing."""
    total = int(np.sum(counts))
    if total == 0:
        return None
    resampled = resample_histogram(counts)
    heights = np.log1p(resampled) / math.log1p(total)
    n = len(resampled)
    points = [(rect.x, rect.bottom)]
    for i, h in enumerate(heights):
        top = rect.bottom - rect.height * float(h)
        points.append((rect.x + rect.width * i / n, top))
        points.append((rect.x + rect.width * (i + 1) / n, top))
    points.append((rect.right, rect.bottom))
    return polygon(
        points,
        stroke=colors.HISTOGRAM_STROKE,
        stroke_width=colors.HISTOGRAM_STROKE_WIDTH,
        fill=colors.HISTOGRAM_FILL,
        fill_opacity=colors.HISTOGRAM_FILL_OPACITY,
    )


def mark_histogram(histogram: HistogramCube, blocks: BlockMap) -> list[SvgElement]:
    markers = []
    for bx, by in blocks.primary.positions():
        marker = mark_rect_histogram(histogram.histogram(bx, by), blocks.primary.block(bx, by))
        if marker is not None:
            markers.append(marker)
    return markers
