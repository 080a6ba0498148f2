"""Renderers for skeleton graphs."""

from __future__ import annotations

from collections.abc import Mapping

from afisviz.models.fields import BooleanMatrix
from afisviz.models.skeleton import Point, SkeletonGraph
from afisviz.raster.pixmap import Pixmap
from afisviz.rendering import colors
from afisviz.rendering.fields import paint_boolean_matrix
from afisviz.rendering.layers import embed_png
from afisviz.svg.document import SvgElement
from afisviz.svg.primitives import circle

SKELETON_MINUTIA_RADIUS = 4.0
SKELETON_MINUTIA_STROKE_WIDTH = 0.7


def overlay_skeleton_shadow(shadow: BooleanMatrix | SkeletonGraph) -> Pixmap:
    if isinstance(shadow, SkeletonGraph):
        shadow = shadow.shadow()
    return paint_boolean_matrix(shadow, colors.SKELETON_SHADOW, colors.TRANSPARENT)


def mark_skeleton_minutia(minutia: Point, color: str) -> SvgElement:
    x, y = minutia
    return circle(
        x + 0.5,
        y + 0.5,
        SKELETON_MINUTIA_RADIUS,
        fill="none",
        stroke=color,
        stroke_width=SKELETON_MINUTIA_STROKE_WIDTH,
    )


def mark_counted_minutia(minutia: Point, counts: Mapping[Point, int]) -> SvgElement:
    """Ridge endings (exactly one ridge) stand out from junctions and loose points."""
    return mark_skeleton_minutia(minutia, colors.skeleton_minutia_color(counts.get(minutia, 0)))


def mark_skeleton(skeleton: SkeletonGraph) -> list[SvgElement]:
    markers = [embed_png(overlay_skeleton_shadow(skeleton))]
    counts = skeleton.ridge_counts()
    markers.extend(mark_counted_minutia(minutia, counts) for minutia in skeleton.minutiae)
    return markers
