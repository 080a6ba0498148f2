"""Visual diffs between two versions of the same artifact."""

from __future__ import annotations

import numpy as np

from afisviz.models.fields import BooleanMatrix
from afisviz.models.skeleton import SkeletonGraph
from afisviz.models.template import Template
from afisviz.raster.pixmap import Pixmap
from afisviz.rendering import colors
from afisviz.rendering.layers import embed_png
from afisviz.rendering.minutiae import mark_minutia
from afisviz.rendering.skeletons import mark_counted_minutia, mark_skeleton_minutia
from afisviz.svg.document import SvgElement


def paint_boolean_diff(previous: BooleanMatrix, next: BooleanMatrix) -> Pixmap:
    """Each pixel gets one of four colors: stayed on, stayed off, turned on, turned off."""
    before = previous.cells
    after = next.cells
    pixels = np.select(
        [after & before, after & ~before, ~after & before],
        [colors.DIFF_UNCHANGED_ON, colors.DIFF_ADDED, colors.DIFF_REMOVED],
        default=colors.DIFF_UNCHANGED_OFF,
    ).astype(np.uint32)
    return Pixmap.from_colors(pixels)


def paint_skeleton_diff(previous: SkeletonGraph, next: SkeletonGraph) -> list[SvgElement]:
    """Pixel diff of the shadows with minutia changes marked on top.

    Minutiae are matched by position.
    """
    markers = [embed_png(paint_boolean_diff(previous.shadow(), next.shadow()))]
    counts = next.ridge_counts()
    before = set(previous.minutiae)
    after = set(next.minutiae)
    markers.extend(
        mark_skeleton_minutia(minutia, colors.SKELETON_REMOVED)
        for minutia in previous.minutiae
        if minutia not in after
    )
    for minutia in next.minutiae:
        if minutia in before:
            markers.append(mark_counted_minutia(minutia, counts))
        else:
            markers.append(mark_skeleton_minutia(minutia, colors.SKELETON_ADDED))
    return markers


def mark_template_diff(previous: Template, next: Template) -> list[SvgElement]:
    """Removed minutiae in red, added in orange, the rest in their type color.

    Correspondence is by position only; a minutia that kept its position but
    changed direction counts as unchanged.
    """
    before = {minutia.position for minutia in previous.minutiae}
    after = {minutia.position for minutia in next.minutiae}
    markers = [
        mark_minutia(minutia, colors.MINUTIA_REMOVED)
        for minutia in previous.minutiae
        if minutia.position not in after
    ]
    for minutia in next.minutiae:
        color = None if minutia.position in before else colors.MINUTIA_ADDED
        markers.append(mark_minutia(minutia, color))
    return markers
