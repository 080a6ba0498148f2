"""Visualizers for the raw scan and the grayscale images derived from it."""

from __future__ import annotations

from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.engine.registry import visualizer
from afisviz.models.fields import DoubleMatrix
from afisviz.raster import codec
from afisviz.rendering.fields import paint_double_matrix
from afisviz.rendering.layers import embed_lossless, embed_png
from afisviz.svg.document import SvgElement
from afisviz.visualizers.common import canvas


@visualizer(stage=Stage.INPUT_IMAGE, description="Raw scan as supplied")
def input_image(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    data = archive.require(key)
    width, height = codec.dimensions(data)
    return canvas(width, height).add(embed_lossless(width, height, data)).render()


def _grayscale(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    matrix: DoubleMatrix = archive.require(key)
    return canvas(matrix.width, matrix.height).add(embed_png(paint_double_matrix(matrix))).render()


for _stage, _description in (
    (Stage.DECODED_IMAGE, "Decoded grayscale image"),
    (Stage.SCALED_IMAGE, "Image rescaled to 500 DPI"),
    (Stage.EQUALIZED_IMAGE, "Locally equalized image"),
    (Stage.PARALLEL_SMOOTHING, "Image smoothed along ridges"),
    (Stage.ORTHOGONAL_SMOOTHING, "Image smoothed across ridges"),
):
    visualizer(stage=_stage, description=_description)(_grayscale)
