"""Visualizers for the binarized image and the pixel-level masks."""

from __future__ import annotations

from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.engine.registry import visualizer
from afisviz.models.fields import BooleanMatrix
from afisviz.rendering.diff import paint_boolean_diff
from afisviz.rendering.fields import overlay_mask, paint_boolean_matrix
from afisviz.rendering.layers import embed_png
from afisviz.svg.document import SvgElement
from afisviz.visualizers.common import background, canvas


def _binary(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    matrix: BooleanMatrix = archive.require(key)
    return canvas(matrix.width, matrix.height).add(embed_png(paint_boolean_matrix(matrix))).render()


for _stage, _description in (
    (Stage.BINARIZED_IMAGE, "Ridges black, valleys white"),
    (Stage.FILTERED_BINARY_IMAGE, "Binarized image after removing specks"),
):
    visualizer(stage=_stage, description=_description)(_binary)


@visualizer(
    stage=Stage.FILTERED_BINARY_IMAGE,
    dependencies=[Stage.BINARIZED_IMAGE],
    diff=True,
    description="Pixels flipped by binary filtering",
)
def filtered_binary_diff(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    filtered: BooleanMatrix = archive.require(key)
    binarized: BooleanMatrix = archive.require(Stage.BINARIZED_IMAGE)
    return (
        canvas(filtered.width, filtered.height)
        .add(embed_png(paint_boolean_diff(binarized, filtered)))
        .render()
    )


def _pixel_mask(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    mask: BooleanMatrix = archive.require(key)
    return (
        canvas(mask.width, mask.height)
        .add(background(archive, mask.width, mask.height))
        .add(embed_png(overlay_mask(mask)))
        .render()
    )


for _stage, _description in (
    (Stage.PIXEL_MASK, "Foreground mask at pixel resolution"),
    (Stage.INNER_MASK, "Pixel mask shrunk away from the fingerprint edge"),
):
    visualizer(stage=_stage, dependencies=[Stage.INPUT_IMAGE], description=_description)(_pixel_mask)
