"""Visualizers for ridge orientation fields."""

from __future__ import annotations

from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.engine.registry import visualizer
from afisviz.models.blocks import BlockMap
from afisviz.models.fields import DoublePointMatrix
from afisviz.rendering.fields import mark_block_orientation, overlay_pixelwise_orientation
from afisviz.rendering.layers import embed_png
from afisviz.svg.document import SvgElement
from afisviz.visualizers.common import background, canvas


@visualizer(
    stage=Stage.PIXELWISE_ORIENTATION,
    dependencies=[Stage.INPUT_IMAGE],
    description="Per-pixel orientation as hue over the scan",
)
def pixelwise_orientation(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    orientations: DoublePointMatrix = archive.require(key)
    width, height = orientations.width, orientations.height
    return (
        canvas(width, height)
        .add(background(archive, width, height))
        .add(embed_png(overlay_pixelwise_orientation(orientations)))
        .render()
    )


def _block_orientation(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    block_map: BlockMap = archive.require(Stage.BLOCKS)
    return (
        canvas(block_map.width, block_map.height)
        .add(background(archive, block_map.width, block_map.height))
        .add(mark_block_orientation(archive.require(key), block_map, archive.get(Stage.FILTERED_MASK)))
        .render()
    )


for _stage, _description in (
    (Stage.BLOCK_ORIENTATION, "Orientation averaged per block"),
    (Stage.SMOOTHED_ORIENTATION, "Block orientation smoothed across neighbors"),
):
    visualizer(
        stage=_stage,
        dependencies=[Stage.BLOCKS, Stage.FILTERED_MASK, Stage.INPUT_IMAGE],
        description=_description,
    )(_block_orientation)
