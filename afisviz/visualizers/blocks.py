"""Visualizers for block-level segmentation: grid, histograms, contrast, masks."""

from __future__ import annotations

from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.engine.registry import visualizer
from afisviz.models.blocks import BlockMap
from afisviz.rendering.fields import mark_block_weight, mark_histogram, overlay_mask
from afisviz.rendering.layers import double_block_grid, embed_png
from afisviz.svg.document import SvgElement
from afisviz.visualizers.common import background, canvas


@visualizer(
    stage=Stage.BLOCKS,
    dependencies=[Stage.INPUT_IMAGE],
    description="Primary and secondary block grids over the scan",
)
def blocks(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    block_map: BlockMap = archive.require(key)
    return (
        canvas(block_map.width, block_map.height)
        .add(background(archive, block_map.width, block_map.height))
        .add(double_block_grid(block_map))
        .render()
    )


def _histogram(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    block_map: BlockMap = archive.require(Stage.BLOCKS)
    return (
        canvas(block_map.width, block_map.height)
        .add(background(archive, block_map.width, block_map.height))
        .add(mark_histogram(archive.require(key), block_map))
        .render()
    )


for _stage, _description in (
    (Stage.HISTOGRAM, "Per-block intensity histograms"),
    (Stage.SMOOTHED_HISTOGRAM, "Histograms averaged with neighboring blocks"),
):
    visualizer(
        stage=_stage,
        dependencies=[Stage.BLOCKS, Stage.INPUT_IMAGE],
        description=_description,
    )(_histogram)


@visualizer(
    stage=Stage.CONTRAST,
    dependencies=[Stage.BLOCKS, Stage.INPUT_IMAGE],
    description="Block contrast as circle area",
)
def contrast(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    block_map: BlockMap = archive.require(Stage.BLOCKS)
    return (
        canvas(block_map.width, block_map.height)
        .add(background(archive, block_map.width, block_map.height))
        .add(mark_block_weight(archive.require(key), block_map))
        .render()
    )


def _block_mask(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    block_map: BlockMap = archive.require(Stage.BLOCKS)
    return (
        canvas(block_map.width, block_map.height)
        .add(background(archive, block_map.width, block_map.height))
        .add(embed_png(overlay_mask(archive.require(key), block_map)))
        .render()
    )


for _stage, _description in (
    (Stage.ABSOLUTE_CONTRAST_MASK, "Blocks with too little absolute contrast"),
    (Stage.RELATIVE_CONTRAST_MASK, "Blocks with low contrast relative to the image"),
    (Stage.COMBINED_MASK, "Union of contrast masks"),
    (Stage.FILTERED_MASK, "Combined mask after smoothing"),
):
    visualizer(
        stage=_stage,
        dependencies=[Stage.BLOCKS, Stage.INPUT_IMAGE],
        description=_description,
    )(_block_mask)
