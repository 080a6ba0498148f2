"""Visualizers for ridge and valley skeletons.

Each skeleton stage exists once per skeleton type; the key carries which one.
Every cleanup step after tracing also has a diff against the step before it.
"""

from __future__ import annotations

from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.engine.registry import visualizer
from afisviz.models.fields import BooleanMatrix
from afisviz.models.skeleton import SkeletonGraph
from afisviz.rendering.diff import paint_boolean_diff, paint_skeleton_diff
from afisviz.rendering.fields import overlay_boolean_matrix
from afisviz.rendering.layers import embed_png
from afisviz.rendering.skeletons import mark_skeleton, overlay_skeleton_shadow
from afisviz.svg.document import SvgElement
from afisviz.visualizers.common import background, canvas

# Cleanup step -> the step whose output it modifies.
PREVIOUS_STEP = {
    Stage.REMOVED_DOTS: Stage.TRACED_SKELETON,
    Stage.REMOVED_PORES: Stage.REMOVED_DOTS,
    Stage.REMOVED_GAPS: Stage.REMOVED_PORES,
    Stage.REMOVED_TAILS: Stage.REMOVED_GAPS,
    Stage.REMOVED_FRAGMENTS: Stage.REMOVED_TAILS,
}


@visualizer(
    stage=Stage.BINARIZED_SKELETON,
    dependencies=[Stage.INPUT_IMAGE],
    description="Binary image the skeleton is thinned from",
)
def binarized_skeleton(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    binarized: BooleanMatrix = archive.require(key)
    return (
        canvas(binarized.width, binarized.height)
        .add(background(archive, binarized.width, binarized.height))
        .add(embed_png(overlay_boolean_matrix(binarized)))
        .render()
    )


@visualizer(
    stage=Stage.THINNED_SKELETON,
    dependencies=[Stage.INPUT_IMAGE],
    description="One-pixel-wide thinned lines",
)
def thinned_skeleton(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    thinned: BooleanMatrix = archive.require(key)
    return (
        canvas(thinned.width, thinned.height)
        .add(background(archive, thinned.width, thinned.height))
        .add(embed_png(overlay_skeleton_shadow(thinned)))
        .render()
    )


@visualizer(
    stage=Stage.THINNED_SKELETON,
    dependencies=[Stage.BINARIZED_SKELETON],
    diff=True,
    description="Pixels removed by thinning",
)
def thinned_skeleton_diff(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    thinned: BooleanMatrix = archive.require(key)
    binarized: BooleanMatrix = archive.require(key.sibling(Stage.BINARIZED_SKELETON))
    return (
        canvas(thinned.width, thinned.height)
        .add(embed_png(paint_boolean_diff(binarized, thinned)))
        .render()
    )


def _skeleton(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    skeleton: SkeletonGraph = archive.require(key)
    return (
        canvas(skeleton.width, skeleton.height)
        .add(background(archive, skeleton.width, skeleton.height))
        .add(mark_skeleton(skeleton))
        .render()
    )


def _skeleton_diff(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    skeleton: SkeletonGraph = archive.require(key)
    previous: SkeletonGraph = archive.require(key.sibling(PREVIOUS_STEP[key.stage]))
    return (
        canvas(skeleton.width, skeleton.height)
        .add(paint_skeleton_diff(previous, skeleton))
        .render()
    )


visualizer(
    stage=Stage.TRACED_SKELETON,
    dependencies=[Stage.INPUT_IMAGE],
    description="Skeleton graph traced from thinned lines",
)(_skeleton)

for _stage, _previous in PREVIOUS_STEP.items():
    visualizer(
        stage=_stage,
        dependencies=[Stage.INPUT_IMAGE],
        description=f"Skeleton after {_stage.value.replace('-', ' ')}",
    )(_skeleton)
    visualizer(
        stage=_stage,
        dependencies=[_previous],
        diff=True,
        description=f"Changes made by {_stage.value.replace('-', ' ')}",
    )(_skeleton_diff)
