"""Visualizers for minutia filtering and the neighbor-edge table."""

from __future__ import annotations

from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.engine.registry import visualizer
from afisviz.models.template import Template
from afisviz.rendering.diff import mark_template_diff
from afisviz.rendering.minutiae import mark_edges, mark_template
from afisviz.svg.document import SvgElement
from afisviz.visualizers.common import background, canvas

# Filtering step -> the step whose output it filters.
PREVIOUS_STEP = {
    Stage.INNER_MINUTIAE: Stage.SKELETON_MINUTIAE,
    Stage.REMOVED_MINUTIA_CLOUDS: Stage.INNER_MINUTIAE,
    Stage.TOP_MINUTIAE: Stage.REMOVED_MINUTIA_CLOUDS,
}


def _template(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    template: Template = archive.require(key)
    return (
        canvas(template.width, template.height)
        .add(background(archive, template.width, template.height))
        .add(mark_template(template))
        .render()
    )


def _template_diff(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    template: Template = archive.require(key)
    previous: Template = archive.require(PREVIOUS_STEP[key.stage])
    return (
        canvas(template.width, template.height)
        .add(background(archive, template.width, template.height))
        .add(mark_template_diff(previous, template))
        .render()
    )


for _stage, _description in (
    (Stage.SKELETON_MINUTIAE, "Minutiae collected from both skeletons"),
    (Stage.INNER_MINUTIAE, "Minutiae inside the inner mask"),
    (Stage.REMOVED_MINUTIA_CLOUDS, "Minutiae left after removing dense clouds"),
    (Stage.TOP_MINUTIAE, "Best minutiae kept for the template"),
    (Stage.SHUFFLED_MINUTIAE, "Final template order"),
):
    visualizer(stage=_stage, dependencies=[Stage.INPUT_IMAGE], description=_description)(_template)

for _stage, _previous in PREVIOUS_STEP.items():
    visualizer(
        stage=_stage,
        dependencies=[_previous, Stage.INPUT_IMAGE],
        diff=True,
        description=f"Minutiae dropped on the way to {_stage.value.replace('-', ' ')}",
    )(_template_diff)


@visualizer(
    stage=Stage.EDGE_TABLE,
    dependencies=[Stage.SHUFFLED_MINUTIAE, Stage.INPUT_IMAGE],
    description="Nearest-neighbor edges of every minutia",
)
def edge_table(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    template: Template = archive.require(Stage.SHUFFLED_MINUTIAE)
    return (
        canvas(template.width, template.height)
        .add(background(archive, template.width, template.height))
        .add(mark_edges(archive.require(key), template))
        .render()
    )
