"""Visualizers for the matcher: templates, edge hash, roots and pairing."""

from __future__ import annotations

from afisviz.config import settings
from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.engine.registry import visualizer
from afisviz.models.template import Template
from afisviz.rendering.matching import mark_roots, split_pairing
from afisviz.rendering.minutiae import mark_hash, mark_template
from afisviz.svg.document import SvgElement
from afisviz.visualizers.common import canvas


def _template(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    template: Template = archive.require(key)
    return canvas(template.width, template.height).add(mark_template(template)).render()


visualizer(stage=Stage.PROBE_TEMPLATE, description="Probe template as seen by the matcher")(_template)
visualizer(stage=Stage.CANDIDATE_TEMPLATE, description="Candidate template as seen by the matcher")(_template)


@visualizer(
    stage=Stage.EDGE_HASH,
    dependencies=[Stage.PROBE_TEMPLATE],
    description="Probe edges indexed for lookup",
)
def edge_hash(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    probe: Template = archive.require(Stage.PROBE_TEMPLATE)
    return canvas(probe.width, probe.height).add(mark_hash(archive.require(key), probe)).render()


@visualizer(
    stage=Stage.ROOTS,
    dependencies=[Stage.PROBE_TEMPLATE, Stage.CANDIDATE_TEMPLATE],
    description="Candidate root pairs between probe and candidate",
)
def roots(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    probe: Template = archive.require(Stage.PROBE_TEMPLATE)
    candidate: Template = archive.require(Stage.CANDIDATE_TEMPLATE)
    return mark_roots(archive.require(key), probe, candidate).padding(settings.default_padding).render()


@visualizer(
    stage=Stage.PAIRING,
    dependencies=[Stage.PROBE_TEMPLATE, Stage.CANDIDATE_TEMPLATE],
    description="Pairing tree and support edges on both templates",
)
def pairing(archive: ArtifactArchive, key: ArtifactKey) -> SvgElement:
    probe: Template = archive.require(Stage.PROBE_TEMPLATE)
    candidate: Template = archive.require(Stage.CANDIDATE_TEMPLATE)
    return split_pairing(archive.require(key), probe, candidate).padding(settings.default_padding).render()
