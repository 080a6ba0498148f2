"""End-to-end tests: every registered visualizer over a small synthetic run."""

from __future__ import annotations

import numpy as np
import pytest

from afisviz import bootstrap
from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.errors import MissingArtifactError
from afisviz.models import (
    BooleanMatrix,
    DoubleMatrix,
    DoublePointMatrix,
    EdgeHashEntry,
    HistogramCube,
    IndexedEdge,
    MinutiaPair,
    SkeletonType,
)
from afisviz.rendering import colors


@pytest.fixture(scope="module")
def registry():
    return bootstrap.load_visualizers()


@pytest.fixture
def artifacts(block_map, checker_mask, edge_table, pairing, input_png, template, skeleton):
    rng = np.random.default_rng(7)
    binary = BooleanMatrix(rng.random((8, 8)) > 0.5)
    artifacts = {
        Stage.INPUT_IMAGE: input_png,
        Stage.BLOCKS: block_map,
        Stage.HISTOGRAM: HistogramCube(rng.integers(0, 5, size=(2, 2, 256))),
        Stage.SMOOTHED_HISTOGRAM: HistogramCube(np.zeros((2, 2, 256), dtype=np.int64)),
        Stage.CONTRAST: DoubleMatrix(rng.random((2, 2))),
        Stage.PIXELWISE_ORIENTATION: DoublePointMatrix(rng.normal(size=(8, 8, 2))),
        Stage.BLOCK_ORIENTATION: DoublePointMatrix(rng.normal(size=(2, 2, 2))),
        Stage.SMOOTHED_ORIENTATION: DoublePointMatrix(rng.normal(size=(2, 2, 2))),
        Stage.BINARIZED_IMAGE: binary,
        Stage.FILTERED_BINARY_IMAGE: binary.invert(),
        Stage.PIXEL_MASK: binary,
        Stage.INNER_MASK: BooleanMatrix.empty(8, 8),
        Stage.EDGE_TABLE: edge_table,
        Stage.PROBE_TEMPLATE: template,
        Stage.CANDIDATE_TEMPLATE: template,
        Stage.EDGE_HASH: [
            EdgeHashEntry(1, (IndexedEdge(15.0, 0.1, 0.2, reference=0, neighbor=1),)),
            EdgeHashEntry(2, (IndexedEdge(15.0, 0.2, 0.1, reference=1, neighbor=0),)),
        ],
        Stage.ROOTS: [MinutiaPair(0, 0), MinutiaPair(2, 1)],
        Stage.PAIRING: pairing,
    }
    for stage in (
        Stage.DECODED_IMAGE,
        Stage.SCALED_IMAGE,
        Stage.EQUALIZED_IMAGE,
        Stage.PARALLEL_SMOOTHING,
        Stage.ORTHOGONAL_SMOOTHING,
    ):
        artifacts[stage] = DoubleMatrix(rng.random((8, 8)))
    for stage in (
        Stage.ABSOLUTE_CONTRAST_MASK,
        Stage.RELATIVE_CONTRAST_MASK,
        Stage.COMBINED_MASK,
        Stage.FILTERED_MASK,
    ):
        artifacts[stage] = checker_mask
    for stage in (
        Stage.SKELETON_MINUTIAE,
        Stage.INNER_MINUTIAE,
        Stage.REMOVED_MINUTIA_CLOUDS,
        Stage.TOP_MINUTIAE,
        Stage.SHUFFLED_MINUTIAE,
    ):
        artifacts[stage] = template
    for skeleton_type in SkeletonType:
        artifacts[ArtifactKey(Stage.BINARIZED_SKELETON, skeleton_type)] = BooleanMatrix(
            np.ones((10, 10), dtype=bool)
        )
        artifacts[ArtifactKey(Stage.THINNED_SKELETON, skeleton_type)] = skeleton.shadow()
        for stage in (
            Stage.TRACED_SKELETON,
            Stage.REMOVED_DOTS,
            Stage.REMOVED_PORES,
            Stage.REMOVED_GAPS,
            Stage.REMOVED_TAILS,
            Stage.REMOVED_FRAGMENTS,
        ):
            artifacts[ArtifactKey(stage, skeleton_type)] = skeleton
    return artifacts


def _key(stage: Stage) -> ArtifactKey:
    return ArtifactKey(stage, SkeletonType.RIDGES if stage.per_skeleton else None)


def test_every_stage_has_a_visualizer(registry):
    assert all(registry.supports(stage) for stage in Stage)
    diffs = [spec.stage for spec in registry.all() if spec.diff]
    assert diffs == [
        Stage.FILTERED_BINARY_IMAGE,
        Stage.THINNED_SKELETON,
        Stage.REMOVED_DOTS,
        Stage.REMOVED_PORES,
        Stage.REMOVED_GAPS,
        Stage.REMOVED_TAILS,
        Stage.REMOVED_FRAGMENTS,
        Stage.INNER_MINUTIAE,
        Stage.REMOVED_MINUTIA_CLOUDS,
        Stage.TOP_MINUTIAE,
    ]
    assert registry.count == 50


def test_every_visualizer_renders(registry, artifacts):
    archive = ArtifactArchive(artifacts)
    for spec in registry.all():
        key = _key(spec.stage)
        assert registry.dependencies(key, spec.diff) <= set(archive), spec.stage
        document = registry.render(key, archive, spec.diff)
        assert document.tag == "svg"
        assert document.children, spec.stage


def test_dependencies_are_sufficient(registry, artifacts):
    full = ArtifactArchive(artifacts)
    for spec in registry.all():
        key = _key(spec.stage)
        needed = {k: full[k] for k in spec.dependency_keys(key)}
        registry.render(key, ArtifactArchive(needed), spec.diff)


def test_blocks_without_background(registry, block_map):
    document = registry.render(ArtifactKey(Stage.BLOCKS), ArtifactArchive({Stage.BLOCKS: block_map}))
    assert document.get("viewBox") == "-1 -1 10 10"
    assert document.get("width") == "10"
    assert all(child.tag == "line" for child in document.children)


def test_blocks_with_background(registry, block_map, input_png):
    archive = ArtifactArchive({Stage.BLOCKS: block_map, Stage.INPUT_IMAGE: input_png})
    document = registry.render(ArtifactKey(Stage.BLOCKS), archive)
    first = document.children[0]
    assert first.tag == "image"
    assert first.get("href").startswith("data:image/jpeg;base64,")
    assert (first.get("width"), first.get("height")) == ("8", "8")


def test_input_image_is_lossless(registry, input_png):
    document = registry.render(ArtifactKey(Stage.INPUT_IMAGE), ArtifactArchive({Stage.INPUT_IMAGE: input_png}))
    assert document.children[0].get("href").startswith("data:image/png;base64,")


def test_missing_artifact(registry):
    with pytest.raises(MissingArtifactError, match="blocks"):
        registry.render(ArtifactKey(Stage.CONTRAST), ArtifactArchive())


def test_roots_split_view(registry, artifacts):
    document = registry.render(ArtifactKey(Stage.ROOTS), ArtifactArchive(artifacts))
    # Two 40-wide templates with the default 20 gutter, plus padding.
    assert document.get("viewBox") == "-1 -1 102 32"
    assert len(document.find_all("line")) == 2


def test_pairing_split_view(registry, artifacts):
    document = registry.render(ArtifactKey(Stage.PAIRING), ArtifactArchive(artifacts))
    right = document.children[-1]
    assert right.get("transform") == "translate(60 0)"
    roots = [el for el in document.walk() if el.get("fill") == colors.PAIRING_ROOT]
    assert len(roots) == 2


def test_skeleton_diff_uses_same_skeleton(registry, artifacts):
    key = ArtifactKey(Stage.REMOVED_DOTS, SkeletonType.VALLEYS)
    assert registry.dependencies(key, diff=True) == {
        key,
        ArtifactKey(Stage.TRACED_SKELETON, SkeletonType.VALLEYS),
    }
    archive = ArtifactArchive({k: artifacts[k] for k in registry.dependencies(key, diff=True)})
    document = registry.render(key, archive, diff=True)
    assert document.children[0].tag == "image"
    assert len(document.find_all("circle")) == 3


def test_render_markup(artifacts):
    markup = bootstrap.render(ArtifactKey(Stage.TOP_MINUTIAE), ArtifactArchive(artifacts), diff=True)
    assert markup.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert '<svg xmlns="http://www.w3.org/2000/svg"' in markup
    assert markup.count("<circle") == 3
