"""Tests for artifact keys and the archive."""

import pytest

from afisviz.engine.archive import ArtifactArchive
from afisviz.engine.keys import ArtifactKey, Stage
from afisviz.errors import MissingArtifactError, VisualizationError
from afisviz.models import SkeletonType


def test_skeleton_stage_needs_type():
    with pytest.raises(ValueError):
        ArtifactKey(Stage.THINNED_SKELETON)
    with pytest.raises(ValueError):
        ArtifactKey(Stage.BLOCKS, SkeletonType.RIDGES)


def test_key_names():
    assert str(ArtifactKey(Stage.BLOCKS)) == "blocks"
    assert str(ArtifactKey(Stage.REMOVED_GAPS, SkeletonType.VALLEYS)) == "valleys-removed-gaps"


def test_sibling_keeps_skeleton_only_where_it_applies():
    key = ArtifactKey(Stage.REMOVED_TAILS, SkeletonType.RIDGES)
    assert key.sibling(Stage.REMOVED_GAPS) == ArtifactKey(Stage.REMOVED_GAPS, SkeletonType.RIDGES)
    assert key.sibling(Stage.INPUT_IMAGE) == ArtifactKey(Stage.INPUT_IMAGE)


def test_per_skeleton_stages():
    assert sum(stage.per_skeleton for stage in Stage) == 8
    assert len(Stage) == 40


def test_archive_accepts_stages_and_keys():
    archive = ArtifactArchive({Stage.CONTRAST: 1, ArtifactKey(Stage.BLOCKS): 2})
    assert archive[ArtifactKey(Stage.CONTRAST)] == 1
    assert archive[Stage.BLOCKS] == 2
    assert Stage.CONTRAST in archive
    assert "contrast" not in archive
    assert archive.get(Stage.PAIRING) is None
    assert len(archive) == 2


def test_require_missing():
    archive = ArtifactArchive()
    with pytest.raises(MissingArtifactError) as info:
        archive.require(Stage.PAIRING)
    assert info.value.key == ArtifactKey(Stage.PAIRING)
    assert str(info.value) == "Artifact not available: pairing"
    assert isinstance(info.value, VisualizationError)
    assert isinstance(info.value, KeyError)


def test_bare_skeleton_stage_is_never_present():
    skeleton = object()
    archive = ArtifactArchive({ArtifactKey(Stage.REMOVED_DOTS, SkeletonType.RIDGES): skeleton})
    assert Stage.REMOVED_DOTS not in archive
    assert archive.get(Stage.REMOVED_DOTS) is None
    assert archive.get(Stage.REMOVED_DOTS, "missing") == "missing"
    with pytest.raises(KeyError):
        archive[Stage.REMOVED_DOTS]
    assert archive[ArtifactKey(Stage.REMOVED_DOTS, SkeletonType.RIDGES)] is skeleton
