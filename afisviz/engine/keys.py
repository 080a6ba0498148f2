"""Closed set of artifact keys the visualizers understand."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from afisviz.models.skeleton import SkeletonType


class Stage(enum.Enum):
    """Pipeline outputs, in the order the algorithm produces them."""

    # Extraction: image analysis
    INPUT_IMAGE = "input-image"
    DECODED_IMAGE = "decoded-image"
    SCALED_IMAGE = "scaled-image"
    BLOCKS = "blocks"
    HISTOGRAM = "histogram"
    SMOOTHED_HISTOGRAM = "smoothed-histogram"
    CONTRAST = "contrast"
    ABSOLUTE_CONTRAST_MASK = "absolute-contrast-mask"
    RELATIVE_CONTRAST_MASK = "relative-contrast-mask"
    COMBINED_MASK = "combined-mask"
    FILTERED_MASK = "filtered-mask"
    EQUALIZED_IMAGE = "equalized-image"
    PIXELWISE_ORIENTATION = "pixelwise-orientation"
    BLOCK_ORIENTATION = "block-orientation"
    SMOOTHED_ORIENTATION = "smoothed-orientation"
    PARALLEL_SMOOTHING = "parallel-smoothing"
    ORTHOGONAL_SMOOTHING = "orthogonal-smoothing"
    BINARIZED_IMAGE = "binarized-image"
    FILTERED_BINARY_IMAGE = "filtered-binary-image"
    PIXEL_MASK = "pixel-mask"
    INNER_MASK = "inner-mask"
    # Extraction: skeletons, one per SkeletonType
    BINARIZED_SKELETON = "binarized-skeleton"
    THINNED_SKELETON = "thinned-skeleton"
    TRACED_SKELETON = "traced-skeleton"
    REMOVED_DOTS = "removed-dots"
    REMOVED_PORES = "removed-pores"
    REMOVED_GAPS = "removed-gaps"
    REMOVED_TAILS = "removed-tails"
    REMOVED_FRAGMENTS = "removed-fragments"
    # Extraction: minutiae
    SKELETON_MINUTIAE = "skeleton-minutiae"
    INNER_MINUTIAE = "inner-minutiae"
    REMOVED_MINUTIA_CLOUDS = "removed-minutia-clouds"
    TOP_MINUTIAE = "top-minutiae"
    SHUFFLED_MINUTIAE = "shuffled-minutiae"
    EDGE_TABLE = "edge-table"
    # Matching
    PROBE_TEMPLATE = "probe-template"
    CANDIDATE_TEMPLATE = "candidate-template"
    EDGE_HASH = "edge-hash"
    ROOTS = "roots"
    PAIRING = "pairing"

    @property
    def per_skeleton(self) -> bool:
        return self in _SKELETON_STAGES


_SKELETON_STAGES = frozenset(
    {
        Stage.BINARIZED_SKELETON,
        Stage.THINNED_SKELETON,
        Stage.TRACED_SKELETON,
        Stage.REMOVED_DOTS,
        Stage.REMOVED_PORES,
        Stage.REMOVED_GAPS,
        Stage.REMOVED_TAILS,
        Stage.REMOVED_FRAGMENTS,
    }
)


@dataclass(frozen=True)
class ArtifactKey:
    """Stage plus, for skeleton stages, which skeleton (ridges or valleys)."""

    stage: Stage
    skeleton: SkeletonType | None = None

    def __post_init__(self) -> None:
        if self.stage.per_skeleton and self.skeleton is None:
            raise ValueError(f"{self.stage.value} needs a skeleton type")
        if not self.stage.per_skeleton and self.skeleton is not None:
            raise ValueError(f"{self.stage.value} is not a skeleton stage")

    def sibling(self, stage: Stage) -> ArtifactKey:
        """Key of another stage for the same skeleton, where that applies."""
        return ArtifactKey(stage, self.skeleton if stage.per_skeleton else None)

    def __str__(self) -> str:
        if self.skeleton is None:
            return self.stage.value
        return f"{self.skeleton.value}-{self.stage.value}"
