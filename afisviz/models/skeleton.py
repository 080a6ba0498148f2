"""Skeleton graph of thinned ridges (or valleys)."""

from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass, field

import numpy as np

from afisviz.models.fields import BooleanMatrix

Point = tuple[int, int]


class SkeletonType(enum.Enum):
    RIDGES = "ridges"
    VALLEYS = "valleys"


@dataclass(frozen=True)
class SkeletonRidge:
    """One ridge between two minutiae, given as indices into ``SkeletonGraph.minutiae``.

    Every ridge is listed twice in the graph, once from each end.
    """

    start: int
    end: int
    points: tuple[Point, ...] = ()


@dataclass(frozen=True)
class SkeletonGraph:
    width: int
    height: int
    minutiae: tuple[Point, ...] = ()
    ridges: tuple[SkeletonRidge, ...] = field(default_factory=tuple)

    def shadow(self) -> BooleanMatrix:
        """Pixels covered by any ridge or minutia."""
        cells = np.zeros((self.height, self.width), dtype=np.bool_)
        for x, y in self.minutiae:
            cells[y, x] = True
        for ridge in self.ridges:
            for x, y in ridge.points:
                cells[y, x] = True
        return BooleanMatrix(cells)

    def ridge_counts(self) -> Counter[Point]:
        """Number of ridges leaving each minutia position."""
        return Counter(self.minutiae[ridge.start] for ridge in self.ridges)
