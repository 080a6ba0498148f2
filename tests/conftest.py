"""Shared test fixtures."""

from __future__ import annotations

import math

import numpy as np
import pytest

from afisviz.models import (
    BlockMap,
    BooleanMatrix,
    EdgePair,
    Minutia,
    MinutiaPair,
    MinutiaType,
    NeighborEdge,
    PairingGraph,
    SkeletonGraph,
    SkeletonRidge,
    Template,
)
from afisviz.raster.pixmap import Pixmap, gray


def make_template() -> Template:
    return Template(
        width=40,
        height=30,
        minutiae=(
            Minutia(5, 5, 0.0, MinutiaType.ENDING),
            Minutia(20, 5, math.pi / 2, MinutiaType.BIFURCATION),
            Minutia(10, 25, math.pi, MinutiaType.ENDING),
        ),
    )


def make_skeleton() -> SkeletonGraph:
    """A single horizontal ridge from (1, 2) to (6, 2) plus a lone dot at (8, 8)."""
    ridge_points = tuple((x, 2) for x in range(1, 7))
    return SkeletonGraph(
        width=10,
        height=10,
        minutiae=((1, 2), (6, 2), (8, 8)),
        ridges=(
            SkeletonRidge(0, 1, ridge_points),
            SkeletonRidge(1, 0, tuple(reversed(ridge_points))),
        ),
    )


@pytest.fixture
def block_map() -> BlockMap:
    return BlockMap.build(8, 8, 4)


@pytest.fixture
def template() -> Template:
    return make_template()


@pytest.fixture
def skeleton() -> SkeletonGraph:
    return make_skeleton()


@pytest.fixture
def edge_table() -> list[list[NeighborEdge]]:
    # 0 <-> 1 listed by both ends, 1 -> 2 only by minutia 1.
    return [
        [NeighborEdge(length=15.0, reference_angle=0.1, neighbor_angle=0.2, neighbor=1)],
        [
            NeighborEdge(length=15.0, reference_angle=0.2, neighbor_angle=0.1, neighbor=0),
            NeighborEdge(length=22.4, reference_angle=1.0, neighbor_angle=2.0, neighbor=2),
        ],
        [],
    ]


@pytest.fixture
def pairing() -> PairingGraph:
    root = MinutiaPair(0, 1)
    return PairingGraph(
        root=root,
        tree=(EdgePair(root, MinutiaPair(1, 0)),),
        support=(EdgePair(MinutiaPair(1, 0), MinutiaPair(2, 2)),),
    )


@pytest.fixture
def checker_mask() -> BooleanMatrix:
    return BooleanMatrix(np.array([[True, False], [False, True]]))


@pytest.fixture
def input_png() -> bytes:
    return Pixmap(8, 8).fill(gray(128)).png()
