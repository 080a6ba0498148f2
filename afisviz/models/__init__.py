"""Typed snapshots of the artifacts produced by the extraction and matching pipeline."""

from afisviz.models.blocks import BlockGrid, BlockMap, IntRect
from afisviz.models.fields import BooleanMatrix, DoubleMatrix, DoublePointMatrix, HistogramCube
from afisviz.models.matching import EdgePair, MatchSide, MinutiaPair, PairingGraph
from afisviz.models.skeleton import SkeletonGraph, SkeletonRidge, SkeletonType
from afisviz.models.template import (
    EdgeHashEntry,
    EdgeShape,
    IndexedEdge,
    Minutia,
    MinutiaType,
    NeighborEdge,
    Template,
)

__all__ = [
    "BlockGrid",
    "BlockMap",
    "IntRect",
    "BooleanMatrix",
    "DoubleMatrix",
    "DoublePointMatrix",
    "HistogramCube",
    "EdgePair",
    "MatchSide",
    "MinutiaPair",
    "PairingGraph",
    "SkeletonGraph",
    "SkeletonRidge",
    "SkeletonType",
    "EdgeHashEntry",
    "EdgeShape",
    "IndexedEdge",
    "Minutia",
    "MinutiaType",
    "NeighborEdge",
    "Template",
]
