"""Minutiae, templates and the edge tables built on top of them."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class MinutiaType(enum.Enum):
    ENDING = "ending"
    BIFURCATION = "bifurcation"


@dataclass(frozen=True)
class Minutia:
    x: int
    y: int
    direction: float  # radians, full 2π heading
    type: MinutiaType = MinutiaType.ENDING

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def center(self) -> tuple[float, float]:
        """Center of the minutia's pixel."""
        return (self.x + 0.5, self.y + 0.5)


@dataclass(frozen=True)
class Template:
    width: int
    height: int
    minutiae: tuple[Minutia, ...] = ()

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True)
class EdgeShape:
    length: float
    reference_angle: float
    neighbor_angle: float


@dataclass(frozen=True)
class NeighborEdge(EdgeShape):
    neighbor: int = 0


@dataclass(frozen=True)
class IndexedEdge(EdgeShape):
    reference: int = 0
    neighbor: int = 0


@dataclass(frozen=True)
class EdgeHashEntry:
    key: int
    edges: tuple[IndexedEdge, ...] = ()
