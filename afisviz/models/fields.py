"""Per-pixel and per-block fields produced by the image-analysis stages.

Cells are stored row-major as ``cells[y, x]`` while accessors take ``(x, y)``.
Arrays are copied and frozen on construction so an artifact can be shared
between renderers without defensive copies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from afisviz.models.blocks import BlockMap


def _frozen(values, dtype) -> NDArray:
    array = np.array(values, dtype=dtype)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class DoubleMatrix:
    cells: NDArray[np.float64]

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", _frozen(self.cells, np.float64))

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def get(self, x: int, y: int) -> float:
        return float(self.cells[y, x])


@dataclass(frozen=True, eq=False)
class BooleanMatrix:
    cells: NDArray[np.bool_]

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", _frozen(self.cells, np.bool_))

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def get(self, x: int, y: int) -> bool:
        return bool(self.cells[y, x])

    def invert(self) -> BooleanMatrix:
        return BooleanMatrix(~self.cells)

    def expand(self, blocks: BlockMap) -> BooleanMatrix:
        """Blow a block-level mask up to pixel resolution using the primary grid."""
        grid = blocks.primary
        rows = grid.row_index()
        columns = grid.column_index()
        return BooleanMatrix(self.cells[rows[:, None], columns[None, :]])

    @classmethod
    def empty(cls, width: int, height: int) -> BooleanMatrix:
        return cls(np.zeros((height, width), dtype=np.bool_))


@dataclass(frozen=True, eq=False)
class DoublePointMatrix:
    """Orientation vectors in doubled-angle form.

    A vector at angle ``2θ`` stands for ridge orientation ``θ``, so opposite
    ridge directions average instead of cancelling out.
    """

    cells: NDArray[np.float64]

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", _frozen(self.cells, np.float64))

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def get(self, x: int, y: int) -> tuple[float, float]:
        vx, vy = self.cells[y, x]
        return (float(vx), float(vy))

    def lengths(self) -> NDArray[np.float64]:
        return np.hypot(self.cells[..., 0], self.cells[..., 1])

    def orientations(self) -> NDArray[np.float64]:
        """Orientation of every cell in [0, π)."""
        angles = np.arctan2(self.cells[..., 1], self.cells[..., 0])
        return np.mod(angles / 2, math.pi)


@dataclass(frozen=True, eq=False)
class HistogramCube:
    """Per-block pixel-intensity histograms, ``counts[by, bx, bin]``."""

    counts: NDArray[np.int64]

    def __post_init__(self) -> None:
        object.__setattr__(self, "counts", _frozen(self.counts, np.int64))

    @property
    def bins(self) -> int:
        return self.counts.shape[2]

    def histogram(self, bx: int, by: int) -> NDArray[np.int64]:
        return self.counts[by, bx]
