"""Block tilings of the fingerprint image."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class IntRect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + 0.5 * self.width, self.y + 0.5 * self.height)

    @property
    def radius(self) -> float:
        """Radius of the circle inscribed in the rectangle."""
        return 0.5 * min(self.width, self.height)


@dataclass(frozen=True)
class BlockGrid:
    """Rectangular tiling described by its corner coordinates.

    ``x`` holds the left edge of every column plus the right edge of the last one,
    ``y`` does the same for rows, so a grid of N columns has N + 1 x-corners.
    """

    x: tuple[int, ...]
    y: tuple[int, ...]

    @property
    def blocks(self) -> tuple[int, int]:
        """Block count as (columns, rows)."""
        return (len(self.x) - 1, len(self.y) - 1)

    def block(self, bx: int, by: int) -> IntRect:
        return IntRect(
            self.x[bx],
            self.y[by],
            self.x[bx + 1] - self.x[bx],
            self.y[by + 1] - self.y[by],
        )

    def positions(self):
        """Yield (bx, by) for every block in row-major order."""
        columns, rows = self.blocks
        for by in range(rows):
            for bx in range(columns):
                yield bx, by

    def column_index(self) -> NDArray[np.intp]:
        """Block column of every pixel column."""
        return np.repeat(np.arange(len(self.x) - 1), np.diff(self.x))

    def row_index(self) -> NDArray[np.intp]:
        """Block row of every pixel row."""
        return np.repeat(np.arange(len(self.y) - 1), np.diff(self.y))

    @classmethod
    def uniform(cls, width: int, height: int, size: int) -> BlockGrid:
        """Tile ``width`` x ``height`` pixels with ``size``-sized blocks, last block clipped."""
        xs = list(range(0, width, size)) + [width]
        ys = list(range(0, height, size)) + [height]
        return cls(tuple(xs), tuple(ys))


@dataclass(frozen=True)
class BlockMap:
    """Primary tiling plus the secondary tiling offset by half a block."""

    width: int
    height: int
    primary: BlockGrid
    secondary: BlockGrid

    @property
    def pixels(self) -> tuple[int, int]:
        return (self.width, self.height)

    @classmethod
    def build(cls, width: int, height: int, size: int) -> BlockMap:
        primary = BlockGrid.uniform(width, height, size)
        half = size // 2
        xs = [0] + [min(width, x + half) for x in primary.x[:-1]] + [width]
        ys = [0] + [min(height, y + half) for y in primary.y[:-1]] + [height]
        secondary = BlockGrid(tuple(sorted(set(xs))), tuple(sorted(set(ys))))
        return cls(width, height, primary, secondary)
