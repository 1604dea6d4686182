# mountain_engine/core/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple

import numpy as np

from .constants import TileKind


@dataclass(frozen=True)
class TerrainTile:
    """One addressable tile. ``kind`` is the terrain type of the tile."""

    kind: TileKind
    altitude: int
    color: int
    variant: int

    @property
    def name(self) -> str:
        return self.kind.name.lower()


@dataclass(frozen=True)
class HeightRange:
    """Half-open vertical band ``[min, max)`` in world pixels."""

    min: int
    max: int

    def contains(self, y: float) -> bool:
        return self.min <= y < self.max

    @property
    def span(self) -> int:
        return self.max - self.min


class Position(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True, eq=False)
class MountainLayer:
    """
    One horizontal band of the mountain, a cylinder that wraps left to right.

    ``kind`` and ``variant`` are (rows, cols) uint8 grids, frozen after the
    build. Tiles are materialized on access so callers never get a reference
    into the grids.
    """

    index: int
    circumference: int
    height_range: HeightRange
    tile_size: int
    color: int
    kind: np.ndarray
    variant: np.ndarray

    @property
    def width(self) -> int:
        """Grid columns."""
        return int(self.kind.shape[1])

    @property
    def height(self) -> int:
        """Grid rows."""
        return int(self.kind.shape[0])

    @property
    def wrap_period(self) -> int:
        """Pixels after which the tile columns repeat (``width * tile_size``).

        Equals ``circumference`` only when it is a whole number of tiles.
        """
        return self.width * self.tile_size

    def tile(self, col: int, row: int) -> TerrainTile:
        return TerrainTile(
            kind=TileKind(int(self.kind[row, col])),
            altitude=self.height_range.min + row * self.tile_size,
            color=self.color,
            variant=int(self.variant[row, col]),
        )

    def iter_tiles(self) -> Iterator[TerrainTile]:
        for row in range(self.height):
            for col in range(self.width):
                yield self.tile(col, row)

    @property
    def terrain(self) -> List[List[TerrainTile]]:
        """Row-major copy of the grid as tiles."""
        return [[self.tile(c, r) for c in range(self.width)] for r in range(self.height)]
