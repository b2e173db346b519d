"""
Grid capabilities consumed by the generator, and a numpy-backed default.

The generator never indexes storage directly. It asks a GridAccess for a
cell and hands that cell to a TilePainter, so hosts with their own grid
(an editor, a game scene) can plug in without copying tiles around.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

import numpy as np

from .tiles import TileKind


@dataclass(frozen=True)
class Cell:
    """A handle to one grid cell."""

    x: int
    y: int


class GridAccess(Protocol):
    """Read access to a rectangular grid of cells."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def try_get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at (x, y), or None if it is outside the grid."""
        ...


class TilePainter(Protocol):
    """Write access: puts a tile kind on a cell."""

    def paint_tile(self, cell: Cell, tile_kind: TileKind, overwrite: bool) -> None:
        """
        Paint tile_kind on cell.

        With overwrite=False a cell that already holds something other than
        NOTHING is left unchanged.
        """
        ...


# Type Definition
TileMap = np.ndarray


class TileGrid:
    """
    Grid storage backed by a 2D integer array indexed [row, column].

    Implements both GridAccess and TilePainter. Rows are y, columns are x.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must have a positive size, got {width}x{height}")
        self.tiles: TileMap = np.zeros((height, width), dtype=int)

    @classmethod
    def from_array(cls, tiles: TileMap) -> "TileGrid":
        """Wrap an existing [row, column] tile array (copied)."""
        rows, cols = tiles.shape
        grid = cls(cols, rows)
        grid.tiles[:, :] = tiles
        return grid

    @property
    def width(self) -> int:
        return int(self.tiles.shape[1])

    @property
    def height(self) -> int:
        return int(self.tiles.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def try_get_cell(self, x: int, y: int) -> Optional[Cell]:
        if not self.in_bounds(x, y):
            return None
        return Cell(x, y)

    def paint_tile(self, cell: Cell, tile_kind: TileKind, overwrite: bool) -> None:
        current = self.tiles[cell.y, cell.x]
        if not overwrite and current != TileKind.NOTHING:
            return
        self.tiles[cell.y, cell.x] = tile_kind

    def tile_at(self, x: int, y: int) -> TileKind:
        """Return the tile at (x, y). Out-of-bounds reads return NOTHING."""
        if not self.in_bounds(x, y):
            return TileKind.NOTHING
        return TileKind(int(self.tiles[y, x]))

    def count(self, tile_kind: TileKind) -> int:
        return int(np.count_nonzero(self.tiles == tile_kind))

    def copy(self) -> "TileGrid":
        return TileGrid.from_array(self.tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return bool(np.array_equal(self.tiles, other.tiles))
