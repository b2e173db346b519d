"""Tests for rectangles, grid storage and the seeded random service."""

import numpy as np
import pytest

from bsp_dungeon.geometry import Point, Rect
from bsp_dungeon.grid import Cell, TileGrid
from bsp_dungeon.random_service import SeededRandomService
from bsp_dungeon.tiles import TileKind


class TestRect:
    def test_edges_are_exclusive(self):
        rect = Rect(2, 3, 4, 5)
        assert rect.x_max == 6
        assert rect.y_max == 8
        assert rect.area == 20

    def test_center_rounds_towards_origin(self):
        assert Rect(0, 0, 5, 5).center == Point(2, 2)
        assert Rect(10, 10, 4, 3).center == Point(12, 11)

    def test_touching_rects_do_not_intersect(self):
        """Rects sharing only an edge have no cell in common."""
        left = Rect(0, 0, 5, 5)
        right = Rect(5, 0, 5, 5)
        below = Rect(0, 5, 5, 5)
        assert not left.intersects(right)
        assert not left.intersects(below)

    def test_overlapping_rects_intersect(self):
        a = Rect(0, 0, 5, 5)
        b = Rect(4, 4, 5, 5)
        assert a.intersects(b)
        assert b.intersects(a)

    def test_expand_and_inset(self):
        rect = Rect(5, 5, 4, 2)
        assert rect.expand(1) == Rect(4, 4, 6, 4)
        assert rect.inset(1) == Rect(6, 6, 2, 0)
        assert rect.inset(1).height == 0

    def test_expanded_neighbor_intersects(self):
        """An edge-adjacent neighbor overlaps once it grows by one."""
        a = Rect(0, 0, 3, 3)
        b = Rect(3, 0, 3, 3)
        assert not a.intersects(b)
        assert a.intersects(b.expand(1))

    def test_one_cell_gap_survives_growing_one_side(self):
        """Growing only one side by one makes a one-cell gap touch, not overlap."""
        a = Rect(0, 0, 3, 3)
        b = Rect(4, 0, 3, 3)
        assert b.expand(1) == Rect(3, -1, 5, 5)
        assert not a.intersects(b.expand(1))
        assert a.intersects(b.expand(2))

    def test_contains(self):
        outer = Rect(0, 0, 10, 10)
        assert outer.contains_rect(Rect(2, 2, 8, 8))
        assert not outer.contains_rect(Rect(2, 2, 9, 8))
        assert outer.contains_point(9, 9)
        assert not outer.contains_point(10, 9)

    def test_cells_cover_the_rect_row_by_row(self):
        cells = list(Rect(1, 1, 3, 2).cells())
        assert len(cells) == 6
        assert cells[0] == (1, 1)
        assert cells[2] == (3, 1)
        assert cells[3] == (1, 2)


class TestTileGrid:
    def test_new_grid_is_empty(self):
        grid = TileGrid(7, 4)
        assert grid.width == 7
        assert grid.height == 4
        assert grid.tiles.shape == (4, 7)
        assert grid.count(TileKind.NOTHING) == 28

    def test_invalid_size_raises(self):
        with pytest.raises(ValueError):
            TileGrid(0, 5)

    def test_try_get_cell_out_of_bounds(self):
        grid = TileGrid(5, 5)
        assert grid.try_get_cell(4, 4) == Cell(4, 4)
        assert grid.try_get_cell(5, 0) is None
        assert grid.try_get_cell(0, -1) is None

    def test_paint_indexes_rows_by_y(self):
        grid = TileGrid(5, 3)
        grid.paint_tile(Cell(4, 1), TileKind.ROOM, True)
        assert grid.tiles[1, 4] == TileKind.ROOM
        assert grid.tile_at(4, 1) == TileKind.ROOM

    def test_paint_without_overwrite_keeps_existing_tile(self):
        grid = TileGrid(3, 3)
        cell = Cell(1, 1)
        grid.paint_tile(cell, TileKind.WALL, True)
        grid.paint_tile(cell, TileKind.ROOM, False)
        assert grid.tile_at(1, 1) == TileKind.WALL

        grid.paint_tile(Cell(0, 0), TileKind.ROOM, False)
        assert grid.tile_at(0, 0) == TileKind.ROOM

    def test_repainting_same_kind_is_a_no_op(self):
        grid = TileGrid(3, 3)
        grid.paint_tile(Cell(2, 2), TileKind.CORRIDOR, True)
        before = grid.copy()
        grid.paint_tile(Cell(2, 2), TileKind.CORRIDOR, True)
        assert grid == before

    def test_out_of_bounds_read_is_nothing(self):
        grid = TileGrid(2, 2)
        assert grid.tile_at(-1, 0) == TileKind.NOTHING

    def test_from_array_copies(self):
        tiles = np.full((2, 3), int(TileKind.GROUND))
        grid = TileGrid.from_array(tiles)
        tiles[0, 0] = TileKind.WALL
        assert grid.width == 3
        assert grid.height == 2
        assert grid.tile_at(0, 0) == TileKind.GROUND


class TestSeededRandomService:
    def test_same_seed_same_sequence(self):
        a = SeededRandomService(7)
        b = SeededRandomService(7)
        assert [a.range(0, 100) for _ in range(20)] == [b.range(0, 100) for _ in range(20)]
        assert [a.chance(0.5) for _ in range(20)] == [b.chance(0.5) for _ in range(20)]

    def test_range_upper_bound_is_exclusive(self):
        rng = SeededRandomService(1)
        values = {rng.range(3, 6) for _ in range(200)}
        assert values == {3, 4, 5}

    def test_empty_range_raises(self):
        with pytest.raises(ValueError):
            SeededRandomService(1).range(5, 5)

    def test_chance_extremes(self):
        rng = SeededRandomService(3)
        assert not any(rng.chance(0.0) for _ in range(50))
        assert all(rng.chance(1.0) for _ in range(50))

    def test_chance_rejects_bad_probability(self):
        with pytest.raises(ValueError):
            SeededRandomService(1).chance(1.5)
