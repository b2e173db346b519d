"""Tests for text and image rendering of painted grids."""

import numpy as np
import pytest

from bsp_dungeon.geometry import Point, Rect
from bsp_dungeon.grid import TileGrid
from bsp_dungeon.render import (
    CENTER_COLOR,
    GRID_LINE_COLOR,
    TILE_COLORS,
    outline_rect,
    render_ascii,
    render_image,
)
from bsp_dungeon.tiles import TileKind


@pytest.fixture
def small_grid() -> TileGrid:
    grid = TileGrid(4, 2)
    grid.tiles[0, :] = [TileKind.GROUND, TileKind.WALL, TileKind.ROOM, TileKind.CORRIDOR]
    return grid


class TestRenderAscii:
    def test_one_line_per_row(self, small_grid):
        assert render_ascii(small_grid) == ",#.+\n    "


class TestRenderImage:
    def test_shape_and_dtype(self, small_grid):
        image = render_image(small_grid, tile_size=5)
        assert image.shape == (10, 20, 3)
        assert image.dtype == np.uint8

    def test_tiles_filled_with_their_color(self, small_grid):
        image = render_image(small_grid, tile_size=4)
        assert tuple(image[1, 1]) == TILE_COLORS[TileKind.GROUND]
        assert tuple(image[2, 6]) == TILE_COLORS[TileKind.WALL]
        assert tuple(image[3, 9]) == TILE_COLORS[TileKind.ROOM]
        assert tuple(image[0, 15]) == TILE_COLORS[TileKind.CORRIDOR]
        assert tuple(image[6, 6]) == TILE_COLORS[TileKind.NOTHING]

    def test_centers_are_marked(self, small_grid):
        image = render_image(small_grid, tile_size=8, centers=[Point(2, 0)])
        assert tuple(image[4, 20]) == CENTER_COLOR

    def test_grid_lines(self, small_grid):
        image = render_image(small_grid, tile_size=8, show_grid=True)
        assert tuple(image[3, 8]) == GRID_LINE_COLOR
        assert tuple(image[8, 3]) == GRID_LINE_COLOR

    def test_invalid_tile_size(self, small_grid):
        with pytest.raises(ValueError):
            render_image(small_grid, tile_size=0)


class TestOutlineRect:
    def test_border_only(self):
        image = np.zeros((40, 40, 3), np.uint8)
        outline_rect(image, Rect(1, 1, 3, 3), 10, (255, 255, 255))
        assert tuple(image[10, 20]) == (255, 255, 255)
        assert tuple(image[39, 20]) == (255, 255, 255)
        assert tuple(image[20, 20]) == (0, 0, 0)
