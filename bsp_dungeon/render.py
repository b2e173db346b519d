"""Debug rendering of a painted grid, as text or as a BGR image."""

from typing import Dict, Iterable, Optional, Tuple

import cv2
import numpy as np

from .geometry import Point, Rect
from .grid import TileGrid
from .tiles import TileKind

# Type Definition
Image = np.ndarray

TILE_TO_ASCII: Dict[TileKind, str] = {
    TileKind.NOTHING: " ",
    TileKind.GROUND: ",",
    TileKind.WALL: "#",
    TileKind.ROOM: ".",
    TileKind.CORRIDOR: "+",
}

# BGR, as cv2 expects
TILE_COLORS: Dict[TileKind, Tuple[int, int, int]] = {
    TileKind.NOTHING: (0, 0, 0),
    TileKind.GROUND: (60, 110, 60),
    TileKind.WALL: (90, 90, 90),
    TileKind.ROOM: (200, 200, 200),
    TileKind.CORRIDOR: (80, 170, 220),
}

GRID_LINE_COLOR = (40, 40, 40)
CENTER_COLOR = (0, 0, 255)


def render_ascii(grid: TileGrid) -> str:
    """Convert a grid to one line of characters per row."""
    lines = []
    for row in grid.tiles:
        lines.append("".join(TILE_TO_ASCII.get(TileKind(int(tile)), "?") for tile in row))
    return "\n".join(lines)


def render_image(
    grid: TileGrid,
    tile_size: int = 8,
    show_grid: bool = False,
    centers: Optional[Iterable[Point]] = None,
) -> Image:
    """
    Draw each tile as a tile_size square of its kind's color.

    Args:
        grid: The painted grid
        tile_size: Pixel size of one cell
        show_grid: Outline every cell
        centers: Room centers to mark with a dot

    Returns:
        A (height * tile_size, width * tile_size, 3) uint8 BGR image
    """
    if tile_size < 1:
        raise ValueError(f"tile_size must be at least 1, got {tile_size}")

    rows, cols = grid.tiles.shape
    image: Image = np.zeros((rows * tile_size, cols * tile_size, 3), np.uint8)

    # Color lookup for every tile at once, then scale up by tile_size
    palette = np.zeros((max(TILE_COLORS) + 1, 3), np.uint8)
    for kind, color in TILE_COLORS.items():
        palette[kind] = color
    colored = palette[grid.tiles]
    image[:, :] = np.repeat(np.repeat(colored, tile_size, axis=0), tile_size, axis=1)

    if show_grid and tile_size > 2:
        for col in range(cols + 1):
            x = col * tile_size
            cv2.line(image, (x, 0), (x, rows * tile_size), GRID_LINE_COLOR, 1)
        for row in range(rows + 1):
            y = row * tile_size
            cv2.line(image, (0, y), (cols * tile_size, y), GRID_LINE_COLOR, 1)

    if centers is not None:
        radius = max(1, tile_size // 3)
        for center in centers:
            pixel = (
                center.x * tile_size + tile_size // 2,
                center.y * tile_size + tile_size // 2,
            )
            cv2.circle(image, pixel, radius, CENTER_COLOR, -1)

    return image


def outline_rect(image: Image, rect: Rect, tile_size: int, color: Tuple[int, int, int]) -> None:
    """Draw rect's border (in cell coordinates) onto image."""
    top_left = (rect.x * tile_size, rect.y * tile_size)
    bottom_right = (rect.x_max * tile_size - 1, rect.y_max * tile_size - 1)
    cv2.rectangle(image, top_left, bottom_right, color, 1)
