"""
Reachability over a painted grid.

Used to check that a generated layout is traversable: every room center
must be reachable from every other by walking on ROOM and CORRIDOR tiles.
"""

from collections import deque
from typing import Callable, Sequence, Set, Tuple

from .geometry import Point
from .grid import TileGrid
from .tiles import WALKABLE_TILES

# 4-directional neighbors: (delta_x, delta_y)
DIRECTIONS = [(0, -1), (0, 1), (-1, 0), (1, 0)]  # North, South, West, East


def walkable_checker(grid: TileGrid) -> Callable[[int, int], bool]:
    """Return a callback telling whether (x, y) holds a ROOM or CORRIDOR tile."""

    def is_walkable(x: int, y: int) -> bool:
        return grid.tile_at(x, y) in WALKABLE_TILES

    return is_walkable


def reachable_cells(grid: TileGrid, start: Point) -> Set[Tuple[int, int]]:
    """Flood fill from start over walkable tiles. Empty if start is not walkable."""
    is_walkable = walkable_checker(grid)
    if not is_walkable(start.x, start.y):
        return set()

    visited: Set[Tuple[int, int]] = {(start.x, start.y)}
    queue: deque[Tuple[int, int]] = deque([(start.x, start.y)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in DIRECTIONS:
            neighbor = (x + dx, y + dy)
            if neighbor not in visited and is_walkable(*neighbor):
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


def are_points_connected(grid: TileGrid, points: Sequence[Point]) -> bool:
    """
    Check that every point can reach every other over walkable tiles.

    Zero or one point is trivially connected.
    """
    if len(points) < 2:
        return True
    region = reachable_cells(grid, points[0])
    return all((p.x, p.y) in region for p in points)
