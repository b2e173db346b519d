"""
Corridors between placed rooms.

A connection policy decides which pairs of room centers get a corridor; the
carving itself is always the same L-shaped path. Policies only plan, so
they draw nothing from the random service: every random draw made while
connecting belongs to a corridor's axis order, in corridor order.
"""

import sys
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

from .geometry import Point
from .grid import GridAccess, TilePainter
from .partition import PartitionNode, collect_room_centers
from .random_service import RandomService
from .tiles import TileKind

if TYPE_CHECKING:
    from .cancellation import CancellationSignal

# A planned corridor: (from, to)
Link = Tuple[Point, Point]

CorridorCallback = Callable[[Point, Point], None]


class ConnectionStrategy(Enum):
    """Which rooms are linked by corridors."""

    SEQUENTIAL = auto()  # each room to the one placed just before it
    NEAREST_PREVIOUS = auto()  # each room to the closest room placed before it
    SIBLINGS = auto()  # closest pair across every split, bottom-up


class ConnectionPolicy(ABC):
    """Plans the corridors for an ordered list of room centers."""

    @abstractmethod
    def plan_links(
        self, centers: Sequence[Point], root: Optional[PartitionNode] = None
    ) -> List[Link]:
        """
        Decide which centers to join.

        Args:
            centers: Room centers in placement order
            root: The partition tree the rooms were placed in, for policies
                  that follow the tree

        Returns:
            Corridors to carve, in carving order
        """
        pass


class SequentialPolicy(ConnectionPolicy):
    """Chain the rooms in placement order: 0-1, 1-2, 2-3, ..."""

    def plan_links(
        self, centers: Sequence[Point], root: Optional[PartitionNode] = None
    ) -> List[Link]:
        return [(centers[i - 1], centers[i]) for i in range(1, len(centers))]


def _distance_sq(a: Point, b: Point) -> int:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


class NearestPreviousPolicy(ConnectionPolicy):
    """
    Link each room to the closest room placed before it.

    This is a greedy spanning tree, not a minimum one: a room only looks
    backwards in placement order. Ties go to the earliest room.
    """

    def plan_links(
        self, centers: Sequence[Point], root: Optional[PartitionNode] = None
    ) -> List[Link]:
        links: List[Link] = []
        for i in range(1, len(centers)):
            current = centers[i]
            best_index = 0
            best_dist_sq = _distance_sq(centers[0], current)
            for j in range(1, i):
                dist_sq = _distance_sq(centers[j], current)
                if dist_sq < best_dist_sq:
                    best_dist_sq = dist_sq
                    best_index = j
            links.append((centers[best_index], current))
        return links


class SiblingPolicy(ConnectionPolicy):
    """
    Follow the partition tree bottom-up.

    At every split, the closest pair of rooms with one room on each side is
    joined. Both sides are already connected internally by the time their
    parent is visited, so the whole layout ends up connected. The centers
    argument is ignored; rooms are read from the tree.
    """

    def plan_links(
        self, centers: Sequence[Point], root: Optional[PartitionNode] = None
    ) -> List[Link]:
        if root is None:
            raise ValueError("SiblingPolicy needs the partition tree")
        links: List[Link] = []
        self._link_subtree(root, links)
        return links

    def _link_subtree(self, node: PartitionNode, links: List[Link]) -> None:
        # Post-order: both halves are linked internally before they are joined
        if node.is_leaf:
            return

        assert node.child1 is not None and node.child2 is not None
        self._link_subtree(node.child1, links)
        self._link_subtree(node.child2, links)

        first = collect_room_centers(node.child1)
        second = collect_room_centers(node.child2)

        if first and second:
            best: Optional[Link] = None
            best_dist_sq = 0
            for a in first:
                for b in second:
                    dist_sq = _distance_sq(a, b)
                    if best is None or dist_sq < best_dist_sq:
                        best = (a, b)
                        best_dist_sq = dist_sq
            assert best is not None
            links.append(best)


POLICIES = {
    ConnectionStrategy.SEQUENTIAL: SequentialPolicy,
    ConnectionStrategy.NEAREST_PREVIOUS: NearestPreviousPolicy,
    ConnectionStrategy.SIBLINGS: SiblingPolicy,
}


def policy_for(strategy: ConnectionStrategy) -> ConnectionPolicy:
    """Instantiate the policy that implements strategy."""
    return POLICIES[strategy]()


def _paint(grid: GridAccess, painter: TilePainter, x: int, y: int) -> None:
    cell = grid.try_get_cell(x, y)
    if cell is None:
        return
    painter.paint_tile(cell, TileKind.CORRIDOR, True)


def _paint_horizontal(
    grid: GridAccess, painter: TilePainter, x1: int, x2: int, y: int, width: int
) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        for w in range(width):
            _paint(grid, painter, x, y + w)


def _paint_vertical(
    grid: GridAccess, painter: TilePainter, y1: int, y2: int, x: int, width: int
) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        for w in range(width):
            _paint(grid, painter, x + w, y)


def carve_corridor(
    grid: GridAccess,
    painter: TilePainter,
    start: Point,
    end: Point,
    width: int,
    random_service: RandomService,
) -> None:
    """
    Paint an L-shaped corridor from start to end.

    A coin flip picks the leg order. Horizontal-first runs along start's row
    to end's column, then along end's column; vertical-first runs along
    start's column, then along end's row. Each leg is width cells thick,
    growing east (vertical legs) or south (horizontal legs). Cells outside
    the grid are skipped.
    """
    horizontal_first = random_service.chance(0.5)

    if horizontal_first:
        _paint_horizontal(grid, painter, start.x, end.x, start.y, width)
        _paint_vertical(grid, painter, start.y, end.y, end.x, width)
    else:
        _paint_vertical(grid, painter, start.y, end.y, start.x, width)
        _paint_horizontal(grid, painter, start.x, end.x, end.y, width)


def connect_rooms(
    centers: Sequence[Point],
    corridor_width: int,
    grid: GridAccess,
    painter: TilePainter,
    random_service: RandomService,
    strategy: ConnectionStrategy = ConnectionStrategy.SEQUENTIAL,
    root: Optional[PartitionNode] = None,
    cancellation: Optional["CancellationSignal"] = None,
    on_corridor: Optional[CorridorCallback] = None,
) -> int:
    """
    Carve corridors so that every room is reachable from every other.

    Args:
        centers: Room centers in placement order
        corridor_width: Thickness of each corridor leg
        grid: Cell lookup
        painter: Receives the CORRIDOR tiles
        random_service: Decides each corridor's leg order
        strategy: Which rooms to link
        root: Partition tree, required by ConnectionStrategy.SIBLINGS
        cancellation: Checked before every corridor
        on_corridor: Called after each corridor is carved

    Returns:
        The number of corridors carved.

    Raises:
        GenerationCancelled: If cancellation is observed before a corridor.
    """
    if len(centers) < 2:
        print(
            f"[BSP] Not enough rooms to connect ({len(centers)})",
            file=sys.stderr,
        )
        return 0

    links = policy_for(strategy).plan_links(centers, root)

    carved = 0
    for start, end in links:
        if cancellation is not None:
            cancellation.raise_if_cancelled()
        carve_corridor(grid, painter, start, end, corridor_width, random_service)
        carved += 1
        if on_corridor is not None:
            on_corridor(start, end)
    return carved
