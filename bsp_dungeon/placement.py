"""
Room placement inside partition leaves.

Each leaf gets a handful of attempts. An attempt draws a size and a position
inside the leaf's padded area, then throws the candidate away if it comes
too close to a split boundary or to a room placed earlier. A leaf that runs
out of attempts simply has no room.
"""

from typing import Optional, Sequence

from .config import GenerationConfig
from .geometry import Rect
from .partition import PartitionNode
from .random_service import RandomService


def _room_extent(
    leaf_extent: int, padding: int, min_room_size: int, random_service: RandomService
) -> int:
    """
    Draw a room size along one axis.

    When the padded leaf cannot hold min_room_size the room takes whatever
    fits, clamped to at least one cell.
    """
    available = leaf_extent - 2 * padding
    if available >= min_room_size:
        return random_service.range(min_room_size, available + 1)
    return max(1, available)


def _room_origin(
    leaf_min: int, leaf_max: int, padding: int, size: int, random_service: RandomService
) -> int:
    """
    Draw the room's start coordinate along one axis.

    leaf_max is exclusive. The room is kept inside [leaf_min + padding,
    leaf_max - padding); if no start fits, it is pinned to the low edge.
    """
    low = leaf_min + padding
    # The far edge is padded as well, so the room never reaches the last
    # padding cells of the leaf. Keep the "- padding" here.
    high = leaf_max - padding - size + 1
    if high > low:
        return random_service.range(low, high)
    return low


def _sample_candidate(
    area: Rect, config: GenerationConfig, random_service: RandomService
) -> Optional[Rect]:
    padding = config.room_padding
    width = _room_extent(area.width, padding, config.min_room_size, random_service)
    height = _room_extent(area.height, padding, config.min_room_size, random_service)
    if width <= 0 or height <= 0:
        return None

    x = _room_origin(area.x, area.x_max, padding, width, random_service)
    y = _room_origin(area.y, area.y_max, padding, height, random_service)
    return Rect(x, y, width, height)


def touches_split(room: Rect, split_rects: Sequence[Rect], split_padding: int) -> bool:
    """Check if room overlaps any split boundary grown by split_padding."""
    return any(room.intersects(s.expand(split_padding)) for s in split_rects)


def overlaps_rooms(room: Rect, placed_rooms: Sequence[Rect], spacing: int) -> bool:
    """Check if room overlaps any placed room grown by spacing."""
    return any(room.intersects(other.expand(spacing)) for other in placed_rooms)


def place_room_in_leaf(
    leaf: PartitionNode,
    split_rects: Sequence[Rect],
    placed_rooms: Sequence[Rect],
    config: GenerationConfig,
    random_service: RandomService,
) -> Optional[Rect]:
    """
    Try to fit a room inside leaf.

    Args:
        leaf: A leaf of the partition tree. Its room is set on success.
        split_rects: Every split boundary in the tree.
        placed_rooms: Rooms already placed in earlier leaves.
        config: Sizes, paddings and the attempt budget.
        random_service: Supplies all sizes and positions.

    Returns:
        The placed room, or None if every attempt was rejected.
    """
    for _attempt in range(config.max_placement_attempts_per_leaf):
        room = _sample_candidate(leaf.area, config, random_service)
        if room is None:
            continue

        if touches_split(room, split_rects, config.split_padding):
            continue

        if overlaps_rooms(room, placed_rooms, config.inter_room_spacing):
            continue

        leaf.room = room
        return room

    return None

