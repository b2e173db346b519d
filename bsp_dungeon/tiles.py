from enum import IntEnum


class TileKind(IntEnum):
    """
    Tile kinds painted by the generator.

    Values are stored directly in the grid array, so NOTHING must stay 0
    (a freshly allocated grid is all NOTHING).
    """

    NOTHING = 0

    # Background laid down before any structure
    GROUND = 1

    # Split boundaries between sibling partitions (impassable rock)
    WALL = 10

    # Walkable tiles
    ROOM = 20
    CORRIDOR = 21


WALKABLE_TILES = frozenset({TileKind.ROOM, TileKind.CORRIDOR})
