"""BSP dungeon generation: partition, place rooms, connect them."""

from bsp_dungeon.cancellation import CancellationSignal, GenerationCancelled, StepPacing
from bsp_dungeon.config import GenerationConfig
from bsp_dungeon.connection import ConnectionStrategy, carve_corridor, connect_rooms
from bsp_dungeon.event_system import EventBus, EventData, GenerationEvent
from bsp_dungeon.generator import (
    BSPGenerator,
    GenerationResult,
    GenerationState,
    generate,
    generate_dungeon,
)
from bsp_dungeon.geometry import Point, Rect
from bsp_dungeon.grid import Cell, GridAccess, TileGrid, TilePainter
from bsp_dungeon.partition import (
    PartitionNode,
    SplitGeometryError,
    build_partition_tree,
    collect_leaves,
    collect_room_centers,
    collect_split_rects,
    recursive_split,
    split_node,
)
from bsp_dungeon.placement import place_room_in_leaf
from bsp_dungeon.random_service import RandomService, SeededRandomService
from bsp_dungeon.tiles import TileKind
