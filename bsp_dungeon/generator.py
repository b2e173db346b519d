"""
Dungeon Generation Driver
=========================

A run moves through fixed phases:

1. PARTITIONING - cut the whole grid into a BSP tree. Nothing is painted.
2. PLACING - lay ground (optional), paint the split boundaries as WALL,
   then try to place one room per leaf, in leaf order, painting each ROOM.
3. CONNECTING - carve CORRIDOR tiles between the placed rooms.
4. DONE

Between steps the driver polls the cancellation signal. Once it is set, the
run stops where it is and ends in CANCELLED; tiles already painted stay
painted.
"""

import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .cancellation import CancellationSignal, GenerationCancelled, StepPacing
from .config import GenerationConfig
from .connection import connect_rooms
from .event_system import EventBus, GenerationEvent
from .geometry import Point, Rect
from .grid import GridAccess, TileGrid, TilePainter
from .partition import (
    PartitionNode,
    build_partition_tree,
    collect_leaves,
    collect_split_rects,
)
from .placement import place_room_in_leaf
from .random_service import RandomService, SeededRandomService
from .tiles import TileKind


class GenerationState(Enum):
    IDLE = auto()
    PARTITIONING = auto()
    PLACING = auto()
    CONNECTING = auto()
    DONE = auto()
    CANCELLED = auto()


@dataclass
class GenerationResult:
    """Outcome of one generation run."""

    success: bool
    rooms_placed: int
    cancelled: bool
    state: GenerationState = GenerationState.IDLE
    leaf_count: int = 0
    corridor_count: int = 0
    rooms: List[Rect] = field(default_factory=list)
    centers: List[Point] = field(default_factory=list)


class BSPGenerator:
    """
    Runs the BSP generation phases against an external grid.

    A generator instance runs one generation at a time; the partition tree,
    leaves and room list of a run are never shared with another run.
    """

    def __init__(
        self,
        grid: GridAccess,
        painter: TilePainter,
        random_service: RandomService,
        config: Optional[GenerationConfig] = None,
        cancellation: Optional[CancellationSignal] = None,
        pacing: Optional[StepPacing] = None,
        events: Optional[EventBus] = None,
    ) -> None:
        self.grid = grid
        self.painter = painter
        self.random_service = random_service
        self.config = config if config is not None else GenerationConfig()
        self.cancellation = cancellation if cancellation is not None else CancellationSignal()
        self.pacing = pacing if pacing is not None else StepPacing()
        self.events = events

        self.state = GenerationState.IDLE
        self.root: Optional[PartitionNode] = None
        self._running = False

        # Per-run bookkeeping, reset by generate()
        self._leaves: List[PartitionNode] = []
        self._split_rects: List[Rect] = []
        self._rooms: List[Rect] = []
        self._centers: List[Point] = []
        self._corridors = 0

    def _log(self, message: str) -> None:
        if self.config.debug:
            print(f"[BSP] {message}", file=sys.stderr)

    def _emit(self, event: GenerationEvent, **kwargs) -> None:
        """Emit an event if an event bus is configured."""
        if self.events is not None:
            self.events.emit(event, **kwargs)

    def _checkpoint(self) -> None:
        self.cancellation.raise_if_cancelled()

    def _enter(self, state: GenerationState) -> None:
        self._checkpoint()
        self.state = state
        self._log(f"Phase {state.name}")
        self._emit(GenerationEvent.PHASE_STARTED, phase=state)

    def generate(self) -> GenerationResult:
        """
        Run every phase and report what was built.

        Raises:
            RuntimeError: If this generator is already running.
            ValueError: If the configuration is invalid.
        """
        if self._running:
            raise RuntimeError("A generation is already in progress on this generator")

        self.config.validate()
        self._running = True
        self.state = GenerationState.IDLE
        self.root = None
        self._leaves = []
        self._split_rects = []
        self._rooms = []
        self._centers = []
        self._corridors = 0

        try:
            self._enter(GenerationState.PARTITIONING)
            self._partition()

            self._enter(GenerationState.PLACING)
            self._place()

            self._enter(GenerationState.CONNECTING)
            self._connect()

            self.state = GenerationState.DONE
            self._log(
                f"Done: {len(self._rooms)} rooms in {len(self._leaves)} leaves, "
                f"{self._corridors} corridors"
            )
            self._emit(
                GenerationEvent.GENERATION_FINISHED,
                rooms_placed=len(self._rooms),
                corridors=self._corridors,
            )
        except GenerationCancelled:
            interrupted = self.state
            self.state = GenerationState.CANCELLED
            print(
                f"[BSP] Generation cancelled during {interrupted.name} "
                f"after {len(self._rooms)} rooms",
                file=sys.stderr,
            )
            self._emit(
                GenerationEvent.GENERATION_CANCELLED,
                phase=interrupted,
                rooms_placed=len(self._rooms),
            )
        finally:
            self._running = False

        cancelled = self.state == GenerationState.CANCELLED
        return GenerationResult(
            success=not cancelled,
            rooms_placed=len(self._rooms),
            cancelled=cancelled,
            state=self.state,
            leaf_count=len(self._leaves),
            corridor_count=self._corridors,
            rooms=list(self._rooms),
            centers=list(self._centers),
        )

    # -- Phases -----------------------------------------------------------

    def _partition(self) -> None:
        whole_grid = Rect(0, 0, self.grid.width, self.grid.height)

        def on_split(node: PartitionNode) -> None:
            assert node.child1 is not None and node.child2 is not None
            self._log(f"Split {node.area}: A{node.child1.area} B{node.child2.area}")
            self._emit(
                GenerationEvent.NODE_SPLIT,
                area=node.area,
                child1=node.child1.area,
                child2=node.child2.area,
            )

        self.root = build_partition_tree(
            whole_grid, self.config.min_leaf_size, self.random_service, on_split
        )
        self._split_rects = collect_split_rects(self.root)
        self._leaves = collect_leaves(self.root)
        self._log(f"Total leaves: {len(self._leaves)}")

    def _paint_rect(self, rect: Rect, tile_kind: TileKind) -> None:
        for x, y in rect.cells():
            cell = self.grid.try_get_cell(x, y)
            if cell is None:
                continue
            self.painter.paint_tile(cell, tile_kind, True)

    def _place(self) -> None:
        if self.config.fill_ground:
            for y in range(self.grid.height):
                self._checkpoint()
                self._paint_rect(Rect(0, y, self.grid.width, 1), TileKind.GROUND)

        for split_rect in self._split_rects:
            self._checkpoint()
            self._paint_rect(split_rect, TileKind.WALL)
        self.pacing.wait()

        for leaf_index, leaf in enumerate(self._leaves):
            self._checkpoint()
            room = place_room_in_leaf(
                leaf, self._split_rects, self._rooms, self.config, self.random_service
            )
            if room is None:
                print(f"[BSP] Failed to place room in leaf area {leaf.area}", file=sys.stderr)
                self._emit(GenerationEvent.ROOM_FAILED, leaf_index=leaf_index, area=leaf.area)
                continue

            self._paint_rect(room, TileKind.ROOM)
            center = room.center
            self._rooms.append(room)
            self._centers.append(center)
            self._log(f"Placed room at {room} (center {center.x}, {center.y})")
            self._emit(
                GenerationEvent.ROOM_PLACED, leaf_index=leaf_index, room=room, center=center
            )
            self.pacing.wait()

    def _connect(self) -> None:
        def on_corridor(start: Point, end: Point) -> None:
            self._corridors += 1
            self._log(f"Connected ({start.x}, {start.y}) -> ({end.x}, {end.y})")
            self._emit(
                GenerationEvent.CORRIDOR_CARVED,
                start=start,
                end=end,
                width=self.config.corridor_width,
            )
            self.pacing.wait()

        connect_rooms(
            self._centers,
            self.config.corridor_width,
            self.grid,
            self.painter,
            self.random_service,
            strategy=self.config.connection_strategy,
            root=self.root,
            cancellation=self.cancellation,
            on_corridor=on_corridor,
        )


def generate(
    grid: GridAccess,
    painter: TilePainter,
    random_service: RandomService,
    config: Optional[GenerationConfig] = None,
    cancellation: Optional[CancellationSignal] = None,
    pacing: Optional[StepPacing] = None,
    events: Optional[EventBus] = None,
) -> GenerationResult:
    """Generate a BSP layout on grid. See BSPGenerator."""
    generator = BSPGenerator(
        grid, painter, random_service, config, cancellation, pacing, events
    )
    return generator.generate()


def generate_dungeon(
    width: int,
    height: int,
    seed: Optional[int] = None,
    config: Optional[GenerationConfig] = None,
    events: Optional[EventBus] = None,
) -> Tuple[TileGrid, GenerationResult]:
    """
    Factory function: generate a layout on a fresh numpy-backed grid.

    Parameters:
        width: Grid width in cells
        height: Grid height in cells
        seed: Random seed; the same seed and config give the same grid
        config: Generation parameters (defaults if omitted)
        events: Optional event bus to observe the run

    Returns:
        grid: The painted TileGrid
        result: What the run produced
    """
    grid = TileGrid(width, height)
    result = generate(grid, grid, SeededRandomService(seed), config, events=events)
    return grid, result
