from dataclasses import dataclass

from .connection import ConnectionStrategy


@dataclass
class GenerationConfig:
    # Partitioning
    min_leaf_size: int = 6

    # Room placement
    min_room_size: int = 3
    room_padding: int = 2  # inset between a room and its leaf's edges
    split_padding: int = 1  # clearance between a room and any split boundary
    inter_room_spacing: int = 1  # clearance between two rooms
    max_placement_attempts_per_leaf: int = 5

    # Connection
    corridor_width: int = 1
    connection_strategy: ConnectionStrategy = ConnectionStrategy.SEQUENTIAL

    # Lay GROUND over the whole grid before placing anything
    fill_ground: bool = True

    # Print every split, room and corridor to stderr
    debug: bool = False

    def validate(self) -> None:
        """
        Check that the configuration can drive a generation run.

        Raises:
            ValueError: On the first invalid field found.
        """
        if self.min_leaf_size < 1:
            raise ValueError(f"min_leaf_size must be at least 1, got {self.min_leaf_size}")
        if self.min_room_size < 1:
            raise ValueError(f"min_room_size must be at least 1, got {self.min_room_size}")
        for name in ("room_padding", "split_padding", "inter_room_spacing"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
        if self.max_placement_attempts_per_leaf < 1:
            raise ValueError(
                "max_placement_attempts_per_leaf must be at least 1, "
                f"got {self.max_placement_attempts_per_leaf}"
            )
        if self.corridor_width < 1:
            raise ValueError(f"corridor_width must be at least 1, got {self.corridor_width}")
        if not isinstance(self.connection_strategy, ConnectionStrategy):
            raise ValueError(f"Unknown connection strategy: {self.connection_strategy!r}")


__all__ = ["GenerationConfig"]
