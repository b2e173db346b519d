from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Point:
    """A cell coordinate in the grid. x grows east, y grows south."""

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """Axis-aligned integer rectangle. x_max and y_max are exclusive."""

    x: int
    y: int
    width: int
    height: int

    @property
    def x_max(self) -> int:
        return self.x + self.width

    @property
    def y_max(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> Point:
        """Center cell, rounded towards the origin."""
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    @property
    def area(self) -> int:
        return self.width * self.height

    def intersects(self, other: "Rect") -> bool:
        """Check if the two rectangles share at least one cell.

        Rectangles that only touch along an edge do not intersect.
        """
        return (
            self.x < other.x_max
            and self.x_max > other.x
            and self.y < other.y_max
            and self.y_max > other.y
        )

    def expand(self, amount: int) -> "Rect":
        """Return a copy grown by amount on all four sides."""
        return Rect(
            self.x - amount,
            self.y - amount,
            self.width + amount * 2,
            self.height + amount * 2,
        )

    def inset(self, amount: int) -> "Rect":
        """Return a copy shrunk by amount on all four sides.

        The result may have a non-positive width or height.
        """
        return self.expand(-amount)

    def contains_point(self, x: int, y: int) -> bool:
        return self.x <= x < self.x_max and self.y <= y < self.y_max

    def contains_rect(self, other: "Rect") -> bool:
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.x_max <= self.x_max
            and other.y_max <= self.y_max
        )

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every (x, y) in the rectangle, row by row."""
        for y in range(self.y, self.y_max):
            for x in range(self.x, self.x_max):
                yield x, y

    def __str__(self) -> str:
        return f"(x:{self.x}, y:{self.y}, w:{self.width}, h:{self.height})"
