"""
Binary Space Partitioning
=========================

The grid is cut in two, then each half is cut in two, and so on until the
pieces are too small to cut again:

1. A region wider than it is tall is cut into two side-by-side columns
   (a vertical split); taller than wide, into two stacked rows (a horizontal
   split); a square flips a coin.
2. The cut lands at a random offset that leaves at least min_leaf_size on
   both sides.
3. A region where neither side reaches 2 * min_leaf_size, or whose chosen
   axis has no room for a cut, stays a leaf.

Each leaf later receives at most one room. The line between two siblings is
the split boundary: a one-cell-thick rectangle lying on the first row (or
column) of the second child.
"""

import sys
from typing import Callable, List, Optional

from .geometry import Point, Rect
from .random_service import RandomService


class SplitGeometryError(Exception):
    """Two sibling areas are not aligned along a shared edge."""


class PartitionNode:
    """
    One region of the partition tree.

    A node owns either no children (a leaf) or exactly two. Parents are never
    referenced from children; every traversal starts at the root.
    """

    def __init__(self, area: Rect) -> None:
        self._area = area
        self.child1: Optional["PartitionNode"] = None
        self.child2: Optional["PartitionNode"] = None

        # Set once on a leaf, when placement succeeds
        self.room: Optional[Rect] = None

    @property
    def area(self) -> Rect:
        return self._area

    @property
    def is_leaf(self) -> bool:
        return self.child1 is None and self.child2 is None

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf else "node"
        return f"PartitionNode({kind} {self._area})"


SplitCallback = Callable[[PartitionNode], None]


def split_node(
    node: PartitionNode, min_leaf_size: int, random_service: RandomService
) -> bool:
    """
    Try to divide node's area into two children.

    Args:
        node: The node to split. Must currently be a leaf.
        min_leaf_size: Smallest extent either child may have along the cut axis.
        random_service: Supplies the axis coin flip and the cut offset.

    Returns:
        True if the node now has two children, False if it stays a leaf.
    """
    if not node.is_leaf:
        return False

    area = node.area
    if area.width < min_leaf_size * 2 and area.height < min_leaf_size * 2:
        return False

    if area.width < area.height:
        split_horizontal = True
    elif area.width > area.height:
        split_horizontal = False
    else:
        split_horizontal = random_service.chance(0.5)

    extent = area.height if split_horizontal else area.width
    min_split = min_leaf_size
    max_split = extent - min_leaf_size
    if max_split <= min_split:
        return False

    split = random_service.range(min_split, max_split + 1)

    if split_horizontal:
        first = Rect(area.x, area.y, area.width, split)
        second = Rect(area.x, area.y + split, area.width, area.height - split)
    else:
        first = Rect(area.x, area.y, split, area.height)
        second = Rect(area.x + split, area.y, area.width - split, area.height)

    node.child1 = PartitionNode(first)
    node.child2 = PartitionNode(second)
    return True


def recursive_split(
    node: PartitionNode,
    min_leaf_size: int,
    random_service: RandomService,
    on_split: Optional[SplitCallback] = None,
) -> None:
    """Split node, then its children, until no node can be split further."""
    if split_node(node, min_leaf_size, random_service):
        if on_split is not None:
            on_split(node)
        assert node.child1 is not None and node.child2 is not None
        recursive_split(node.child1, min_leaf_size, random_service, on_split)
        recursive_split(node.child2, min_leaf_size, random_service, on_split)


def build_partition_tree(
    area: Rect,
    min_leaf_size: int,
    random_service: RandomService,
    on_split: Optional[SplitCallback] = None,
) -> PartitionNode:
    """Create a root over area and split it all the way down."""
    root = PartitionNode(area)
    recursive_split(root, min_leaf_size, random_service, on_split)
    return root


def collect_leaves(node: PartitionNode) -> List[PartitionNode]:
    """Return all leaves in pre-order (child1 subtree before child2 subtree)."""
    leaves: List[PartitionNode] = []
    _collect_leaves(node, leaves)
    return leaves


def _collect_leaves(node: PartitionNode, leaves: List[PartitionNode]) -> None:
    if node.is_leaf:
        leaves.append(node)
        return
    assert node.child1 is not None and node.child2 is not None
    _collect_leaves(node.child1, leaves)
    _collect_leaves(node.child2, leaves)


def split_boundary(node: PartitionNode, strict: bool = False) -> Rect:
    """
    Return the one-cell-thick rectangle between node's two children.

    Children stacked on top of each other give a horizontal strip on the
    second child's first row; side-by-side children give a vertical strip on
    its first column. Anything else falls back to the bounding rectangle of
    both children, which the split algorithm never produces.

    Raises:
        SplitGeometryError: In strict mode, instead of using the fallback.
        ValueError: If node is a leaf.
    """
    if node.child1 is None or node.child2 is None:
        raise ValueError(f"{node} has no split boundary")

    a = node.child1.area
    b = node.child2.area

    if a.x == b.x and a.width == b.width:
        return Rect(a.x, b.y, a.width, 1)
    if a.y == b.y and a.height == b.height:
        return Rect(b.x, a.y, 1, a.height)

    if strict:
        raise SplitGeometryError(f"Children {a} and {b} are not aligned")

    print(
        f"[BSP] Warning: misaligned children {a} and {b}, using bounding rect",
        file=sys.stderr,
    )
    x_min = min(a.x, b.x)
    y_min = min(a.y, b.y)
    x_max = max(a.x_max, b.x_max)
    y_max = max(a.y_max, b.y_max)
    return Rect(x_min, y_min, x_max - x_min, y_max - y_min)


def collect_split_rects(node: PartitionNode, strict: bool = False) -> List[Rect]:
    """Return the split boundary of every internal node, in pre-order."""
    rects: List[Rect] = []
    _collect_split_rects(node, rects, strict)
    return rects


def _collect_split_rects(node: PartitionNode, rects: List[Rect], strict: bool) -> None:
    if node.is_leaf:
        return
    rects.append(split_boundary(node, strict))
    assert node.child1 is not None and node.child2 is not None
    _collect_split_rects(node.child1, rects, strict)
    _collect_split_rects(node.child2, rects, strict)


def collect_room_centers(node: PartitionNode) -> List[Point]:
    """Return the centers of the rooms placed in node's subtree, in pre-order."""
    return [leaf.room.center for leaf in collect_leaves(node) if leaf.room is not None]
