"""
Geometry helpers for axis-aligned rectangles in page coordinates.
"""

import math
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class Rect:
    """Read-only bounding box snapshot. right/bottom are derived from the size."""
    left: float
    top: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rect size must be non-negative, got {self.width}x{self.height}")

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((bx - ax)**2 + (by - ay)**2)


def rect_of(node) -> Rect:
    """Current Rect of a node, derived from its position and fixed size."""
    return Rect(node.x, node.y, node.width, node.height)


def container_rect(width: float, height: float) -> Rect:
    return Rect(0, 0, width, height)


def rect_from_snapshot(node, rects: Optional[Mapping[str, Rect]] = None) -> Rect:
    """The node's Rect from a per-move snapshot, or its live Rect if absent."""
    if rects is not None and node.id in rects:
        return rects[node.id]
    return rect_of(node)
