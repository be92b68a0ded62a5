"""
Proximity Search - picks the single node the dragged node should align to.
"""

import math
from typing import Iterable, Mapping, Optional

from snapdrag.drag.geometry import Rect, distance, rect_from_snapshot
from snapdrag.drag.registry import Node


def find_closest(dragged: Node, nodes: Iterable[Node], threshold: float,
                 rects: Optional[Mapping[str, Rect]] = None) -> Optional[Node]:
    """
    Find the node whose top-left corner is nearest to the dragged node's.

    Distance is measured corner to corner (not center to center). The first
    node in iteration order wins ties. Returns None unless the minimum is
    strictly below threshold.

    Args:
        dragged: The node being dragged (excluded from the search)
        nodes: All nodes, in registry order
        threshold: Maximum distance for a candidate
        rects: Optional per-move snapshot (node id -> Rect)
    """
    dragged_rect = rect_from_snapshot(dragged, rects)
    closest = None
    closest_dist = math.inf

    for node in nodes:
        if node.id == dragged.id:
            continue
        rect = rect_from_snapshot(node, rects)
        dist = distance(rect.left, rect.top, dragged_rect.left, dragged_rect.top)
        if dist < closest_dist:
            closest_dist = dist
            closest = node

    return closest if closest_dist < threshold else None
