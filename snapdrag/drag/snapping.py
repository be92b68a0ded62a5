"""
Snap Resolver - corrects a raw drag position against a reference rectangle.

Each axis is resolved on its own with a fixed priority (first match wins):

    horizontal: left edges, then right edges, then centers
    vertical:   top edges, then bottom edges, then centers

A reference line matches when the dragged line is strictly closer than the
edge threshold. A match moves the node so the two lines coincide exactly;
no match leaves that axis where it was.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from snapdrag.drag.constants import EDGE_THRESHOLD
from snapdrag.drag.geometry import Rect, rect_from_snapshot
from snapdrag.drag.registry import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapResult:
    """Which reference line fired on each axis (None = axis left as is)."""
    x: Optional[str] = None
    y: Optional[str] = None
    target_id: Optional[str] = None

    @property
    def snapped(self) -> bool:
        return self.x is not None or self.y is not None


def _snap_axis(start: float, size: float, ref_start: float, ref_end: float,
               threshold: float) -> Tuple[float, Optional[int]]:
    """
    Resolve one axis. Returns the new start coordinate and the index of the
    matched line (0 = start edge, 1 = end edge, 2 = center), or None.
    """
    end = start + size
    if abs(start - ref_start) < threshold:
        return ref_start, 0
    if abs(end - ref_end) < threshold:
        return ref_end - size, 1
    ref_center = (ref_start + ref_end) / 2
    if abs((start + end) / 2 - ref_center) < threshold:
        return ref_center - size / 2, 2
    return start, None


def _snap_to_rect(dragged: Node, dragged_rect: Rect, reference: Rect,
                  threshold: float, target_id: Optional[str]) -> SnapResult:
    x, x_hit = _snap_axis(dragged_rect.left, dragged_rect.width,
                          reference.left, reference.right, threshold)
    y, y_hit = _snap_axis(dragged_rect.top, dragged_rect.height,
                          reference.top, reference.bottom, threshold)

    if x_hit is not None or y_hit is not None:
        dragged.move_to(x, y)

    return SnapResult(
        x=('left', 'right', 'center')[x_hit] if x_hit is not None else None,
        y=('top', 'bottom', 'center')[y_hit] if y_hit is not None else None,
        target_id=target_id,
    )


def snap_to_node(dragged: Node, candidate: Node, edge_threshold: float = EDGE_THRESHOLD,
                 rects: Optional[Mapping[str, Rect]] = None) -> SnapResult:
    """Align the dragged node's edges or center to the candidate's."""
    dragged_rect = rect_from_snapshot(dragged, rects)
    candidate_rect = rect_from_snapshot(candidate, rects)
    result = _snap_to_rect(dragged, dragged_rect, candidate_rect, edge_threshold, candidate.id)
    if result.snapped:
        logger.debug(f"Snapped {dragged.id} to {candidate.id}: x={result.x}, y={result.y}")
    return result


def snap_to_page(dragged: Node, container: Rect, edge_threshold: float = EDGE_THRESHOLD,
                 rects: Optional[Mapping[str, Rect]] = None) -> SnapResult:
    """Align the dragged node to the container's edges or centerlines."""
    dragged_rect = rect_from_snapshot(dragged, rects)
    result = _snap_to_rect(dragged, dragged_rect, container, edge_threshold, None)
    if result.snapped:
        logger.debug(f"Snapped {dragged.id} to page: x={result.x}, y={result.y}")
    return result
