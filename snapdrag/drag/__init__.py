"""
Drag-and-snap engine for SnapDrag.

This package provides pointer dragging with alignment snapping:
- NodeRegistry / Node: The fixed set of draggable rectangles
- find_closest: Proximity search for the snap candidate
- snap_to_node / snap_to_page: Per-axis snap resolution
- DragController: Press/move/release state machine
- DragCanvas: NiceGUI rendering of the nodes
- setup_drag_handlers: Event handlers for app.py integration

Usage:
    from snapdrag.drag import DragController, DragCanvas, create_default_registry
    from snapdrag.drag.handlers import setup_drag_handlers
"""

from snapdrag.drag.constants import (
    PROXIMITY_THRESHOLD,
    EDGE_THRESHOLD,
    PAGE_WIDTH,
    PAGE_HEIGHT,
    SnapConfig,
)
from snapdrag.drag.geometry import Rect, distance, rect_of, container_rect, rect_from_snapshot
from snapdrag.drag.registry import Node, NodeRegistry, create_default_registry
from snapdrag.drag.proximity import find_closest
from snapdrag.drag.snapping import SnapResult, snap_to_node, snap_to_page
from snapdrag.drag.events import PressEvent, MoveEvent, ReleaseEvent, PointerEventSink, replay
from snapdrag.drag.controller import DragController, DragSession, DragState
from snapdrag.drag.canvas import DragCanvas
from snapdrag.drag.handlers import setup_drag_handlers

__all__ = [
    'Rect',
    'distance',
    'rect_of',
    'container_rect',
    'rect_from_snapshot',
    'Node',
    'NodeRegistry',
    'create_default_registry',
    'find_closest',
    'SnapResult',
    'snap_to_node',
    'snap_to_page',
    'PressEvent',
    'MoveEvent',
    'ReleaseEvent',
    'PointerEventSink',
    'replay',
    'DragController',
    'DragSession',
    'DragState',
    'DragCanvas',
    'setup_drag_handlers',
    'SnapConfig',
    'PROXIMITY_THRESHOLD',
    'EDGE_THRESHOLD',
    'PAGE_WIDTH',
    'PAGE_HEIGHT',
]
