"""
Drag Handlers - Event handlers wiring browser pointer events to the engine.

The browser emits custom events (see canvas.py); these handlers normalize
their payloads and forward them to the DragController, which in turn
notifies the canvas to re-render.
"""

import logging
from typing import Any, Callable, Dict, Optional

from snapdrag.drag.controller import DragController, DragState

logger = logging.getLogger(__name__)


def normalize_pointer_payload(raw: Any) -> Optional[Dict[str, Any]]:
    """
    Normalize a pointer event payload from NiceGUI.

    Accepts an event object with .args, a dict with clientX/clientY
    (or x/y) plus optional scrollX/scrollY and nodeId, or a list
    [x, y, scroll_x, scroll_y, node_id].

    Returns:
        Dict with node_id, x, y, scroll_x, scroll_y, or None if unparsable
    """
    if hasattr(raw, 'args'):
        raw = raw.args

    if isinstance(raw, dict):
        x = raw.get('clientX', raw.get('x'))
        y = raw.get('clientY', raw.get('y'))
        scroll_x = raw.get('scrollX', raw.get('scroll_x', 0))
        scroll_y = raw.get('scrollY', raw.get('scroll_y', 0))
        node_id = raw.get('nodeId', raw.get('node_id'))
    elif isinstance(raw, (list, tuple)) and len(raw) >= 2:
        x, y = raw[0], raw[1]
        scroll_x = raw[2] if len(raw) > 2 else 0
        scroll_y = raw[3] if len(raw) > 3 else 0
        node_id = raw[4] if len(raw) > 4 else None
    else:
        return None

    try:
        return {
            'node_id': str(node_id) if node_id is not None else None,
            'x': float(x),
            'y': float(y),
            'scroll_x': float(scroll_x or 0),
            'scroll_y': float(scroll_y or 0),
        }
    except (TypeError, ValueError):
        return None


def setup_drag_handlers(controller: DragController, canvas) -> Dict[str, Callable]:
    """
    Set up the pointer event handlers.

    Args:
        controller: DragController instance
        canvas: DragCanvas (or anything with update(DragState))

    Returns:
        Dict with handler functions for binding to UI events
    """

    def on_drag_state_change(drag_state: DragState):
        """Called whenever the controller state changes - re-render."""
        canvas.update(drag_state)

    controller.set_on_state_change(on_drag_state_change)

    def handle_press(event):
        """Start a drag on the pressed node."""
        payload = normalize_pointer_payload(event)
        if payload is None or not payload['node_id']:
            logger.debug(f"Ignoring press payload: {event!r}")
            return
        controller.press(payload['node_id'], payload['x'], payload['y'],
                         payload['scroll_x'], payload['scroll_y'])

    def handle_move(event):
        """Follow the pointer while a drag is active."""
        if not controller.is_dragging:
            return
        payload = normalize_pointer_payload(event)
        if payload is None:
            logger.debug(f"Ignoring move payload: {event!r}")
            return
        controller.move(payload['x'], payload['y'], payload['scroll_x'], payload['scroll_y'])

    def handle_release(event=None):
        """End the drag wherever the pointer was released."""
        controller.release()

    return {
        'handle_press': handle_press,
        'handle_move': handle_move,
        'handle_release': handle_release,
    }
