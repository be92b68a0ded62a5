"""
Drag Controller - Single source of truth for the drag session.

This controller owns the pointer-event lifecycle:

    Idle --press--> Dragging --move--> Dragging --release--> Idle

Every move applies the follow-the-cursor position, then runs Proximity
Search and the Snap Resolver against one geometry snapshot. The controller
never touches the UI; listeners get a DragState after each handled event.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from snapdrag.drag.constants import SnapConfig
from snapdrag.drag.events import PointerEvent, dispatch
from snapdrag.drag.proximity import find_closest
from snapdrag.drag.registry import NodeRegistry
from snapdrag.drag.snapping import SnapResult, snap_to_node, snap_to_page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DragSession:
    """Ephemeral record of an in-progress drag. The grab offset never changes."""
    node_id: str
    grab_offset_x: float
    grab_offset_y: float


@dataclass(frozen=True)
class DragState:
    """Immutable snapshot of the controller after the last handled event."""
    session: Optional[DragSession] = None
    node_id: Optional[str] = None
    candidate_id: Optional[str] = None
    snap: Optional[SnapResult] = None

    @property
    def is_dragging(self) -> bool:
        return self.session is not None


class DragController:
    """Tracks the active drag and resolves snapping on every pointer move."""

    def __init__(self, registry: NodeRegistry, config: Optional[SnapConfig] = None):
        self._registry = registry
        self._config = config or SnapConfig()
        self._state = DragState()
        self._on_state_change: Optional[Callable[[DragState], None]] = None

    @property
    def registry(self) -> NodeRegistry:
        return self._registry

    @property
    def config(self) -> SnapConfig:
        return self._config

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def session(self) -> Optional[DragSession]:
        return self._state.session

    @property
    def is_dragging(self) -> bool:
        return self._state.is_dragging

    def set_on_state_change(self, callback: Callable[[DragState], None]):
        self._on_state_change = callback

    def press(self, node_id: str, pointer_x: float, pointer_y: float,
              scroll_x: float = 0, scroll_y: float = 0) -> Optional[DragSession]:
        """
        Start dragging a node. The last press wins if a different node is
        pressed while another drag is active.

        Returns:
            The active session, or None if the node is unknown
        """
        node = self._registry.get(node_id)
        if node is None:
            logger.debug(f"Ignoring press on unknown node {node_id!r}")
            return None

        current = self._state.session
        if current is not None and current.node_id == node_id:
            return current

        page_x, page_y = pointer_x + scroll_x, pointer_y + scroll_y
        session = DragSession(
            node_id=node_id,
            grab_offset_x=page_x - node.x,
            grab_offset_y=page_y - node.y,
        )
        if current is not None:
            logger.info(f"Press on {node_id} while dragging {current.node_id}; switching session")
        else:
            logger.info(f"Started dragging {node_id}")

        self._state = DragState(session=session, node_id=node_id)
        self._notify_change()
        return session

    def move(self, pointer_x: float, pointer_y: float,
             scroll_x: float = 0, scroll_y: float = 0) -> Optional[SnapResult]:
        """
        Follow the pointer and snap. Returns the snap outcome, or None when
        no drag is active.
        """
        session = self._state.session
        if session is None:
            return None

        node = self._registry.get(session.node_id)
        raw_x = pointer_x + scroll_x - session.grab_offset_x
        raw_y = pointer_y + scroll_y - session.grab_offset_y
        self._registry.set_position(node.id, raw_x, raw_y)

        rects = self._registry.snapshot()
        candidate = find_closest(node, self._registry, self._config.proximity_threshold, rects=rects)
        if candidate is not None:
            snap = snap_to_node(node, candidate, self._config.edge_threshold, rects=rects)
        else:
            snap = snap_to_page(node, self._config.container, self._config.edge_threshold, rects=rects)

        logger.debug(f"Moved {node.id}: raw=({raw_x}, {raw_y}) final=({node.x}, {node.y})")
        self._state = DragState(
            session=session, node_id=node.id,
            candidate_id=candidate.id if candidate is not None else None,
            snap=snap,
        )
        self._notify_change()
        return snap

    def release(self) -> Optional[DragSession]:
        """End the drag. The last move's position is final. Returns the ended session."""
        session = self._state.session
        if session is None:
            logger.debug("Ignoring release with no active drag")
            return None

        logger.info(f"Stopped dragging {session.node_id} at {self._registry.position(session.node_id)}")
        self._state = DragState(node_id=session.node_id)
        self._notify_change()
        return session

    def dispatch(self, event: PointerEvent):
        return dispatch(self, event)

    def _notify_change(self):
        if self._on_state_change:
            self._on_state_change(self._state)
