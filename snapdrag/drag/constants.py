"""
Shared constants for the drag-and-snap system.

The threshold and page values are defaults only; the live values travel in a
SnapConfig (resolved by snapdrag.config). The CSS class names and event names
are shared with the injected JavaScript in canvas.py. Keep them in sync!
"""

from dataclasses import dataclass

from snapdrag.drag.geometry import Rect, container_rect

# Max top-left to top-left distance for a node to be a snap candidate
PROXIMITY_THRESHOLD = 100

# Max deviation in pixels for an edge/center alignment to trigger
EDGE_THRESHOLD = 20

# Container (page) bounds used when no node qualifies
PAGE_WIDTH = 800
PAGE_HEIGHT = 600

# Default demo layout: three 50x50 nodes on one row
NODE_WIDTH = 50
NODE_HEIGHT = 50
DEFAULT_LAYOUT = [(100, 100), (300, 100), (500, 100)]

# DOM hooks
DRAGGABLE_CLASS = 'draggable'
GRABBING_CLASS = 'grabbing'
CANVAS_CLASS = 'snapdrag-canvas'

# Custom event names emitted from the browser
PRESS_EVENT = 'snapdrag:press'
MOVE_EVENT = 'snapdrag:move'
RELEASE_EVENT = 'snapdrag:release'


@dataclass(frozen=True)
class SnapConfig:
    """Thresholds and container size for one engine instance."""
    proximity_threshold: float = PROXIMITY_THRESHOLD
    edge_threshold: float = EDGE_THRESHOLD
    page_width: float = PAGE_WIDTH
    page_height: float = PAGE_HEIGHT

    def __post_init__(self):
        if self.proximity_threshold < 0 or self.edge_threshold < 0:
            raise ValueError("Snap thresholds must be non-negative")
        if self.page_width <= 0 or self.page_height <= 0:
            raise ValueError(f"Page size must be positive, got {self.page_width}x{self.page_height}")

    @property
    def container(self) -> Rect:
        return container_rect(self.page_width, self.page_height)
