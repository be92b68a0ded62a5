"""
Node Registry - Single owner of every node's position.

The registry is closed: membership is fixed at construction and iteration
order is creation order. The rendering layer only mirrors positions read
from here.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from snapdrag.drag.constants import DEFAULT_LAYOUT, NODE_HEIGHT, NODE_WIDTH
from snapdrag.drag.geometry import Rect, rect_of

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """A draggable rectangle. x/y is the top-left corner in page coordinates."""
    id: str
    x: float
    y: float
    width: float = NODE_WIDTH
    height: float = NODE_HEIGHT

    @property
    def rect(self) -> Rect:
        return rect_of(self)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class NodeRegistry:
    """Ordered, fixed collection of nodes with read/write access to positions."""

    def __init__(self, nodes: Iterable[Node]):
        self._nodes: List[Node] = list(nodes)
        self._by_id: Dict[str, Node] = {}
        for node in self._nodes:
            if node.id in self._by_id:
                raise ValueError(f"Duplicate node id: {node.id}")
            self._by_id[node.id] = node

    @classmethod
    def from_layout(cls, positions: Sequence[Tuple[float, float]],
                    width: float = NODE_WIDTH, height: float = NODE_HEIGHT) -> 'NodeRegistry':
        """Build a registry of equally sized nodes with ids node-0, node-1, ..."""
        return cls(
            Node(id=f"node-{index}", x=x, y=y, width=width, height=height)
            for index, (x, y) in enumerate(positions)
        )

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._by_id

    def get(self, node_id: str) -> Optional[Node]:
        return self._by_id.get(node_id)

    def position(self, node_id: str) -> Tuple[float, float]:
        node = self._by_id[node_id]
        return node.x, node.y

    def set_position(self, node_id: str, x: float, y: float) -> None:
        self._by_id[node_id].move_to(x, y)

    def rect(self, node_id: str) -> Rect:
        return self._by_id[node_id].rect

    def snapshot(self) -> Dict[str, Rect]:
        """One consistent Rect per node, taken at a single point in time."""
        return {node.id: node.rect for node in self._nodes}


def create_default_registry() -> NodeRegistry:
    """The demo layout: three 50x50 nodes on a single row."""
    registry = NodeRegistry.from_layout(DEFAULT_LAYOUT)
    logger.debug(f"Created default registry with {len(registry)} nodes")
    return registry
