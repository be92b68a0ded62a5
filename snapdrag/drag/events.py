"""
Pointer event types and the sink protocol the drag engine is driven through.

Coordinates are in viewport space, as the browser reports them. The scroll
offsets travel with each event so the engine can convert to page space.
"""

from dataclasses import dataclass
from typing import Iterable, Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class PressEvent:
    node_id: str
    x: float
    y: float
    scroll_x: float = 0
    scroll_y: float = 0


@dataclass(frozen=True)
class MoveEvent:
    x: float
    y: float
    scroll_x: float = 0
    scroll_y: float = 0


@dataclass(frozen=True)
class ReleaseEvent:
    pass


PointerEvent = Union[PressEvent, MoveEvent, ReleaseEvent]


@runtime_checkable
class PointerEventSink(Protocol):
    """Anything that consumes the press -> move* -> release sequence."""

    def press(self, node_id: str, pointer_x: float, pointer_y: float,
              scroll_x: float = 0, scroll_y: float = 0):
        ...

    def move(self, pointer_x: float, pointer_y: float,
             scroll_x: float = 0, scroll_y: float = 0):
        ...

    def release(self):
        ...


def dispatch(sink: PointerEventSink, event: PointerEvent):
    """Route a single event to the matching sink method and return its result."""
    if isinstance(event, PressEvent):
        return sink.press(event.node_id, event.x, event.y, event.scroll_x, event.scroll_y)
    if isinstance(event, MoveEvent):
        return sink.move(event.x, event.y, event.scroll_x, event.scroll_y)
    if isinstance(event, ReleaseEvent):
        return sink.release()
    raise TypeError(f"Unsupported pointer event: {event!r}")


def replay(sink: PointerEventSink, events: Iterable[PointerEvent]) -> int:
    """Feed a recorded event sequence to the sink. Returns the number of events sent."""
    count = 0
    for event in events:
        dispatch(sink, event)
        count += 1
    return count
