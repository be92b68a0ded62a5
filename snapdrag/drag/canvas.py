"""
Drag Canvas - NiceGUI rendering of the node registry.

Each node is an absolutely positioned div inside a page-sized container.
The canvas only mirrors positions the controller has already resolved;
pointer events are forwarded to Python by a small injected script that
listens on the whole document, so a release anywhere ends the drag.
"""

from nicegui import ui
from typing import Dict, Optional

from snapdrag.drag.constants import (
    CANVAS_CLASS,
    DRAGGABLE_CLASS,
    GRABBING_CLASS,
    MOVE_EVENT,
    PRESS_EVENT,
    RELEASE_EVENT,
    SnapConfig,
)
from snapdrag.drag.controller import DragState
from snapdrag.drag.registry import NodeRegistry


class DragCanvas:
    """
    Renders nodes as HTML elements and reflects drag state onto them.

    Call setup() once inside a page, then pass update() as the controller's
    state callback (setup_drag_handlers does this).
    """

    def __init__(self, registry: NodeRegistry, config: SnapConfig):
        self._registry = registry
        self._config = config
        self._elements: Dict[str, ui.element] = {}
        self._grabbed_id: Optional[str] = None
        self._is_setup = False

    def setup(self) -> Optional[ui.element]:
        """Create the DOM elements and event forwarding. Call once per page."""
        if self._is_setup:
            return None

        ui.add_head_html(f'''
            <style>
                body {{ margin: 0; }}
                .{CANVAS_CLASS} {{
                    position: absolute;
                    top: 0; left: 0;
                    background: #0f172a;
                    outline: 1px dashed #334155;
                }}
                .{DRAGGABLE_CLASS} {{
                    position: absolute;
                    background: #3b82f6;
                    border-radius: 4px;
                    cursor: grab;
                    user-select: none;
                }}
                .{DRAGGABLE_CLASS}.{GRABBING_CLASS} {{
                    cursor: grabbing;
                    background: #60a5fa;
                }}
            </style>
        ''')

        ui.add_body_html(f'''
            <script>
                (function () {{
                    let dragging = false;
                    const pointer = (e, extra) => Object.assign({{
                        clientX: e.clientX,
                        clientY: e.clientY,
                        scrollX: window.scrollX,
                        scrollY: window.scrollY
                    }}, extra || {{}});

                    document.addEventListener('mousedown', (e) => {{
                        const el = e.target.closest('.{DRAGGABLE_CLASS}');
                        if (!el) return;
                        e.preventDefault();
                        dragging = true;
                        emitEvent('{PRESS_EVENT}', pointer(e, {{nodeId: el.dataset.nodeId}}));
                    }});
                    document.addEventListener('mousemove', (e) => {{
                        if (dragging) emitEvent('{MOVE_EVENT}', pointer(e));
                    }});
                    document.addEventListener('mouseup', () => {{
                        if (!dragging) return;
                        dragging = false;
                        emitEvent('{RELEASE_EVENT}', {{}});
                    }});
                }})();
            </script>
        ''')

        with ui.element('div').classes(CANVAS_CLASS).style(
            f'width: {self._config.page_width}px; height: {self._config.page_height}px'
        ) as container:
            for node in self._registry:
                element = ui.element('div').classes(DRAGGABLE_CLASS).props(f'data-node-id={node.id}')
                element.style(f'width: {node.width}px; height: {node.height}px')
                self._elements[node.id] = element
                self.render_node(node.id)

        self._is_setup = True
        return container

    def render_node(self, node_id: str):
        element = self._elements.get(node_id)
        if element is None:
            return
        x, y = self._registry.position(node_id)
        element.style(f'left: {x}px; top: {y}px')

    def update(self, state: DragState):
        """Mirror the touched node's position and the grab cursor."""
        if state.node_id:
            self.render_node(state.node_id)

        grabbed = state.session.node_id if state.session else None
        if grabbed == self._grabbed_id:
            return
        if self._grabbed_id in self._elements:
            self._elements[self._grabbed_id].classes(remove=GRABBING_CLASS)
        if grabbed in self._elements:
            self._elements[grabbed].classes(add=GRABBING_CLASS)
        self._grabbed_id = grabbed
