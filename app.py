"""
Main NiceGUI application for SnapDrag.

Renders the node registry with DragCanvas and forwards browser pointer
events to a DragController, which snaps dragged nodes to their nearest
neighbour or to the page edges.
"""

from nicegui import ui
import sys

from dotenv import load_dotenv
load_dotenv()

from snapdrag import __version__
from snapdrag.config import get_snap_config
from snapdrag.drag import DragCanvas, DragController, create_default_registry, setup_drag_handlers
from snapdrag.drag.constants import MOVE_EVENT, PRESS_EVENT, RELEASE_EVENT


@ui.page('/')
def index():
    # Each browser tab gets its own nodes and drag session
    config = get_snap_config()
    registry = create_default_registry()
    controller = DragController(registry, config)

    canvas = DragCanvas(registry, config)
    canvas.setup()

    handlers = setup_drag_handlers(controller, canvas)
    ui.on(PRESS_EVENT, handlers['handle_press'])
    ui.on(MOVE_EVENT, handlers['handle_move'])
    ui.on(RELEASE_EVENT, handlers['handle_release'])


if __name__ in {"__main__", "__mp_main__"}:
    startup_config = get_snap_config()
    print(f"[SnapDrag {__version__}] Page {startup_config.page_width:g}x{startup_config.page_height:g}, "
          f"proximity {startup_config.proximity_threshold:g}, edge {startup_config.edge_threshold:g}")
    ui.run(
        title='SnapDrag',
        port=8080,
        reload=not getattr(sys, 'frozen', False),
    )
