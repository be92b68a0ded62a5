"""
Tests for the DragController state machine and the end-to-end drag flow.
"""

import pytest

from snapdrag.drag import (
    DragController,
    MoveEvent,
    Node,
    NodeRegistry,
    PointerEventSink,
    PressEvent,
    ReleaseEvent,
    SnapConfig,
    create_default_registry,
    replay,
)


@pytest.fixture
def registry():
    return create_default_registry()


@pytest.fixture
def controller(registry):
    return DragController(registry)


@pytest.fixture
def states(controller):
    """Collect every DragState the controller publishes."""
    received = []
    controller.set_on_state_change(received.append)
    return received


class TestSessionLifecycle:
    """Press -> move -> release and the misuse guards."""

    def test_press_records_grab_offset(self, controller, states):
        session = controller.press('node-0', 110, 115)
        assert session.node_id == 'node-0'
        assert (session.grab_offset_x, session.grab_offset_y) == (10, 15)
        assert controller.is_dragging
        assert states[-1].session == session

    def test_press_adds_scroll_offset(self, controller):
        session = controller.press('node-0', 110, 15, scroll_y=100)
        assert (session.grab_offset_x, session.grab_offset_y) == (10, 15)

    def test_release_ends_session_without_moving(self, controller, registry, states):
        controller.press('node-0', 110, 110)
        controller.move(160, 410)
        position = registry.position('node-0')
        ended = controller.release()
        assert ended.node_id == 'node-0'
        assert controller.session is None
        assert registry.position('node-0') == position
        assert not states[-1].is_dragging

    def test_release_without_session_is_noop(self, controller, states):
        assert controller.release() is None
        assert states == []

    def test_move_without_session_is_noop(self, controller, registry, states):
        before = registry.snapshot()
        assert controller.move(300, 300) is None
        assert registry.snapshot() == before
        assert states == []

    def test_press_unknown_node_is_noop(self, controller, states):
        assert controller.press('missing', 10, 10) is None
        assert controller.session is None
        assert states == []

    def test_press_unknown_node_keeps_active_session(self, controller):
        session = controller.press('node-0', 110, 110)
        controller.press('missing', 10, 10)
        assert controller.session == session

    def test_repress_same_node_keeps_session(self, controller):
        session = controller.press('node-0', 110, 110)
        assert controller.press('node-0', 140, 140) == session
        assert controller.session == session


class TestMove:
    """Follow-the-cursor plus snapping on each move."""

    def test_follows_pointer_without_snap(self, controller, registry):
        controller.press('node-0', 110, 110)
        result = controller.move(210, 410)
        assert registry.position('node-0') == (200, 400)
        assert not result.snapped
        assert controller.state.candidate_id is None

    def test_scroll_mid_drag(self, controller, registry):
        controller.press('node-0', 110, 110)
        controller.move(210, 310, scroll_x=0, scroll_y=100)
        assert registry.position('node-0') == (200, 400)

    def test_snaps_to_closest_node(self, controller, registry, states):
        """Scenario: A dragged to (295,100) snaps onto B's left/top edges."""
        controller.press('node-0', 110, 110)
        result = controller.move(305, 110)
        assert registry.position('node-0') == (300, 100)
        assert result.target_id == 'node-1'
        assert states[-1].candidate_id == 'node-1'

    def test_snaps_to_page_when_no_candidate(self):
        """Scenario: a lone node released near the corner lands on (0,0)."""
        registry = NodeRegistry([Node(id='solo', x=100, y=100)])
        controller = DragController(registry)
        controller.press('solo', 100, 100)
        result = controller.move(4, 4)
        assert registry.position('solo') == (0, 0)
        assert result.target_id is None

    def test_page_right_edge(self):
        registry = NodeRegistry([Node(id='solo', x=100, y=100)])
        controller = DragController(registry)
        controller.press('solo', 100, 100)
        controller.move(798, 100)
        assert registry.position('solo') == (798, 100)
        controller.move(760, 100)
        assert registry.position('solo') == (750, 100)

    def test_snapped_move_then_free_move(self, controller, registry):
        controller.press('node-0', 110, 110)
        controller.move(305, 110)
        assert registry.position('node-0') == (300, 100)
        controller.move(110, 410)
        assert registry.position('node-0') == (100, 400)

    def test_config_thresholds_are_used(self, registry):
        controller = DragController(registry, SnapConfig(proximity_threshold=3, edge_threshold=2))
        controller.press('node-0', 110, 110)
        controller.move(305, 110)
        # No candidate within 3, page lines far away: stays raw
        assert registry.position('node-0') == (295, 100)

    def test_other_nodes_never_move(self, controller, registry):
        controller.press('node-0', 110, 110)
        for x in range(110, 600, 37):
            controller.move(x, 130)
        assert registry.position('node-1') == (300, 100)
        assert registry.position('node-2') == (500, 100)


class TestLastPressWins:
    """Pressing a different node mid-drag redirects the session."""

    def test_second_press_redirects(self, controller, registry, states):
        controller.press('node-0', 110, 110)
        controller.move(160, 310)
        a_position = registry.position('node-0')

        session = controller.press('node-2', 510, 110)
        assert session.node_id == 'node-2'
        assert controller.session.node_id == 'node-2'

        controller.move(560, 410)
        assert registry.position('node-0') == a_position
        assert registry.position('node-2') == (550, 400)
        assert states[-1].node_id == 'node-2'


class TestEventSource:
    """Driving the controller through recorded events."""

    def test_controller_is_a_sink(self, controller):
        assert isinstance(controller, PointerEventSink)

    def test_replay_is_deterministic(self):
        events = [
            PressEvent('node-0', 110, 110),
            MoveEvent(200, 200),
            MoveEvent(305, 110),
            ReleaseEvent(),
            MoveEvent(600, 500),
        ]
        results = []
        for _ in range(2):
            registry = create_default_registry()
            controller = DragController(registry)
            assert replay(controller, events) == len(events)
            results.append(registry.snapshot())
            assert controller.session is None
        assert results[0] == results[1]
        assert results[0]['node-0'].left == 300

    def test_dispatch_returns_method_result(self, controller):
        session = controller.dispatch(PressEvent('node-1', 310, 110))
        assert session.node_id == 'node-1'
        assert controller.dispatch(ReleaseEvent()) == session

    def test_dispatch_rejects_unknown_event(self, controller):
        with pytest.raises(TypeError):
            controller.dispatch(object())
