from itertools import permutations

import pytest

from snapdrag.drag import Node, NodeRegistry, find_closest


@pytest.fixture
def dragged():
    return Node(id='dragged', x=0, y=0)


class TestFindClosest:
    """Corner-to-corner proximity search."""

    @pytest.mark.parametrize('bx, expected', [(99, True), (100, False), (150, False), (0, True)])
    def test_candidate_iff_strictly_below_threshold(self, dragged, bx, expected):
        other = Node(id='other', x=bx, y=0)
        result = find_closest(dragged, [dragged, other], 100)
        assert (result is other) == expected
        if not expected:
            assert result is None

    def test_excludes_dragged_node(self, dragged):
        assert find_closest(dragged, [dragged], 100) is None

    def test_picks_minimum(self, dragged):
        far = Node(id='far', x=60, y=0)
        near = Node(id='near', x=0, y=20)
        assert find_closest(dragged, [dragged, far, near], 100) is near

    def test_tie_break_first_in_order(self, dragged):
        a = Node(id='a', x=50, y=0)
        b = Node(id='b', x=0, y=50)
        c = Node(id='c', x=30, y=40)
        for order in permutations([a, b, c]):
            assert find_closest(dragged, [dragged, *order], 100) is order[0]

    def test_top_left_corners_not_centers(self, dragged):
        # Wide node whose center is far but whose corner is close wins
        wide = Node(id='wide', x=30, y=0, width=500, height=50)
        small = Node(id='small', x=40, y=0, width=10, height=10)
        assert find_closest(dragged, [dragged, small, wide], 100) is wide

    def test_uses_snapshot_when_given(self, dragged):
        other = Node(id='other', x=500, y=500)
        registry = NodeRegistry([dragged, other])
        rects = registry.snapshot()
        # Live position moves close, but the snapshot still says far away
        other.move_to(5, 5)
        assert find_closest(dragged, registry, 100, rects=rects) is None
