"""Tests for move, swap and slide."""

import pytest

from monarrange.layout.adjacency import shared_edge
from monarrange.layout.directional import Direction
from monarrange.layout.moves import move_monitor, slide_monitor, swap_monitors
from monarrange.layout.rect import LayoutMonitor, SelectionError


def snapshot(monitors):
    return [(m.id, m.x, m.y, m.w, m.h) for m in monitors]


class TestSwap:
    """swap_monitors keeps the pair touching."""

    def test_side_by_side(self, three_side_by_side):
        swap_monitors(three_side_by_side, 0, 1)
        a, b, c = three_side_by_side
        assert (a.id, a.x) == ("A", 1920)
        assert (b.id, b.x) == ("B", 0)
        assert c.x == 3840

    def test_argument_order_does_not_matter(self, three_side_by_side):
        swap_monitors(three_side_by_side, 1, 0)
        assert [m.x for m in three_side_by_side] == [1920, 0, 3840]

    def test_stacked(self, two_stacked):
        swap_monitors(two_stacked, 0, 1)
        assert two_stacked[1].y == 0
        assert two_stacked[0].y == 1080

    def test_different_widths_stay_touching(self):
        m = [
            LayoutMonitor("A", 0, 0, 1920, 1080),
            LayoutMonitor("B", 1920, 0, 2560, 1440),
        ]
        swap_monitors(m, 0, 1)
        assert m[1].x == 0
        assert m[0].x == 2560
        assert shared_edge(m[0], m[1]) is not None

    def test_shifts_monitors_beyond_pair_by_width_delta(self):
        m = [
            LayoutMonitor("A", 0, 0, 1920, 1080),
            LayoutMonitor("B", 1920, 0, 2560, 1440),
            LayoutMonitor("C", 4480, 0, 1920, 1080),
        ]
        swap_monitors(m, 0, 1)
        assert m[2].x == 4480 - (2560 - 1920)

    def test_stacked_shifts_monitors_below(self):
        m = [
            LayoutMonitor("A", 0, 0, 1920, 1080),
            LayoutMonitor("B", 0, 1080, 1920, 1440),
            LayoutMonitor("C", 0, 2520, 1920, 1080),
            LayoutMonitor("side", 1920, 0, 1920, 1080),
        ]
        swap_monitors(m, 0, 1)
        assert m[1].y == 0
        assert m[0].y == 1440
        assert m[2].y == 2520 - 360
        assert m[3].y == 0

    def test_not_adjacent_is_noop(self):
        m = [
            LayoutMonitor("A", 0, 0, 1920, 1080),
            LayoutMonitor("B", 5000, 0, 1920, 1080),
        ]
        before = snapshot(m)
        swap_monitors(m, 0, 1)
        assert snapshot(m) == before


class TestSlide:
    """slide_monitor never leaves a gap with the neighbor."""

    def test_along_shared_vertical_edge(self, different_heights):
        slide_monitor(different_heights, 0, 1, Direction.DOWN, 100)
        a, b = different_heights
        assert (a.x, a.y) == (0, 100)
        assert shared_edge(a, b) is not None

    def test_past_edge_snaps_below(self):
        m = [
            LayoutMonitor("A", 0, 0, 1920, 1080),
            LayoutMonitor("B", 1920, 0, 1920, 1080),
        ]
        slide_monitor(m, 0, 1, Direction.DOWN, 1200)
        assert m[0].y == 1080
        assert m[0].x == m[1].x

    def test_shorter_monitor_keeps_contact_while_overlap_remains(self, different_heights):
        slide_monitor(different_heights, 0, 1, Direction.DOWN, 1200)
        a, b = different_heights
        assert (a.x, a.y) == (0, 1200)
        assert shared_edge(a, b) is not None

    def test_shorter_monitor_past_taller_snaps_below(self, different_heights):
        slide_monitor(different_heights, 0, 1, Direction.DOWN, 1500)
        a, b = different_heights
        assert a.y == b.bottom
        assert a.x == b.x
        assert shared_edge(a, b) is not None

    def test_past_edge_upwards_snaps_above(self, different_heights):
        slide_monitor(different_heights, 0, 1, Direction.UP, 1200)
        a, b = different_heights
        assert a.bottom == b.y
        assert a.x == b.x

    def test_horizontal_slide_along_stacked(self, two_stacked):
        slide_monitor(two_stacked, 1, 0, Direction.RIGHT, 50)
        assert two_stacked[1].position == (50, 1080)

    def test_horizontal_slide_past_edge(self, two_stacked):
        slide_monitor(two_stacked, 1, 0, Direction.RIGHT, 2000)
        a, b = two_stacked
        assert b.x == a.right
        assert b.y == a.y

    @pytest.mark.parametrize("step", [10, 500, 1079, 1080, 1500, 4000])
    @pytest.mark.parametrize("direction", [Direction.UP, Direction.DOWN])
    def test_never_leaves_a_gap(self, different_heights, direction, step):
        slide_monitor(different_heights, 0, 1, direction, step)
        assert shared_edge(different_heights[0], different_heights[1]) is not None


class TestMoveMonitor:
    """move_monitor chooses between swap, slide and no-op."""

    def test_perpendicular_swaps(self, three_side_by_side):
        move_monitor(three_side_by_side, 1, Direction.LEFT, 10)
        a, b, c = three_side_by_side
        assert b.x == 0
        assert a.x == 1920
        assert c.x == 3840
        assert shared_edge(a, c) is not None

    def test_parallel_slides(self, three_side_by_side):
        move_monitor(three_side_by_side, 1, Direction.DOWN, 50)
        a, b, c = three_side_by_side
        assert b.y == 50
        assert shared_edge(a, b) is not None
        assert shared_edge(b, c) is not None

    def test_stacked_down_swaps(self, two_stacked):
        move_monitor(two_stacked, 0, Direction.DOWN, 50)
        assert two_stacked[0].y == 1080
        assert two_stacked[1].y == 0

    @pytest.mark.parametrize(
        "index, direction",
        [(0, Direction.LEFT), (2, Direction.RIGHT)],
    )
    def test_extremity_is_noop(self, three_side_by_side, index, direction):
        before = snapshot(three_side_by_side)
        move_monitor(three_side_by_side, index, direction, 10)
        assert snapshot(three_side_by_side) == before

    def test_topmost_up_is_noop(self, two_stacked):
        before = snapshot(two_stacked)
        move_monitor(two_stacked, 0, Direction.UP, 10)
        assert snapshot(two_stacked) == before

    def test_single_monitor_is_noop(self):
        m = [LayoutMonitor("A", 0, 0, 1920, 1080)]
        move_monitor(m, 0, Direction.LEFT, 10)
        assert m[0].position == (0, 0)

    def test_isolated_monitor_is_noop(self):
        m = [
            LayoutMonitor("A", 0, 0, 1920, 1080),
            LayoutMonitor("B", 5000, 5000, 1920, 1080),
        ]
        before = snapshot(m)
        move_monitor(m, 1, Direction.LEFT, 10)
        assert snapshot(m) == before

    def test_out_of_range_selected(self, three_side_by_side):
        with pytest.raises(SelectionError):
            move_monitor(three_side_by_side, 3, Direction.LEFT, 10)
