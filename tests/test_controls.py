"""Tests for keyboard and swipe translation."""

import pytest

from snake_sim.controls import ControlAction, direction_for_swipe, key_action
from snake_sim.direction import Direction


class TestKeyAction:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("ArrowUp", Direction.UP),
            ("w", Direction.UP),
            ("S", Direction.DOWN),
            ("a", Direction.LEFT),
            ("ArrowRight", Direction.RIGHT),
            (" ", ControlAction.TOGGLE),
        ],
    )
    def test_bindings(self, key, expected):
        assert key_action(key) is expected

    @pytest.mark.parametrize("key", ["x", "Enter", "", None, 38])
    def test_unbound(self, key):
        assert key_action(key) is None


class TestSwipe:
    def test_horizontal(self):
        assert direction_for_swipe(50, 10) is Direction.RIGHT
        assert direction_for_swipe(-50, -10) is Direction.LEFT

    def test_vertical(self):
        assert direction_for_swipe(10, 50) is Direction.DOWN
        assert direction_for_swipe(-10, -50) is Direction.UP

    def test_short_gesture_is_not_a_swipe(self):
        assert direction_for_swipe(30, -30) is None
        assert direction_for_swipe(0, 0) is None

    def test_one_axis_over_threshold_is_enough(self):
        assert direction_for_swipe(31, 0) is Direction.RIGHT

    def test_custom_threshold(self):
        assert direction_for_swipe(20, 0, threshold=10) is Direction.RIGHT

    @pytest.mark.parametrize(
        ("dx", "dy"),
        [
            ("50", 0),
            (None, 50),
            (False, 50),
            (50, True),
            (float("nan"), 50),
            (float("-inf"), 0),
            ([50], 0),
        ],
    )
    def test_non_numeric_is_not_a_swipe(self, dx, dy):
        assert direction_for_swipe(dx, dy) is None
