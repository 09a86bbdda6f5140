"""Tests for raw input translation."""

from neon_snake.input_adapter import is_confirm_key, key_to_direction, swipe_to_direction
from neon_snake.snake import Direction


class TestKeys:
    def test_arrow_keys(self):
        assert key_to_direction("ArrowUp") is Direction.UP
        assert key_to_direction("ArrowDown") is Direction.DOWN
        assert key_to_direction("ArrowLeft") is Direction.LEFT
        assert key_to_direction("ArrowRight") is Direction.RIGHT

    def test_unknown_key(self):
        assert key_to_direction("KeyQ") is None

    def test_confirm_keys(self):
        assert is_confirm_key("Space")
        assert is_confirm_key("Enter")
        assert not is_confirm_key("ArrowUp")


class TestSwipe:
    def test_horizontal_swipe_while_vertical(self):
        assert swipe_to_direction(40, 5, Direction.UP) is Direction.RIGHT
        assert swipe_to_direction(-40, 5, Direction.DOWN) is Direction.LEFT

    def test_vertical_swipe_while_horizontal(self):
        assert swipe_to_direction(3, 50, Direction.LEFT) is Direction.DOWN
        assert swipe_to_direction(3, -50, Direction.RIGHT) is Direction.UP

    def test_same_axis_ignored(self):
        assert swipe_to_direction(40, 0, Direction.LEFT) is None
        assert swipe_to_direction(0, -40, Direction.DOWN) is None

    def test_zero_swipe_ignored(self):
        assert swipe_to_direction(0, 0, Direction.LEFT) is None
