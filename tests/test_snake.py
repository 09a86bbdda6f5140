"""Tests for the Snake module."""

import pytest

from neon_snake.snake import Direction, Snake


class TestDirection:
    def test_unit_vectors(self):
        assert Direction.UP.value == (0, -1)
        assert Direction.DOWN.value == (0, 1)
        assert Direction.LEFT.value == (-1, 0)
        assert Direction.RIGHT.value == (1, 0)

    def test_opposites(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.LEFT.opposite is Direction.RIGHT
        for d in Direction:
            assert d.opposite.opposite is d

    def test_from_name(self):
        assert Direction.from_name("left") is Direction.LEFT
        assert Direction.from_name(" Up ") is Direction.UP
        assert Direction.from_name("sideways") is None


class TestSnakeInit:
    def test_spawn_layout(self):
        snake = Snake.spawn(20, 20)
        assert list(snake.body) == [(10, 10), (10, 11), (10, 12)]
        assert snake.head == (10, 10)
        assert snake.tail == (10, 12)

    def test_body_extends_opposite_to_direction(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert list(snake.body) == [(5, 5), (4, 5), (3, 5)]

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake(0, 0, length=0)


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake(5, 5, Direction.UP)
        assert snake.next_head(Direction.UP) == (5, 4)
        assert snake.next_head(Direction.RIGHT) == (6, 5)

    def test_push_and_drop(self):
        snake = Snake(5, 5, Direction.UP, length=2)
        snake.push_head((5, 4))
        assert len(snake) == 3
        assert snake.drop_tail() == (5, 6)
        assert list(snake.body) == [(5, 4), (5, 5)]

    def test_occupies(self):
        snake = Snake(5, 5, Direction.UP, length=3)
        assert snake.occupies(5, 7)
        assert not snake.occupies(6, 5)


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake(5, 5, Direction.RIGHT, length=2)
        assert snake.to_dict() == {"body": [[5, 5], [4, 5]]}
