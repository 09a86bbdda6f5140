"""Translate raw device input (key names, swipe deltas) into directions."""

from __future__ import annotations

from neon_snake.snake import Direction

KEY_DIRECTIONS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}

CONFIRM_KEYS = frozenset({"Space", "Enter", " "})


def key_to_direction(key: str) -> Direction | None:
    """Map a DOM ``KeyboardEvent.key``/``code`` arrow name to a direction."""
    return KEY_DIRECTIONS.get(key)


def is_confirm_key(key: str) -> bool:
    return key in CONFIRM_KEYS


def swipe_to_direction(
    dx: float, dy: float, current: Direction,
) -> Direction | None:
    """Turn a swipe vector into a direction along its dominant axis.

    Swipes along the axis the snake already travels on are ignored, which
    also rules out reversals.
    """
    if abs(dx) > abs(dy):
        if current.dx != 0:
            return None
        if dx > 0:
            return Direction.RIGHT
        return Direction.LEFT
    if current.dy != 0 or dy == 0:
        return None
    return Direction.DOWN if dy > 0 else Direction.UP
