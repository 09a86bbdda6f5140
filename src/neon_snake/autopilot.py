"""Greedy autopilot used for headless simulation runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from neon_snake.snake import Direction

if TYPE_CHECKING:
    from neon_snake.engine import GameEngine


def preferred_directions(
    head: tuple[int, int], food: tuple[int, int] | None,
) -> list[Direction]:
    """Order all four directions, moves that close in on *food* first."""
    prefs: list[Direction] = []
    if food is not None:
        hx, hy = head
        fx, fy = food
        if fx < hx:
            prefs.append(Direction.LEFT)
        elif fx > hx:
            prefs.append(Direction.RIGHT)
        if fy < hy:
            prefs.append(Direction.UP)
        elif fy > hy:
            prefs.append(Direction.DOWN)
    prefs.extend(d for d in Direction if d not in prefs)
    return prefs


def is_safe(engine: GameEngine, direction: Direction) -> bool:
    """Check whether moving along *direction* survives the next tick."""
    x, y = engine.snake.next_head(direction)
    return engine.grid.in_bounds(x, y) and not engine.snake.occupies(x, y)


def choose_direction(engine: GameEngine) -> Direction:
    """Pick a safe direction toward the food, else keep going straight."""
    current = engine.direction
    for direction in preferred_directions(engine.snake.head, engine.food):
        if direction is current.opposite:
            continue
        if is_safe(engine, direction):
            return direction
    return current
