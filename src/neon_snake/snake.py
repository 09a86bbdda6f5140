"""Snake representation and movement vectors."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Direction | None:
        """Look up a direction by case-insensitive name, or ``None``."""
        return cls.__members__.get(name.strip().upper())


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        head_x: int,
        head_y: int,
        direction: Direction = Direction.UP,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.body: deque[tuple[int, int]] = deque(
            (head_x - direction.dx * i, head_y - direction.dy * i)
            for i in range(length)
        )

    @classmethod
    def spawn(cls, width: int, height: int, length: int = 3) -> Snake:
        """Build the starting snake: centred, tail trailing below, heading up."""
        return cls(width // 2, height // 2, Direction.UP, length=length)

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self, direction: Direction) -> tuple[int, int]:
        """Compute the cell the head would move to along *direction*."""
        x, y = self.head
        return x + direction.dx, y + direction.dy

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body

    def push_head(self, cell: tuple[int, int]) -> None:
        self.body.appendleft(cell)

    def drop_tail(self) -> tuple[int, int]:
        """Remove and return the tail segment."""
        return self.body.pop()

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
