"""Direction buffer decoupling input events from simulation ticks."""

from __future__ import annotations

from neon_snake.snake import Direction


class InputBuffer:
    """Holds the next direction to apply on the coming tick.

    Every accepted :meth:`submit` overwrites the buffered direction. A
    direction that exactly reverses the *applied* movement vector is
    silently dropped; the buffered one is not consulted, so the last
    accepted input between two ticks wins.
    """

    def __init__(self, direction: Direction = Direction.UP) -> None:
        self.current = direction
        self.pending = direction

    def submit(self, direction: Direction) -> bool:
        """Buffer *direction* unless it reverses the current movement.

        Returns whether the direction was accepted.
        """
        if direction is self.current.opposite:
            return False
        self.pending = direction
        return True

    def apply(self) -> Direction:
        """Promote the buffered direction to the current movement vector."""
        self.current = self.pending
        return self.current

    def reset(self, direction: Direction) -> None:
        self.current = direction
        self.pending = direction
