"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from neon_snake.grid import Grid
    from neon_snake.snake import Snake

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Places food on a uniformly random cell not covered by the snake.

    Placement uses rejection sampling: draw a cell, retry while it lands on
    the snake. After *max_attempts* draws the placer falls back to choosing
    among the remaining free cells, and gives up with ``None`` when the
    board is completely covered.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = 10_000,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def place(self, snake: Snake) -> tuple[int, int] | None:
        """Return a free cell for the next food item."""
        for _ in range(self.max_attempts):
            x = int(self.rng.integers(self.grid.width))
            y = int(self.rng.integers(self.grid.height))
            if not snake.occupies(x, y):
                return x, y

        free = self.grid.free_cells(snake.body)
        if not free:
            logger.warning("No free cells available for food placement.")
            return None
        logger.info(
            "Rejection sampling exhausted after %d draws; picking from %d free cells.",
            self.max_attempts, len(free),
        )
        return free[int(self.rng.integers(len(free)))]
