"""Grid model for the snake playfield."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

MIN_TILES = 10


@dataclass(frozen=True)
class GridDimensions:
    """Requested playfield size in tiles.

    Any values are accepted; :meth:`clamped` turns them into a playable
    size when a run starts.
    """

    width: int
    height: int

    def clamped(self, minimum: int = MIN_TILES) -> GridDimensions:
        """Return dimensions raised to at least *minimum* tiles per axis."""
        return GridDimensions(max(self.width, minimum), max(self.height, minimum))


def grid_for_viewport(
    viewport_width: float,
    viewport_height: float,
    tile_size: int = 20,
    margin: int = 40,
    minimum: int = MIN_TILES,
) -> GridDimensions:
    """Compute how many square tiles fit into a viewport.

    A fixed *margin* is reserved around the canvas and each axis is clamped
    to *minimum* tiles so that tiny windows still produce a playable board.
    """
    cols = math.floor((viewport_width - margin) / tile_size)
    rows = math.floor((viewport_height - margin) / tile_size)
    return GridDimensions(
        width=cols if cols > minimum else minimum,
        height=rows if rows > minimum else minimum,
    )


class Grid:
    """Bounds checks and free-cell queries over an ``(x, y)`` playfield.

    Coordinates are ``(x, y)`` with ``x`` growing right and ``y`` growing
    down, matching canvas pixel space.
    """

    def __init__(self, width: int = 20, height: int = 20) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive.")
        self.dimensions = GridDimensions(width, height)

    @property
    def width(self) -> int:
        return self.dimensions.width

    @property
    def height(self) -> int:
        return self.dimensions.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def occupancy(self, occupied: Iterable[tuple[int, int]]) -> np.ndarray:
        """Return a ``(height, width)`` boolean mask of occupied cells."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in occupied:
            if self.in_bounds(x, y):
                mask[y, x] = True
        return mask

    def free_cells(
        self, occupied: Iterable[tuple[int, int]],
    ) -> list[tuple[int, int]]:
        """Return every cell not listed in *occupied*, in row-major order."""
        ys, xs = np.where(~self.occupancy(occupied))
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid size to a dictionary."""
        return {"width": self.width, "height": self.height}
