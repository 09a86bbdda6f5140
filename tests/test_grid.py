"""Tests for the Grid module."""

import numpy as np
import pytest

from neon_snake.grid import Grid, GridDimensions, grid_for_viewport


class TestGridDimensions:
    def test_degenerate_values_clamped(self):
        assert GridDimensions(0, 3).clamped(10) == GridDimensions(10, 10)
        assert GridDimensions(-4, 0).clamped(10) == GridDimensions(10, 10)

    def test_clamped_raises_small_axes(self):
        assert GridDimensions(6, 30).clamped(10) == GridDimensions(10, 30)

    def test_clamped_keeps_large_axes(self):
        assert GridDimensions(25, 12).clamped(10) == GridDimensions(25, 12)


class TestGridForViewport:
    def test_fits_tiles_inside_margin(self):
        dims = grid_for_viewport(500, 300, tile_size=20, margin=40)
        assert dims == GridDimensions(23, 13)

    def test_tiny_viewport_clamped_to_minimum(self):
        dims = grid_for_viewport(100, 100, tile_size=20, margin=40)
        assert dims == GridDimensions(10, 10)


class TestGridOperations:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.width == 20
        assert grid.height == 20
        assert grid.area == 400

    def test_positive_required(self):
        with pytest.raises(ValueError, match="positive"):
            Grid(0, 10)
        with pytest.raises(ValueError, match="positive"):
            Grid(10, -1)

    def test_in_bounds_is_exclusive(self):
        grid = Grid(width=5, height=4)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 3)
        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(5, 0)
        assert not grid.in_bounds(0, 4)
        assert not grid.in_bounds(0, -1)

    def test_occupancy_mask_shape_and_layout(self):
        grid = Grid(width=5, height=4)
        mask = grid.occupancy([(4, 0), (1, 3)])
        assert mask.shape == (4, 5)
        assert mask[0, 4]
        assert mask[3, 1]
        assert np.count_nonzero(mask) == 2

    def test_free_cells(self):
        grid = Grid(width=4, height=4)
        assert len(grid.free_cells([])) == 16
        free = grid.free_cells([(0, 0), (3, 2)])
        assert len(free) == 14
        assert (0, 0) not in free
        assert (3, 2) not in free
        assert (2, 3) in free

    def test_to_dict(self):
        assert Grid(width=7, height=9).to_dict() == {"width": 7, "height": 9}
