"""Tests for the seeded point generators."""

import numpy as np

from py_delaunay.core.point_sets import jittered_grid, uniform_points


class TestJitteredGrid:
    """Test jittered grid generation."""

    def test_shape_and_bounds(self):
        points = jittered_grid(100, 60, 10, seed=1)
        assert points.shape == (60, 2)
        assert np.all(points[:, 0] >= 0) and np.all(points[:, 0] <= 100)
        assert np.all(points[:, 1] >= 0) and np.all(points[:, 1] <= 60)

    def test_points_stay_in_their_cells(self):
        spacing = 10
        points = jittered_grid(50, 50, spacing, seed=2)
        cells = {(int(x // spacing), int(y // spacing)) for x, y in points}
        assert len(cells) == len(points)

    def test_seed_is_reproducible(self):
        np.testing.assert_array_equal(jittered_grid(40, 40, 5, seed=3),
                                      jittered_grid(40, 40, 5, seed=3))
        assert not np.array_equal(jittered_grid(40, 40, 5, seed=3),
                                  jittered_grid(40, 40, 5, seed=4))


class TestUniformPoints:
    """Test uniform point generation."""

    def test_shape_and_bounds(self):
        points = uniform_points(200, 30, 10, seed=0)
        assert points.shape == (200, 2)
        assert points[:, 0].min() >= 0 and points[:, 0].max() < 30
        assert points[:, 1].min() >= 0 and points[:, 1].max() < 10

    def test_seed_is_reproducible(self):
        np.testing.assert_array_equal(uniform_points(10, 1, 1, seed=8),
                                      uniform_points(10, 1, 1, seed=8))
