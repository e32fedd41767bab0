"""Seeded point generators for callers, demos and tests."""

from typing import Optional

import numpy as np


def jittered_grid(width: float, height: float, spacing: float,
                  seed: Optional[int] = None) -> np.ndarray:
    """
    Generate jittered square grid points.

    Creates a regular grid with randomized positions to prevent artificial
    patterns (and the co-circular quads a perfect grid is full of).

    Args:
        width: Grid width
        height: Grid height
        spacing: Distance between grid points
        seed: Random seed for reproducibility

    Returns:
        Array of [x, y] point coordinates
    """
    rng = np.random.default_rng(seed)

    radius = spacing / 2
    jittering = radius * 0.9  # max deviation

    xs = np.arange(radius, width, spacing)
    ys = np.arange(radius, height, spacing)
    grid_x, grid_y = np.meshgrid(xs, ys)
    points = np.column_stack([grid_x.ravel(), grid_y.ravel()])

    points = points + rng.uniform(-jittering, jittering, size=points.shape)
    points[:, 0] = np.clip(np.round(points[:, 0], 2), 0, width)
    points[:, 1] = np.clip(np.round(points[:, 1], 2), 0, height)
    return points


def uniform_points(n: int, width: float, height: float,
                   seed: Optional[int] = None) -> np.ndarray:
    """Uniformly distributed points in [0, width) x [0, height)."""
    rng = np.random.default_rng(seed)
    return rng.uniform((0, 0), (width, height), size=(n, 2))
