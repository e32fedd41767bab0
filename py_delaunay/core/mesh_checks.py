"""Verification helpers for emitted triangulations."""

from typing import Iterable, List, Tuple

from .geometry import Point, Triangle, as_points
from .predicates import in_circle, orient


def circumcircle_violations(triangles: Iterable[Triangle], points) -> List[Tuple[Triangle, Point]]:
    """
    Find points lying strictly inside the circumcircle of a triangle.

    Brute force, O(triangles * points); meant for tests and debugging.

    Args:
        triangles: Triangles in either orientation
        points: Candidate points

    Returns:
        (triangle, point) pairs breaking the Delaunay property
    """
    points = as_points(points)
    violations = []
    for triangle in triangles:
        a, b, c = triangle
        if orient(a, b, c) < 0:
            b, c = c, b
        for point in points:
            if point in triangle:
                continue
            if in_circle(a, b, c, point):
                violations.append((triangle, point))
    return violations


def degenerate_triangles(triangles: Iterable[Triangle]) -> List[Triangle]:
    """Triangles whose corners are collinear (zero area)."""
    return [t for t in triangles if orient(*t) == 0]
