"""Plain geometry value types shared by the triangulation engine."""

import math
from typing import Iterable, NamedTuple, Tuple

import numpy as np

from .errors import EmptyPointSetError


class Point(NamedTuple):
    """Immutable 2D point. Equality is exact coordinate equality."""
    x: float
    y: float

    @classmethod
    def of(cls, value) -> "Point":
        """Coerce a pair (tuple, list, numpy row) into a Point of floats."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))


class BoundingBox(NamedTuple):
    """Axis-aligned rectangle used to bootstrap the mesh."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points, margin: float, scale: float = 0.0) -> "BoundingBox":
        """
        Padded bounding rectangle of a point set.

        Args:
            points: Sequence of [x, y] pairs or an (N, 2) array
            margin: Minimum padding added on every side
            scale: Padding as a multiple of the larger side of the point
                extent; the larger of the two paddings is used

        Returns:
            BoundingBox strictly containing every point
        """
        coords = np.asarray(points, dtype=float)
        if coords.size == 0:
            raise EmptyPointSetError("Cannot compute a bounding box of zero points")
        coords = coords.reshape(-1, 2)

        min_x, min_y = coords.min(axis=0)
        max_x, max_y = coords.max(axis=0)
        extent = max(float(max_x - min_x), float(max_y - min_y))
        margin = max(margin, scale * extent)
        return cls(float(min_x) - margin, float(min_y) - margin,
                   float(max_x) + margin, float(max_y) + margin)

    @property
    def bottom_left(self) -> Point:
        return Point(self.min_x, self.min_y)

    @property
    def bottom_right(self) -> Point:
        return Point(self.max_x, self.min_y)

    @property
    def top_right(self) -> Point:
        return Point(self.max_x, self.max_y)

    @property
    def top_left(self) -> Point:
        return Point(self.min_x, self.max_y)

    @property
    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """Corners in counter-clockwise order starting bottom-left."""
        return (self.bottom_left, self.bottom_right, self.top_right, self.top_left)

    def contains(self, point: Point) -> bool:
        """True if point lies strictly inside the rectangle."""
        return self.min_x < point.x < self.max_x and self.min_y < point.y < self.max_y


class Triangle(NamedTuple):
    """Three corners of a mesh face, counter-clockwise."""
    a: Point
    b: Point
    c: Point

    @property
    def area(self) -> float:
        return abs((self.b.x - self.a.x) * (self.c.y - self.a.y)
                   - (self.b.y - self.a.y) * (self.c.x - self.a.x)) / 2


class Segment(NamedTuple):
    """One spanning-tree edge."""
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


class SimpleEdge(NamedTuple):
    """Weighted undirected edge derived from the mesh; weight is squared length."""
    origin: Point
    destination: Point
    weight: float

    @classmethod
    def between(cls, origin: Point, destination: Point) -> "SimpleEdge":
        dx = destination.x - origin.x
        dy = destination.y - origin.y
        return cls(origin, destination, dx * dx + dy * dy)


def as_points(points: Iterable) -> list:
    """Convert any iterable of pairs (or an (N, 2) array) into a list of Points."""
    if isinstance(points, np.ndarray):
        points = points.reshape(-1, 2).tolist()
    return [Point.of(p) for p in points]
