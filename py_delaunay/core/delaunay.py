"""
Incremental Delaunay triangulation on a quad-edge mesh.

Points are inserted one at a time into a mesh bootstrapped from a padded
bounding rectangle (Guibas & Stolfi, "Primitives for the manipulation of
general subdivisions and the computation of Voronoi diagrams", 1985).
Each insertion locates the containing triangle, connects the new point to
the surrounding polygon and restores the Delaunay property with Lawson
flips around the new point. The rectangle corners are synthetic and never
appear in the output.
"""

from typing import Iterator, List, Optional, Set

import numpy as np
import structlog

from ..config import Settings, settings as default_settings
from .errors import DegenerateTriangulationError, PointOutsideBoundsError, TriangulationError
from .geometry import BoundingBox, Point, Segment, SimpleEdge, Triangle, as_points
from .predicates import in_circle, segment_distance_sq
from .quad_edge import QuadEdgeMesh, sym
from .spanning_tree import kruskal

logger = structlog.get_logger()


class Delaunay:
    """Delaunay triangulation engine."""

    def __init__(self, margin: Optional[float] = None, settings: Optional[Settings] = None):
        """
        Args:
            margin: Fixed bounding box padding. By default the padding is
                settings.bbox_margin_scale times the point extent, and at
                least settings.bbox_margin. Corners placed too close to the
                points take convex hull edges out of the output.
            settings: Engine settings; defaults to the global settings
        """
        self.settings = settings or default_settings
        if margin is None:
            self.margin = self.settings.bbox_margin
            self.margin_scale = self.settings.bbox_margin_scale
        else:
            self.margin = margin
            self.margin_scale = 0.0
        self.mesh = QuadEdgeMesh()
        self.vertices: List[Point] = []
        self.bbox: Optional[BoundingBox] = None
        self.vertex_count = 0
        self._corners: frozenset = frozenset()
        self._current: Optional[int] = None
        self._store_vertices = False

    def set_bbox(self, bbox: BoundingBox) -> None:
        """Start a fresh mesh holding only the rectangle boundary."""
        self.bbox = bbox
        self.mesh = QuadEdgeMesh()
        self.vertex_count = 0
        self._corners = frozenset(bbox.corners)

        mesh = self.mesh
        ab = mesh.make_edge(bbox.bottom_left, bbox.bottom_right)
        bc = mesh.make_edge(bbox.bottom_right, bbox.top_right)
        cd = mesh.make_edge(bbox.top_right, bbox.top_left)
        da = mesh.make_edge(bbox.top_left, bbox.bottom_left)

        mesh.splice(sym(ab), bc)
        mesh.splice(sym(bc), cd)
        mesh.splice(sym(cd), da)
        mesh.splice(sym(da), ab)

        self._current = ab

    def triangulate(self, points, store_vertices: bool = False) -> "Delaunay":
        """
        Triangulate a point set, inserting points in input order.

        The input is not modified. Duplicate points are ignored.

        Args:
            points: Sequence of [x, y] pairs or an (N, 2) array
            store_vertices: Keep the points for spanning tree extraction

        Returns:
            self, for chaining
        """
        points = as_points(points)
        self.set_bbox(BoundingBox.from_points(points, self.margin, self.margin_scale))
        self._store_vertices = store_vertices
        self.vertices = list(points) if store_vertices else []

        logger.info("Triangulating", points=len(points), bbox=tuple(self.bbox))
        for point in points:
            self._insert(point)

        logger.info("Triangulation complete",
                    vertices=self.vertex_count, quad_edges=len(self.mesh))
        return self

    def insert_point(self, point) -> bool:
        """
        Insert a single point into the current mesh.

        Returns:
            True if the point was added, False if it was already a vertex
        """
        point = Point.of(point)
        inserted = self._insert(point)
        if inserted and self._store_vertices:
            self.vertices.append(point)
        return inserted

    def locate(self, point: Point, start: Optional[int] = None) -> int:
        """
        Find an edge of the triangle containing point.

        Directed walk after Brown & Faigle, "A robust efficient algorithm
        for point location in triangulations" (1997). The returned edge
        either has point as an endpoint, or has point inside (or on) the
        triangle to its left.

        Args:
            point: Query point, strictly inside the bounding box
            start: Edge to start walking from; defaults to the last insertion

        Returns:
            Edge index into self.mesh
        """
        mesh = self.mesh
        edge = self._current if start is None else start
        if mesh.point_at_right(edge, point):
            edge = sym(edge)

        limit = self.settings.walk_limit_factor * len(mesh) + 16
        for _ in range(limit):
            if point == mesh.orig(edge) or point == mesh.dest(edge):
                return edge

            onext = mesh.onext(edge)
            dprev = mesh.dprev(edge)
            op = 0
            if not mesh.point_at_right(onext, point):
                op += 1
            if not mesh.point_at_right(dprev, point):
                op += 2

            if op == 0:
                return edge
            elif op == 1:
                edge = onext
            elif op == 2:
                edge = dprev
            elif self._distance(onext, point) < self._distance(dprev, point):
                edge = onext
            else:
                edge = dprev

        raise DegenerateTriangulationError(
            f"Point location for {tuple(point)} did not converge after {limit} steps")

    def _distance(self, edge: int, point: Point) -> float:
        return segment_distance_sq(self.mesh.orig(edge), self.mesh.dest(edge), point)

    def _insert(self, point: Point) -> bool:
        if self.bbox is None:
            raise TriangulationError("No bounding box; call triangulate() or set_bbox() first")
        if not self.bbox.contains(point):
            raise PointOutsideBoundsError(
                f"Point {tuple(point)} lies outside the bounding box {tuple(self.bbox)}")

        mesh = self.mesh
        edge = self.locate(point)

        if point == mesh.orig(edge) or point == mesh.dest(edge):
            logger.debug("Duplicate point ignored", x=point.x, y=point.y)
            return False

        if mesh.has_point(edge, point):
            logger.debug("Point on existing edge", x=point.x, y=point.y)
            temp = mesh.oprev(edge)
            mesh.remove(edge)
            edge = temp

        base = mesh.make_edge(mesh.orig(edge), point)
        mesh.splice(base, edge)
        self._current = start = base

        while True:
            base = mesh.connect(edge, sym(base))
            edge = mesh.oprev(base)
            if mesh.lnext(edge) == start:
                break

        self._legalize(edge, start, point)
        self.vertex_count += 1
        return True

    def _legalize(self, edge: int, start: int, point: Point) -> None:
        """Flip suspect edges around point until every one is locally Delaunay."""
        mesh = self.mesh
        limit = self.settings.flip_limit_factor * len(mesh) + 16
        flipped: Set[frozenset] = set()

        for _ in range(limit):
            temp = mesh.oprev(edge)
            apex = mesh.dest(temp)

            if mesh.point_at_right(edge, apex) and in_circle(mesh.orig(edge), apex, mesh.dest(edge), point):
                mesh.swap(edge)
                key = frozenset((mesh.orig(edge), mesh.dest(edge)))
                if key in flipped:
                    raise DegenerateTriangulationError(
                        f"Degenerate configuration: edge {sorted(key)} flipped twice "
                        f"while inserting {tuple(point)}")
                flipped.add(key)
                edge = mesh.oprev(edge)
            elif mesh.onext(edge) == start:
                return
            else:
                edge = mesh.lprev(mesh.onext(edge))

        raise DegenerateTriangulationError(
            f"Legalization around {tuple(point)} did not finish after {limit} steps")

    def _collect_faces(self) -> List[Triangle]:
        mesh = self.mesh
        corners = self._corners

        for e in mesh.edges():
            mesh.unmark(e)
            mesh.unmark(sym(e))
            if mesh.orig(e) in corners:
                mesh.mark(e)
            if mesh.dest(e) in corners:
                mesh.mark(sym(e))

        faces = []
        for e in mesh.edges():
            for q1 in (e, sym(e)):
                q2 = mesh.lnext(q1)
                q3 = mesh.lnext(q2)
                if not (mesh.is_marked(q1) or mesh.is_marked(q2) or mesh.is_marked(q3)):
                    faces.append(Triangle(mesh.orig(q1), mesh.orig(q2), mesh.orig(q3)))
            mesh.mark(e)
            mesh.mark(sym(e))
        return faces

    def triangles(self) -> Iterator[Triangle]:
        """Triangles of the mesh that do not touch a bounding box corner."""
        yield from self._collect_faces()

    def simple_edges(self, unique: bool = False) -> Iterator[SimpleEdge]:
        """
        Weighted edges of the emitted triangles.

        Args:
            unique: Emit each undirected edge once instead of once per
                adjacent triangle

        Yields:
            SimpleEdge with weight equal to the squared length
        """
        seen: Set[frozenset] = set()
        for a, b, c in self._collect_faces():
            for origin, destination in ((a, b), (b, c), (c, a)):
                if unique:
                    key = frozenset((origin, destination))
                    if key in seen:
                        continue
                    seen.add(key)
                yield SimpleEdge.between(origin, destination)

    def triangles_array(self) -> np.ndarray:
        """Triangles as a float array of shape (T, 3, 2)."""
        return np.array(self._collect_faces(), dtype=float).reshape(-1, 3, 2)

    @property
    def triangle_count(self) -> int:
        return len(self._collect_faces())

    def kruskal(self, minimum: bool = True) -> Optional[List[Segment]]:
        """
        Spanning tree of the stored vertices over the triangulation edges.

        Args:
            minimum: False builds a maximum spanning tree

        Only edges of emitted triangles are candidates, so all-collinear
        input (no triangles) gives an empty list rather than a path.

        Returns:
            Spanning tree segments, or None if fewer than three vertices
            were stored (see triangulate(store_vertices=True))
        """
        if len(self.vertices) < 3:
            logger.warning("Spanning tree requested without enough stored vertices",
                           vertices=len(self.vertices))
            return None

        return kruskal(self.vertices, self.simple_edges(unique=True), minimum=minimum)
