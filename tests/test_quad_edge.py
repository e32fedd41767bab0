"""Tests for the quad-edge arena."""

from py_delaunay.core.delaunay import Delaunay
from py_delaunay.core.geometry import Point
from py_delaunay.core.quad_edge import QuadEdgeMesh, rot, rot_sym, sym


def ring(mesh, e, step):
    """Follow step from e until it returns; bounded to catch open rings."""
    seen = [e]
    current = step(e)
    while current != e:
        seen.append(current)
        assert len(seen) < 1000, "ring does not close"
        current = step(current)
    return seen


def assert_mesh_consistent(engine):
    """Every origin ring closes and every face is a triangle or the outer square."""
    mesh = engine.mesh
    bbox_corners = set(engine.bbox.corners)
    for e in mesh.edges():
        for d in (e, sym(e)):
            origins = {mesh.orig(x) for x in ring(mesh, d, mesh.onext)}
            assert origins == {mesh.orig(d)}

            face = ring(mesh, d, mesh.lnext)
            if len(face) == 4:
                assert {mesh.orig(x) for x in face} == bbox_corners
            else:
                assert len(face) == 3


class TestRotations:
    """Test index arithmetic of the rotation operators."""

    def test_rot_cycle(self):
        mesh = QuadEdgeMesh()
        e = mesh.make_edge(Point(0, 0), Point(1, 0))
        family = [e, rot(e), rot(rot(e)), rot(rot(rot(e)))]
        assert len(set(family)) == 4
        assert rot(family[3]) == e
        assert rot(rot(e)) == sym(e)
        assert rot_sym(rot(e)) == e
        assert all(x >> 2 == e >> 2 for x in family)

    def test_quads_do_not_overlap(self):
        mesh = QuadEdgeMesh()
        e1 = mesh.make_edge(Point(0, 0), Point(1, 0))
        e2 = mesh.make_edge(Point(0, 0), Point(0, 1))
        assert e2 == e1 + 4
        assert len(mesh) == 2


class TestMakeEdge:
    """Test freshly allocated edges."""

    def test_endpoints(self):
        mesh = QuadEdgeMesh()
        e = mesh.make_edge(Point(0, 0), Point(3, 4))
        assert mesh.orig(e) == Point(0, 0)
        assert mesh.dest(e) == Point(3, 4)
        assert mesh.orig(sym(e)) == Point(3, 4)
        assert mesh.dest(sym(e)) == Point(0, 0)

    def test_isolated_rings(self):
        mesh = QuadEdgeMesh()
        e = mesh.make_edge(Point(0, 0), Point(3, 4))
        assert mesh.onext(e) == e
        assert mesh.onext(sym(e)) == sym(e)
        assert mesh.onext(rot(e)) == rot_sym(e)
        assert mesh.onext(rot_sym(e)) == rot(e)
        assert mesh.lnext(e) == sym(e)


class TestSplice:
    """Test ring merging and splitting."""

    def test_merge_and_split(self):
        mesh = QuadEdgeMesh()
        a = mesh.make_edge(Point(0, 0), Point(1, 0))
        b = mesh.make_edge(Point(0, 0), Point(0, 1))

        mesh.splice(a, b)
        assert mesh.onext(a) == b
        assert mesh.onext(b) == a

        mesh.splice(a, b)
        assert mesh.onext(a) == a
        assert mesh.onext(b) == b


class TestConnect:
    """Test closing a triangle with connect."""

    def test_triangle_faces(self):
        mesh = QuadEdgeMesh()
        a, b, c = Point(0, 0), Point(1, 0), Point(0, 1)
        e1 = mesh.make_edge(a, b)
        e2 = mesh.make_edge(b, c)
        mesh.splice(sym(e1), e2)

        e3 = mesh.connect(e2, e1)
        assert mesh.orig(e3) == c
        assert mesh.dest(e3) == a

        assert ring(mesh, e1, mesh.lnext) == [e1, e2, e3]
        assert ring(mesh, sym(e1), mesh.lnext) == [sym(e1), sym(e3), sym(e2)]
        assert mesh.lprev(e1) == e3


class TestMeshOperations:
    """Test swap and remove on a triangulated mesh."""

    def test_insertions_keep_rings_closed(self):
        engine = Delaunay().triangulate([(0, 0), (10, 0), (10, 10), (0, 10), (5, 5), (3, 7)])
        assert_mesh_consistent(engine)

    def test_swap_connects_opposite_apexes(self):
        engine = Delaunay().triangulate([(0, 0), (10, 0), (10, 10), (0, 10)])
        mesh = engine.mesh
        real = {Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)}

        diagonal = next(e for e in mesh.edges()
                        if {mesh.orig(e), mesh.dest(e)} in ({Point(0, 0), Point(10, 10)},
                                                           {Point(10, 0), Point(0, 10)}))
        before = {mesh.orig(diagonal), mesh.dest(diagonal)}
        apexes = {mesh.dest(mesh.oprev(diagonal)), mesh.dest(mesh.lnext(diagonal))}
        assert apexes <= real and not apexes & before

        mesh.swap(diagonal)
        assert {mesh.orig(diagonal), mesh.dest(diagonal)} == apexes
        assert engine.triangle_count == 2
        assert_mesh_consistent(engine)

    def test_remove_retires_quad(self):
        mesh = QuadEdgeMesh()
        a = mesh.make_edge(Point(0, 0), Point(1, 0))
        b = mesh.make_edge(Point(0, 0), Point(0, 1))
        mesh.splice(a, b)

        mesh.remove(b)
        assert mesh.onext(a) == a
        assert not mesh.is_alive(b)
        assert list(mesh.edges()) == [a]
        assert len(mesh) == 1

    def test_point_at_right(self):
        mesh = QuadEdgeMesh()
        e = mesh.make_edge(Point(0, 0), Point(10, 0))
        assert mesh.point_at_right(e, Point(5, -1))
        assert not mesh.point_at_right(e, Point(5, 1))
        assert not mesh.point_at_right(e, Point(5, 0))
        assert mesh.has_point(e, Point(5, 0))
        assert not mesh.has_point(e, Point(5, 1))
