"""
Quad-edge topology (Guibas & Stolfi, 1985) stored as an index arena.

Every call to make_edge allocates one quad: four consecutive slots holding
an edge e, its dual rot(e), the reversed edge sym(e) and the reversed dual
rot_sym(e). An edge reference is just the slot index, so the rotation
operators are arithmetic on the low two bits and onext is the only stored
link. Only primal slots (rotation 0 and 2) carry an origin point.
"""

from typing import Iterator, List, Optional

from .geometry import Point
from .predicates import is_ccw, on_line


def rot(e: int) -> int:
    """Dual edge, rotated 90 degrees counter-clockwise."""
    return (e & ~3) | ((e + 1) & 3)


def sym(e: int) -> int:
    """Same edge, opposite direction."""
    return e ^ 2


def rot_sym(e: int) -> int:
    """Dual edge, rotated 90 degrees clockwise."""
    return (e & ~3) | ((e + 3) & 3)


class QuadEdgeMesh:
    """Arena of quad-edges with the four topology-mutating operators."""

    def __init__(self):
        self._orig: List[Optional[Point]] = []
        self._onext: List[int] = []
        self._marked = bytearray()
        self._alive: List[bool] = []
        self._live = 0

    def __len__(self) -> int:
        """Number of live quads."""
        return self._live

    # Navigation

    def orig(self, e: int) -> Optional[Point]:
        return self._orig[e]

    def dest(self, e: int) -> Optional[Point]:
        return self._orig[e ^ 2]

    def onext(self, e: int) -> int:
        return self._onext[e]

    def oprev(self, e: int) -> int:
        return rot(self._onext[rot(e)])

    def dprev(self, e: int) -> int:
        return rot_sym(self._onext[rot_sym(e)])

    def lnext(self, e: int) -> int:
        return rot(self._onext[rot_sym(e)])

    def lprev(self, e: int) -> int:
        return self._onext[e] ^ 2

    def is_alive(self, e: int) -> bool:
        return self._alive[e >> 2]

    def edges(self) -> Iterator[int]:
        """Live primal edges in allocation order."""
        for quad, alive in enumerate(self._alive):
            if alive:
                yield quad << 2

    # Marks

    @property
    def marked(self) -> bytearray:
        return self._marked

    def mark(self, e: int) -> None:
        self._marked[e] = 1

    def unmark(self, e: int) -> None:
        self._marked[e] = 0

    def is_marked(self, e: int) -> bool:
        return self._marked[e] == 1

    # Topology

    def make_edge(self, orig: Point, dest: Point) -> int:
        """Allocate an isolated edge orig -> dest and return it."""
        e = len(self._orig)
        self._orig.extend((orig, None, dest, None))
        self._onext.extend((e, e + 3, e + 2, e + 1))
        self._marked.extend(b"\x00\x00\x00\x00")
        self._alive.append(True)
        self._live += 1
        return e

    def set_orig(self, e: int, point: Point) -> None:
        self._orig[e] = point

    def splice(self, a: int, b: int) -> None:
        """
        Exchange the onext successors of a and b and of their duals.

        If a and b share an origin ring it is split in two, otherwise
        the two rings are merged; either way every ring stays closed.
        """
        onext = self._onext
        alpha = rot(onext[a])
        beta = rot(onext[b])

        t1 = onext[b]
        t2 = onext[a]
        t3 = onext[beta]
        t4 = onext[alpha]

        onext[a] = t1
        onext[b] = t2
        onext[alpha] = t3
        onext[beta] = t4

    def connect(self, a: int, b: int) -> int:
        """Add an edge from a.dest to b.orig inside the face left of a and b."""
        e = self.make_edge(self.dest(a), self._orig[b])
        self.splice(e, self.lnext(a))
        self.splice(e ^ 2, b)
        return e

    def swap(self, e: int) -> None:
        """Flip e to the other diagonal of the quadrilateral around it."""
        a = self.oprev(e)
        b = self.oprev(e ^ 2)

        self.splice(e, a)
        self.splice(e ^ 2, b)
        self.splice(e, self.lnext(a))
        self.splice(e ^ 2, self.lnext(b))
        self._orig[e] = self.dest(a)
        self._orig[e ^ 2] = self.dest(b)

    def remove(self, e: int) -> None:
        """Detach e from both endpoint rings and retire its quad."""
        self.splice(e, self.oprev(e))
        self.splice(e ^ 2, self.oprev(e ^ 2))
        self._alive[e >> 2] = False
        self._live -= 1

    # Predicates

    def has_point(self, e: int, point: Point) -> bool:
        """True if point is collinear with edge e."""
        return on_line(self._orig[e], self.dest(e), point)

    def point_at_right(self, e: int, point: Point) -> bool:
        """True if point lies strictly right of orig -> dest."""
        return is_ccw(point, self.dest(e), self._orig[e])
