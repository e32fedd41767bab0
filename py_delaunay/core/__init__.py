"""
Core triangulation functionality.
"""

from .geometry import Point, BoundingBox, Triangle, Segment, SimpleEdge
from .errors import (TriangulationError, EmptyPointSetError,
                     PointOutsideBoundsError, DegenerateTriangulationError)
from .disjoint_set import DisjointSet
from .quad_edge import QuadEdgeMesh
from .delaunay import Delaunay
from .spanning_tree import kruskal, total_length

__all__ = ['Point', 'BoundingBox', 'Triangle', 'Segment', 'SimpleEdge',
           'TriangulationError', 'EmptyPointSetError', 'PointOutsideBoundsError',
           'DegenerateTriangulationError', 'DisjointSet', 'QuadEdgeMesh',
           'Delaunay', 'kruskal', 'total_length']
