"""Failures raised by the triangulation engine."""


class TriangulationError(Exception):
    """Base class for triangulation failures."""


class EmptyPointSetError(TriangulationError, ValueError):
    """Raised when a bounding box is requested for zero points."""


class PointOutsideBoundsError(TriangulationError, ValueError):
    """Raised when a point falls outside the mesh bounding box."""


class DegenerateTriangulationError(TriangulationError, RuntimeError):
    """Raised when point location or legalization fails to converge."""
