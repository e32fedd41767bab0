"""Kruskal spanning-forest extraction over weighted edges."""

from typing import Hashable, Iterable, List

import structlog

from .disjoint_set import DisjointSet
from .geometry import Segment, SimpleEdge

logger = structlog.get_logger()


def kruskal(vertices: Iterable[Hashable], edges: Iterable[SimpleEdge],
            minimum: bool = True) -> List[Segment]:
    """
    Minimum (or maximum) spanning forest by Kruskal's algorithm.

    Edges are sorted by weight (stable, so ties keep input order) and
    accepted whenever their endpoints are still in different partitions.
    The result has V - C segments for V vertices in C components.

    Args:
        vertices: Every vertex the edges may reference
        edges: Weighted edges; duplicates are harmless
        minimum: False builds a maximum spanning forest instead

    Returns:
        Accepted edges as segments, in acceptance order
    """
    partition = DisjointSet(vertices)
    ordered = sorted(edges, key=lambda edge: edge.weight, reverse=not minimum)

    result = []
    for edge in ordered:
        if partition.union(edge.origin, edge.destination):
            result.append(Segment(edge.origin, edge.destination))

    logger.debug("Spanning forest built", vertices=len(partition),
                 candidate_edges=len(ordered), accepted=len(result), minimum=minimum)
    return result


def total_length(segments: Iterable[Segment]) -> float:
    """Sum of Euclidean segment lengths."""
    return sum(segment.length for segment in segments)
