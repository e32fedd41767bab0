#!/usr/bin/env python3
"""
Demo script showing triangulation and spanning tree extraction.
"""

import matplotlib.pyplot as plt

from py_delaunay.core import Delaunay, total_length
from py_delaunay.core.mesh_checks import circumcircle_violations
from py_delaunay.core.point_sets import jittered_grid
from py_delaunay.utils.logging_config import configure_logging


def plot(engine: Delaunay, tree, filename: str):
    """Draw the triangles in grey and the spanning tree on top."""
    fig, ax = plt.subplots(figsize=(8, 8))
    for a, b, c in engine.triangles():
        ax.fill([a.x, b.x, c.x], [a.y, b.y, c.y], facecolor="none", edgecolor="0.7", linewidth=0.5)
    for start, end in tree:
        ax.plot([start.x, end.x], [start.y, end.y], color="tab:red", linewidth=1.2)

    xs, ys = zip(*engine.vertices)
    ax.scatter(xs, ys, s=6, color="black", zorder=3)
    ax.set_aspect("equal")
    ax.set_title(f"{engine.triangle_count} triangles, spanning tree length {total_length(tree):.1f}")
    fig.savefig(filename, dpi=150, bbox_inches="tight")
    plt.close(fig)


def main():
    """Demonstrate triangulation of a jittered grid."""
    configure_logging("INFO", "console")

    print("Delaunay Triangulation Demo")
    print("=" * 40)

    width, height, spacing = 300, 300, 15
    points = jittered_grid(width, height, spacing, seed=42)
    print(f"\nGenerated {len(points)} jittered grid points")

    engine = Delaunay().triangulate(points, store_vertices=True)
    triangles = list(engine.triangles())
    print(f"Triangles: {len(triangles)}")
    print(f"Unique edges: {sum(1 for _ in engine.simple_edges(unique=True))}")

    violations = circumcircle_violations(triangles, points)
    print(f"Empty circumcircle violations: {len(violations)}")

    minimum = engine.kruskal()
    maximum = engine.kruskal(minimum=False)
    print(f"Minimum spanning tree: {len(minimum)} segments, length {total_length(minimum):.2f}")
    print(f"Maximum spanning tree: {len(maximum)} segments, length {total_length(maximum):.2f}")

    plot(engine, minimum, "triangulation_demo.png")
    print("\nSaved triangulation_demo.png")


if __name__ == "__main__":
    main()
