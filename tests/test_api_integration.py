"""
Tests for the triangulation API endpoints.
"""

import math

import pytest
from fastapi.testclient import TestClient

from py_delaunay.api.main import app
from py_delaunay.core.errors import DegenerateTriangulationError

SQUARE = [[0, 0], [10, 0], [10, 10], [0, 10]]


class TestTriangulationAPI:
    """Test the triangulation and spanning tree endpoints."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_root(self):
        response = self.client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "running"
        assert data["version"] == "0.1.0"

    def test_health(self):
        response = self.client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_triangulate_square(self):
        response = self.client.post("/triangulate", json={"points": SQUARE})
        assert response.status_code == 200

        data = response.json()
        assert data["triangle_count"] == 2
        assert data["vertex_count"] == 4
        assert len(data["triangles"]) == 2
        corners = {tuple(p) for p in SQUARE}
        for triangle in data["triangles"]:
            assert {tuple(corner) for corner in triangle} <= corners

    def test_triangulate_with_margin(self):
        response = self.client.post("/triangulate",
                                    json={"points": SQUARE + [[5, 5]], "margin": 1000})
        assert response.status_code == 200
        assert response.json()["triangle_count"] == 4

    def test_spanning_tree(self):
        response = self.client.post("/spanning-tree", json={"points": SQUARE})
        assert response.status_code == 200

        data = response.json()
        assert len(data["segments"]) == 3
        assert data["total_length"] == pytest.approx(30)

    def test_maximum_spanning_tree(self):
        response = self.client.post("/spanning-tree", json={"points": SQUARE, "maximum": True})
        assert response.status_code == 200
        assert response.json()["total_length"] == pytest.approx(20 + 10 * math.sqrt(2))

    def test_spanning_tree_needs_three_points(self):
        response = self.client.post("/spanning-tree", json={"points": [[0, 0], [1, 1]]})
        assert response.status_code == 400

    def test_collinear_spanning_tree_is_empty(self):
        response = self.client.post("/spanning-tree", json={"points": [[0, 0], [1, 0], [2, 0]]})
        assert response.status_code == 200
        assert response.json() == {"segments": [], "total_length": 0}

    def test_empty_points_rejected(self):
        response = self.client.post("/triangulate", json={"points": []})
        assert response.status_code == 422

    def test_malformed_point_rejected(self):
        response = self.client.post("/triangulate", json={"points": [[0, 0, 0]]})
        assert response.status_code == 422

    def test_negative_margin_rejected(self):
        response = self.client.post("/triangulate", json={"points": SQUARE, "margin": -1})
        assert response.status_code == 422

    def test_degenerate_failure_maps_to_422(self, monkeypatch):
        def fail(self, points, store_vertices=False):
            raise DegenerateTriangulationError("walk did not converge")

        monkeypatch.setattr("py_delaunay.api.main.Delaunay.triangulate", fail)
        response = self.client.post("/triangulate", json={"points": SQUARE})
        assert response.status_code == 422
        assert "walk did not converge" in response.json()["detail"]
