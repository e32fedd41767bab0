"""FastAPI main application."""

from typing import List, Optional, Tuple

import structlog
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ..config import settings
from ..core.delaunay import Delaunay
from ..core.errors import TriangulationError
from ..core.spanning_tree import total_length
from ..utils.logging_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Delaunay Triangulation API",
    description="Incremental quad-edge Delaunay triangulation and spanning trees",
    version="0.1.0"
)

Coordinate = Tuple[float, float]


# Request/Response models
class TriangulationRequest(BaseModel):
    """Points to triangulate."""

    points: List[Coordinate] = Field(..., min_length=1, max_length=settings.max_points,
                                     description="Input points as [x, y] pairs")
    margin: Optional[float] = Field(None, gt=0, description="Bounding box padding")


class TriangulationResponse(BaseModel):
    """Triangles of the Delaunay triangulation."""

    triangles: List[Tuple[Coordinate, Coordinate, Coordinate]]
    triangle_count: int
    vertex_count: int


class SpanningTreeRequest(TriangulationRequest):
    """Points to connect with a spanning tree."""

    maximum: bool = Field(False, description="Build a maximum instead of a minimum spanning tree")


class SpanningTreeResponse(BaseModel):
    """Spanning tree segments over the triangulation edges."""

    segments: List[Tuple[Coordinate, Coordinate]]
    total_length: float


def _triangulate(request: TriangulationRequest, store_vertices: bool = False) -> Delaunay:
    engine = Delaunay(margin=request.margin)
    try:
        return engine.triangulate(request.points, store_vertices=store_vertices)
    except TriangulationError as e:
        logger.error("Triangulation failed", error=str(e), points=len(request.points))
        raise HTTPException(status_code=422, detail=f"Triangulation failed: {e}")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Delaunay Triangulation API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/triangulate", response_model=TriangulationResponse)
def triangulate(request: TriangulationRequest):
    """Triangulate a point set."""
    logger.info("Triangulation requested", points=len(request.points), margin=request.margin)

    engine = _triangulate(request)
    triangles = [tuple(tuple(corner) for corner in triangle) for triangle in engine.triangles()]
    return TriangulationResponse(
        triangles=triangles,
        triangle_count=len(triangles),
        vertex_count=engine.vertex_count
    )


@app.post("/spanning-tree", response_model=SpanningTreeResponse)
def spanning_tree(request: SpanningTreeRequest):
    """
    Minimum (or maximum) spanning tree over the Delaunay edges.

    Candidate edges come from the emitted triangles only; all-collinear
    points produce no triangles and therefore an empty segment list.
    """
    logger.info("Spanning tree requested", points=len(request.points), maximum=request.maximum)

    engine = _triangulate(request, store_vertices=True)
    segments = engine.kruskal(minimum=not request.maximum)
    if segments is None:
        raise HTTPException(status_code=400, detail="At least 3 points are required for a spanning tree")

    return SpanningTreeResponse(
        segments=[(tuple(s.start), tuple(s.end)) for s in segments],
        total_length=total_length(segments)
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
