"""
Simple Polygon Check.

Decides whether an ordered vertex list closes into a simple polygon, i.e.
one whose edges only meet at the shared vertex of consecutive edges.

Algorithm
---------
Edge i joins vertex i to vertex (i + 1) mod n. Every pair of edges (i, j)
with j >= i + 2 is tested for intersection, except (0, n - 1): the first and
last edges share the closing vertex. Consecutive edges are never tested.
This is O(n²) and meant for tens to low hundreds of vertices.
"""

from typing import List

from common.logging_config import get_logger
from common.types import PointSequence, Segment
from planar.segments import segments_intersect

logger = get_logger(__name__)


def polygon_edges(vertices: PointSequence) -> List[Segment]:
    """Build the closed edge list of a vertex sequence.

    Parameters
    ----------
    vertices : sequence of Point2D
        Ordered polygon vertices, without repeating the first at the end.

    Returns
    -------
    List[Segment]
        n edges, the last one closing back to the first vertex.
    """
    n = len(vertices)
    return [(tuple(vertices[i]), tuple(vertices[(i + 1) % n])) for i in range(n)]


def can_coords_be_polygon(vertices: PointSequence) -> bool:
    """Check whether the vertices form a simple (non self-intersecting) polygon.

    Parameters
    ----------
    vertices : sequence of Point2D
        Ordered polygon vertices.

    Returns
    -------
    bool
        False for fewer than three vertices or when two non-adjacent edges
        intersect, True otherwise.

    Examples
    --------
    >>> can_coords_be_polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
    True
    >>> can_coords_be_polygon([(0, 0), (1, 1), (1, 0), (0, 1)])
    False
    """
    n = len(vertices)
    if n < 3:
        return False

    edges = polygon_edges(vertices)
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if segments_intersect(edges[i], edges[j]):
                logger.debug(f"Edges {i} and {j} intersect: {edges[i]} / {edges[j]}")
                return False

    return True
