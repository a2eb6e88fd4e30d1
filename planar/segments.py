"""
Segment Intersection Test.

Thin wrapper around shapely's GEOS predicates, which use robust orientation
tests and so are not fooled by floating-point round-off near collinearity.
"""

from shapely.geometry import LineString, Point
from shapely.geometry.base import BaseGeometry

from common.types import Segment


def _as_geometry(segment: Segment) -> BaseGeometry:
    """Shapely geometry for a segment; a zero-length segment becomes a Point."""
    start, end = segment
    if tuple(start) == tuple(end):
        return Point(start)
    return LineString(segment)


def segments_intersect(segment_a: Segment, segment_b: Segment) -> bool:
    """Test whether two line segments intersect.

    Parameters
    ----------
    segment_a, segment_b : Segment
        Each a pair of (x, y) endpoints.

    Returns
    -------
    bool
        True for a proper crossing, a shared endpoint, an endpoint touching
        the other segment, or a collinear overlap. A zero-length segment
        is treated as its single point.

    Examples
    --------
    >>> segments_intersect(((0, 0), (1, 1)), ((1, 0), (0, 1)))
    True
    >>> segments_intersect(((0, 0), (1, 0)), ((0, 1), (1, 1)))
    False
    """
    return bool(_as_geometry(segment_a).intersects(_as_geometry(segment_b)))
