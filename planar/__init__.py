"""
Planar geometry helpers for vertex lists given in (longitude, latitude) order.

Coordinates are treated as plain 2D points; no projection is applied.
"""

from planar.segments import segments_intersect
from planar.polygon import can_coords_be_polygon, polygon_edges

__all__ = [
    "segments_intersect",
    "can_coords_be_polygon",
    "polygon_edges",
]
