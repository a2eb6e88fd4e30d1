"""
Geospatial Module for the WGS84 / GCJ-02 / BD-09 Coordinate Toolkit.

This module provides:
- The empirical GCJ-02 offset model
- Transforms between the three frames, pointwise and batched
- The mainland China region classifier
- The frame-tagged ``Coordinate`` value type
- Haversine and geodesic distance calculations
"""

from geospatial.offset_model import (
    coordinate_offset,
    coordinate_offset_batch,
)

from geospatial.region import (
    in_china,
    in_china_batch,
    in_rectangle,
)

from geospatial.frame_transforms import (
    wgs84_to_gcj02,
    gcj02_to_wgs84,
    bd09_to_gcj02,
    gcj02_to_bd09,
    bd09_to_wgs84,
    wgs84_to_bd09,
    TRANSFORMS,
    get_transform,
    convert,
    convert_batch,
)

from geospatial.distance_calculations import (
    get_distance,
    get_distance_quantity,
    geodesic_distance,
    validate_point,
)

from geospatial.coordinate_models import Coordinate

__all__ = [
    # Offset model
    "coordinate_offset",
    "coordinate_offset_batch",
    # Region
    "in_china",
    "in_china_batch",
    "in_rectangle",
    # Frame transforms
    "wgs84_to_gcj02",
    "gcj02_to_wgs84",
    "bd09_to_gcj02",
    "gcj02_to_bd09",
    "bd09_to_wgs84",
    "wgs84_to_bd09",
    "TRANSFORMS",
    "get_transform",
    "convert",
    "convert_batch",
    # Distance calculations
    "get_distance",
    "get_distance_quantity",
    "geodesic_distance",
    "validate_point",
    # Value types
    "Coordinate",
]
