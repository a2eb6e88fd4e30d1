"""
Transforms Between the WGS84, GCJ-02 and BD-09 Frames.

Four pairwise transforms are defined directly:

- WGS84 -> GCJ-02: add the scaled empirical offset.
- GCJ-02 -> WGS84: subtract the offset evaluated at the GCJ-02 point.
- BD-09 -> GCJ-02: remove the fixed biases, then undo the polar correction.
- GCJ-02 -> BD-09: apply the polar correction, then add the fixed biases.

WGS84 <-> BD-09 are always composed through GCJ-02.

Accuracy
--------
Neither inverse is exact. GCJ-02 -> WGS84 evaluates the offset at the wrong
point, leaving a residual of up to a few meters; BD-09 -> GCJ-02 mirrors the
forward corrections without inverting them. This matches the reference
transform family and must not be replaced by an iterative solver.

No transform validates or clamps its input, and none consults
``region.in_china``.
"""

import math
from typing import Callable, Dict, Tuple, Union
import numpy as np

from common.constants import EARTH_RADIUS, EE, PI, X_PI, GeoConstants
from common.logging_config import get_logger
from common.types import Frame, Point2D, PointArray
from geospatial.offset_model import coordinate_offset

logger = get_logger(__name__)

_ORIGIN_LNG = GeoConstants.OFFSET_ORIGIN_LONGITUDE.value
_ORIGIN_LAT = GeoConstants.OFFSET_ORIGIN_LATITUDE.value
_BD_LNG_BIAS = GeoConstants.BD_LONGITUDE_BIAS.value
_BD_LAT_BIAS = GeoConstants.BD_LATITUDE_BIAS.value


def _scaled_offset(longitude: float, latitude: float) -> Tuple[float, float]:
    """Offset in degrees at a point, scaled by the Krasovsky radii of curvature.

    Parameters
    ----------
    longitude, latitude : float
        Point at which the offset and the Jacobian are evaluated, in degrees.

    Returns
    -------
    Tuple[float, float]
        (d_lng, d_lat) in degrees.

    Notes
    -----
    magic = 1 - e² sin²φ
    d_lng *= 180 / (a / sqrt(magic) · cos φ · π)     (prime vertical)
    d_lat *= 180 / (a (1 - e²) / magic^(3/2) · π)   (meridian)
    """
    d_lng, d_lat = coordinate_offset(longitude - _ORIGIN_LNG, latitude - _ORIGIN_LAT)
    rad_lat = latitude / 180.0 * PI
    magic = math.sin(rad_lat)
    magic = 1 - EE * magic * magic
    sqrt_magic = math.sqrt(magic)
    d_lng = (d_lng * 180.0) / (EARTH_RADIUS / sqrt_magic * math.cos(rad_lat) * PI)
    d_lat = (d_lat * 180.0) / ((EARTH_RADIUS * (1 - EE)) / (magic * sqrt_magic) * PI)
    return d_lng, d_lat


def wgs84_to_gcj02(point: Point2D) -> Point2D:
    """Convert a WGS84 point to GCJ-02.

    Parameters
    ----------
    point : Point2D
        WGS84 (longitude, latitude) in degrees.

    Returns
    -------
    Point2D
        GCJ-02 (longitude, latitude) in degrees.

    Examples
    --------
    >>> lng, lat = wgs84_to_gcj02((116.3975, 39.9085))
    >>> round(lng - 116.3975, 3), round(lat - 39.9085, 3)
    (0.006, 0.001)
    """
    longitude, latitude = point
    d_lng, d_lat = _scaled_offset(longitude, latitude)
    return longitude + d_lng, latitude + d_lat


def gcj02_to_wgs84(point: Point2D) -> Point2D:
    """Convert a GCJ-02 point to WGS84 (approximate inverse).

    The offset is evaluated at the GCJ-02 point rather than the unknown
    WGS84 point and then subtracted.

    Parameters
    ----------
    point : Point2D
        GCJ-02 (longitude, latitude) in degrees.

    Returns
    -------
    Point2D
        WGS84 (longitude, latitude) in degrees.
    """
    longitude, latitude = point
    d_lng, d_lat = _scaled_offset(longitude, latitude)
    return longitude - d_lng, latitude - d_lat


def bd09_to_gcj02(point: Point2D) -> Point2D:
    """Convert a BD-09 point to GCJ-02.

    Parameters
    ----------
    point : Point2D
        BD-09 (longitude, latitude) in degrees.

    Returns
    -------
    Point2D
        GCJ-02 (longitude, latitude) in degrees.
    """
    bd_lng, bd_lat = point
    x = bd_lng - _BD_LNG_BIAS
    y = bd_lat - _BD_LAT_BIAS
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * X_PI)
    return z * math.cos(theta), z * math.sin(theta)


def gcj02_to_bd09(point: Point2D) -> Point2D:
    """Convert a GCJ-02 point to BD-09.

    Parameters
    ----------
    point : Point2D
        GCJ-02 (longitude, latitude) in degrees.

    Returns
    -------
    Point2D
        BD-09 (longitude, latitude) in degrees.
    """
    gcj_lng, gcj_lat = point
    z = math.sqrt(gcj_lng * gcj_lng + gcj_lat * gcj_lat) + 0.00002 * math.sin(gcj_lat * X_PI)
    theta = math.atan2(gcj_lat, gcj_lng) + 0.000003 * math.cos(gcj_lng * X_PI)
    return z * math.cos(theta) + _BD_LNG_BIAS, z * math.sin(theta) + _BD_LAT_BIAS


def bd09_to_wgs84(point: Point2D) -> Point2D:
    """Convert a BD-09 point to WGS84 through GCJ-02."""
    return gcj02_to_wgs84(bd09_to_gcj02(point))


def wgs84_to_bd09(point: Point2D) -> Point2D:
    """Convert a WGS84 point to BD-09 through GCJ-02."""
    return gcj02_to_bd09(wgs84_to_gcj02(point))


# The six directed conversions; same-frame pairs are handled by ``convert``
TRANSFORMS: Dict[Tuple[Frame, Frame], Callable[[Point2D], Point2D]] = {
    (Frame.WGS84, Frame.GCJ02): wgs84_to_gcj02,
    (Frame.WGS84, Frame.BD09): wgs84_to_bd09,
    (Frame.GCJ02, Frame.WGS84): gcj02_to_wgs84,
    (Frame.GCJ02, Frame.BD09): gcj02_to_bd09,
    (Frame.BD09, Frame.WGS84): bd09_to_wgs84,
    (Frame.BD09, Frame.GCJ02): bd09_to_gcj02,
}


def get_transform(
    source: Union[Frame, str],
    target: Union[Frame, str]
) -> Callable[[Point2D], Point2D]:
    """Look up the function converting ``source`` points to ``target``.

    Parameters
    ----------
    source, target : Frame or str
        Frames, given as members or names.

    Returns
    -------
    Callable[[Point2D], Point2D]
        The transform. For identical frames, a function returning its input
        as a tuple.
    """
    source = Frame.parse(source)
    target = Frame.parse(target)
    if source is target:
        return _identity
    return TRANSFORMS[(source, target)]


def _identity(point: Point2D) -> Point2D:
    longitude, latitude = point
    return longitude, latitude


def convert(
    point: Point2D,
    source: Union[Frame, str],
    target: Union[Frame, str]
) -> Point2D:
    """Convert a point between any two frames.

    Parameters
    ----------
    point : Point2D
        (longitude, latitude) in the ``source`` frame.
    source, target : Frame or str
        Frames, given as members or names such as ``"wgs84"``.

    Returns
    -------
    Point2D
        (longitude, latitude) in the ``target`` frame. Unchanged when the
        frames are equal.

    Raises
    ------
    ValueError
        If either frame name is unknown.
    """
    return get_transform(source, target)(point)


def convert_batch(
    points: PointArray,
    source: Union[Frame, str],
    target: Union[Frame, str]
) -> PointArray:
    """Convert an array of points between two frames.

    Each row goes through the scalar transform so that results are identical
    to calling ``convert`` point by point.

    Parameters
    ----------
    points : ndarray
        Array of shape (N, 2) with longitude and latitude columns.
    source, target : Frame or str
        Frames, given as members or names.

    Returns
    -------
    ndarray
        Float64 array of shape (N, 2) in the target frame.

    Raises
    ------
    ValueError
        If ``points`` is not (N, 2) or a frame name is unknown.
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) array of points, got shape {points.shape}")

    source = Frame.parse(source)
    target = Frame.parse(target)
    transform = get_transform(source, target)
    logger.debug(f"Converting {len(points)} points {source.value} -> {target.value}")

    result = np.empty_like(points)
    for i, (longitude, latitude) in enumerate(points):
        result[i] = transform((float(longitude), float(latitude)))
    return result
