"""
Mainland China Region Classifier.

Decides whether a point lies in the area where map providers apply the
GCJ-02 offset. The area is approximated by six mainland rectangles minus six
exclusion rectangles (Taiwan and border areas of the far north, northeast and
southwest that are published without offset).

The frame transforms do NOT consult this predicate; they apply the offset
unconditionally. Callers that want the usual "leave foreign points alone"
behaviour must check ``in_china`` themselves.
"""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from common.types import Point2D, PointArray

Rectangle = Tuple[Point2D, Point2D]

# Each rectangle is a pair of opposite corners, not necessarily sorted
MAINLAND_RECTANGLES: Tuple[Rectangle, ...] = (
    ((79.4462, 49.2204), (96.33, 42.8899)),
    ((109.6872, 54.1415), (135.0002, 39.3742)),
    ((73.1246, 42.8899), (124.143255, 29.5297)),
    ((82.9684, 29.5297), (97.0352, 26.7186)),
    ((97.0253, 29.5297), (124.367395, 20.414096)),
    ((107.975793, 20.414096), (111.744104, 17.871542)),
)

EXCLUDED_RECTANGLES: Tuple[Rectangle, ...] = (
    ((119.921265, 25.398623), (122.497559, 21.785006)),  # Taiwan
    ((101.8652, 22.284), (106.665, 20.0988)),
    ((106.4525, 21.5422), (108.051, 20.4878)),
    ((109.0323, 55.8175), (119.127, 50.3257)),
    ((127.4568, 55.8175), (137.0227, 49.5574)),
    ((131.2662, 44.8922), (137.0227, 42.5692)),
)


def in_rectangle(point: Point2D, start: Point2D, end: Point2D) -> bool:
    """Test whether a point lies in the rectangle spanned by two corners.

    Bounds are inclusive and the corners may be given in any order.

    Parameters
    ----------
    point : Point2D
        (longitude, latitude) to test.
    start, end : Point2D
        Opposite corners of the rectangle.

    Returns
    -------
    bool
        True if the point is inside or on the boundary.
    """
    s_lng, s_lat = start
    e_lng, e_lat = end
    longitude, latitude = point
    return (
        min(s_lng, e_lng) <= longitude <= max(s_lng, e_lng)
        and min(s_lat, e_lat) <= latitude <= max(s_lat, e_lat)
    )


def in_china(point: Point2D) -> bool:
    """Test whether a point falls in the offset region of mainland China.

    Parameters
    ----------
    point : Point2D
        (longitude, latitude) in degrees.

    Returns
    -------
    bool
        True if the point is in a mainland rectangle and in no exclusion
        rectangle.

    Examples
    --------
    >>> in_china((116.4, 39.9))   # Beijing
    True
    >>> in_china((121.0, 23.5))   # Taiwan
    False
    """
    return (
        any(in_rectangle(point, start, end) for start, end in MAINLAND_RECTANGLES)
        and not any(in_rectangle(point, start, end) for start, end in EXCLUDED_RECTANGLES)
    )


def _in_any_rectangle(points: PointArray, rectangles: Tuple[Rectangle, ...]) -> NDArray[np.bool_]:
    """Row-wise membership of points in a union of rectangles."""
    corners = np.asarray(rectangles, dtype=np.float64)  # (R, 2 corners, 2 coords)
    lower = corners.min(axis=1)  # (R, 2)
    upper = corners.max(axis=1)
    inside = (points[:, None, :] >= lower[None]) & (points[:, None, :] <= upper[None])
    return inside.all(axis=2).any(axis=1)


def in_china_batch(points: PointArray) -> NDArray[np.bool_]:
    """Vectorized version of ``in_china``.

    Parameters
    ----------
    points : ndarray
        Array of shape (N, 2) with longitude and latitude columns.

    Returns
    -------
    ndarray
        Boolean array of shape (N,).

    Raises
    ------
    ValueError
        If ``points`` is not two-dimensional with two columns.
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) array of points, got shape {points.shape}")

    return (
        _in_any_rectangle(points, MAINLAND_RECTANGLES)
        & ~_in_any_rectangle(points, EXCLUDED_RECTANGLES)
    )
