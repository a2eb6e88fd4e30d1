"""
Great-Circle and Geodesic Distance Calculations.

``get_distance`` is the haversine formula on a sphere of radius 6378245 m
(the Krasovsky semi-major axis), the same radius the GCJ-02 model uses.
``geodesic_distance`` is the ellipsoidal WGS84 alternative for callers
that need survey accuracy.

Validation
----------
These are the only functions in the package that validate input. A
longitude with |lng| > 180 or a latitude with |lat| > 90 raises
``InvalidCoordinate`` before any computation. Values are checked in the
order lng1, lat1, lng2, lat2 and the first offender is reported.

References
----------
- Sinnott, R.W. (1984). Virtues of the Haversine. Sky and Telescope, 68(2), 159.
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
"""

import math
import pint
from pyproj import Geod

from common.constants import EARTH_RADIUS
from common.exceptions import InvalidCoordinate
from common.logging_config import get_logger
from common.types import Point2D
from common.units import Q_, STANDARD_UNITS, validate_units

logger = get_logger(__name__)

# Create the geodesic calculator for WGS84
_wgs84_geod = Geod(ellps='WGS84')


def _to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def validate_point(point: Point2D) -> None:
    """Check that a point has a valid longitude and latitude.

    Parameters
    ----------
    point : Point2D
        (longitude, latitude) in degrees.

    Raises
    ------
    InvalidCoordinate
        If |longitude| > 180 or |latitude| > 90. Longitude is checked first.
    """
    longitude, latitude = point
    if abs(longitude) > 180:
        logger.warning(f"Rejected longitude {longitude}")
        raise InvalidCoordinate(longitude, "longitude")
    if abs(latitude) > 90:
        logger.warning(f"Rejected latitude {latitude}")
        raise InvalidCoordinate(latitude, "latitude")


def get_distance(point1: Point2D, point2: Point2D) -> float:
    """Compute the haversine distance between two points.

    Parameters
    ----------
    point1, point2 : Point2D
        (longitude, latitude) in degrees.

    Returns
    -------
    float
        Distance in meters.

    Raises
    ------
    InvalidCoordinate
        If any longitude or latitude is out of range.

    Notes
    -----
    d = 2R · asin(sqrt(sin²(Δφ/2) + cos φ1 cos φ2 sin²(Δλ/2)))

    Examples
    --------
    >>> round(get_distance((0.0, 0.0), (0.0, 1.0)))
    111321
    """
    validate_point(point1)
    validate_point(point2)

    lng1, lat1 = point1
    lng2, lat2 = point2

    rad_lat1 = _to_radians(lat1)
    rad_lat2 = _to_radians(lat2)
    delta_lat = rad_lat1 - rad_lat2
    delta_lng = _to_radians(lng1) - _to_radians(lng2)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(rad_lat1) * math.cos(rad_lat2) * math.sin(delta_lng / 2) ** 2
    )
    return 2 * math.asin(math.sqrt(a)) * EARTH_RADIUS


@validate_units({'return': STANDARD_UNITS["distance"]})
def get_distance_quantity(point1: Point2D, point2: Point2D) -> pint.Quantity:
    """Haversine distance as a pint Quantity in meters.

    Parameters
    ----------
    point1, point2 : Point2D
        (longitude, latitude) in degrees.

    Returns
    -------
    pint.Quantity
        Distance with units, e.g. ``.to('km')`` for kilometers.
    """
    return Q_(get_distance(point1, point2), STANDARD_UNITS["distance"])


def geodesic_distance(point1: Point2D, point2: Point2D) -> float:
    """Compute the geodesic distance on the WGS84 ellipsoid.

    Parameters
    ----------
    point1, point2 : Point2D
        WGS84 (longitude, latitude) in degrees.

    Returns
    -------
    float
        Distance in meters.

    Raises
    ------
    InvalidCoordinate
        If any longitude or latitude is out of range.

    Notes
    -----
    Wraps ``pyproj.Geod.inv``, which implements Karney's algorithm.
    """
    validate_point(point1)
    validate_point(point2)

    _, _, distance_m = _wgs84_geod.inv(point1[0], point1[1], point2[0], point2[1])
    return float(distance_m)
