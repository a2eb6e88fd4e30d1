"""
Geodetic Constants for the Mars-Frame Coordinate Transforms.

This module provides the constants used by the GCJ-02 and BD-09 offset
models and by the haversine distance calculation. Every constant is
recorded with its unit and provenance.

The values below are not the WGS84 parameters. The GCJ-02 offset model was
fitted against the Krasovsky 1940 ellipsoid, and the published transform
family uses long decimal literals for pi. They must be reproduced digit for
digit, otherwise outputs drift away from every other implementation of the
same de-facto standard.

References
----------
- Krasovsky 1940 ellipsoid: a = 6378245 m, e² = 0.00669342162296594323
- GCJ-02 / BD-09 reference transform family (public domain formulas)
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A constant with its unit and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    unit: str
    source: str
    description: str


class GeoConstants:
    """Registry of constants used by the frame transforms.

    Krasovsky Ellipsoid
    -------------------
    The GCJ-02 offset is scaled from meters into degrees with the radii of
    curvature of the Krasovsky ellipsoid, not WGS84.

    Pi Variants
    -----------
    ``PI`` is the long literal used by the offset model. ``X_PI`` is derived
    from a slightly different literal and is only used by the BD-09 polar
    corrections.
    """

    # =========================================================================
    # Krasovsky 1940 Ellipsoid
    # =========================================================================

    EARTH_RADIUS: Final[Constant] = Constant(
        value=6378245.0,
        unit="m",
        source="Krasovsky 1940",
        description="Semi-major axis used by the GCJ-02 model and haversine distance"
    )

    ECCENTRICITY_SQUARED: Final[Constant] = Constant(
        value=0.00669342162296594323,
        unit="dimensionless",
        source="Krasovsky 1940",
        description="First eccentricity squared: e² = (a² - b²) / a²"
    )

    # =========================================================================
    # Pi Variants
    # =========================================================================

    PI: Final[Constant] = Constant(
        value=3.1415926535897932384626,
        unit="rad",
        source="GCJ-02 reference transform",
        description="Long literal of pi used by the offset model"
    )

    X_PI: Final[Constant] = Constant(
        value=3.14159265358979324 * 3000.0 / 180.0,
        unit="rad/deg",
        source="BD-09 reference transform",
        description="Angular scale of the BD-09 periodic corrections"
    )

    # =========================================================================
    # Offset Model Reference Point
    # =========================================================================

    OFFSET_ORIGIN_LONGITUDE: Final[Constant] = Constant(
        value=105.0,
        unit="deg",
        source="GCJ-02 reference transform",
        description="Meridian the offset polynomial is centred on"
    )

    OFFSET_ORIGIN_LATITUDE: Final[Constant] = Constant(
        value=35.0,
        unit="deg",
        source="GCJ-02 reference transform",
        description="Parallel the offset polynomial is centred on"
    )

    # =========================================================================
    # BD-09 Fixed Biases
    # =========================================================================

    BD_LONGITUDE_BIAS: Final[Constant] = Constant(
        value=0.0065,
        unit="deg",
        source="BD-09 reference transform",
        description="Longitude shift added when going from GCJ-02 to BD-09"
    )

    BD_LATITUDE_BIAS: Final[Constant] = Constant(
        value=0.006,
        unit="deg",
        source="BD-09 reference transform",
        description="Latitude shift added when going from GCJ-02 to BD-09"
    )

    @staticmethod
    def as_dict() -> dict:
        """Return every registered constant keyed by name.

        Returns
        -------
        dict
            Mapping of attribute name to ``Constant``.
        """
        return {
            name: value
            for name, value in vars(GeoConstants).items()
            if isinstance(value, Constant)
        }


# Plain float aliases for the hot formulas
EARTH_RADIUS: Final[float] = GeoConstants.EARTH_RADIUS.value
EE: Final[float] = GeoConstants.ECCENTRICITY_SQUARED.value
PI: Final[float] = GeoConstants.PI.value
X_PI: Final[float] = GeoConstants.X_PI.value
