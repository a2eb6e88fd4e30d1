"""
Coordinate Value Type Tagged With Its Frame.

A ``Coordinate`` couples a longitude/latitude pair with the frame it is
expressed in, so that conversions cannot be applied twice or in the wrong
direction by accident.
"""

from dataclasses import dataclass
from typing import Union

from common.types import Frame, Point2D
from geospatial.distance_calculations import get_distance
from geospatial.frame_transforms import get_transform
from geospatial.region import in_china


@dataclass(frozen=True)
class Coordinate:
    """A point on Earth in one of the three supported frames.

    Attributes
    ----------
    frame : Frame
        Frame the values are expressed in.
    longitude : float
        Longitude in DEGREES. Not normalized or range-checked.
    latitude : float
        Latitude in DEGREES. Not range-checked.

    Notes
    -----
    Instances are immutable; every conversion returns a new ``Coordinate``.

    Examples
    --------
    >>> gps = Coordinate(Frame.WGS84, 116.3975, 39.9085)
    >>> gps.to_bd09().frame
    <Frame.BD09: 'BD09'>
    """
    frame: Frame
    longitude: float
    latitude: float

    def __post_init__(self):
        """Normalize frame names given as strings."""
        object.__setattr__(self, "frame", Frame.parse(self.frame))

    @classmethod
    def from_tuple(cls, frame: Union[Frame, str], point: Point2D) -> 'Coordinate':
        """Create a coordinate from a (longitude, latitude) pair.

        Parameters
        ----------
        frame : Frame or str
            Frame of the point.
        point : Point2D
            (longitude, latitude) in degrees.

        Returns
        -------
        Coordinate
        """
        longitude, latitude = point
        return cls(Frame.parse(frame), longitude, latitude)

    def as_tuple(self) -> Point2D:
        """Return (longitude, latitude)."""
        return self.longitude, self.latitude

    def to(self, target: Union[Frame, str]) -> 'Coordinate':
        """Convert to another frame.

        Parameters
        ----------
        target : Frame or str
            Frame to convert into.

        Returns
        -------
        Coordinate
            New coordinate tagged with ``target``. An equal copy when
            ``target`` is this coordinate's frame.
        """
        target = Frame.parse(target)
        longitude, latitude = get_transform(self.frame, target)(self.as_tuple())
        return Coordinate(target, longitude, latitude)

    def to_wgs84(self) -> 'Coordinate':
        """Convert to WGS84."""
        return self.to(Frame.WGS84)

    def to_gcj02(self) -> 'Coordinate':
        """Convert to GCJ-02."""
        return self.to(Frame.GCJ02)

    def to_bd09(self) -> 'Coordinate':
        """Convert to BD-09."""
        return self.to(Frame.BD09)

    def in_china(self) -> bool:
        """Whether the raw longitude/latitude fall in the offset region."""
        return in_china(self.as_tuple())

    def distance_to(self, other: 'Coordinate') -> float:
        """Haversine distance in meters to another coordinate.

        ``other`` is first converted into this coordinate's frame.

        Raises
        ------
        InvalidCoordinate
            If either point is out of range.
        """
        return get_distance(self.as_tuple(), other.to(self.frame).as_tuple())
