"""
Type Definitions for Coordinate Frames and Planar Geometry.

This module defines the frame enumeration and the type aliases shared by
the transform, distance and polygon modules.

Conventions
-----------
- Every point is ``(longitude, latitude)`` in signed decimal DEGREES.
- Longitude comes first, matching the field order of ``Coordinate``.
- Nothing here range-checks or normalizes values.
"""

from enum import Enum
from typing import Sequence, Tuple, Union
import numpy as np
from numpy.typing import NDArray


class Frame(str, Enum):
    """Geographic reference frame of a coordinate.

    Members
    -------
    WGS84
        World Geodetic System 1984, as reported by GPS receivers.
    GCJ02
        The obfuscated "Mars" frame required for public maps in China.
    BD09
        Baidu's frame, a further polar-offset of GCJ-02.

    Examples
    --------
    >>> Frame.parse("gcj-02")
    <Frame.GCJ02: 'GCJ02'>
    """
    WGS84 = "WGS84"
    GCJ02 = "GCJ02"
    BD09 = "BD09"

    @classmethod
    def parse(cls, value: Union["Frame", str]) -> "Frame":
        """Resolve a frame from an enum member or a loosely written name.

        Parameters
        ----------
        value : Frame or str
            A ``Frame`` or a name such as ``"wgs84"``, ``"GCJ-02"``, ``"bd_09"``.

        Returns
        -------
        Frame
            The matching member.

        Raises
        ------
        ValueError
            If the name does not match any frame.
        """
        if isinstance(value, cls):
            return value
        key = str(value).upper().replace("-", "").replace("_", "").strip()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unknown coordinate frame {value!r}. "
                f"Expected one of {[f.value for f in cls]}"
            ) from None


# Type aliases
Point2D = Tuple[float, float]  # (longitude, latitude) in degrees
Segment = Tuple[Point2D, Point2D]
PointSequence = Sequence[Point2D]
PointArray = NDArray[np.float64]  # Shape: (N, 2), columns are longitude, latitude
