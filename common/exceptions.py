"""
Exceptions raised by the coordinate utilities.

Only input validation raises. The transforms and the planar geometry
functions are total over finite floats.
"""

from typing import Optional


class CoordinateError(ValueError):
    """Base class for coordinate-related errors."""
    pass


class InvalidCoordinate(CoordinateError):
    """Raised when a longitude or latitude lies outside its valid range.

    Attributes
    ----------
    value : float
        The offending value.
    axis : str
        ``"longitude"`` or ``"latitude"``.
    """

    def __init__(self, value: float, axis: str, message: Optional[str] = None):
        self.value = value
        self.axis = axis
        if message is None:
            message = f"{value} is not a valid {axis} value"
        super().__init__(message)
