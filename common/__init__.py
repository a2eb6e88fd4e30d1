"""
Common utilities shared by the coordinate-frame and geometry packages.

This package provides foundational components:
- Geodetic constants with provenance
- The ``Frame`` enumeration and point type aliases
- Exceptions for invalid input
- Logging and configuration
- Unit registry
"""

from common.constants import GeoConstants, Constant
from common.types import Frame, Point2D, Segment, PointArray
from common.exceptions import CoordinateError, InvalidCoordinate
from common.config import LibraryConfig, load_config
from common.logging_config import get_logger, configure_logging
from common.units import ureg, Q_, STANDARD_UNITS, validate_units

__all__ = [
    "GeoConstants",
    "Constant",
    "Frame",
    "Point2D",
    "Segment",
    "PointArray",
    "CoordinateError",
    "InvalidCoordinate",
    "LibraryConfig",
    "load_config",
    "get_logger",
    "configure_logging",
    "ureg",
    "Q_",
    "STANDARD_UNITS",
    "validate_units",
]
