"""
Empirical GCJ-02 Offset Model.

This module computes the raw offset between WGS84 and GCJ-02 coordinates.
The offset is a polynomial in the centred coordinates plus three series of
sine harmonics. Its coefficients were fitted empirically and are copied
verbatim from the reference transform; none of them can be derived.

The raw offset is expressed in meter-like units. ``frame_transforms`` scales
it into degrees with the Krasovsky radii of curvature.

Inputs
------
x = longitude - 105.0
y = latitude - 35.0
"""

import math
from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from common.constants import PI


def coordinate_offset(x: float, y: float) -> Tuple[float, float]:
    """Compute the raw (d_lng, d_lat) GCJ-02 offset.

    Parameters
    ----------
    x : float
        Longitude minus 105 degrees.
    y : float
        Latitude minus 35 degrees.

    Returns
    -------
    Tuple[float, float]
        (d_lng, d_lat) in the model's raw units.

    Notes
    -----
    ``math`` is used rather than numpy so that scalar results match other
    implementations of the model bit for bit.
    """
    d_lng = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    d_lng += (20.0 * math.sin(6.0 * x * PI) + 20.0 * math.sin(2.0 * x * PI)) * 2.0 / 3.0
    d_lng += (20.0 * math.sin(x * PI) + 40.0 * math.sin(x / 3.0 * PI)) * 2.0 / 3.0
    d_lng += (150.0 * math.sin(x / 12.0 * PI) + 300.0 * math.sin(x / 30.0 * PI)) * 2.0 / 3.0

    d_lat = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    d_lat += (20.0 * math.sin(6.0 * x * PI) + 20.0 * math.sin(2.0 * x * PI)) * 2.0 / 3.0
    d_lat += (20.0 * math.sin(y * PI) + 40.0 * math.sin(y / 3.0 * PI)) * 2.0 / 3.0
    d_lat += (160.0 * math.sin(y / 12.0 * PI) + 320 * math.sin(y * PI / 30.0)) * 2.0 / 3.0

    return d_lng, d_lat


def coordinate_offset_batch(
    x: NDArray[np.float64],
    y: NDArray[np.float64]
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Vectorized version of ``coordinate_offset``.

    Parameters
    ----------
    x, y : ndarray
        Centred longitudes and latitudes, broadcastable to a common shape.

    Returns
    -------
    Tuple[ndarray, ndarray]
        (d_lng, d_lat) arrays.

    Notes
    -----
    numpy's trigonometric kernels may differ from libm in the last bit, so
    results agree with the scalar function to floating tolerance only.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    # Harmonics of x shared by both series
    x_harmonics = (20.0 * np.sin(6.0 * x * PI) + 20.0 * np.sin(2.0 * x * PI)) * 2.0 / 3.0

    d_lng = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * np.sqrt(np.abs(x))
    d_lng = d_lng + x_harmonics
    d_lng = d_lng + (20.0 * np.sin(x * PI) + 40.0 * np.sin(x / 3.0 * PI)) * 2.0 / 3.0
    d_lng = d_lng + (150.0 * np.sin(x / 12.0 * PI) + 300.0 * np.sin(x / 30.0 * PI)) * 2.0 / 3.0

    d_lat = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * np.sqrt(np.abs(x))
    d_lat = d_lat + x_harmonics
    d_lat = d_lat + (20.0 * np.sin(y * PI) + 40.0 * np.sin(y / 3.0 * PI)) * 2.0 / 3.0
    d_lat = d_lat + (160.0 * np.sin(y / 12.0 * PI) + 320 * np.sin(y * PI / 30.0)) * 2.0 / 3.0

    return d_lng, d_lat
