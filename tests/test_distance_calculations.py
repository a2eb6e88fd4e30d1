import math

import pytest

from common.exceptions import CoordinateError, InvalidCoordinate
from common.units import Q_, STANDARD_UNITS
from geospatial.distance_calculations import (
    geodesic_distance,
    get_distance,
    get_distance_quantity,
    validate_point,
)


def test_identical_points_are_zero_apart(beijing):
    assert get_distance(beijing, beijing) == 0.0


def test_one_degree_of_latitude_on_krasovsky_sphere():
    expected = 6378245.0 * math.pi / 180
    assert get_distance((0.0, 0.0), (0.0, 1.0)) == pytest.approx(expected, rel=1e-9)
    assert get_distance((0.0, 0.0), (0.0, 1.0)) == pytest.approx(111321.4, abs=1.0)


def test_distance_is_symmetric():
    a, b = (116.3975, 39.9085), (121.4737, 31.2304)
    assert get_distance(a, b) == pytest.approx(get_distance(b, a), rel=1e-12)


def test_beijing_to_shanghai():
    distance = get_distance((116.3975, 39.9085), (121.4737, 31.2304))
    assert 1_050_000 < distance < 1_090_000


def test_range_boundaries_are_accepted():
    assert get_distance((180.0, 0.0), (-179.5, 90.0)) > 0
    assert get_distance((-180.0, -90.0), (0.0, 0.0)) > 0


@pytest.mark.parametrize("point1, point2, value, axis", [
    ((200.0, 0.0), (0.0, 0.0), 200.0, "longitude"),
    ((0.0, 0.0), (-180.5, 0.0), -180.5, "longitude"),
    ((0.0, 91.0), (0.0, 0.0), 91.0, "latitude"),
    ((0.0, 0.0), (0.0, -95.0), -95.0, "latitude"),
    # First offender wins: longitude before latitude, point 1 before point 2
    ((200.0, 100.0), (300.0, 0.0), 200.0, "longitude"),
    ((0.0, 100.0), (300.0, 0.0), 100.0, "latitude"),
])
def test_invalid_coordinates_raise(point1, point2, value, axis):
    with pytest.raises(InvalidCoordinate) as excinfo:
        get_distance(point1, point2)
    assert excinfo.value.value == value
    assert excinfo.value.axis == axis
    assert str(value) in str(excinfo.value)


def test_invalid_coordinate_is_a_value_error():
    with pytest.raises(ValueError):
        validate_point((0.0, 120.0))
    assert issubclass(InvalidCoordinate, CoordinateError)


def test_distance_quantity_has_length_units():
    quantity = get_distance_quantity((0.0, 0.0), (0.0, 1.0))
    assert quantity.units == Q_(1, STANDARD_UNITS["distance"]).units
    assert quantity.to('km').magnitude == pytest.approx(111.3214, abs=1e-3)


def test_geodesic_distance_on_wgs84():
    # Meridian arc of the first degree of latitude
    assert geodesic_distance((0.0, 0.0), (0.0, 1.0)) == pytest.approx(110574.4, abs=1.0)


def test_geodesic_distance_validates():
    with pytest.raises(InvalidCoordinate):
        geodesic_distance((0.0, 0.0), (0.0, 90.5))
