import numpy as np
import pytest

from geospatial.region import in_china, in_china_batch, in_rectangle


@pytest.mark.parametrize("point, expected", [
    ((116.4, 39.9), True),     # Beijing
    ((121.0, 23.5), False),    # Taiwan, inside a mainland box but excluded
    ((160.0, 10.0), False),    # mid-Pacific
    ((121.4737, 31.2304), True),   # Shanghai
    ((87.6168, 43.8256), True),    # Urumqi
    ((2.3522, 48.8566), False),    # Paris
])
def test_in_china(point, expected):
    assert in_china(point) is expected


def test_rectangle_is_corner_order_independent():
    point = (1.0, 1.0)
    assert in_rectangle(point, (0.0, 0.0), (2.0, 2.0))
    assert in_rectangle(point, (2.0, 2.0), (0.0, 0.0))
    assert in_rectangle(point, (0.0, 2.0), (2.0, 0.0))


def test_rectangle_bounds_are_inclusive():
    assert in_rectangle((0.0, 0.0), (0.0, 0.0), (2.0, 2.0))
    assert in_rectangle((2.0, 1.0), (0.0, 0.0), (2.0, 2.0))
    assert not in_rectangle((2.0000001, 1.0), (0.0, 0.0), (2.0, 2.0))


def test_mainland_corner_is_inside():
    # Lower corner of the Hainan rectangle
    assert in_china((107.975793, 17.871542))


def test_batch_matches_scalar():
    points = np.array([
        (116.4, 39.9),
        (121.0, 23.5),
        (160.0, 10.0),
        (110.3312, 20.0310),
        (130.0, 50.0),
        (73.1246, 29.5297),
    ])
    expected = [in_china(tuple(p)) for p in points]
    assert in_china_batch(points).tolist() == expected


def test_batch_rejects_bad_shape():
    with pytest.raises(ValueError):
        in_china_batch(np.array([116.4, 39.9]))
