import numpy as np
import pytest

from geospatial.offset_model import coordinate_offset, coordinate_offset_batch


def test_offset_at_reference_centre():
    # At x = y = 0 every harmonic vanishes and only the constants remain
    d_lng, d_lat = coordinate_offset(0.0, 0.0)
    assert d_lng == pytest.approx(300.0)
    assert d_lat == pytest.approx(-100.0)


def test_offset_is_deterministic():
    assert coordinate_offset(11.3975, 4.9085) == coordinate_offset(11.3975, 4.9085)


def test_offset_handles_negative_x():
    d_lng, d_lat = coordinate_offset(-30.0, -10.0)
    assert np.isfinite(d_lng)
    assert np.isfinite(d_lat)


def test_batch_matches_scalar():
    x = np.array([11.3975, 16.4737, -17.3832, 0.0, -0.5])
    y = np.array([4.9085, -3.7696, 8.8256, 0.0, 12.25])

    d_lng, d_lat = coordinate_offset_batch(x, y)

    for i in range(len(x)):
        expected_lng, expected_lat = coordinate_offset(x[i], y[i])
        assert d_lng[i] == pytest.approx(expected_lng, rel=1e-12, abs=1e-9)
        assert d_lat[i] == pytest.approx(expected_lat, rel=1e-12, abs=1e-9)
