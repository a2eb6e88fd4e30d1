import itertools

import numpy as np
import pytest

from common.types import Frame
from geospatial.frame_transforms import (
    TRANSFORMS,
    bd09_to_gcj02,
    bd09_to_wgs84,
    convert,
    convert_batch,
    gcj02_to_bd09,
    gcj02_to_wgs84,
    get_transform,
    wgs84_to_bd09,
    wgs84_to_gcj02,
)

# The inverses are approximate; residuals stay around a few meters
ROUND_TRIP_TOLERANCE_DEG = 1e-4


@pytest.mark.parametrize("transform, point, expected", [
    (wgs84_to_gcj02, (116.3975, 39.9085), (116.4037435471518, 39.90990349067184)),
    (gcj02_to_bd09, (116.4037435471518, 39.90990349067184), (116.41011673308975, 39.916242799885815)),
    (bd09_to_gcj02, (116.3975, 39.9085), (116.39110912918383, 39.90218973102947)),
    (wgs84_to_gcj02, (-74.0, 40.7), (-73.96149971333548, 40.69705957260743)),
])
def test_matches_reference_outputs(transform, point, expected):
    assert transform(point) == expected


def test_wgs84_to_gcj02_offset_near_beijing(beijing):
    lng, lat = wgs84_to_gcj02(beijing)
    assert 0.004 < lng - beijing[0] < 0.008
    assert 0.0005 < lat - beijing[1] < 0.003


def test_gcj02_to_bd09_adds_roughly_the_fixed_biases(beijing):
    gcj = wgs84_to_gcj02(beijing)
    bd = gcj02_to_bd09(gcj)
    assert 0.005 < bd[0] - gcj[0] < 0.008
    assert 0.005 < bd[1] - gcj[1] < 0.007


def test_round_trip_wgs84_gcj02_is_close_but_not_exact(beijing):
    back = gcj02_to_wgs84(wgs84_to_gcj02(beijing))
    assert back[0] == pytest.approx(beijing[0], abs=1e-6)
    assert back[1] == pytest.approx(beijing[1], abs=1e-6)
    assert back != beijing


def test_wgs84_to_bd09_is_composed_through_gcj02(china_points):
    for point in china_points:
        assert wgs84_to_bd09(point) == gcj02_to_bd09(wgs84_to_gcj02(point))


def test_bd09_to_wgs84_is_composed_through_gcj02(china_points):
    for point in china_points:
        bd = wgs84_to_bd09(point)
        assert bd09_to_wgs84(bd) == gcj02_to_wgs84(bd09_to_gcj02(bd))


@pytest.mark.parametrize("source, target", list(itertools.permutations(Frame, 2)))
def test_round_trip_between_every_frame_pair(china_points, source, target):
    for point in china_points:
        start = convert(point, Frame.WGS84, source)
        back = convert(convert(start, source, target), target, source)
        assert back[0] == pytest.approx(start[0], abs=ROUND_TRIP_TOLERANCE_DEG)
        assert back[1] == pytest.approx(start[1], abs=ROUND_TRIP_TOLERANCE_DEG)


def test_transforms_are_unconditional():
    pacific = (160.0, 10.0)
    shifted = wgs84_to_gcj02(pacific)
    assert shifted != pacific


def test_transforms_are_pure(beijing):
    assert wgs84_to_gcj02(beijing) == wgs84_to_gcj02(beijing)
    assert bd09_to_gcj02(beijing) == bd09_to_gcj02(beijing)


def test_transform_table_covers_six_directed_pairs():
    assert set(TRANSFORMS) == set(itertools.permutations(Frame, 2))


@pytest.mark.parametrize("frame", list(Frame))
def test_convert_same_frame_is_identity(beijing, frame):
    assert convert(beijing, frame, frame) == beijing


def test_convert_accepts_frame_names(beijing):
    assert convert(beijing, "wgs84", "bd-09") == wgs84_to_bd09(beijing)
    assert get_transform("GCJ02", "WGS84") is gcj02_to_wgs84


def test_convert_rejects_unknown_frame(beijing):
    with pytest.raises(ValueError):
        convert(beijing, "WGS84", "CGCS2000")


def test_convert_batch_matches_pointwise(china_points):
    points = np.array(china_points)
    result = convert_batch(points, Frame.WGS84, Frame.BD09)

    assert result.shape == points.shape
    assert result.dtype == np.float64
    for row, point in zip(result, china_points):
        assert tuple(row) == wgs84_to_bd09(point)


def test_convert_batch_rejects_bad_shape():
    with pytest.raises(ValueError, match=r"\(N, 2\)"):
        convert_batch(np.zeros((3, 3)), Frame.WGS84, Frame.GCJ02)
