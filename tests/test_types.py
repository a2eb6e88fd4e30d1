import pytest

from common.types import Frame


def test_exactly_three_frames():
    assert {f.value for f in Frame} == {"WGS84", "GCJ02", "BD09"}


@pytest.mark.parametrize("name, expected", [
    ("WGS84", Frame.WGS84),
    ("wgs84", Frame.WGS84),
    ("gcj-02", Frame.GCJ02),
    ("GCJ_02", Frame.GCJ02),
    (" bd09 ", Frame.BD09),
    (Frame.BD09, Frame.BD09),
])
def test_parse_accepts_loose_names(name, expected):
    assert Frame.parse(name) is expected


def test_parse_rejects_unknown_frame():
    with pytest.raises(ValueError, match="Unknown coordinate frame"):
        Frame.parse("ETRS89")
