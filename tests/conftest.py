import pytest

from common.config import LibraryConfig
from common.logging_config import configure_logging


@pytest.fixture
def beijing():
    """WGS84 position of Tiananmen, Beijing."""
    return (116.3975, 39.9085)


@pytest.fixture
def china_points():
    """WGS84 points spread over the offset region."""
    return [
        (116.3975, 39.9085),   # Beijing
        (121.4737, 31.2304),   # Shanghai
        (113.2644, 23.1291),   # Guangzhou
        (104.0665, 30.5723),   # Chengdu
        (87.6168, 43.8256),    # Urumqi
        (126.6424, 45.7560),   # Harbin
        (110.3312, 20.0310),   # Haikou
    ]


@pytest.fixture
def restore_logging():
    """Put the default logging configuration back after a test."""
    yield
    configure_logging(LibraryConfig())
