"""Shared fixtures for the ISS flyover tests."""

import pytest

from src.iss_flyover.config import FlyoverConfig
from src.iss_flyover.schemas import Coordinates, FlyoverWindow


@pytest.fixture
def anyio_backend():
    """Use only asyncio backend (trio not installed)."""
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ISS_FLYOVER_* variables from the host out of the tests."""
    for name in (
        "ISS_FLYOVER_IP_URL",
        "ISS_FLYOVER_GEOLOCATION_URL",
        "ISS_FLYOVER_PASS_URL",
        "ISS_FLYOVER_TIMEOUT",
        "ISS_FLYOVER_CHECK_GEOLOCATION_STATUS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> FlyoverConfig:
    return FlyoverConfig()


@pytest.fixture
def sample_coords() -> Coordinates:
    """New York, roughly."""
    return Coordinates(latitude=40.7, longitude=-74.0)


@pytest.fixture
def sample_geo_response() -> dict:
    """freegeoip payload for 1.2.3.4."""
    return {
        "ip": "1.2.3.4",
        "country_code": "US",
        "country_name": "United States",
        "region_name": "New York",
        "city": "New York",
        "time_zone": "America/New_York",
        "latitude": 40.7,
        "longitude": -74.0,
        "metro_code": 501,
    }


@pytest.fixture
def sample_pass_response() -> dict:
    """iss-pass payload with two passes."""
    return {
        "message": "success",
        "request": {
            "altitude": 100,
            "datetime": 1599990000,
            "latitude": 40.7,
            "longitude": -74.0,
            "passes": 2,
        },
        "response": [
            {"risetime": 1600000000, "duration": 600},
            {"risetime": 1600050000, "duration": 540},
        ],
    }


@pytest.fixture
def sample_windows() -> list:
    return [
        FlyoverWindow(risetime=1600000000, duration=600),
        FlyoverWindow(risetime=1600050000, duration=540),
    ]
