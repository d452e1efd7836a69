"""
ISS flyover lookups.

Chains three public JSON APIs (public IP, IP geolocation, ISS pass
prediction) to find the next ISS passes over the caller's location.
"""

from src.iss_flyover.api import (
    fetch_coords_by_ip,
    fetch_iss_flyover_times,
    fetch_my_ip,
    next_iss_times_for_my_location,
)
from src.iss_flyover.config import FlyoverConfig
from src.iss_flyover.exceptions import (
    ConfigurationError,
    ISSFlyoverError,
    UpstreamParseError,
    UpstreamStatusError,
)
from src.iss_flyover.schemas import Coordinates, FlyoverWindow, IPAddress
from src.iss_flyover.services import FlyoverService, FlyoverStage

__all__ = [
    "ConfigurationError",
    "Coordinates",
    "FlyoverConfig",
    "FlyoverService",
    "FlyoverStage",
    "FlyoverWindow",
    "IPAddress",
    "ISSFlyoverError",
    "UpstreamParseError",
    "UpstreamStatusError",
    "fetch_coords_by_ip",
    "fetch_iss_flyover_times",
    "fetch_my_ip",
    "next_iss_times_for_my_location",
]
