"""
Schemas for the ISS flyover lookups.

Records are parsed from upstream JSON at the adapter boundary and are
immutable afterwards.
"""

from src.iss_flyover.schemas.flyover import FlyoverResponse, FlyoverWindow
from src.iss_flyover.schemas.location import Coordinates, IPAddress

__all__ = [
    "Coordinates",
    "FlyoverResponse",
    "FlyoverWindow",
    "IPAddress",
]
