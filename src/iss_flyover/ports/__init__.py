"""
Port interfaces for the ISS flyover lookups.

The orchestrator only depends on these ABCs; HTTP adapters implement
them in production and fakes implement them in tests.
"""

from src.iss_flyover.ports.resolvers import (
    FlyoverPredictor,
    GeolocationResolver,
    IPResolver,
)

__all__ = [
    "FlyoverPredictor",
    "GeolocationResolver",
    "IPResolver",
]
