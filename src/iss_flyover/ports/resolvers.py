"""
Resolver port interfaces.

Defines the abstract contracts for the three leaf lookups the
orchestrator chains together. Each resolver performs exactly one
external lookup and either returns its value or raises.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from src.iss_flyover.schemas import Coordinates, FlyoverWindow, IPAddress


class IPResolver(ABC):
    """
    Abstract interface for looking up the caller's public IP address.

    Implementations:
    - IpifyResolver: ipify JSON API
    """

    @abstractmethod
    async def fetch_my_ip(self) -> IPAddress:
        """
        Return the caller's public IP address.

        Raises:
            httpx.RequestError: Transport failure, unchanged.
            UpstreamStatusError: Non-200 response.
            UpstreamParseError: Body without a usable ``ip`` field.
        """
        ...


class GeolocationResolver(ABC):
    """
    Abstract interface for mapping an IP address to coordinates.

    Implementations:
    - FreeGeoIPResolver: freegeoip JSON API
    """

    @abstractmethod
    async def fetch_coords_by_ip(self, ip: IPAddress) -> Coordinates:
        """
        Return the approximate coordinates of ``ip``.

        Args:
            ip: URL-safe IP address string, embedded in the request path.

        Raises:
            httpx.RequestError: Transport failure, unchanged.
            UpstreamStatusError: Non-200 response (when status checks are on).
            UpstreamParseError: Body without finite latitude/longitude.
        """
        ...


class FlyoverPredictor(ABC):
    """
    Abstract interface for predicting ISS passes over a location.

    Implementations:
    - IssPassPredictor: iss-pass JSON API
    """

    @abstractmethod
    async def fetch_iss_flyover_times(self, coords: Coordinates) -> List[FlyoverWindow]:
        """
        Return upcoming passes over ``coords`` in upstream order.

        Raises:
            httpx.RequestError: Transport failure, unchanged.
            UpstreamStatusError: Non-200 response.
            UpstreamParseError: Body without a list of passes.
        """
        ...
