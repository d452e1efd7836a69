"""
Module-level entry points.

Thin async functions over the adapters and the service for callers
that do not want to manage resolver objects. Each function accepts an
optional shared ``httpx.AsyncClient`` (left open) and config.

Example:
    >>> import asyncio
    >>> passes = asyncio.run(next_iss_times_for_my_location())
"""

from typing import List, Optional

import httpx

from src.iss_flyover.adapters import FreeGeoIPResolver, IpifyResolver, IssPassPredictor
from src.iss_flyover.config import FlyoverConfig
from src.iss_flyover.schemas import Coordinates, FlyoverWindow, IPAddress
from src.iss_flyover.services import FlyoverService


async def fetch_my_ip(
    client: Optional[httpx.AsyncClient] = None,
    config: Optional[FlyoverConfig] = None,
) -> IPAddress:
    """Return the caller's public IP address."""
    async with IpifyResolver(client=client, config=config) as resolver:
        return await resolver.fetch_my_ip()


async def fetch_coords_by_ip(
    ip: IPAddress,
    client: Optional[httpx.AsyncClient] = None,
    config: Optional[FlyoverConfig] = None,
) -> Coordinates:
    """Return the approximate coordinates of ``ip``."""
    async with FreeGeoIPResolver(client=client, config=config) as resolver:
        return await resolver.fetch_coords_by_ip(ip)


async def fetch_iss_flyover_times(
    coords: Coordinates,
    client: Optional[httpx.AsyncClient] = None,
    config: Optional[FlyoverConfig] = None,
) -> List[FlyoverWindow]:
    """Return upcoming ISS passes over ``coords``."""
    async with IssPassPredictor(client=client, config=config) as predictor:
        return await predictor.fetch_iss_flyover_times(coords)


async def next_iss_times_for_my_location(
    client: Optional[httpx.AsyncClient] = None,
    config: Optional[FlyoverConfig] = None,
) -> List[FlyoverWindow]:
    """
    Return upcoming ISS passes for the caller's current location.

    The first failing lookup's exception is raised unchanged.
    """
    async with FlyoverService.from_config(config=config, client=client) as service:
        return await service.next_iss_times_for_my_location()
