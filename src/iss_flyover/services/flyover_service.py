"""
Flyover Service - chains the three resolvers into one lookup.

Resolves the caller's IP, geolocates it, then asks for the ISS passes
over those coordinates. Stages run strictly one after another and the
first failure ends the lookup with that stage's own exception.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import TracebackType
from typing import List, Optional, Type

import httpx

from src.iss_flyover.adapters import FreeGeoIPResolver, IpifyResolver, IssPassPredictor
from src.iss_flyover.config import FlyoverConfig
from src.iss_flyover.ports import FlyoverPredictor, GeolocationResolver, IPResolver
from src.iss_flyover.schemas import FlyoverWindow

logger = logging.getLogger(__name__)


class FlyoverStage(Enum):
    """Progress of a single orchestrated lookup."""

    RESOLVING_IP = "resolving_ip"
    RESOLVING_COORDINATES = "resolving_coordinates"
    RESOLVING_FLYOVERS = "resolving_flyovers"
    DONE = "done"
    FAILED = "failed"


class FlyoverService:
    """
    Orchestrates IP -> coordinates -> flyovers.

    Holds no per-lookup state, so one instance can serve concurrent
    lookups.

    Attributes:
        _ip_resolver: Looks up the caller's public IP.
        _geolocation_resolver: Maps the IP to coordinates.
        _flyover_predictor: Predicts passes over the coordinates.
    """

    def __init__(
        self,
        ip_resolver: IPResolver,
        geolocation_resolver: GeolocationResolver,
        flyover_predictor: FlyoverPredictor,
    ) -> None:
        self._ip_resolver = ip_resolver
        self._geolocation_resolver = geolocation_resolver
        self._flyover_predictor = flyover_predictor

    @classmethod
    def from_config(
        cls,
        config: Optional[FlyoverConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> FlyoverService:
        """
        Build a service wired to the HTTP adapters.

        Args:
            config: Endpoint settings. If None, uses defaults.
            client: Shared async client. If None, each adapter creates its own.
        """
        return cls(
            IpifyResolver(client=client, config=config),
            FreeGeoIPResolver(client=client, config=config),
            IssPassPredictor(client=client, config=config),
        )

    async def close(self) -> None:
        """
        Close any HTTP clients owned by the resolvers.

        Every resolver is closed even if an earlier one fails; the first
        failure is re-raised afterwards.
        """
        errors: List[Exception] = []
        for resolver in (
            self._ip_resolver,
            self._geolocation_resolver,
            self._flyover_predictor,
        ):
            close = getattr(resolver, "close", None)
            if close is None:
                continue
            try:
                await close()
            except Exception as e:
                logger.error("Failed to close %s: %s", type(resolver).__name__, e)
                errors.append(e)

        if errors:
            raise errors[0]

    async def __aenter__(self) -> FlyoverService:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def next_iss_times_for_my_location(self) -> List[FlyoverWindow]:
        """
        Find the upcoming ISS passes for the caller's current location.

        Returns:
            Flyover windows exactly as the predictor returned them.

        Raises:
            Exception: Whatever the failing stage raised, unchanged. Later
                stages are not invoked.
        """
        stage = FlyoverStage.RESOLVING_IP
        try:
            ip = await self._ip_resolver.fetch_my_ip()

            stage = FlyoverStage.RESOLVING_COORDINATES
            logger.debug("Stage %s for %s", stage.value, ip)
            coords = await self._geolocation_resolver.fetch_coords_by_ip(ip)

            stage = FlyoverStage.RESOLVING_FLYOVERS
            logger.debug("Stage %s for (%s, %s)", stage.value, coords.latitude, coords.longitude)
            passes = await self._flyover_predictor.fetch_iss_flyover_times(coords)
        except Exception as e:
            logger.warning(
                "Flyover lookup %s while %s: %s",
                FlyoverStage.FAILED.value,
                stage.value,
                e,
            )
            raise

        logger.debug("Stage %s with %d passes", FlyoverStage.DONE.value, len(passes))
        return passes
