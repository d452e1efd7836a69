"""
freegeoip adapter - maps an IP address to latitude/longitude.

The IP address is embedded in the request path without escaping, so
callers must pass a URL-safe string.
"""

import logging

from pydantic import ValidationError

from src.iss_flyover.adapters.http_client import JsonHttpAdapter
from src.iss_flyover.exceptions import UpstreamParseError
from src.iss_flyover.ports.resolvers import GeolocationResolver
from src.iss_flyover.schemas import Coordinates, IPAddress

logger = logging.getLogger(__name__)

RESOURCE = "coordinates"


class FreeGeoIPResolver(JsonHttpAdapter, GeolocationResolver):
    """
    Geolocation resolver backed by ``freegeoip.app``.

    The status check can be switched off with
    ``FlyoverConfig.check_geolocation_status``; the body must still
    carry both coordinates in that case.
    """

    async def fetch_coords_by_ip(self, ip: IPAddress) -> Coordinates:
        data = await self._get_json(
            self._config.geolocation_url(ip),
            RESOURCE,
            check_status=self._config.check_geolocation_status,
        )

        if not isinstance(data, dict):
            raise UpstreamParseError(RESOURCE, "expected a JSON object")

        try:
            coords = Coordinates.model_validate(data)
        except ValidationError as e:
            logger.error("Invalid coordinates for %s: %s", ip, e)
            raise UpstreamParseError(RESOURCE, str(e)) from e

        logger.debug("Resolved %s to (%s, %s)", ip, coords.latitude, coords.longitude)
        return coords
