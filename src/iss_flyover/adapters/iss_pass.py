"""
iss-pass adapter - predicts upcoming ISS passes over coordinates.
"""

import logging
from typing import List

from pydantic import ValidationError

from src.iss_flyover.adapters.http_client import JsonHttpAdapter
from src.iss_flyover.exceptions import UpstreamParseError
from src.iss_flyover.ports.resolvers import FlyoverPredictor
from src.iss_flyover.schemas import Coordinates, FlyoverResponse, FlyoverWindow

logger = logging.getLogger(__name__)

RESOURCE = "fly over times"


class IssPassPredictor(JsonHttpAdapter, FlyoverPredictor):
    """
    Flyover predictor backed by the iss-pass JSON API.

    Passes come back in the order the service lists them, without
    re-sorting or truncation.
    """

    async def fetch_iss_flyover_times(self, coords: Coordinates) -> List[FlyoverWindow]:
        data = await self._get_json(
            self._config.flyover_url,
            RESOURCE,
            params={"lat": coords.latitude, "lon": coords.longitude},
        )

        try:
            passes = FlyoverResponse.model_validate(data).response
        except ValidationError as e:
            logger.error("Invalid pass list for %s: %s", coords, e)
            raise UpstreamParseError(RESOURCE, str(e)) from e

        logger.debug("Received %d passes", len(passes))
        return passes
