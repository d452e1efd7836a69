"""
ipify adapter - resolves the caller's public IP address.
"""

import logging

from src.iss_flyover.adapters.http_client import JsonHttpAdapter
from src.iss_flyover.exceptions import UpstreamParseError
from src.iss_flyover.ports.resolvers import IPResolver
from src.iss_flyover.schemas import IPAddress

logger = logging.getLogger(__name__)

RESOURCE = "IP"


class IpifyResolver(JsonHttpAdapter, IPResolver):
    """IP resolver backed by ``api.ipify.org`` (``{"ip": "..."}``)."""

    async def fetch_my_ip(self) -> IPAddress:
        data = await self._get_json(self._config.ip_url, RESOURCE)

        ip = data.get("ip") if isinstance(data, dict) else None
        if not isinstance(ip, str):
            logger.error("IP field missing from response: %r", data)
            raise UpstreamParseError(RESOURCE, "missing string field 'ip'")

        logger.debug("Resolved public IP %s", ip)
        return ip
