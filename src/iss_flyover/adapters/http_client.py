"""
Shared async HTTP plumbing for the resolver adapters.

Every adapter issues a single GET and reads a JSON body. Transport
errors raised by httpx propagate untouched; only status and body
problems are turned into package exceptions.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Dict, Optional, Type

import httpx

from src.iss_flyover.config import DEFAULT_CONFIG, FlyoverConfig
from src.iss_flyover.exceptions import UpstreamParseError, UpstreamStatusError

logger = logging.getLogger(__name__)


class JsonHttpAdapter:
    """
    Base class for adapters that fetch one JSON document per call.

    A client passed in by the caller is shared and never closed here;
    a client created lazily by the adapter is closed by ``close()``.

    Attributes:
        _config: Endpoint and timeout settings.
        _client: Async HTTP client (lazy-initialized when not injected).
        _owns_client: Whether ``close()`` should close ``_client``.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        config: Optional[FlyoverConfig] = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout_seconds),
                headers={"Accept": "application/json"},
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> JsonHttpAdapter:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def _get_json(
        self,
        url: str,
        resource: str,
        params: Optional[Dict[str, Any]] = None,
        check_status: bool = True,
    ) -> Any:
        """
        GET ``url`` and decode the JSON body.

        Args:
            url: Absolute URL to request.
            resource: Human-readable name of what is fetched, used in errors.
            params: Optional query parameters.
            check_status: Reject any status other than 200.

        Returns:
            Decoded JSON value.

        Raises:
            httpx.RequestError: Transport failure, propagated unchanged.
            UpstreamStatusError: If ``check_status`` and the status is not 200.
            UpstreamParseError: If the body is not valid JSON.
        """
        client = await self._get_client()
        logger.debug("Requesting %s for %s with params %s", url, resource, params)

        response = await client.get(
            url, params=params, timeout=self._config.timeout_seconds
        )

        if check_status and response.status_code != 200:
            logger.error(
                "Upstream error fetching %s: %d %s",
                resource,
                response.status_code,
                response.text[:200],
            )
            raise UpstreamStatusError(resource, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            logger.error("Invalid JSON response for %s: %s", resource, e)
            raise UpstreamParseError(resource, f"invalid JSON ({e})") from e
