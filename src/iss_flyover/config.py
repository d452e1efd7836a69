"""
Configuration for the ISS flyover lookups.

Endpoints and transport settings live in one immutable dataclass so
callers can swap any of them (e.g. a self-hosted pass predictor)
without touching the adapters.
"""

from __future__ import annotations

import math
import os
import string
from dataclasses import dataclass
from typing import Mapping, Optional

from src.iss_flyover.exceptions import ConfigurationError

IPIFY_URL = "https://api.ipify.org/?format=json"
FREEGEOIP_URL_TEMPLATE = "https://freegeoip.app/json/{ip}"
ISS_PASS_URL = "https://iss-pass.herokuapp.com/json/"

# httpx's own default
DEFAULT_TIMEOUT_SECONDS = 5.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_timeout(name: str, raw: str) -> float:
    """
    Parse a timeout in seconds, which must be positive and finite.

    Raises:
        ConfigurationError: If ``raw`` is not such a number.
    """
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(name, raw, "a number of seconds") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(name, raw, "a positive, finite number of seconds")
    return timeout


def check_geolocation_template(name: str, template: str) -> str:
    """
    Check that ``template`` has exactly one placeholder, ``{ip}``.

    Raises:
        ConfigurationError: On a missing, foreign or malformed placeholder.
    """
    expected = "a URL containing the {ip} placeholder and no other"
    try:
        fields = {
            field
            for _, field, _, _ in string.Formatter().parse(template)
            if field is not None
        }
        template.format(ip="0.0.0.0")
    except (KeyError, IndexError, ValueError):
        raise ConfigurationError(name, template, expected) from None
    if fields != {"ip"}:
        raise ConfigurationError(name, template, expected)
    return template


@dataclass(frozen=True)
class FlyoverConfig:
    """
    Settings shared by the three resolvers.

    Attributes:
        ip_url: Endpoint returning ``{"ip": "..."}``.
        geolocation_url_template: Endpoint template with an ``{ip}`` placeholder.
        flyover_url: Pass prediction endpoint, queried with ``lat`` and ``lon``.
        timeout_seconds: Per-request transport timeout.
        check_geolocation_status: Reject non-200 geolocation responses.
            When False the body is parsed regardless of status.
    """

    ip_url: str = IPIFY_URL
    geolocation_url_template: str = FREEGEOIP_URL_TEMPLATE
    flyover_url: str = ISS_PASS_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    check_geolocation_status: bool = True

    def geolocation_url(self, ip: str) -> str:
        """Embed the IP address in the geolocation path as-is."""
        return self.geolocation_url_template.format(ip=ip)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> FlyoverConfig:
        """
        Build a config from ``ISS_FLYOVER_*`` environment variables.

        Unset variables keep their defaults.

        Raises:
            ConfigurationError: If a timeout, boolean or URL template is invalid.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        timeout = defaults.timeout_seconds
        raw_timeout = env.get("ISS_FLYOVER_TIMEOUT")
        if raw_timeout:
            timeout = parse_timeout("ISS_FLYOVER_TIMEOUT", raw_timeout)

        geolocation_template = defaults.geolocation_url_template
        raw_template = env.get("ISS_FLYOVER_GEOLOCATION_URL")
        if raw_template:
            geolocation_template = check_geolocation_template(
                "ISS_FLYOVER_GEOLOCATION_URL", raw_template
            )

        check_status = defaults.check_geolocation_status
        raw_check = env.get("ISS_FLYOVER_CHECK_GEOLOCATION_STATUS")
        if raw_check:
            normalized = raw_check.strip().lower()
            if normalized in _TRUE_VALUES:
                check_status = True
            elif normalized in _FALSE_VALUES:
                check_status = False
            else:
                raise ConfigurationError(
                    "ISS_FLYOVER_CHECK_GEOLOCATION_STATUS", raw_check, "a boolean"
                )

        return cls(
            ip_url=env.get("ISS_FLYOVER_IP_URL") or defaults.ip_url,
            geolocation_url_template=geolocation_template,
            flyover_url=env.get("ISS_FLYOVER_PASS_URL") or defaults.flyover_url,
            timeout_seconds=timeout,
            check_geolocation_status=check_status,
        )


DEFAULT_CONFIG = FlyoverConfig()
