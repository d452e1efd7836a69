"""
HTTP adapters implementing the resolver ports.
"""

from src.iss_flyover.adapters.freegeoip import FreeGeoIPResolver
from src.iss_flyover.adapters.http_client import JsonHttpAdapter
from src.iss_flyover.adapters.ipify import IpifyResolver
from src.iss_flyover.adapters.iss_pass import IssPassPredictor

__all__ = [
    "FreeGeoIPResolver",
    "IpifyResolver",
    "IssPassPredictor",
    "JsonHttpAdapter",
]
