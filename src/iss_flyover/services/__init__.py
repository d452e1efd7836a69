"""
Domain services for the ISS flyover lookups.
"""

from src.iss_flyover.services.flyover_service import FlyoverService, FlyoverStage

__all__ = ["FlyoverService", "FlyoverStage"]
