"""
Location schemas: the caller's IP address and its coordinates.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, FiniteFloat, field_validator

# Opaque token handed from the IP resolver to the geolocation resolver
IPAddress = str


class Coordinates(BaseModel):
    """
    Approximate position of an IP address.

    Only JSON numbers are accepted; booleans and numeric strings are
    rejected rather than coerced. No range validation is done here;
    out-of-range values are passed on to the pass predictor, which may
    reject them.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    latitude: FiniteFloat
    longitude: FiniteFloat

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _require_number(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected a number, got {type(value).__name__}")
        return value
