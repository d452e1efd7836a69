"""
Flyover schemas.

A flyover window is one predicted ISS pass over a location. Windows are
kept in the order the predictor returns them.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FlyoverWindow(BaseModel):
    """
    Single ISS pass: rise time and how long it stays visible.

    Whole-number floats (``600.0``) are accepted; booleans, strings and
    fractional values are not.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    risetime: int = Field(description="Rise time in seconds since the epoch")
    duration: int = Field(description="Visibility duration in seconds")

    @field_validator("risetime", "duration", mode="before")
    @classmethod
    def _require_whole_number(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("expected an integer, got bool")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        raise ValueError(f"expected an integer, got {value!r}")


class FlyoverResponse(BaseModel):
    """Envelope returned by the pass prediction service."""

    model_config = ConfigDict(extra="ignore")

    response: List[FlyoverWindow]
