"""
Pydantic model for flight data.

Flights come from the read-only catalog document and are never
modified by the API, so the model is frozen.
"""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from .common import ApiModel, as_utc


class Flight(ApiModel):
    """A scheduled flight in the catalog."""

    id: UUID
    number: str = Field(..., examples=["FL100"])
    origin: str = Field(..., examples=["JFK"])
    destination: str = Field(..., examples=["LAX"])
    departure_utc: datetime = Field(..., examples=["2025-09-05T08:15:00Z"])
    arrival_utc: datetime = Field(..., examples=["2025-09-05T11:10:00Z"])
    status: str = Field(..., examples=["On Time"])

    model_config = ConfigDict(frozen=True)

    @field_validator("departure_utc", "arrival_utc")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
