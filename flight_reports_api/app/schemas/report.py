"""
Pydantic models for reports.

``Report`` is the stored and returned representation.  ``ReportCreate``
and ``ReportUpdate`` are request bodies; every field on them is
optional at the schema level so that a missing title on creation is
reported by the store as a validation error (HTTP 400) rather than by
FastAPI's request parsing.

Flight ids in requests are accepted as plain strings.  Strings that
are not valid UUIDs cannot name a catalog flight and are dropped
together with other unknown ids.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from .common import ApiModel, as_utc


class Report(ApiModel):
    """A user-created report referencing zero or more flights."""

    id: UUID
    title: str
    description: Optional[str] = None
    flight_ids: List[UUID] = Field(default_factory=list)
    created_utc: datetime
    updated_utc: Optional[datetime] = None

    @field_validator("created_utc", "updated_utc")
    @classmethod
    def _to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None


class ReportCreate(ApiModel):
    """Request body for creating a report."""

    title: Optional[str] = Field(None, examples=["Trip"])
    description: Optional[str] = Field(None, examples=["Flights for the September trip"])
    flight_ids: Optional[List[str]] = None


class ReportUpdate(ApiModel):
    """Request body for updating a report.

    Fields left out (or sent as null) keep their current value.  A
    blank title is ignored, while a blank description and an empty
    ``flightIds`` list are applied.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    flight_ids: Optional[List[str]] = None
