"""
Shared pydantic base for API payloads.

Field names are snake_case in Python and camelCase on the wire.  On
input, keys are matched case-insensitively against both spellings so
that ``flightIds``, ``FlightIds``, ``flightids`` and ``flight_ids``
all populate the same field.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ApiModel(BaseModel):
    """Base class for every model exchanged over HTTP or written to disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        lookup: Dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            lookup[name.lower()] = alias
            lookup[alias.lower()] = alias
        normalized: Dict[Any, Any] = {}
        for key, value in data.items():
            canonical = lookup.get(key.lower(), key) if isinstance(key, str) else key
            # First spelling wins when a payload repeats a field in another case.
            normalized.setdefault(canonical, value)
        return normalized
