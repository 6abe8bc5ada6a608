"""
Flight catalog.

The catalog is loaded once when the application is created and is
read-only afterwards.  ``FlightCatalog.load`` implements the startup
policy: a catalog document that is missing, empty or invalid either
aborts startup (strict mode) or is replaced by three built-in sample
flights.  A document is accepted or rejected as a whole; a single
invalid entry discards every entry.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from flight_reports_api.app.core.errors import CatalogLoadError, NotFoundError
from flight_reports_api.app.core.storage import read_json
from flight_reports_api.app.schemas.flight import Flight

logger = logging.getLogger(__name__)

_FLIGHT_LIST = TypeAdapter(List[Flight])


def parse_id(value: Union[str, UUID, None]) -> Optional[UUID]:
    """Return ``value`` as a UUID, or ``None`` if it is not valid UUID text."""
    if value is None or isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def default_flights() -> List[Flight]:
    """Return the three sample flights, each with a fresh identifier."""

    def utc(hour: int, minute: int) -> datetime:
        return datetime(2025, 9, 5, hour, minute, tzinfo=timezone.utc)

    return [
        Flight(id=uuid.uuid4(), number="FL100", origin="JFK", destination="LAX",
               departure_utc=utc(8, 15), arrival_utc=utc(11, 10), status="On Time"),
        Flight(id=uuid.uuid4(), number="FL200", origin="LAX", destination="ORD",
               departure_utc=utc(12, 30), arrival_utc=utc(16, 5), status="Delayed"),
        Flight(id=uuid.uuid4(), number="FL300", origin="SEA", destination="DEN",
               departure_utc=utc(9, 45), arrival_utc=utc(13, 0), status="Boarding"),
    ]


def read_catalog(path: Union[str, Path]) -> List[Flight]:
    """Read and validate the catalog document at ``path``.

    Null entries are skipped.  Raises ``CatalogLoadError`` if the file
    is missing, unreadable, not a JSON array, contains an invalid
    entry or holds no flights.
    """
    try:
        raw = read_json(path)
    except FileNotFoundError as exc:
        raise CatalogLoadError(f"flight catalog {path} not found") from exc
    except (OSError, ValueError) as exc:
        raise CatalogLoadError(f"flight catalog {path} is unreadable: {exc}") from exc
    if not isinstance(raw, list):
        raise CatalogLoadError(f"flight catalog {path} must contain a JSON array")
    try:
        flights = _FLIGHT_LIST.validate_python([item for item in raw if item is not None])
    except ValidationError as exc:
        raise CatalogLoadError(f"flight catalog {path} is invalid: {exc}") from exc
    if not flights:
        raise CatalogLoadError(f"flight catalog {path} contains no flights")
    return flights


class FlightCatalog:
    """Read-only, ordered collection of flights with lookup by id."""

    def __init__(self, flights: Iterable[Flight]) -> None:
        self._flights: Tuple[Flight, ...] = tuple(flights)
        self._by_id = {flight.id: flight for flight in self._flights}

    @classmethod
    def load(cls, path: Union[str, Path], strict: bool = False) -> "FlightCatalog":
        """Build the catalog from ``path`` according to the startup policy.

        With ``strict`` set, any ``CatalogLoadError`` propagates to the
        caller.  Otherwise the error is logged and the sample flights
        are used instead.
        """
        try:
            flights = read_catalog(path)
        except CatalogLoadError as exc:
            if strict:
                logger.error("Cannot load flight catalog: %s", exc)
                raise
            flights = default_flights()
            logger.warning("%s; using %d built-in sample flights", exc, len(flights))
            return cls(flights)
        logger.info("Loaded %d flights from %s", len(flights), path)
        return cls(flights)

    def __len__(self) -> int:
        return len(self._flights)

    def all(self) -> List[Flight]:
        return list(self._flights)

    def contains(self, flight_id: Union[str, UUID, None]) -> bool:
        return parse_id(flight_id) in self._by_id

    def get(self, flight_id: Union[str, UUID]) -> Flight:
        """Return the flight with ``flight_id`` or raise ``NotFoundError``."""
        flight = self._by_id.get(parse_id(flight_id))
        if flight is None:
            raise NotFoundError("flight", flight_id)
        return flight

    def filter_ids(self, flight_ids: Iterable[Union[str, UUID]]) -> List[UUID]:
        """Keep the ids that name catalog flights, without duplicates.

        The order of first occurrence is preserved.
        """
        kept: List[UUID] = []
        for value in flight_ids:
            flight_id = parse_id(value)
            if flight_id in self._by_id and flight_id not in kept:
                kept.append(flight_id)
        return kept
