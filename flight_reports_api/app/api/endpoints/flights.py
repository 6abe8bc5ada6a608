"""
Flight endpoints.

The catalog is read-only, so only listing and lookup by id are
exposed.  An unknown or malformed id answers 404.
"""

from typing import List

from fastapi import APIRouter, Depends

from flight_reports_api.app.api.deps import get_catalog
from flight_reports_api.app.schemas.flight import Flight
from flight_reports_api.app.services.flight_service import FlightCatalog

router = APIRouter()


@router.get("", response_model=List[Flight], name="GetFlights")
async def list_flights(catalog: FlightCatalog = Depends(get_catalog)) -> List[Flight]:
    """Return every flight in catalog order."""
    return catalog.all()


@router.get("/{flight_id}", response_model=Flight, name="GetFlightById")
async def get_flight(flight_id: str, catalog: FlightCatalog = Depends(get_catalog)) -> Flight:
    return catalog.get(flight_id)
