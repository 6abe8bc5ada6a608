"""Shared fixtures: a two-flight catalog on disk and apps built around it."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from flight_reports_api.app.core.config import Settings
from flight_reports_api.app.main import create_app
from flight_reports_api.app.services.flight_service import FlightCatalog

FLIGHT_A = "11111111-1111-4111-8111-111111111111"
FLIGHT_B = "22222222-2222-4222-8222-222222222222"
UNKNOWN_FLIGHT = "99999999-9999-4999-8999-999999999999"

CATALOG = [
    {
        "id": FLIGHT_A,
        "number": "FL100",
        "origin": "JFK",
        "destination": "LAX",
        "departureUtc": "2025-09-05T08:15:00Z",
        "arrivalUtc": "2025-09-05T11:10:00Z",
        "status": "On Time",
    },
    {
        "id": FLIGHT_B,
        "number": "FL200",
        "origin": "LAX",
        "destination": "ORD",
        "departureUtc": "2025-09-05T12:30:00Z",
        "arrivalUtc": "2025-09-05T16:05:00Z",
        "status": "Delayed",
    },
]


class FakeClock:
    """Deterministic clock that moves forward one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 9, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def catalog_path(tmp_path):
    path = tmp_path / "flights.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return path


@pytest.fixture
def reports_path(tmp_path):
    return tmp_path / "reports.json"


@pytest.fixture
def catalog(catalog_path):
    return FlightCatalog.load(catalog_path, strict=True)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app_settings(catalog_path, reports_path):
    return Settings(
        flights_path=str(catalog_path),
        reports_path=str(reports_path),
        strict_catalog=True,
        cors_origins="http://localhost:5173",
    )


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def parse_utc(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as returned by the API."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
