"""Tests for loading the flight catalog under both startup policies."""

import json
import logging
from uuid import UUID

import pytest

from flight_reports_api.app.core.errors import CatalogLoadError, NotFoundError
from flight_reports_api.app.services.flight_service import FlightCatalog, default_flights

from conftest import CATALOG, FLIGHT_A, FLIGHT_B, UNKNOWN_FLIGHT


def test_loads_catalog_verbatim(catalog_path):
    catalog = FlightCatalog.load(catalog_path, strict=True)
    flights = catalog.all()
    assert [str(f.id) for f in flights] == [FLIGHT_A, FLIGHT_B]
    first = flights[0]
    assert first.number == "FL100"
    assert first.origin == "JFK"
    assert first.destination == "LAX"
    assert first.status == "On Time"
    assert first.departure_utc.isoformat() == "2025-09-05T08:15:00+00:00"


def test_accepts_any_key_case_and_naive_timestamps(tmp_path):
    path = tmp_path / "flights.json"
    path.write_text(json.dumps([{
        "Id": FLIGHT_A,
        "Number": "FL1",
        "Origin": "AMS",
        "Destination": "CDG",
        "DepartureUtc": "2025-09-05T08:00:00",
        "arrival_utc": "2025-09-05T09:15:00",
        "Status": "On Time",
    }]), encoding="utf-8")
    flight = FlightCatalog.load(path, strict=True).get(FLIGHT_A)
    assert flight.departure_utc.utcoffset().total_seconds() == 0
    assert flight.arrival_utc.hour == 9


def test_null_entries_are_skipped(tmp_path):
    path = tmp_path / "flights.json"
    path.write_text(json.dumps([None, CATALOG[0], None]), encoding="utf-8")
    assert len(FlightCatalog.load(path, strict=True)) == 1


@pytest.mark.parametrize("content", ["", "[]", "{}", "not json", "[null]"])
def test_strict_rejects_unusable_documents(tmp_path, content):
    path = tmp_path / "flights.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        FlightCatalog.load(path, strict=True)


def test_strict_rejects_missing_file(tmp_path):
    with pytest.raises(CatalogLoadError, match="not found"):
        FlightCatalog.load(tmp_path / "missing.json", strict=True)


def test_one_invalid_entry_discards_the_whole_document(tmp_path):
    broken = dict(CATALOG[1])
    del broken["number"]
    path = tmp_path / "flights.json"
    path.write_text(json.dumps([CATALOG[0], broken]), encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        FlightCatalog.load(path, strict=True)
    # Lenient mode falls back entirely rather than keeping the valid entry.
    catalog = FlightCatalog.load(path, strict=False)
    assert not catalog.contains(FLIGHT_A)
    assert [f.number for f in catalog.all()] == ["FL100", "FL200", "FL300"]


def test_lenient_falls_back_to_sample_flights(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        catalog = FlightCatalog.load(tmp_path / "missing.json", strict=False)
    flights = catalog.all()
    assert [(f.number, f.origin, f.destination, f.status) for f in flights] == [
        ("FL100", "JFK", "LAX", "On Time"),
        ("FL200", "LAX", "ORD", "Delayed"),
        ("FL300", "SEA", "DEN", "Boarding"),
    ]
    assert "built-in sample flights" in caplog.text


def test_sample_flights_get_fresh_ids():
    first = {f.id for f in default_flights()}
    second = {f.id for f in default_flights()}
    assert len(first) == 3
    assert first.isdisjoint(second)


def test_lookup_and_membership(catalog):
    assert catalog.get(FLIGHT_A).number == "FL100"
    assert catalog.get(UUID(FLIGHT_B)).number == "FL200"
    assert catalog.contains(FLIGHT_A.upper())
    assert not catalog.contains(UNKNOWN_FLIGHT)
    assert not catalog.contains("not-a-uuid")
    with pytest.raises(NotFoundError):
        catalog.get(UNKNOWN_FLIGHT)
    with pytest.raises(NotFoundError):
        catalog.get("not-a-uuid")


def test_filter_ids_drops_unknown_and_duplicates(catalog):
    kept = catalog.filter_ids([FLIGHT_B, UNKNOWN_FLIGHT, "junk", FLIGHT_B, FLIGHT_A])
    assert kept == [UUID(FLIGHT_B), UUID(FLIGHT_A)]
