"""
Dependency providers for the API routes.

The flight catalog and the report store are built once by
``create_app`` and kept on ``app.state``; routes receive them through
``Depends`` instead of importing module-level globals.
"""

from fastapi import Request

from flight_reports_api.app.services.flight_service import FlightCatalog
from flight_reports_api.app.services.report_service import ReportStore


def get_catalog(request: Request) -> FlightCatalog:
    return request.app.state.catalog


def get_report_store(request: Request) -> ReportStore:
    return request.app.state.report_store
