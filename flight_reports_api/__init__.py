"""
Top‑level package for the Flight Reports API.

This file makes ``flight_reports_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``flight_reports_api.app.main``.  The HTTP client lives in
``flight_reports_api.client``; everything else lives under ``app``.
"""

__all__ = []
