"""Flight Reports API client.

A thin wrapper around the HTTP interface using the ``requests``
library.  It exposes one method per route:

* :meth:`FlightReportsClient.list_flights` and
  :meth:`FlightReportsClient.get_flight` for the read-only catalog;
* :meth:`FlightReportsClient.list_reports`,
  :meth:`FlightReportsClient.get_report`,
  :meth:`FlightReportsClient.create_report` and
  :meth:`FlightReportsClient.update_report` for reports.

Lookups return ``None`` when the server answers 404.  Any other error
status raises :class:`ApiError`.

Any object with a ``requests.Session``-compatible ``request`` method
can be passed as ``session``; the test suite passes FastAPI's
``TestClient``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import requests


logger = logging.getLogger(__name__)

# Sentinel for "leave this field out of the update body".
_UNSET: Any = object()


class ApiError(Exception):
    """Raised when the API answers with an unexpected error status."""

    def __init__(self, status_code: Optional[int], message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class FlightReportsClient:
    """Client for the flight and report endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g.
                ``http://localhost:5174``.  The ``/api`` prefix is added
                by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response, or ``None`` to
                use the session default.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any | None = None,
        allow_not_found: bool = False,
    ) -> Any:
        """Perform a request and return the decoded JSON body.

        Returns ``None`` for a 404 when ``allow_not_found`` is set.
        Raises :class:`ApiError` for any other status of 400 or above
        and for transport failures.
        """
        url = f"{self.base_url}/api{path}"
        logger.debug("Sending %s request to %s", method, url)
        options: Dict[str, Any] = {"json": json_body}
        if self.timeout is not None:
            options["timeout"] = self.timeout
        try:
            response = self.session.request(method, url, **options)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            raise ApiError(None, str(exc)) from exc
        if response.status_code == 404 and allow_not_found:
            return None
        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error("API request failed (%s): %s", response.status_code, message)
            raise ApiError(response.status_code, message)
        if response.content:
            return response.json()
        return None

    @staticmethod
    def _error_message(response: Any) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        if isinstance(body, dict) and body.get("detail"):
            return str(body["detail"])
        return str(body)

    # ------------------------------------------------------------------
    # Flights
    # ------------------------------------------------------------------
    def list_flights(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/flights")

    def get_flight(self, flight_id: Any) -> Optional[Dict[str, Any]]:
        return self._request("GET", f"/flights/{flight_id}", allow_not_found=True)

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def list_reports(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/reports")

    def get_report(self, report_id: Any) -> Optional[Dict[str, Any]]:
        return self._request("GET", f"/reports/{report_id}", allow_not_found=True)

    def create_report(
        self,
        title: str,
        description: Optional[str] = None,
        flight_ids: Optional[Iterable[Any]] = None,
    ) -> Dict[str, Any]:
        """Create a report and return it as the server stored it."""
        body: Dict[str, Any] = {"title": title, "description": description}
        if flight_ids is not None:
            body["flightIds"] = [str(fid) for fid in flight_ids]
        return self._request("POST", "/reports", json_body=body)

    def update_report(
        self,
        report_id: Any,
        *,
        title: Any = _UNSET,
        description: Any = _UNSET,
        flight_ids: Any = _UNSET,
    ) -> Optional[Dict[str, Any]]:
        """Update a report, sending only the fields that were given.

        Returns ``None`` if the report does not exist.
        """
        body: Dict[str, Any] = {}
        if title is not _UNSET:
            body["title"] = title
        if description is not _UNSET:
            body["description"] = description
        if flight_ids is not _UNSET:
            body["flightIds"] = None if flight_ids is None else [str(fid) for fid in flight_ids]
        return self._request("PUT", f"/reports/{report_id}", json_body=body, allow_not_found=True)
