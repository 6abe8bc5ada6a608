"""
Service layer for reports.

``ReportStore`` owns the authoritative, in-memory list of reports and
keeps a JSON copy of it on disk.  The file is read once when the
store is created and rewritten in full after every create and
update.  Write failures are logged and otherwise ignored: the
in-memory list stays authoritative for the rest of the process.

Reports cannot be deleted.

Update applies a partial patch whose rules differ per field:

* ``title`` is replaced only by a non-blank value;
* ``description`` is replaced by any value that is present, blank
  included;
* ``flight_ids`` is replaced whenever present, so an empty list
  clears the report's flights.
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from flight_reports_api.app.core.errors import NotFoundError, ReportValidationError
from flight_reports_api.app.core.storage import read_json, write_json
from flight_reports_api.app.schemas.common import utc_now
from flight_reports_api.app.schemas.report import Report, ReportCreate, ReportUpdate
from flight_reports_api.app.services.flight_service import FlightCatalog, parse_id

logger = logging.getLogger(__name__)

_REPORT_LIST = TypeAdapter(List[Report])


class ReportStore:
    """In-memory report collection backed by a JSON document.

    All mutations, together with the write that follows them, run
    under a single lock owned by the store instance.
    """

    def __init__(
        self,
        path: Union[str, Path],
        catalog: FlightCatalog,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.path = Path(path)
        self.catalog = catalog
        self._clock = clock or utc_now
        self._lock = threading.Lock()
        self._reports: List[Report] = self._load()

    def _load(self) -> List[Report]:
        """Read persisted reports; anything unreadable yields an empty list."""
        if not self.path.exists():
            logger.info("No report file at %s; starting empty", self.path)
            return []
        try:
            reports = _REPORT_LIST.validate_python(read_json(self.path))
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning("Ignoring unreadable report file %s: %s", self.path, exc)
            return []
        unique: List[Report] = []
        seen = set()
        for report in reports:
            if report.id in seen:
                logger.warning("Dropping duplicate report %s in %s", report.id, self.path)
                continue
            seen.add(report.id)
            unique.append(report)
        logger.info("Loaded %d reports from %s", len(unique), self.path)
        return unique

    def persist(self) -> bool:
        """Write every report to the backing file.

        Returns ``True`` on success.  On failure the error is logged
        and ``False`` is returned; nothing is raised.
        """
        with self._lock:
            return self._persist()

    def _persist(self) -> bool:
        # Caller holds self._lock.
        payload = [report.model_dump(mode="json", by_alias=True) for report in self._reports]
        try:
            write_json(self.path, payload)
        except OSError as exc:
            logger.error("Failed to persist %d reports to %s: %s", len(payload), self.path, exc)
            return False
        return True

    def list_all(self) -> List[Report]:
        with self._lock:
            return list(self._reports)

    def get(self, report_id: Union[str, UUID]) -> Report:
        """Return the report with ``report_id`` or raise ``NotFoundError``."""
        with self._lock:
            return self._reports[self._index_of(report_id)]

    def create(self, data: ReportCreate) -> Report:
        """Validate, store and persist a new report.

        Raises ``ReportValidationError`` when the title is missing or
        blank; the store is left unchanged in that case.
        """
        title = (data.title or "").strip()
        if not title:
            raise ReportValidationError("Title is required")
        description = (data.description or "").strip() or None
        with self._lock:
            report = Report(
                id=uuid.uuid4(),
                title=title,
                description=description,
                flight_ids=self.catalog.filter_ids(data.flight_ids or []),
                created_utc=self._clock(),
            )
            self._reports.append(report)
            self._persist()
        logger.info("Created report %s with %d flights", report.id, len(report.flight_ids))
        return report

    def update(self, report_id: Union[str, UUID], data: ReportUpdate) -> Report:
        """Apply a partial patch to an existing report and persist it.

        Raises ``NotFoundError`` if no report has ``report_id``; nothing
        is written in that case.
        """
        with self._lock:
            index = self._index_of(report_id)
            changes = {"updated_utc": self._clock()}
            if data.title is not None and data.title.strip():
                changes["title"] = data.title.strip()
            if data.description is not None:
                changes["description"] = data.description.strip()
            if data.flight_ids is not None:
                changes["flight_ids"] = self.catalog.filter_ids(data.flight_ids)
            report = self._reports[index].model_copy(update=changes)
            self._reports[index] = report
            self._persist()
        logger.info("Updated report %s (%s)", report.id, ", ".join(sorted(changes)))
        return report

    def _index_of(self, report_id: Union[str, UUID]) -> int:
        wanted = parse_id(report_id)
        for index, report in enumerate(self._reports):
            if report.id == wanted:
                return index
        raise NotFoundError("report", report_id)

    def __len__(self) -> int:
        return len(self._reports)
