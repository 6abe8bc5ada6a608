"""
Report endpoints.

Reports can be listed, fetched, created and updated.  There is no
delete route.  Domain errors raised by the store are translated into
responses by the handlers registered in ``main``: a blank title on
creation answers 400 and an unknown id answers 404 with an empty body.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from flight_reports_api.app.api.deps import get_report_store
from flight_reports_api.app.schemas.report import Report, ReportCreate, ReportUpdate
from flight_reports_api.app.services.report_service import ReportStore

router = APIRouter()


@router.get("", response_model=List[Report], name="GetReports")
async def list_reports(store: ReportStore = Depends(get_report_store)) -> List[Report]:
    """Return all reports in the order they were created."""
    return store.list_all()


@router.post("", response_model=Report, status_code=status.HTTP_201_CREATED, name="CreateReport")
def create_report(
    report_in: ReportCreate,
    response: Response,
    store: ReportStore = Depends(get_report_store),
) -> Report:
    """Create a report.

    Unknown flight ids are dropped and duplicates collapsed.  The
    ``Location`` header points at the new report.

    Runs in the threadpool; concurrent calls are serialized by the
    store lock.
    """
    report = store.create(report_in)
    response.headers["Location"] = f"/api/reports/{report.id}"
    return report


@router.get("/{report_id}", response_model=Report, name="GetReportById")
async def get_report(report_id: str, store: ReportStore = Depends(get_report_store)) -> Report:
    return store.get(report_id)


@router.put("/{report_id}", response_model=Report, name="UpdateReport")
def update_report(
    report_id: str,
    report_in: ReportUpdate,
    store: ReportStore = Depends(get_report_store),
) -> Report:
    """Apply a partial update to a report.

    A blank ``title`` is ignored, a blank ``description`` is stored
    and ``flightIds: []`` removes every flight.  ``updatedUtc`` is
    refreshed even when nothing else changes.
    """
    return store.update(report_id, report_in)
