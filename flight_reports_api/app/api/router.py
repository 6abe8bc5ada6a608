"""
Top‑level API router.

Aggregates the resource routers; ``main`` mounts it under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import flights, reports

router = APIRouter()

router.include_router(flights.router, prefix="/flights", tags=["flights"])
router.include_router(reports.router, prefix="/reports", tags=["reports"])
