"""
Domain exceptions.

Services raise these; ``main.create_app`` registers handlers that turn
them into HTTP responses.  Persistence failures have no exception
type of their own because they never leave the report store.
"""


class FlightReportsError(Exception):
    """Base class for all errors raised by the service layer."""


class CatalogLoadError(FlightReportsError):
    """The flight catalog could not be loaded and strict mode is on."""


class ReportValidationError(FlightReportsError):
    """A report request is missing a required field."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(FlightReportsError):
    """A flight or report lookup by id found nothing."""

    def __init__(self, kind: str, object_id: object) -> None:
        super().__init__(f"{kind} {object_id} not found")
        self.kind = kind
        self.object_id = object_id
