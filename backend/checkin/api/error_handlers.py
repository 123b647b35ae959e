"""Error Handlers — map Facility repository errors onto HTTP responses.

Invariants:
    - NotFound (missing Facility id on get/update/delete) → 404
    - NotUnique (Facility name already taken, by the advisory lookup or the
      unique constraint) → 400 with code NOT_UNIQUE
    - BadRequest (invalid FacilityCreate/FacilityUpdate/list options) → 400
    - ServerError → 500 naming the FacilityRepository operation, never the
      driver message
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Every CheckinError is logged with its operation (e.g.
      "FacilityRepository.update") and request path; 5xx at error, the rest at warning
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from checkin.core.errors import CheckinError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_checkin_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_checkin_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CheckinError)
    async def checkin_error_handler(request: Request, exc: CheckinError):
        """Handle all check-in domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"CheckinError: {exc.message}",
            extra={
                "error_code": exc.code,
                "operation": exc.operation,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
