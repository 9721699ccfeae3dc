"""Error Handlers: global exception handlers for expected Roster outcomes.

Invariants:
    - RosterError → its http_status, message as a JSON string body
    - RequestValidationError on a path parameter → 404 (the route does not match)
    - RequestValidationError on the body → 400 with field-level details
    - No catch-all handler here: unexpected faults belong to the containment stage

Design Decisions:
    - Two-layer handler: domain (RosterError), validation (Pydantic)
    - These handlers run inside the pipeline, so the logging stage sees
      the 400/404 they produce
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from roster.core.errors import RosterError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_roster_error_handler(app)
    _register_validation_error_handler(app)


def _register_roster_error_handler(app: FastAPI) -> None:
    """Register Roster domain error handler."""

    @app.exception_handler(RosterError)
    async def roster_error_handler(request: Request, exc: RosterError):
        logger.warning(
            f"RosterError: {exc.message}",
            extra={
                "error_code": exc.code,
                "error_category": exc.category.value,
                "severity": exc.severity.value,
                "field": getattr(exc, "field", None),
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        errors = exc.errors()
        if any(e["loc"] and e["loc"][0] == "path" for e in errors):
            # Non-integer ids do not match /users/{id}
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"detail": "Not Found"},
            )
        logger.warning(
            f"Validation error on {request.url.path}: {errors}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(errors),
        )


def _build_validation_error_response(errors) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in errors
            ],
        },
    }
