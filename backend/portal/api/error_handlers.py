"""Error Handlers: global exception handlers for the portal API.

Invariants:
    - PortalError → {success: false, message, code} with the error's status
    - Schema validation (RequestValidationError / pydantic ValidationError) → 400
      with itemized field errors
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Validation is the only failure clients can act on, so it is the only one
      that carries details
    - `body` prefix stripped from locations: clients only ever send bodies
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from portal.core.errors import PortalError

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Please check your form data"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_portal_error_handler(app)
    _register_validation_error_handlers(app)
    _register_generic_error_handler(app)


def _register_portal_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PortalError)
    async def portal_error_handler(request: Request, exc: PortalError):
        """Handle all portal domain/infrastructure errors."""
        logger.error(
            f"PortalError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handlers(app: FastAPI) -> None:
    """Register request-body and model validation handlers."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc.errors()),
        )

    @app.exception_handler(ValidationError)
    async def model_validation_error_handler(
        request: Request, exc: ValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc.errors()),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": "An unexpected error occurred",
            },
        )


def build_validation_error_response(errors) -> dict:
    """Build the 400 envelope from pydantic error dicts."""
    return {
        "success": False,
        "message": VALIDATION_MESSAGE,
        "errors": [
            {
                "field": _field_path(e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in errors
        ],
    }


def _field_path(loc) -> str:
    parts = list(loc)
    if parts and parts[0] == "body":
        parts = parts[1:]
    return ".".join(str(p) for p in parts)
