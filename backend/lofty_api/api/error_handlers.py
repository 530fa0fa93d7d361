"""Error Handlers: global exception handlers for the Lofty API.

Invariants:
    - Every handled error answers with the ServiceResponse envelope (success=False,
      responseObject=null)
    - LoftyError → its own http_status and message
    - RequestValidationError → 400 "Invalid input: ..." (Validation Gate)
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (LoftyError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py so create_app stays a flat list of registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from lofty_api.api.validation import validation_failure
from lofty_api.core.errors import LoftyError
from lofty_api.core.service_response import failure

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_lofty_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_lofty_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(LoftyError)
    async def lofty_error_handler(request: Request, exc: LoftyError):
        """Handle all Lofty domain/infrastructure errors."""
        logger.error(
            f"LoftyError: {exc.message}",
            extra={
                "error_code": exc.code, "path": request.url.path,
                "status_code": exc.http_status,
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
        """Short-circuit malformed requests before any service runs."""
        envelope = validation_failure(exc.errors())
        logger.warning(
            f"Validation error on {request.url.path}: {envelope.message}",
            extra={"path": request.url.path, "status_code": envelope.status_code},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=envelope.to_body(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"path": request.url.path},
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=failure(
                "An unexpected error occurred",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            ).to_body(),
        )
